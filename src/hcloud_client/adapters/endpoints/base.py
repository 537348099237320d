"""Shared plumbing of the endpoint groups.

A group is a thin handle around a `Transport`: it builds the path and query,
validates the request body, sends exactly one request and validates the
response. Groups never retry and never poll.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, TypeVar

from pydantic import BaseModel

from hcloud_client.core.domain.actions import (
    Action,
    ActionResponse,
    DeleteResponse,
    ListActionsResponse,
)
from hcloud_client.core.domain.common import RequestModel
from hcloud_client.core.errors import UNKNOWN_ERROR, HCloudError
from hcloud_client.core.interfaces.transport import NO_CONTENT, QueryParams, Transport
from hcloud_client.core.validation import validate

M = TypeVar("M", bound=BaseModel)
R = TypeVar("R", bound=RequestModel)

DEFAULT_REPEATED = ("sort", "status")


def build_query(
    filters: Mapping[str, Any],
    *,
    repeated: Iterable[str] = DEFAULT_REPEATED,
) -> dict[str, Any]:
    """Drop unset filters and turn repeatable ones into lists.

    A scalar given for a repeatable key becomes a one-element list, so the
    transport always encodes it as `key=value` (possibly repeated).
    """

    repeatable = set(repeated)
    query: dict[str, Any] = {}
    for key, value in filters.items():
        if value is None:
            continue
        if key in repeatable and not isinstance(value, (list, tuple)):
            value = [value]
        elif isinstance(value, tuple):
            value = list(value)
        query[key] = value
    return query


class ResourceEndpoint:
    """Base class of every endpoint group."""

    #: Collection path, e.g. `/servers`.
    path = ""
    #: Human name used in validation messages, e.g. `server`.
    resource = "resource"

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _item_path(self, resource_id: int | str, *parts: str | int) -> str:
        segments = [self.path, str(resource_id), *(str(p) for p in parts)]
        return "/".join(segments)

    def _body(self, model: type[R], params: R | Mapping[str, Any] | None, context: str) -> dict[str, Any]:
        if isinstance(params, model):
            return params.to_body()
        return validate(model, params if params is not None else {}, context=context).to_body()

    async def _call(
        self,
        method: str,
        path: str,
        response_model: type[M],
        *,
        context: str,
        body: Any = None,
        params: QueryParams | None = None,
    ) -> M:
        raw = await self._transport.request(method, path, body=body, params=params)
        if raw is NO_CONTENT:
            raise HCloudError(f"{context} failed: unexpected empty body", UNKNOWN_ERROR, 0)
        return validate(response_model, raw, context=context)

    async def _list(self, response_model: type[M], params: QueryParams, *, path: str | None = None) -> M:
        return await self._call(
            "GET",
            path or self.path,
            response_model,
            params=params,
            context=f"List {self.resource}s response",
        )

    async def _fetch(self, path: str, response_model: type[M], *, params: QueryParams | None = None) -> M:
        return await self._call("GET", path, response_model, params=params, context=f"Get {self.resource} response")

    async def _delete(self, path: str) -> Action | None:
        """DELETE `path`; `None` on 204, otherwise the (optional) action."""

        raw = await self._transport.request("DELETE", path)
        if raw is NO_CONTENT:
            return None
        return validate(DeleteResponse, raw, context=f"Delete {self.resource} response").action


class ActionResourceEndpoint(ResourceEndpoint):
    """Resource family exposing `/<id>/actions` sub-resources."""

    async def list_actions(
        self,
        resource_id: int | str,
        *,
        status: str | list[str] | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListActionsResponse:
        query = build_query({"status": status, "sort": sort, "page": page, "per_page": per_page})
        return await self._call(
            "GET",
            self._item_path(resource_id, "actions"),
            ListActionsResponse,
            params=query,
            context=f"List {self.resource} actions response",
        )

    async def get_action(self, resource_id: int | str, action_id: int) -> Action:
        response = await self._call(
            "GET",
            self._item_path(resource_id, "actions", action_id),
            ActionResponse,
            context=f"Get {self.resource} action response",
        )
        return response.action

    async def _post_action(
        self,
        resource_id: int | str,
        command: str,
        request_model: type[RequestModel] | None = None,
        params: Any = None,
        *,
        response_model: type[BaseModel] = ActionResponse,
    ) -> Any:
        """POST `<path>/<id>/actions/<command>`; body `{}` when no model is given.

        Returns the `Action` for plain action responses, the validated
        response model otherwise.
        """

        label = command.replace("_", " ").capitalize()
        body: dict[str, Any] = {}
        if request_model is not None:
            body = self._body(request_model, params, f"{label} {self.resource} request")
        response = await self._call(
            "POST",
            self._item_path(resource_id, "actions", command),
            response_model,
            body=body,
            context=f"{label} {self.resource} response",
        )
        if isinstance(response, ActionResponse):
            return response.action
        return response
