"""`/actions`: global action lookup."""

from __future__ import annotations

from hcloud_client.adapters.endpoints.base import ResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action, ActionResponse, ListActionsResponse


class ActionsEndpoint(ResourceEndpoint):
    path = "/actions"
    resource = "action"

    async def list(
        self,
        *,
        id: int | list[int] | None = None,
        status: str | list[str] | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListActionsResponse:
        """List actions, filtered by `id` (repeatable) and/or `status`.

        Deprecated upstream in favour of the per-resource action lists.
        """

        query = build_query(
            {"id": id, "status": status, "sort": sort, "page": page, "per_page": per_page},
            repeated=("id", "status", "sort"),
        )
        return await self._list(ListActionsResponse, query)

    async def get(self, action_id: int) -> Action:
        response = await self._fetch(self._item_path(action_id), ActionResponse)
        return response.action
