"""`/servers`: lifecycle, power management and the other server actions."""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.servers import (
    AttachIsoRequest,
    ChangeServerProtectionRequest,
    ChangeServerTypeRequest,
    CreateImageRequest,
    CreateImageResponse,
    CreateServerRequest,
    CreateServerResponse,
    EnableRescueRequest,
    EnableRescueResponse,
    ListServersResponse,
    RebuildServerRequest,
    RebuildServerResponse,
    Server,
    ServerMetricsResponse,
    ServerResponse,
    UpdateServerRequest,
)


class ServersEndpoint(ActionResourceEndpoint):
    path = "/servers"
    resource = "server"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        status: str | list[str] | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListServersResponse:
        query = build_query(
            {
                "name": name,
                "label_selector": label_selector,
                "status": status,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            }
        )
        return await self._list(ListServersResponse, query)

    async def create(self, params: CreateServerRequest | Mapping[str, Any]) -> CreateServerResponse:
        """Create a server; the returned `action` tracks its provisioning."""

        body = self._body(CreateServerRequest, params, "Create server request")
        return await self._call("POST", self.path, CreateServerResponse, body=body, context="Create server response")

    async def get(self, server_id: int) -> Server:
        response = await self._fetch(self._item_path(server_id), ServerResponse)
        return response.server

    async def update(self, server_id: int, params: UpdateServerRequest | Mapping[str, Any]) -> Server:
        body = self._body(UpdateServerRequest, params, "Update server request")
        response = await self._call(
            "PUT", self._item_path(server_id), ServerResponse, body=body, context="Update server response"
        )
        return response.server

    async def delete(self, server_id: int) -> Action | None:
        return await self._delete(self._item_path(server_id))

    async def get_metrics(
        self,
        server_id: int,
        *,
        type: str | list[str],
        start: str,
        end: str,
        step: int | None = None,
    ) -> ServerMetricsResponse:
        """Fetch metrics; several `type`s are sent comma separated."""

        types = type if isinstance(type, (list, tuple)) else [type]
        query = build_query({"type": ",".join(types), "start": start, "end": end, "step": step})
        return await self._call(
            "GET",
            self._item_path(server_id, "metrics"),
            ServerMetricsResponse,
            params=query,
            context="Get server metrics response",
        )

    async def power_on(self, server_id: int) -> Action:
        return await self._post_action(server_id, "poweron")

    async def power_off(self, server_id: int) -> Action:
        """Hard power off, like pulling the plug."""

        return await self._post_action(server_id, "poweroff")

    async def reboot(self, server_id: int) -> Action:
        """Soft reboot through ACPI."""

        return await self._post_action(server_id, "reboot")

    async def reset(self, server_id: int) -> Action:
        return await self._post_action(server_id, "reset")

    async def shutdown(self, server_id: int) -> Action:
        return await self._post_action(server_id, "shutdown")

    async def attach_iso(self, server_id: int, iso: int | str) -> Action:
        return await self._post_action(server_id, "attach_iso", AttachIsoRequest, {"iso": iso})

    async def detach_iso(self, server_id: int) -> Action:
        return await self._post_action(server_id, "detach_iso")

    async def enable_rescue(
        self,
        server_id: int,
        params: EnableRescueRequest | Mapping[str, Any] | None = None,
    ) -> EnableRescueResponse:
        return await self._post_action(
            server_id,
            "enable_rescue",
            EnableRescueRequest,
            params,
            response_model=EnableRescueResponse,
        )

    async def disable_rescue(self, server_id: int) -> Action:
        return await self._post_action(server_id, "disable_rescue")

    async def create_image(
        self,
        server_id: int,
        params: CreateImageRequest | Mapping[str, Any] | None = None,
    ) -> CreateImageResponse:
        return await self._post_action(
            server_id,
            "create_image",
            CreateImageRequest,
            params,
            response_model=CreateImageResponse,
        )

    async def rebuild(self, server_id: int, image: int | str) -> RebuildServerResponse:
        return await self._post_action(
            server_id,
            "rebuild",
            RebuildServerRequest,
            {"image": image},
            response_model=RebuildServerResponse,
        )

    async def change_protection(
        self,
        server_id: int,
        *,
        delete: bool | None = None,
        rebuild: bool | None = None,
    ) -> Action:
        params: dict[str, bool] = {}
        if delete is not None:
            params["delete"] = delete
        if rebuild is not None:
            params["rebuild"] = rebuild
        return await self._post_action(server_id, "change_protection", ChangeServerProtectionRequest, params)

    async def change_type(self, server_id: int, server_type: int | str, *, upgrade_disk: bool) -> Action:
        """Change the server type; the server must be powered off."""

        return await self._post_action(
            server_id,
            "change_type",
            ChangeServerTypeRequest,
            {"server_type": server_type, "upgrade_disk": upgrade_disk},
        )
