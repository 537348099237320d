"""`/volumes`."""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import ChangeProtectionRequest
from hcloud_client.core.domain.volumes import (
    AttachVolumeRequest,
    CreateVolumeRequest,
    CreateVolumeResponse,
    ListVolumesResponse,
    ResizeVolumeRequest,
    UpdateVolumeRequest,
    Volume,
    VolumeResponse,
)


class VolumesEndpoint(ActionResourceEndpoint):
    path = "/volumes"
    resource = "volume"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        status: str | list[str] | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListVolumesResponse:
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
        return await self._list(ListVolumesResponse, query)

    async def create(self, params: CreateVolumeRequest | Mapping[str, Any]) -> CreateVolumeResponse:
        """Create a volume in a location, or attached to `server` directly."""

        body = self._body(CreateVolumeRequest, params, "Create volume request")
        return await self._call("POST", self.path, CreateVolumeResponse, body=body, context="Create volume response")

    async def get(self, volume_id: int) -> Volume:
        response = await self._fetch(self._item_path(volume_id), VolumeResponse)
        return response.volume

    async def update(self, volume_id: int, params: UpdateVolumeRequest | Mapping[str, Any]) -> Volume:
        body = self._body(UpdateVolumeRequest, params, "Update volume request")
        response = await self._call(
            "PUT", self._item_path(volume_id), VolumeResponse, body=body, context="Update volume response"
        )
        return response.volume

    async def delete(self, volume_id: int) -> Action | None:
        return await self._delete(self._item_path(volume_id))

    async def attach(self, volume_id: int, server_id: int, *, automount: bool | None = None) -> Action:
        params: dict[str, Any] = {"server": server_id}
        if automount is not None:
            params["automount"] = automount
        return await self._post_action(volume_id, "attach", AttachVolumeRequest, params)

    async def detach(self, volume_id: int) -> Action:
        return await self._post_action(volume_id, "detach")

    async def resize(self, volume_id: int, size: int) -> Action:
        """Grow the volume to `size` GB; volumes cannot shrink."""

        return await self._post_action(volume_id, "resize", ResizeVolumeRequest, {"size": size})

    async def change_protection(self, volume_id: int, *, delete: bool) -> Action:
        return await self._post_action(volume_id, "change_protection", ChangeProtectionRequest, {"delete": delete})
