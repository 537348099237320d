"""`/server_types`."""

from __future__ import annotations

from hcloud_client.adapters.endpoints.base import ResourceEndpoint, build_query
from hcloud_client.core.domain.server_types import (
    ListServerTypesResponse,
    ServerType,
    ServerTypeResponse,
)


class ServerTypesEndpoint(ResourceEndpoint):
    path = "/server_types"
    resource = "server type"

    async def list(
        self,
        *,
        name: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListServerTypesResponse:
        query = build_query({"name": name, "page": page, "per_page": per_page})
        return await self._list(ListServerTypesResponse, query)

    async def get(self, server_type_id: int) -> ServerType:
        response = await self._fetch(self._item_path(server_type_id), ServerTypeResponse)
        return response.server_type
