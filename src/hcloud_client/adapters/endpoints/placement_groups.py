"""`/placement_groups`."""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.placement_groups import (
    CreatePlacementGroupRequest,
    CreatePlacementGroupResponse,
    ListPlacementGroupsResponse,
    PlacementGroup,
    PlacementGroupResponse,
    UpdatePlacementGroupRequest,
)


class PlacementGroupsEndpoint(ResourceEndpoint):
    path = "/placement_groups"
    resource = "placement group"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        type: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListPlacementGroupsResponse:
        query = build_query(
            {
                "name": name,
                "label_selector": label_selector,
                "type": type,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            }
        )
        return await self._list(ListPlacementGroupsResponse, query)

    async def create(
        self, params: CreatePlacementGroupRequest | Mapping[str, Any]
    ) -> CreatePlacementGroupResponse:
        body = self._body(CreatePlacementGroupRequest, params, "Create placement group request")
        return await self._call(
            "POST", self.path, CreatePlacementGroupResponse, body=body, context="Create placement group response"
        )

    async def get(self, placement_group_id: int) -> PlacementGroup:
        response = await self._fetch(self._item_path(placement_group_id), PlacementGroupResponse)
        return response.placement_group

    async def update(
        self, placement_group_id: int, params: UpdatePlacementGroupRequest | Mapping[str, Any]
    ) -> PlacementGroup:
        body = self._body(UpdatePlacementGroupRequest, params, "Update placement group request")
        response = await self._call(
            "PUT",
            self._item_path(placement_group_id),
            PlacementGroupResponse,
            body=body,
            context="Update placement group response",
        )
        return response.placement_group

    async def delete(self, placement_group_id: int) -> Action | None:
        return await self._delete(self._item_path(placement_group_id))
