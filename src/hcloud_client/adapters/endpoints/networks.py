"""`/networks`."""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import ChangeProtectionRequest
from hcloud_client.core.domain.networks import (
    ChangeIPRangeRequest,
    CreateNetworkRequest,
    DeleteSubnetRequest,
    ListNetworksResponse,
    Network,
    NetworkResponse,
    RouteRequest,
    SubnetRequest,
    UpdateNetworkRequest,
)


class NetworksEndpoint(ActionResourceEndpoint):
    path = "/networks"
    resource = "network"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListNetworksResponse:
        query = build_query(
            {"name": name, "label_selector": label_selector, "sort": sort, "page": page, "per_page": per_page}
        )
        return await self._list(ListNetworksResponse, query)

    async def create(self, params: CreateNetworkRequest | Mapping[str, Any]) -> Network:
        body = self._body(CreateNetworkRequest, params, "Create network request")
        response = await self._call("POST", self.path, NetworkResponse, body=body, context="Create network response")
        return response.network

    async def get(self, network_id: int) -> Network:
        response = await self._fetch(self._item_path(network_id), NetworkResponse)
        return response.network

    async def update(self, network_id: int, params: UpdateNetworkRequest | Mapping[str, Any]) -> Network:
        body = self._body(UpdateNetworkRequest, params, "Update network request")
        response = await self._call(
            "PUT", self._item_path(network_id), NetworkResponse, body=body, context="Update network response"
        )
        return response.network

    async def delete(self, network_id: int) -> Action | None:
        return await self._delete(self._item_path(network_id))

    async def add_route(self, network_id: int, destination: str, gateway: str) -> Action:
        return await self._post_action(
            network_id, "add_route", RouteRequest, {"destination": destination, "gateway": gateway}
        )

    async def delete_route(self, network_id: int, destination: str, gateway: str) -> Action:
        return await self._post_action(
            network_id, "delete_route", RouteRequest, {"destination": destination, "gateway": gateway}
        )

    async def add_subnet(self, network_id: int, params: SubnetRequest | Mapping[str, Any]) -> Action:
        return await self._post_action(network_id, "add_subnet", SubnetRequest, params)

    async def delete_subnet(self, network_id: int, ip_range: str) -> Action:
        return await self._post_action(network_id, "delete_subnet", DeleteSubnetRequest, {"ip_range": ip_range})

    async def change_ip_range(self, network_id: int, ip_range: str) -> Action:
        """Extend the network range; it can only grow."""

        return await self._post_action(network_id, "change_ip_range", ChangeIPRangeRequest, {"ip_range": ip_range})

    async def change_protection(self, network_id: int, *, delete: bool) -> Action:
        return await self._post_action(network_id, "change_protection", ChangeProtectionRequest, {"delete": delete})
