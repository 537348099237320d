"""`/load_balancers`."""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import ChangeProtectionRequest, ChangeReverseDnsRequest
from hcloud_client.core.domain.load_balancers import (
    AttachToNetworkRequest,
    ChangeAlgorithmRequest,
    ChangeLoadBalancerTypeRequest,
    CreateLoadBalancerRequest,
    CreateLoadBalancerResponse,
    DeleteServiceRequest,
    DetachFromNetworkRequest,
    ListLoadBalancersResponse,
    LoadBalancer,
    LoadBalancerMetricsResponse,
    LoadBalancerResponse,
    ServiceRequest,
    TargetRequest,
    UpdateLoadBalancerRequest,
    UpdateServiceRequest,
)


class LoadBalancersEndpoint(ActionResourceEndpoint):
    path = "/load_balancers"
    resource = "load balancer"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListLoadBalancersResponse:
        query = build_query(
            {"name": name, "label_selector": label_selector, "sort": sort, "page": page, "per_page": per_page}
        )
        return await self._list(ListLoadBalancersResponse, query)

    async def create(self, params: CreateLoadBalancerRequest | Mapping[str, Any]) -> CreateLoadBalancerResponse:
        body = self._body(CreateLoadBalancerRequest, params, "Create load balancer request")
        return await self._call(
            "POST", self.path, CreateLoadBalancerResponse, body=body, context="Create load balancer response"
        )

    async def get(self, load_balancer_id: int) -> LoadBalancer:
        response = await self._fetch(self._item_path(load_balancer_id), LoadBalancerResponse)
        return response.load_balancer

    async def update(
        self, load_balancer_id: int, params: UpdateLoadBalancerRequest | Mapping[str, Any]
    ) -> LoadBalancer:
        body = self._body(UpdateLoadBalancerRequest, params, "Update load balancer request")
        response = await self._call(
            "PUT",
            self._item_path(load_balancer_id),
            LoadBalancerResponse,
            body=body,
            context="Update load balancer response",
        )
        return response.load_balancer

    async def delete(self, load_balancer_id: int) -> Action | None:
        return await self._delete(self._item_path(load_balancer_id))

    async def add_service(self, load_balancer_id: int, params: ServiceRequest | Mapping[str, Any]) -> Action:
        return await self._post_action(load_balancer_id, "add_service", ServiceRequest, params)

    async def update_service(
        self, load_balancer_id: int, params: UpdateServiceRequest | Mapping[str, Any]
    ) -> Action:
        """Update the service identified by `listen_port`."""

        return await self._post_action(load_balancer_id, "update_service", UpdateServiceRequest, params)

    async def delete_service(self, load_balancer_id: int, listen_port: int) -> Action:
        return await self._post_action(
            load_balancer_id, "delete_service", DeleteServiceRequest, {"listen_port": listen_port}
        )

    async def add_target(self, load_balancer_id: int, params: TargetRequest | Mapping[str, Any]) -> Action:
        return await self._post_action(load_balancer_id, "add_target", TargetRequest, params)

    async def remove_target(self, load_balancer_id: int, params: TargetRequest | Mapping[str, Any]) -> Action:
        return await self._post_action(load_balancer_id, "remove_target", TargetRequest, params)

    async def change_algorithm(self, load_balancer_id: int, algorithm: str) -> Action:
        return await self._post_action(load_balancer_id, "change_algorithm", ChangeAlgorithmRequest, {"type": algorithm})

    async def change_type(self, load_balancer_id: int, load_balancer_type: int | str) -> Action:
        return await self._post_action(
            load_balancer_id,
            "change_type",
            ChangeLoadBalancerTypeRequest,
            {"load_balancer_type": load_balancer_type},
        )

    async def change_reverse_dns(self, load_balancer_id: int, ip: str, dns_ptr: str | None) -> Action:
        return await self._post_action(
            load_balancer_id, "change_dns_ptr", ChangeReverseDnsRequest, {"ip": ip, "dns_ptr": dns_ptr}
        )

    async def change_protection(self, load_balancer_id: int, *, delete: bool) -> Action:
        return await self._post_action(
            load_balancer_id, "change_protection", ChangeProtectionRequest, {"delete": delete}
        )

    async def attach_to_network(self, load_balancer_id: int, network_id: int, *, ip: str | None = None) -> Action:
        params: dict[str, Any] = {"network": network_id}
        if ip is not None:
            params["ip"] = ip
        return await self._post_action(load_balancer_id, "attach_to_network", AttachToNetworkRequest, params)

    async def detach_from_network(self, load_balancer_id: int, network_id: int) -> Action:
        return await self._post_action(
            load_balancer_id, "detach_from_network", DetachFromNetworkRequest, {"network": network_id}
        )

    async def enable_public_interface(self, load_balancer_id: int) -> Action:
        return await self._post_action(load_balancer_id, "enable_public_interface")

    async def disable_public_interface(self, load_balancer_id: int) -> Action:
        return await self._post_action(load_balancer_id, "disable_public_interface")

    async def get_metrics(
        self,
        load_balancer_id: int,
        *,
        type: str | list[str],
        start: str,
        end: str,
        step: int | None = None,
    ) -> LoadBalancerMetricsResponse:
        types = type if isinstance(type, (list, tuple)) else [type]
        query = build_query({"type": ",".join(types), "start": start, "end": end, "step": step})
        return await self._call(
            "GET",
            self._item_path(load_balancer_id, "metrics"),
            LoadBalancerMetricsResponse,
            params=query,
            context="Get load balancer metrics response",
        )
