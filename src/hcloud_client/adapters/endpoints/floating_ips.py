"""`/floating_ips` and `/primary_ips`.

Both families share the same action set: assign, unassign, reverse DNS
and delete protection.
"""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import ChangeProtectionRequest, ChangeReverseDnsRequest
from hcloud_client.core.domain.floating_ips import (
    AssignFloatingIPRequest,
    CreateFloatingIPRequest,
    CreateFloatingIPResponse,
    FloatingIP,
    FloatingIPResponse,
    ListFloatingIPsResponse,
    UpdateFloatingIPRequest,
)
from hcloud_client.core.domain.primary_ips import (
    AssignPrimaryIPRequest,
    CreatePrimaryIPRequest,
    CreatePrimaryIPResponse,
    ListPrimaryIPsResponse,
    PrimaryIP,
    PrimaryIPResponse,
    UpdatePrimaryIPRequest,
)


class _AddressEndpoint(ActionResourceEndpoint):
    async def unassign(self, ip_id: int) -> Action:
        return await self._post_action(ip_id, "unassign")

    async def change_reverse_dns(self, ip_id: int, ip: str, dns_ptr: str | None) -> Action:
        """Set the PTR record of `ip`; `None` resets it to the default."""

        return await self._post_action(
            ip_id, "change_dns_ptr", ChangeReverseDnsRequest, {"ip": ip, "dns_ptr": dns_ptr}
        )

    async def change_protection(self, ip_id: int, *, delete: bool) -> Action:
        return await self._post_action(ip_id, "change_protection", ChangeProtectionRequest, {"delete": delete})

    async def delete(self, ip_id: int) -> Action | None:
        return await self._delete(self._item_path(ip_id))

    def _list_query(
        self,
        name: str | None,
        label_selector: str | None,
        ip: str | None,
        sort: str | list[str] | None,
        page: int | None,
        per_page: int | None,
    ) -> dict[str, Any]:
        return build_query(
            {
                "name": name,
                "label_selector": label_selector,
                "ip": ip,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            }
        )


class FloatingIPsEndpoint(_AddressEndpoint):
    path = "/floating_ips"
    resource = "floating IP"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListFloatingIPsResponse:
        query = self._list_query(name, label_selector, None, sort, page, per_page)
        return await self._list(ListFloatingIPsResponse, query)

    async def create(self, params: CreateFloatingIPRequest | Mapping[str, Any]) -> CreateFloatingIPResponse:
        body = self._body(CreateFloatingIPRequest, params, "Create floating IP request")
        return await self._call(
            "POST", self.path, CreateFloatingIPResponse, body=body, context="Create floating IP response"
        )

    async def get(self, floating_ip_id: int) -> FloatingIP:
        response = await self._fetch(self._item_path(floating_ip_id), FloatingIPResponse)
        return response.floating_ip

    async def update(self, floating_ip_id: int, params: UpdateFloatingIPRequest | Mapping[str, Any]) -> FloatingIP:
        body = self._body(UpdateFloatingIPRequest, params, "Update floating IP request")
        response = await self._call(
            "PUT",
            self._item_path(floating_ip_id),
            FloatingIPResponse,
            body=body,
            context="Update floating IP response",
        )
        return response.floating_ip

    async def assign(self, floating_ip_id: int, server_id: int) -> Action:
        return await self._post_action(floating_ip_id, "assign", AssignFloatingIPRequest, {"server": server_id})


class PrimaryIPsEndpoint(_AddressEndpoint):
    path = "/primary_ips"
    resource = "primary IP"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        ip: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListPrimaryIPsResponse:
        query = self._list_query(name, label_selector, ip, sort, page, per_page)
        return await self._list(ListPrimaryIPsResponse, query)

    async def create(self, params: CreatePrimaryIPRequest | Mapping[str, Any]) -> CreatePrimaryIPResponse:
        body = self._body(CreatePrimaryIPRequest, params, "Create primary IP request")
        return await self._call(
            "POST", self.path, CreatePrimaryIPResponse, body=body, context="Create primary IP response"
        )

    async def get(self, primary_ip_id: int) -> PrimaryIP:
        response = await self._fetch(self._item_path(primary_ip_id), PrimaryIPResponse)
        return response.primary_ip

    async def update(self, primary_ip_id: int, params: UpdatePrimaryIPRequest | Mapping[str, Any]) -> PrimaryIP:
        body = self._body(UpdatePrimaryIPRequest, params, "Update primary IP request")
        response = await self._call(
            "PUT",
            self._item_path(primary_ip_id),
            PrimaryIPResponse,
            body=body,
            context="Update primary IP response",
        )
        return response.primary_ip

    async def assign(self, primary_ip_id: int, assignee_id: int, *, assignee_type: str = "server") -> Action:
        return await self._post_action(
            primary_ip_id,
            "assign",
            AssignPrimaryIPRequest,
            {"assignee_id": assignee_id, "assignee_type": assignee_type},
        )
