"""`/firewalls`.

Firewall actions fan out to every affected resource, so they answer with a
list of actions instead of a single one.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action, ActionsResponse
from hcloud_client.core.domain.firewalls import (
    ApplyToResourcesRequest,
    CreateFirewallRequest,
    CreateFirewallResponse,
    Firewall,
    FirewallResource,
    FirewallResponse,
    FirewallRuleRequest,
    ListFirewallsResponse,
    RemoveFromResourcesRequest,
    SetRulesRequest,
    UpdateFirewallRequest,
)

ResourceInput = Union[FirewallResource, Mapping[str, Any]]
RuleInput = Union[FirewallRuleRequest, Mapping[str, Any]]


class FirewallsEndpoint(ActionResourceEndpoint):
    path = "/firewalls"
    resource = "firewall"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListFirewallsResponse:
        query = build_query(
            {"name": name, "label_selector": label_selector, "sort": sort, "page": page, "per_page": per_page}
        )
        return await self._list(ListFirewallsResponse, query)

    async def create(self, params: CreateFirewallRequest | Mapping[str, Any]) -> CreateFirewallResponse:
        body = self._body(CreateFirewallRequest, params, "Create firewall request")
        return await self._call(
            "POST", self.path, CreateFirewallResponse, body=body, context="Create firewall response"
        )

    async def get(self, firewall_id: int) -> Firewall:
        response = await self._fetch(self._item_path(firewall_id), FirewallResponse)
        return response.firewall

    async def update(self, firewall_id: int, params: UpdateFirewallRequest | Mapping[str, Any]) -> Firewall:
        body = self._body(UpdateFirewallRequest, params, "Update firewall request")
        response = await self._call(
            "PUT", self._item_path(firewall_id), FirewallResponse, body=body, context="Update firewall response"
        )
        return response.firewall

    async def delete(self, firewall_id: int) -> Action | None:
        return await self._delete(self._item_path(firewall_id))

    async def apply_to_resources(self, firewall_id: int, resources: Sequence[ResourceInput]) -> list[Action]:
        response = await self._post_action(
            firewall_id,
            "apply_to_resources",
            ApplyToResourcesRequest,
            {"apply_to": list(resources)},
            response_model=ActionsResponse,
        )
        return response.actions

    async def remove_from_resources(self, firewall_id: int, resources: Sequence[ResourceInput]) -> list[Action]:
        response = await self._post_action(
            firewall_id,
            "remove_from_resources",
            RemoveFromResourcesRequest,
            {"remove_from": list(resources)},
            response_model=ActionsResponse,
        )
        return response.actions

    async def set_rules(self, firewall_id: int, rules: Sequence[RuleInput]) -> list[Action]:
        """Replace all rules; an empty sequence removes every rule."""

        response = await self._post_action(
            firewall_id,
            "set_rules",
            SetRulesRequest,
            {"rules": list(rules)},
            response_model=ActionsResponse,
        )
        return response.actions
