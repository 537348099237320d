"""Firewalls, their rules and the resources they apply to."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import (
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)

RuleDirection = Literal["in", "out"]
RuleProtocol = Literal["tcp", "udp", "icmp", "esp", "gre"]
ResourceType = Literal["server", "label_selector"]

_PORT_PATTERN = r"^\d+(-\d+)?$"


class FirewallRule(HCloudModel):
    """One rule; `port` is a single port or a `from-to` range."""

    direction: RuleDirection
    protocol: RuleProtocol
    source_ips: list[str] | None = None
    destination_ips: list[str] | None = None
    port: str | None = None
    description: str | None = None


class FirewallRuleRequest(RequestModel):
    direction: RuleDirection
    protocol: RuleProtocol
    source_ips: list[str] | None = None
    destination_ips: list[str] | None = None
    port: str | None = Field(default=None, pattern=_PORT_PATTERN)
    description: str | None = None


class ServerRef(BaseModel):
    id: int


class LabelSelector(BaseModel):
    selector: str


class FirewallResource(RequestModel):
    type: ResourceType
    server: ServerRef | None = None
    label_selector: LabelSelector | None = None


class AppliedToResource(HCloudModel):
    type: ResourceType
    server: ServerRef | None = None
    label_selector: LabelSelector | None = None
    applied_to_resources: list[dict[str, object]] | None = None


class Firewall(HCloudModel):
    id: int
    name: str
    labels: Labels
    created: str
    rules: list[FirewallRule]
    applied_to: list[AppliedToResource]


class FirewallResponse(ResponseModel):
    firewall: Firewall


class ListFirewallsResponse(ListResponse):
    firewalls: list[Firewall]


class CreateFirewallRequest(RequestModel):
    name: str = Field(..., min_length=1)
    rules: list[FirewallRuleRequest] | None = None
    apply_to: list[FirewallResource] | None = None
    labels: Labels | None = None


class CreateFirewallResponse(ResponseModel):
    firewall: Firewall
    actions: list[Action] = Field(default_factory=list)


class UpdateFirewallRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    labels: Labels | None = None


class ApplyToResourcesRequest(RequestModel):
    apply_to: list[FirewallResource]


class RemoveFromResourcesRequest(RequestModel):
    remove_from: list[FirewallResource]


class SetRulesRequest(RequestModel):
    rules: list[FirewallRuleRequest]
