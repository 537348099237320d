"""Floating IPs."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from hcloud_client.core.domain.actions import Action, ActionResource
from hcloud_client.core.domain.common import (
    DeleteProtection,
    DnsPointer,
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)
from hcloud_client.core.domain.locations import Location

IPType = Literal["ipv4", "ipv6"]


class FloatingIP(HCloudModel):
    id: int
    name: str | None
    description: str | None
    ip: str
    type: IPType
    server: int | None
    dns_ptr: list[DnsPointer]
    home_location: Location
    blocked: bool | None = None
    labels: Labels
    created: str
    protection: DeleteProtection
    blocking: list[ActionResource] | None = None


class FloatingIPResponse(ResponseModel):
    floating_ip: FloatingIP


class ListFloatingIPsResponse(ListResponse):
    floating_ips: list[FloatingIP]


class CreateFloatingIPRequest(RequestModel):
    type: IPType
    name: str | None = None
    description: str | None = None
    home_location: str | None = None
    server: int | None = None
    labels: Labels | None = None


class CreateFloatingIPResponse(ResponseModel):
    floating_ip: FloatingIP
    action: Action | None = None


class UpdateFloatingIPRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    labels: Labels | None = None


class AssignFloatingIPRequest(RequestModel):
    server: int
