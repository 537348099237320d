"""Primary IPs."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import (
    DeleteProtection,
    DnsPointer,
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)
from hcloud_client.core.domain.floating_ips import IPType
from hcloud_client.core.domain.locations import Datacenter

AssigneeType = Literal["server"]


class PrimaryIP(HCloudModel):
    id: int
    name: str
    ip: str
    type: IPType
    assignee_id: int | None
    assignee_type: AssigneeType | None
    auto_delete: bool
    blocked: bool
    created: str
    datacenter: Datacenter | None
    dns_ptr: list[DnsPointer]
    labels: Labels
    protection: DeleteProtection


class PrimaryIPResponse(ResponseModel):
    primary_ip: PrimaryIP


class ListPrimaryIPsResponse(ListResponse):
    primary_ips: list[PrimaryIP]


class CreatePrimaryIPRequest(RequestModel):
    name: str = Field(..., min_length=1)
    type: IPType
    assignee_type: AssigneeType
    assignee_id: int | None = None
    auto_delete: bool | None = None
    datacenter: str | None = None
    labels: Labels | None = None


class CreatePrimaryIPResponse(ResponseModel):
    primary_ip: PrimaryIP
    action: Action | None = None


class UpdatePrimaryIPRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    auto_delete: bool | None = None
    labels: Labels | None = None


class AssignPrimaryIPRequest(RequestModel):
    assignee_id: int
    assignee_type: AssigneeType = "server"
