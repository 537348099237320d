"""Servers and their request/response shapes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import (
    HCloudModel,
    IdOrName,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)
from hcloud_client.core.domain.images import Image, Iso
from hcloud_client.core.domain.locations import Datacenter
from hcloud_client.core.domain.server_types import ServerType

ServerStatus = Literal[
    "running",
    "initializing",
    "starting",
    "stopping",
    "off",
    "deleting",
    "migrating",
    "rebuilding",
    "unknown",
]


class PublicNetIPv4(BaseModel):
    ip: str
    blocked: bool
    dns_ptr: str | None


class PublicNetIPv6DnsPointer(BaseModel):
    ip: str
    dns_ptr: str


class PublicNetIPv6(BaseModel):
    ip: str
    blocked: bool
    dns_ptr: list[PublicNetIPv6DnsPointer] | None


class PublicNetFirewall(BaseModel):
    id: int
    status: str


class PublicNet(HCloudModel):
    ipv4: PublicNetIPv4 | None
    ipv6: PublicNetIPv6 | None
    firewalls: list[PublicNetFirewall] | None = None
    floating_ips: list[int]


class PrivateNet(HCloudModel):
    network: int
    ip: str
    alias_ips: list[str]
    mac_address: str


class BackupWindow(BaseModel):
    start: str
    end: str


class ServerProtection(BaseModel):
    delete: bool
    rebuild: bool


class Server(HCloudModel):
    id: int
    name: str
    status: ServerStatus
    created: str
    public_net: PublicNet
    private_net: list[PrivateNet]
    server_type: ServerType
    datacenter: Datacenter
    image: Image | None
    iso: Iso | None
    rescue_enabled: bool
    locked: bool
    backup_window: str | None
    outgoing_traffic: int | None
    ingoing_traffic: int | None
    included_traffic: int
    primary_disk_size: int
    protection: ServerProtection
    labels: Labels
    volumes: list[int]
    load_balancers: list[int]

    @property
    def is_running(self) -> bool:
        return self.status == "running"

    @property
    def is_stopped(self) -> bool:
        return self.status == "off"


class ServerResponse(ResponseModel):
    server: Server


class ListServersResponse(ListResponse):
    servers: list[Server]


class CreateServerPublicNet(RequestModel):
    enable_ipv4: bool | None = None
    enable_ipv6: bool | None = None
    ipv4: int | None = None
    ipv6: int | None = None


class CreateServerRequest(RequestModel):
    name: str = Field(..., min_length=1)
    server_type: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    location: str | None = None
    datacenter: str | None = None
    ssh_keys: list[IdOrName] | None = None
    volumes: list[int] | None = None
    networks: list[int] | None = None
    firewalls: list[dict[str, int]] | None = None
    placement_group: int | None = None
    user_data: str | None = None
    labels: Labels | None = None
    start_after_create: bool | None = None
    automount: bool | None = None
    public_net: CreateServerPublicNet | None = None


class CreateServerResponse(ResponseModel):
    server: Server
    action: Action
    next_actions: list[Action]
    root_password: str | None


class UpdateServerRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    labels: Labels | None = None


class ServerMetricsSeries(BaseModel):
    values: list[tuple[float, str]]


class ServerMetrics(BaseModel):
    start: str
    end: str
    step: float
    time_series: dict[str, ServerMetricsSeries]


class ServerMetricsResponse(ResponseModel):
    metrics: ServerMetrics


class AttachIsoRequest(RequestModel):
    iso: IdOrName


class EnableRescueRequest(RequestModel):
    type: Literal["linux64"] | None = None
    ssh_keys: list[IdOrName] | None = None


class EnableRescueResponse(ResponseModel):
    action: Action
    root_password: str | None = None


class CreateImageRequest(RequestModel):
    type: Literal["snapshot", "backup"] | None = None
    description: str | None = None
    labels: Labels | None = None


class CreateImageResponse(ResponseModel):
    action: Action
    image: Image


class RebuildServerRequest(RequestModel):
    image: IdOrName


class RebuildServerResponse(ResponseModel):
    action: Action
    root_password: str | None = None


class ChangeServerProtectionRequest(RequestModel):
    delete: bool | None = None
    rebuild: bool | None = None


class ChangeServerTypeRequest(RequestModel):
    server_type: IdOrName
    upgrade_disk: bool
