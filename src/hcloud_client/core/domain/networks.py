"""Private networks, their subnets and routes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hcloud_client.core.domain.common import (
    DeleteProtection,
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)

SubnetType = Literal["cloud", "server", "vswitch"]


class Route(BaseModel):
    destination: str
    gateway: str


class Subnet(BaseModel):
    type: SubnetType
    ip_range: str | None = None
    network_zone: str
    gateway: str | None = None
    vswitch_id: int | None = None


class Network(HCloudModel):
    id: int
    name: str
    ip_range: str
    subnets: list[Subnet]
    routes: list[Route]
    servers: list[int]
    load_balancers: list[int] = Field(default_factory=list)
    expose_routes_to_vswitch: bool = False
    protection: DeleteProtection
    labels: Labels
    created: str


class NetworkResponse(ResponseModel):
    network: Network


class ListNetworksResponse(ListResponse):
    networks: list[Network]


class RouteRequest(RequestModel):
    destination: str = Field(..., min_length=1)
    gateway: str = Field(..., min_length=1)


class SubnetRequest(RequestModel):
    type: SubnetType
    network_zone: str = Field(..., min_length=1)
    ip_range: str | None = None
    vswitch_id: int | None = None


class CreateNetworkRequest(RequestModel):
    name: str = Field(..., min_length=1)
    ip_range: str = Field(..., min_length=1)
    subnets: list[SubnetRequest] | None = None
    routes: list[RouteRequest] | None = None
    expose_routes_to_vswitch: bool | None = None
    labels: Labels | None = None


class UpdateNetworkRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    expose_routes_to_vswitch: bool | None = None
    labels: Labels | None = None


class DeleteSubnetRequest(RequestModel):
    ip_range: str = Field(..., min_length=1)


class ChangeIPRangeRequest(RequestModel):
    ip_range: str = Field(..., min_length=1)
