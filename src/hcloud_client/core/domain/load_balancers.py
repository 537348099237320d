"""Load balancers: services, targets, algorithm and network attachment."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import (
    DeleteProtection,
    HCloudModel,
    IdOrName,
    Labels,
    ListResponse,
    LocationPrice,
    RequestModel,
    ResponseModel,
)
from hcloud_client.core.domain.locations import Location

Algorithm = Literal["round_robin", "least_connections"]
ServiceProtocol = Literal["http", "https", "tcp"]
TargetType = Literal["server", "label_selector", "ip"]


class HealthCheckHttp(BaseModel):
    domain: str | None = None
    path: str
    response: str | None = None
    status_codes: list[str] | None = None
    tls: bool | None = None


class HealthCheck(BaseModel):
    protocol: ServiceProtocol
    port: int
    interval: int
    timeout: int
    retries: int
    http: HealthCheckHttp | None = None


class ServiceHttp(BaseModel):
    sticky_sessions: bool | None = None
    cookie_name: str | None = None
    cookie_lifetime: int | None = None
    certificates: list[int] | None = None
    redirect_http: bool | None = None


class LoadBalancerService(HCloudModel):
    protocol: ServiceProtocol
    listen_port: int
    destination_port: int
    proxyprotocol: bool
    http: ServiceHttp | None = None
    health_check: HealthCheck


class TargetServer(BaseModel):
    id: int


class TargetIP(BaseModel):
    ip: str


class TargetLabelSelector(BaseModel):
    selector: str


class TargetHealthStatus(BaseModel):
    listen_port: int | None
    status: str


class LoadBalancerTarget(HCloudModel):
    type: TargetType
    server: TargetServer | None = None
    label_selector: TargetLabelSelector | None = None
    ip: TargetIP | None = None
    use_private_ip: bool | None = None
    health_status: list[TargetHealthStatus] | None = None
    targets: list[LoadBalancerTarget] | None = None


class LoadBalancerPublicIPv4(BaseModel):
    ip: str | None
    dns_ptr: str | None


class LoadBalancerPublicNet(BaseModel):
    enabled: bool
    ipv4: LoadBalancerPublicIPv4 | None
    ipv6: LoadBalancerPublicIPv4 | None


class LoadBalancerPrivateNet(BaseModel):
    network: int
    ip: str | None


class LoadBalancerType(HCloudModel):
    id: int
    name: str
    description: str
    max_connections: int
    max_services: int
    max_targets: int
    max_assigned_certificates: int
    prices: list[LocationPrice]


class LoadBalancerAlgorithm(BaseModel):
    type: Algorithm


class LoadBalancer(HCloudModel):
    id: int
    name: str
    public_net: LoadBalancerPublicNet
    private_net: list[LoadBalancerPrivateNet]
    location: Location
    load_balancer_type: LoadBalancerType
    algorithm: LoadBalancerAlgorithm
    services: list[LoadBalancerService]
    targets: list[LoadBalancerTarget]
    labels: Labels
    created: str
    included_traffic: int
    ingoing_traffic: int | None
    outgoing_traffic: int | None
    protection: DeleteProtection


class LoadBalancerResponse(ResponseModel):
    load_balancer: LoadBalancer


class ListLoadBalancersResponse(ListResponse):
    load_balancers: list[LoadBalancer]


class ServiceRequest(RequestModel):
    protocol: ServiceProtocol
    listen_port: int | None = Field(default=None, ge=1, le=65535)
    destination_port: int | None = Field(default=None, ge=1, le=65535)
    proxyprotocol: bool | None = None
    http: ServiceHttp | None = None
    health_check: HealthCheck | None = None


class UpdateServiceRequest(RequestModel):
    listen_port: int = Field(..., ge=1, le=65535)
    protocol: ServiceProtocol | None = None
    destination_port: int | None = Field(default=None, ge=1, le=65535)
    proxyprotocol: bool | None = None
    http: ServiceHttp | None = None
    health_check: HealthCheck | None = None


class DeleteServiceRequest(RequestModel):
    listen_port: int = Field(..., ge=1, le=65535)


class TargetRequest(RequestModel):
    type: TargetType
    server: TargetServer | None = None
    label_selector: TargetLabelSelector | None = None
    ip: TargetIP | None = None
    use_private_ip: bool | None = None


class CreateLoadBalancerRequest(RequestModel):
    name: str = Field(..., min_length=1)
    load_balancer_type: IdOrName
    algorithm: LoadBalancerAlgorithm | None = None
    location: str | None = None
    network_zone: str | None = None
    network: int | None = None
    public_interface: bool | None = None
    services: list[ServiceRequest] | None = None
    targets: list[TargetRequest] | None = None
    labels: Labels | None = None


class CreateLoadBalancerResponse(ResponseModel):
    load_balancer: LoadBalancer
    action: Action


class UpdateLoadBalancerRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    labels: Labels | None = None


class ChangeAlgorithmRequest(RequestModel):
    type: Algorithm


class ChangeLoadBalancerTypeRequest(RequestModel):
    load_balancer_type: IdOrName


class AttachToNetworkRequest(RequestModel):
    network: int
    ip: str | None = None


class DetachFromNetworkRequest(RequestModel):
    network: int


class LoadBalancerMetricsSeries(BaseModel):
    values: list[tuple[float, str]]


class LoadBalancerMetrics(BaseModel):
    start: str
    end: str
    step: float
    time_series: dict[str, LoadBalancerMetricsSeries]


class LoadBalancerMetricsResponse(ResponseModel):
    metrics: LoadBalancerMetrics
