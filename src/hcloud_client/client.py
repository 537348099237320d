"""`HCloudClient`: entry point exposing every endpoint group."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from hcloud_client.adapters.endpoints import (
    ActionsEndpoint,
    CertificatesEndpoint,
    DatacentersEndpoint,
    DnsEndpoint,
    FirewallsEndpoint,
    FloatingIPsEndpoint,
    ImagesEndpoint,
    IsosEndpoint,
    LoadBalancersEndpoint,
    LocationsEndpoint,
    NetworksEndpoint,
    PlacementGroupsEndpoint,
    PricingEndpoint,
    PrimaryIPsEndpoint,
    ServersEndpoint,
    ServerTypesEndpoint,
    SSHKeysEndpoint,
    VolumesEndpoint,
)
from hcloud_client.adapters.http_client import HttpTransport
from hcloud_client.core.config import ClientSettings
from hcloud_client.core.interfaces.transport import QueryParams

logger = logging.getLogger(__name__)


class HCloudClient:
    """Typed async client for the Hetzner Cloud API.

    Explicit arguments win over `settings`, which in turn default to the
    `HCLOUD_*` environment. A missing or blank token raises `HCloudError`
    with code `INVALID_TOKEN` before any network activity.

        async with HCloudClient("my-token") as client:
            servers = await client.servers.list(status="running")
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str | None = None,
        timeout_ms: int | None = None,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        overrides: dict[str, Any] = {}
        if token is not None:
            overrides["token"] = token
        if base_url is not None:
            overrides["base_url"] = base_url
        if timeout_ms is not None:
            overrides["timeout_ms"] = timeout_ms

        if settings is None:
            settings = ClientSettings(**overrides)
        elif overrides:
            settings = ClientSettings(**{**settings.model_dump(), **overrides})

        self.settings = settings
        self._transport = HttpTransport(settings, client=http_client)

        self.actions = ActionsEndpoint(self._transport)
        self.servers = ServersEndpoint(self._transport)
        self.images = ImagesEndpoint(self._transport)
        self.isos = IsosEndpoint(self._transport)
        self.server_types = ServerTypesEndpoint(self._transport)
        self.locations = LocationsEndpoint(self._transport)
        self.datacenters = DatacentersEndpoint(self._transport)
        self.ssh_keys = SSHKeysEndpoint(self._transport)
        self.volumes = VolumesEndpoint(self._transport)
        self.floating_ips = FloatingIPsEndpoint(self._transport)
        self.primary_ips = PrimaryIPsEndpoint(self._transport)
        self.networks = NetworksEndpoint(self._transport)
        self.firewalls = FirewallsEndpoint(self._transport)
        self.load_balancers = LoadBalancersEndpoint(self._transport)
        self.certificates = CertificatesEndpoint(self._transport)
        self.placement_groups = PlacementGroupsEndpoint(self._transport)
        self.pricing = PricingEndpoint(self._transport)
        self.dns = DnsEndpoint(self._transport)

        logger.debug("client ready for %s", settings.base_url)

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Raw request for endpoints without a typed group; returns unvalidated JSON."""

        return await self._transport.request(method, path, body=body, params=params, headers=headers)

    async def get(self, path: str, params: QueryParams | None = None, headers: Mapping[str, str] | None = None) -> Any:
        return await self._transport.get(path, params, headers)

    async def post(
        self,
        path: str,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._transport.post(path, body, params, headers)

    async def put(
        self,
        path: str,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._transport.put(path, body, params, headers)

    async def patch(
        self,
        path: str,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._transport.patch(path, body, params, headers)

    async def delete(
        self, path: str, params: QueryParams | None = None, headers: Mapping[str, str] | None = None
    ) -> Any:
        return await self._transport.delete(path, params, headers)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> HCloudClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
