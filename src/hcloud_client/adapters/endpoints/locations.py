"""`/locations` and `/datacenters`."""

from __future__ import annotations

from hcloud_client.adapters.endpoints.base import ResourceEndpoint, build_query
from hcloud_client.core.domain.locations import (
    Datacenter,
    DatacenterResponse,
    ListDatacentersResponse,
    ListLocationsResponse,
    Location,
    LocationResponse,
)


class LocationsEndpoint(ResourceEndpoint):
    path = "/locations"
    resource = "location"

    async def list(
        self,
        *,
        name: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListLocationsResponse:
        query = build_query({"name": name, "sort": sort, "page": page, "per_page": per_page})
        return await self._list(ListLocationsResponse, query)

    async def get(self, location_id: int) -> Location:
        response = await self._fetch(self._item_path(location_id), LocationResponse)
        return response.location


class DatacentersEndpoint(ResourceEndpoint):
    path = "/datacenters"
    resource = "datacenter"

    async def list(
        self,
        *,
        name: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListDatacentersResponse:
        query = build_query({"name": name, "sort": sort, "page": page, "per_page": per_page})
        return await self._list(ListDatacentersResponse, query)

    async def get(self, datacenter_id: int) -> Datacenter:
        response = await self._fetch(self._item_path(datacenter_id), DatacenterResponse)
        return response.datacenter
