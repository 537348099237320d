"""Locations and datacenters."""

from __future__ import annotations

from pydantic import BaseModel

from hcloud_client.core.domain.common import HCloudModel, ListResponse, ResponseModel


class Location(HCloudModel):
    id: int
    name: str
    description: str
    country: str
    city: str
    latitude: float
    longitude: float
    network_zone: str


class DatacenterServerTypes(BaseModel):
    supported: list[int]
    available: list[int]
    available_for_migration: list[int]


class Datacenter(HCloudModel):
    id: int
    name: str
    description: str
    location: Location
    server_types: DatacenterServerTypes


class LocationResponse(ResponseModel):
    location: Location


class ListLocationsResponse(ListResponse):
    locations: list[Location]


class DatacenterResponse(ResponseModel):
    datacenter: Datacenter


class ListDatacentersResponse(ListResponse):
    datacenters: list[Datacenter]
