from __future__ import annotations

from typing import Any, Literal

from hcloud_client.core.domain.common import (
    Deprecation,
    HCloudModel,
    ListResponse,
    LocationPrice,
    ResponseModel,
)


class ServerType(HCloudModel):
    id: int
    name: str
    description: str
    cores: int
    memory: float
    disk: int
    prices: list[LocationPrice]
    storage_type: Literal["local", "network"]
    cpu_type: Literal["shared", "dedicated"]
    architecture: Literal["x86", "arm"]
    incompatibilities: list[Any] | None = None
    deprecation: Deprecation | None = None


class ServerTypeResponse(ResponseModel):
    server_type: ServerType


class ListServerTypesResponse(ListResponse):
    server_types: list[ServerType]
