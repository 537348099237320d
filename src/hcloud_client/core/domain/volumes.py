"""Block storage volumes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from hcloud_client.core.domain.actions import Action, ActionResource
from hcloud_client.core.domain.common import (
    DeleteProtection,
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)
from hcloud_client.core.domain.locations import Location

VolumeStatus = Literal["creating", "available", "deleting"]


class Volume(HCloudModel):
    id: int
    name: str
    status: VolumeStatus
    server: int | None
    location: Location
    size: int
    linux_device: str
    created: str
    format: str | None
    labels: Labels
    protection: DeleteProtection
    blocking: list[ActionResource] | None = None


class VolumeResponse(ResponseModel):
    volume: Volume


class ListVolumesResponse(ListResponse):
    volumes: list[Volume]


class CreateVolumeRequest(RequestModel):
    name: str = Field(..., min_length=1)
    size: int = Field(..., gt=0)
    location: str | None = None
    server: int | None = None
    format: str | None = None
    automount: bool | None = None
    labels: Labels | None = None


class CreateVolumeResponse(ResponseModel):
    volume: Volume
    action: Action
    next_actions: list[Action] = Field(default_factory=list)


class UpdateVolumeRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    labels: Labels | None = None


class AttachVolumeRequest(RequestModel):
    server: int
    automount: bool | None = None


class ResizeVolumeRequest(RequestModel):
    size: int = Field(..., gt=0)
