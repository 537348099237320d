"""Images (system, app, snapshot, backup) and ISOs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from hcloud_client.core.domain.common import (
    DeleteProtection,
    Deprecation,
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)

ImageType = Literal["system", "app", "snapshot", "backup"]
ImageStatus = Literal["available", "creating", "unavailable"]


class ImageCreatedFrom(BaseModel):
    id: int
    name: str


class Image(HCloudModel):
    id: int
    type: ImageType
    status: ImageStatus
    name: str | None
    description: str
    image_size: float | None
    disk_size: float
    created: str
    created_from: ImageCreatedFrom | None
    bound_to: int | None
    os_flavor: str
    os_version: str | None
    rapid_deploy: bool
    protection: DeleteProtection
    deprecation: Deprecation | None = None
    labels: Labels
    deleted: str | None

    @property
    def is_available(self) -> bool:
        return self.status == "available"

    @property
    def is_snapshot(self) -> bool:
        return self.type == "snapshot"

    @property
    def is_backup(self) -> bool:
        return self.type == "backup"

    @property
    def is_system(self) -> bool:
        return self.type == "system"


class ImageResponse(ResponseModel):
    image: Image


class ListImagesResponse(ListResponse):
    images: list[Image]


class UpdateImageRequest(RequestModel):
    description: str | None = None
    type: Literal["snapshot"] | None = None
    labels: Labels | None = None


class Iso(HCloudModel):
    id: int
    name: str | None
    description: str
    type: Literal["public", "private"]
    deprecation: Deprecation | None = None


class IsoResponse(ResponseModel):
    iso: Iso


class ListIsosResponse(ListResponse):
    isos: list[Iso]
