"""`/images` and `/isos`."""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.images import (
    Image,
    ImageResponse,
    Iso,
    IsoResponse,
    ListImagesResponse,
    ListIsosResponse,
    UpdateImageRequest,
)


class ImagesEndpoint(ResourceEndpoint):
    path = "/images"
    resource = "image"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        type: str | list[str] | None = None,
        status: str | list[str] | None = None,
        architecture: str | list[str] | None = None,
        bound_to: str | None = None,
        include_deprecated: bool | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListImagesResponse:
        query = build_query(
            {
                "name": name,
                "label_selector": label_selector,
                "type": type,
                "status": status,
                "architecture": architecture,
                "bound_to": bound_to,
                "include_deprecated": include_deprecated,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            },
            repeated=("type", "status", "architecture", "sort"),
        )
        return await self._list(ListImagesResponse, query)

    async def get(self, image_id: int) -> Image:
        response = await self._fetch(self._item_path(image_id), ImageResponse)
        return response.image

    async def update(self, image_id: int, params: UpdateImageRequest | Mapping[str, Any]) -> Image:
        """Update description, labels, or convert a backup into a snapshot."""

        body = self._body(UpdateImageRequest, params, "Update image request")
        response = await self._call(
            "PUT", self._item_path(image_id), ImageResponse, body=body, context="Update image response"
        )
        return response.image

    async def delete(self, image_id: int) -> Action | None:
        return await self._delete(self._item_path(image_id))


class IsosEndpoint(ResourceEndpoint):
    path = "/isos"
    resource = "iso"

    async def list(
        self,
        *,
        name: str | None = None,
        architecture: str | None = None,
        include_architecture_wildcard: bool | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListIsosResponse:
        query = build_query(
            {
                "name": name,
                "architecture": architecture,
                "include_architecture_wildcard": include_architecture_wildcard,
                "page": page,
                "per_page": per_page,
            }
        )
        return await self._list(ListIsosResponse, query)

    async def get(self, iso_id: int) -> Iso:
        response = await self._fetch(self._item_path(iso_id), IsoResponse)
        return response.iso
