"""`/certificates`."""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.certificates import (
    Certificate,
    CertificateResponse,
    CreateCertificateRequest,
    CreateCertificateResponse,
    ListCertificatesResponse,
    UpdateCertificateRequest,
)


class CertificatesEndpoint(ActionResourceEndpoint):
    path = "/certificates"
    resource = "certificate"

    async def list(
        self,
        *,
        name: str | None = None,
        label_selector: str | None = None,
        type: str | list[str] | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListCertificatesResponse:
        query = build_query(
            {
                "name": name,
                "label_selector": label_selector,
                "type": type,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            },
            repeated=("type", "sort"),
        )
        return await self._list(ListCertificatesResponse, query)

    async def create(self, params: CreateCertificateRequest | Mapping[str, Any]) -> CreateCertificateResponse:
        """Upload a certificate, or request a managed one for `domain_names`."""

        body = self._body(CreateCertificateRequest, params, "Create certificate request")
        return await self._call(
            "POST", self.path, CreateCertificateResponse, body=body, context="Create certificate response"
        )

    async def get(self, certificate_id: int) -> Certificate:
        response = await self._fetch(self._item_path(certificate_id), CertificateResponse)
        return response.certificate

    async def update(
        self, certificate_id: int, params: UpdateCertificateRequest | Mapping[str, Any]
    ) -> Certificate:
        body = self._body(UpdateCertificateRequest, params, "Update certificate request")
        response = await self._call(
            "PUT",
            self._item_path(certificate_id),
            CertificateResponse,
            body=body,
            context="Update certificate response",
        )
        return response.certificate

    async def delete(self, certificate_id: int) -> Action | None:
        return await self._delete(self._item_path(certificate_id))

    async def retry_issuance(self, certificate_id: int) -> Action:
        """Retry a failed issuance or renewal of a managed certificate."""

        return await self._post_action(certificate_id, "retry")
