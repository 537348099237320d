"""TLS certificates, uploaded or managed (Let's Encrypt)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.common import (
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)

CertificateType = Literal["uploaded", "managed"]


class CertificateUsage(BaseModel):
    id: int
    type: str


class ManagedCertificateStatus(BaseModel):
    issuance: str
    renewal: str
    error: dict[str, str] | None = None


class Certificate(HCloudModel):
    id: int
    name: str
    labels: Labels
    type: CertificateType
    certificate: str | None
    created: str
    not_valid_before: str | None
    not_valid_after: str | None
    domain_names: list[str]
    fingerprint: str | None
    status: ManagedCertificateStatus | None = None
    used_by: list[CertificateUsage] = Field(default_factory=list)


class CertificateResponse(ResponseModel):
    certificate: Certificate


class ListCertificatesResponse(ListResponse):
    certificates: list[Certificate]


class CreateCertificateRequest(RequestModel):
    name: str = Field(..., min_length=1)
    type: CertificateType | None = None
    certificate: str | None = None
    private_key: str | None = None
    domain_names: list[str] | None = None
    labels: Labels | None = None


class CreateCertificateResponse(ResponseModel):
    certificate: Certificate
    action: Action | None = None


class UpdateCertificateRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    labels: Labels | None = None
