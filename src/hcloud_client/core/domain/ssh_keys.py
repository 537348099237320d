"""SSH keys."""

from __future__ import annotations

from pydantic import Field

from hcloud_client.core.domain.common import (
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)


class SSHKey(HCloudModel):
    id: int
    name: str
    fingerprint: str
    public_key: str
    labels: Labels
    created: str


class SSHKeyResponse(ResponseModel):
    ssh_key: SSHKey


class ListSSHKeysResponse(ListResponse):
    ssh_keys: list[SSHKey]


class CreateSSHKeyRequest(RequestModel):
    name: str = Field(..., min_length=1)
    public_key: str = Field(..., min_length=1)
    labels: Labels | None = None


class UpdateSSHKeyRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    labels: Labels | None = None
