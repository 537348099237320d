"""`/ssh_keys`."""

from __future__ import annotations

from typing import Any, Mapping

from hcloud_client.adapters.endpoints.base import ResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action
from hcloud_client.core.domain.ssh_keys import (
    CreateSSHKeyRequest,
    ListSSHKeysResponse,
    SSHKey,
    SSHKeyResponse,
    UpdateSSHKeyRequest,
)


class SSHKeysEndpoint(ResourceEndpoint):
    path = "/ssh_keys"
    resource = "SSH key"

    async def list(
        self,
        *,
        name: str | None = None,
        fingerprint: str | None = None,
        label_selector: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListSSHKeysResponse:
        query = build_query(
            {
                "name": name,
                "fingerprint": fingerprint,
                "label_selector": label_selector,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            }
        )
        return await self._list(ListSSHKeysResponse, query)

    async def create(self, params: CreateSSHKeyRequest | Mapping[str, Any]) -> SSHKey:
        body = self._body(CreateSSHKeyRequest, params, "Create SSH key request")
        response = await self._call("POST", self.path, SSHKeyResponse, body=body, context="Create SSH key response")
        return response.ssh_key

    async def get(self, ssh_key_id: int) -> SSHKey:
        response = await self._fetch(self._item_path(ssh_key_id), SSHKeyResponse)
        return response.ssh_key

    async def update(self, ssh_key_id: int, params: UpdateSSHKeyRequest | Mapping[str, Any]) -> SSHKey:
        body = self._body(UpdateSSHKeyRequest, params, "Update SSH key request")
        response = await self._call(
            "PUT", self._item_path(ssh_key_id), SSHKeyResponse, body=body, context="Update SSH key response"
        )
        return response.ssh_key

    async def delete(self, ssh_key_id: int) -> Action | None:
        return await self._delete(self._item_path(ssh_key_id))
