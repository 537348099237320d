"""Bearer authentication for the Cloud API."""

from __future__ import annotations

from hcloud_client.core.errors import INVALID_TOKEN, HCloudError


def build_auth_header(token: str | None) -> dict[str, str]:
    """Return the `Authorization` header for `token`.

    The token is sent unmodified; only its emptiness is checked.
    """

    if token is None or not token.strip():
        raise HCloudError("API token is required", INVALID_TOKEN)
    return {"Authorization": f"Bearer {token}"}
