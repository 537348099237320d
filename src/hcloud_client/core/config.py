"""Client configuration.

Sources, highest priority first:
- explicit arguments to `HCloudClient` or `ClientSettings`
- `HCLOUD_*` environment variables
- a local `.env` file

The resulting settings are frozen and shared by every request.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hcloud_client._version import __version__

HCLOUD_API_BASE_URL = "https://api.hetzner.cloud/v1"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_USER_AGENT = f"hcloud-client/{__version__}"


class ClientSettings(BaseSettings):
    """Configuration of a single `HCloudClient`.

    The object is frozen: once built it can be shared freely between
    concurrent requests.
    """

    model_config = SettingsConfigDict(
        env_prefix="HCLOUD_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    token: str | None = Field(
        default=None,
        description="Hetzner Cloud API token (Bearer).",
    )
    base_url: str = Field(
        default=HCLOUD_API_BASE_URL,
        min_length=8,
        description="Base URL of the Cloud API.",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Per-request timeout (milliseconds).",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent sent with every request.",
    )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000
