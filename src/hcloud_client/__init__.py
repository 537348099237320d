"""Typed async client for the Hetzner Cloud API."""

from hcloud_client._version import __version__
from hcloud_client.client import HCloudClient
from hcloud_client.core.auth import build_auth_header
from hcloud_client.core.config import (
    DEFAULT_TIMEOUT_MS,
    DEFAULT_USER_AGENT,
    HCLOUD_API_BASE_URL,
    ClientSettings,
)
from hcloud_client.core.errors import (
    ACTION_ERROR,
    INVALID_TOKEN,
    NETWORK_ERROR,
    TIMEOUT,
    UNKNOWN_ERROR,
    VALIDATION_ERROR,
    FieldError,
    HCloudError,
)
from hcloud_client.core.interfaces.transport import NO_CONTENT, Transport
from hcloud_client.core.services.actions import PollOptions, poll_action, poll_actions
from hcloud_client.core.services.helpers import (
    create_and_wait_for_server,
    find_floating_ip_by_ip,
    find_image_by_name,
    find_server_by_name,
)
from hcloud_client.core.services.pagination import get_all_pages, paginate
from hcloud_client.core.validation import ValidationResult, safe_validate, validate

__all__ = [
    "ACTION_ERROR",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_USER_AGENT",
    "HCLOUD_API_BASE_URL",
    "INVALID_TOKEN",
    "NETWORK_ERROR",
    "NO_CONTENT",
    "TIMEOUT",
    "UNKNOWN_ERROR",
    "VALIDATION_ERROR",
    "ClientSettings",
    "FieldError",
    "HCloudClient",
    "HCloudError",
    "PollOptions",
    "Transport",
    "ValidationResult",
    "__version__",
    "build_auth_header",
    "create_and_wait_for_server",
    "find_floating_ip_by_ip",
    "find_image_by_name",
    "find_server_by_name",
    "get_all_pages",
    "paginate",
    "poll_action",
    "poll_actions",
    "safe_validate",
    "validate",
]
