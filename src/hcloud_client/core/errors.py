"""Error type shared by the whole library.

Every failure that reaches a caller (HTTP error, timeout, network failure,
validation error, failed action) is an `HCloudError`, so a single
`except HCloudError` branch keyed on `code` / `status_code` is enough.

Error envelope returned by the API:

    {"error": {"message": "...", "code": "...",
               "details": {"fields": [{"name": "...", "messages": ["..."]}]}}}
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

INVALID_TOKEN = "INVALID_TOKEN"
VALIDATION_ERROR = "VALIDATION_ERROR"
TIMEOUT = "TIMEOUT"
NETWORK_ERROR = "NETWORK_ERROR"
UNKNOWN_ERROR = "UNKNOWN_ERROR"
ACTION_ERROR = "ACTION_ERROR"


class FieldError(BaseModel):
    """Validation messages attached to one field path."""

    name: str = Field(..., description="Field path (dotted for nested fields).")
    messages: list[str] = Field(default_factory=list)


class HCloudError(Exception):
    """Normalized error raised by the client.

    Attributes:
    - message: human readable description (always present).
    - code: short machine token (`TIMEOUT`, `NETWORK_ERROR`, provider codes...).
    - status_code: HTTP status; 0 when no HTTP exchange happened.
    - details: structured payload, e.g. `{"fields": [...]}`.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details

    def __repr__(self) -> str:
        return (
            f"HCloudError(message={self.message!r}, code={self.code!r}, "
            f"status_code={self.status_code!r})"
        )

    @property
    def field_errors(self) -> list[FieldError] | None:
        """Field-level validation details.

        `None` when the error carries no `fields` entry at all, `[]` when the
        provider sent an empty list. Malformed entries are skipped.
        """

        if not isinstance(self.details, dict) or "fields" not in self.details:
            return None
        raw = self.details.get("fields")
        if not isinstance(raw, list):
            return []
        out: list[FieldError] = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            name = item.get("name")
            messages = item.get("messages")
            if not isinstance(name, str):
                continue
            if not isinstance(messages, list):
                messages = []
            out.append(FieldError(name=name, messages=[str(m) for m in messages]))
        return out

    def has_field_errors(self) -> bool:
        return bool(self.field_errors)

    def get_field_errors(self) -> list[FieldError]:
        return self.field_errors or []

    @property
    def is_timeout(self) -> bool:
        return self.code == TIMEOUT

    @property
    def is_network_error(self) -> bool:
        return self.code == NETWORK_ERROR

    @property
    def is_validation_error(self) -> bool:
        return self.code == VALIDATION_ERROR
