"""Schema validation on top of pydantic.

`validate` raises `HCloudError(code="VALIDATION_ERROR")` with one
`{"name", "messages"}` entry per failing field path, the same shape the API
uses for its own field errors. `safe_validate` returns a `ValidationResult`
instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hcloud_client.core.errors import VALIDATION_ERROR, HCloudError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[M]):
    """Outcome of `safe_validate`: either `value` or `error` is set."""

    value: M | None = None
    error: HCloudError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _loc_to_path(loc: tuple[Any, ...]) -> str:
    if not loc:
        return "root"
    return ".".join(str(part) for part in loc)


def error_from_pydantic(exc: PydanticValidationError, *, context: str) -> HCloudError:
    """Convert a pydantic error into an `HCloudError`, grouping messages per path."""

    grouped: dict[str, list[str]] = {}
    for item in exc.errors(include_url=False):
        path = _loc_to_path(tuple(item.get("loc") or ()))
        grouped.setdefault(path, []).append(str(item.get("msg", "invalid value")))

    fields = [{"name": name, "messages": messages} for name, messages in grouped.items()]
    summary = ", ".join(f"{f['name']}: {'; '.join(f['messages'])}" for f in fields)
    return HCloudError(
        f"{context} validation failed: {summary}",
        VALIDATION_ERROR,
        0,
        {"fields": fields},
    )


def validate(model: type[M], data: Any, *, context: str) -> M:
    """Validate `data` against `model` or raise `HCloudError`."""

    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise error_from_pydantic(exc, context=context) from exc


def safe_validate(model: type[M], data: Any, *, context: str = "Payload") -> ValidationResult[M]:
    try:
        return ValidationResult(value=model.model_validate(data))
    except PydanticValidationError as exc:
        return ValidationResult(error=error_from_pydantic(exc, context=context))
