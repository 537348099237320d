"""Transport contract used by endpoint groups.

Why a Protocol:
- Endpoint groups depend on a structural contract, not on `HttpTransport`.
- Any object with a compatible `request` coroutine can be plugged in.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, Protocol, Sequence, Union, runtime_checkable

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

QueryScalar = Union[str, int, float, bool]
QueryValue = Union[QueryScalar, Sequence[QueryScalar], None]
QueryParams = Mapping[str, QueryValue]


class NoContent:
    """Marker returned for 204 / zero-length responses.

    It is falsy and distinct from both `None` and an empty dict.
    """

    _instance: NoContent | None = None

    def __new__(cls) -> NoContent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_CONTENT"


NO_CONTENT = NoContent()


@runtime_checkable
class Transport(Protocol):
    """Minimal contract of the request pipeline.

    Rules:
    - `request` is async and sends exactly one HTTP request.
    - It returns decoded JSON, or `NO_CONTENT` for empty bodies.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request and return decoded JSON or `NO_CONTENT`."""

        ...
