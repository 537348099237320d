"""httpx-based request pipeline.

`HttpTransport` turns (method, path, body, query) into one outbound request
and classifies the outcome:

- 2xx with a body -> decoded JSON (validation happens in the endpoint groups).
- 204 or `content-length: 0` -> `NO_CONTENT`.
- non-2xx -> `HCloudError` built from the API error envelope, or
  `"HTTP <status> <reason>"` when the body is not an envelope.
- timeout -> `TIMEOUT`, other transport failures -> `NETWORK_ERROR`,
  anything else -> `UNKNOWN_ERROR` (all with status 0).

Nothing is retried.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

import httpx

from hcloud_client.core.auth import build_auth_header
from hcloud_client.core.config import ClientSettings
from hcloud_client.core.errors import NETWORK_ERROR, TIMEOUT, UNKNOWN_ERROR, HCloudError
from hcloud_client.core.interfaces.transport import NO_CONTENT, QueryParams

logger = logging.getLogger(__name__)

_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


def build_url(base_url: str, path: str) -> str:
    """Join base URL and path with exactly one slash between them."""

    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _query_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: QueryParams | None) -> list[tuple[str, str]]:
    """Flatten query params; sequences become repeated keys (`k=a&k=b`)."""

    out: list[tuple[str, str]] = []
    if not params:
        return out
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is None:
                    continue
                out.append((key, _query_str(item)))
        else:
            out.append((key, _query_str(value)))
    return out


def build_async_client(
    settings: ClientSettings,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the client's timeout and headers."""

    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers=headers,
        transport=transport,
    )


class HttpTransport:
    """Request pipeline shared by every endpoint group.

    Holds no mutable state besides the underlying `httpx.AsyncClient`, so a
    single instance can serve concurrent calls.
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._auth_header = build_auth_header(settings.token)
        self._client = client if client is not None else build_async_client(settings)
        self._owns_client = client is None

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        verb = method.upper()
        if verb not in _METHODS:
            raise ValueError(f"Unsupported HTTP method: {method!r}")

        url = build_url(self._settings.base_url, path)
        query = encode_query(params)
        request_headers: dict[str, str] = {
            **self._auth_header,
            "Content-Type": "application/json",
            "User-Agent": self._settings.user_agent,
        }
        if headers:
            request_headers.update(headers)

        json_body = body if body is not None and verb != "GET" else None

        logger.debug("%s %s params=%s", verb, url, query)
        try:
            response = await asyncio.wait_for(
                self._client.request(
                    verb,
                    url,
                    params=query,
                    headers=request_headers,
                    json=json_body,
                ),
                timeout=self._settings.timeout_seconds,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.warning("%s %s timed out after %sms", verb, url, self._settings.timeout_ms)
            raise HCloudError(
                f"Request timeout after {self._settings.timeout_ms}ms", TIMEOUT, 0
            ) from exc
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", verb, url, exc)
            raise HCloudError(f"Request failed: {exc}", NETWORK_ERROR, 0) from exc
        except Exception as exc:
            logger.warning("%s %s failed unexpectedly: %r", verb, url, exc)
            raise HCloudError(f"Unknown error occurred: {exc}", UNKNOWN_ERROR, 0) from exc

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        logger.debug("%s %s -> %s", response.request.method, response.request.url, response.status_code)

        if not response.is_success:
            error = self._error_from_response(response)
            logger.warning(
                "%s %s -> HTTP %s (%s): %s",
                response.request.method,
                response.request.url,
                response.status_code,
                error.code,
                error.message,
            )
            raise error

        if response.status_code == 204 or response.headers.get("content-length") == "0":
            return NO_CONTENT

        try:
            return response.json()
        except ValueError as exc:
            raise HCloudError(
                f"Unknown error occurred: HTTP {response.status_code} body is not valid JSON",
                UNKNOWN_ERROR,
                0,
            ) from exc

    @staticmethod
    def _error_from_response(response: httpx.Response) -> HCloudError:
        fallback = f"HTTP {response.status_code} {response.reason_phrase}".rstrip()
        try:
            payload = response.json()
        except ValueError:
            payload = None

        envelope = payload.get("error") if isinstance(payload, dict) else None
        if not isinstance(envelope, dict):
            return HCloudError(fallback, None, response.status_code)

        message = envelope.get("message")
        code = envelope.get("code")
        details = envelope.get("details")
        return HCloudError(
            message if isinstance(message, str) and message else fallback,
            code if isinstance(code, str) else None,
            response.status_code,
            details if isinstance(details, dict) else None,
        )

    async def get(self, path: str, params: QueryParams | None = None, headers: Mapping[str, str] | None = None) -> Any:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.request("POST", path, body=body, params=params, headers=headers)

    async def put(
        self,
        path: str,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.request("PUT", path, body=body, params=params, headers=headers)

    async def patch(
        self,
        path: str,
        body: Any = None,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.request("PATCH", path, body=body, params=params, headers=headers)

    async def delete(self, path: str, params: QueryParams | None = None, headers: Mapping[str, str] | None = None) -> Any:
        return await self.request("DELETE", path, params=params, headers=headers)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
