"""Shared fixtures: an `HCloudClient` wired to an in-memory `httpx.MockTransport`."""

from __future__ import annotations

import json
from typing import Any, Callable, Union

import httpx
import pytest
import pytest_asyncio

from hcloud_client import HCloudClient

TOKEN = "test-token"
API_PREFIX = "/v1"

Reply = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class Router:
    """Maps `(method, path)` to canned responses and records every request.

    A route registered with several replies serves them in order and keeps
    repeating the last one.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], list[Reply]] = {}

    def add(self, method: str, path: str, *replies: Reply) -> None:
        self._routes[(method.upper(), path)] = list(replies)

    def json(self, method: str, path: str, *payloads: Any, status_code: int = 200) -> None:
        self.add(method, path, *(httpx.Response(status_code, json=payload) for payload in payloads))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith(API_PREFIX):
            path = path[len(API_PREFIX):]
        replies = self._routes.get((request.method, path))
        if not replies:
            return httpx.Response(404, json={"error": {"code": "not_found", "message": f"no route for {path}"}})
        reply = replies.pop(0) if len(replies) > 1 else replies[0]
        return reply(request) if callable(reply) else reply

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in ("HCLOUD_TOKEN", "HCLOUD_BASE_URL", "HCLOUD_TIMEOUT_MS", "HCLOUD_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def router() -> Router:
    return Router()


@pytest_asyncio.fixture
async def client(router: Router):
    async with httpx.AsyncClient(transport=httpx.MockTransport(router)) as http:
        yield HCloudClient(TOKEN, http_client=http)
