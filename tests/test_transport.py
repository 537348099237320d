"""Request pipeline: URL/query/header building and outcome classification."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from hcloud_client import NO_CONTENT, ClientSettings, HCloudError
from hcloud_client.adapters.http_client import HttpTransport, build_url, encode_query

from tests.conftest import TOKEN, Router


def make_transport(handler, **settings) -> tuple[HttpTransport, httpx.AsyncClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpTransport(ClientSettings(token=TOKEN, **settings), client=http), http


# ============================================================================
# URL / QUERY
# ============================================================================


@pytest.mark.parametrize(
    "base_url, path",
    [
        ("https://api.example.com/v1", "/servers"),
        ("https://api.example.com/v1/", "/servers"),
        ("https://api.example.com/v1", "servers"),
        ("https://api.example.com/v1/", "servers"),
    ],
)
def test_build_url_joins_with_single_slash(base_url: str, path: str) -> None:
    assert build_url(base_url, path) == "https://api.example.com/v1/servers"


def test_encode_query_repeats_sequences_and_drops_none() -> None:
    query = encode_query({"status": ["running", "off"], "name": None, "page": 2, "include_deprecated": True})

    assert query == [("status", "running"), ("status", "off"), ("page", "2"), ("include_deprecated", "true")]


@pytest.mark.asyncio
async def test_repeated_query_keys_on_the_wire() -> None:
    router = Router()
    router.json("GET", "/servers", {"servers": []})
    transport, http = make_transport(router)
    async with http:
        await transport.get("/servers", {"status": ["running", "off"], "sort": "name:asc"})

    assert router.last.url.params.get_list("status") == ["running", "off"]
    assert router.last.url.params.get_list("sort") == ["name:asc"]


# ============================================================================
# HEADERS / BODY
# ============================================================================


@pytest.mark.asyncio
async def test_sends_auth_content_type_and_user_agent() -> None:
    router = Router()
    router.json("POST", "/ssh_keys", {"ok": True})
    transport, http = make_transport(router, user_agent="tests/1.0")
    async with http:
        result = await transport.post("/ssh_keys", {"name": "k"}, headers={"X-Extra": "1"})

    request = router.last
    assert result == {"ok": True}
    assert request.headers["Authorization"] == f"Bearer {TOKEN}"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["User-Agent"] == "tests/1.0"
    assert request.headers["X-Extra"] == "1"
    assert router.body() == {"name": "k"}


@pytest.mark.asyncio
async def test_get_never_sends_a_body() -> None:
    router = Router()
    router.json("GET", "/pricing", {"pricing": {}})
    transport, http = make_transport(router)
    async with http:
        await transport.request("get", "/pricing", body={"ignored": True})

    assert router.last.method == "GET"
    assert router.last.content == b""


@pytest.mark.asyncio
async def test_unsupported_method_is_rejected() -> None:
    transport, http = make_transport(Router())
    async with http:
        with pytest.raises(ValueError):
            await transport.request("TRACE", "/servers")


# ============================================================================
# SUCCESS OUTCOMES
# ============================================================================


@pytest.mark.asyncio
async def test_204_returns_no_content_sentinel() -> None:
    router = Router()
    router.add("DELETE", "/ssh_keys/1", httpx.Response(204))
    transport, http = make_transport(router)
    async with http:
        result = await transport.delete("/ssh_keys/1")

    assert result is NO_CONTENT
    assert not result
    assert result is not None
    assert result != {}


@pytest.mark.asyncio
async def test_zero_content_length_returns_no_content() -> None:
    router = Router()
    router.add("POST", "/servers/1/actions/poweron", httpx.Response(200, headers={"Content-Length": "0"}))
    transport, http = make_transport(router)
    async with http:
        assert await transport.post("/servers/1/actions/poweron") is NO_CONTENT


@pytest.mark.asyncio
async def test_undecodable_success_body_is_unknown_error() -> None:
    router = Router()
    router.add("GET", "/servers", httpx.Response(200, text="<html>not json</html>"))
    transport, http = make_transport(router)
    async with http:
        with pytest.raises(HCloudError) as info:
            await transport.get("/servers")

    assert info.value.code == "UNKNOWN_ERROR"
    assert info.value.status_code == 0


# ============================================================================
# FAILURE CLASSIFICATION
# ============================================================================


@pytest.mark.asyncio
async def test_error_envelope_is_surfaced_verbatim() -> None:
    envelope = {
        "error": {
            "code": "invalid_input",
            "message": "invalid input in field 'name'",
            "details": {"fields": [{"name": "name", "messages": ["is too long"]}]},
        }
    }
    router = Router()
    router.json("POST", "/servers", envelope, status_code=422)
    transport, http = make_transport(router)
    async with http:
        with pytest.raises(HCloudError) as info:
            await transport.post("/servers", {"name": "x" * 300})

    err = info.value
    assert err.message == "invalid input in field 'name'"
    assert err.code == "invalid_input"
    assert err.status_code == 422
    assert err.details == envelope["error"]["details"]
    assert [f.name for f in err.get_field_errors()] == ["name"]


@pytest.mark.asyncio
async def test_non_envelope_error_uses_status_line() -> None:
    router = Router()
    router.add("GET", "/servers", httpx.Response(500, text="upstream exploded"))
    transport, http = make_transport(router)
    async with http:
        with pytest.raises(HCloudError) as info:
            await transport.get("/servers")

    assert info.value.message == "HTTP 500 Internal Server Error"
    assert info.value.code is None
    assert info.value.status_code == 500


@pytest.mark.asyncio
async def test_httpx_timeout_is_classified_as_timeout() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    transport, http = make_transport(handler, timeout_ms=1500)
    async with http:
        with pytest.raises(HCloudError) as info:
            await transport.get("/servers")

    assert info.value.code == "TIMEOUT"
    assert info.value.status_code == 0
    assert info.value.message == "Request timeout after 1500ms"
    assert info.value.is_timeout


@pytest.mark.asyncio
async def test_total_deadline_is_enforced() -> None:
    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1)
        return httpx.Response(200, json={})

    http = httpx.AsyncClient(transport=httpx.MockTransport(slow))
    transport = HttpTransport(ClientSettings(token=TOKEN, timeout_ms=20), client=http)
    async with http:
        with pytest.raises(HCloudError) as info:
            await transport.get("/servers")

    assert info.value.code == "TIMEOUT"


@pytest.mark.asyncio
async def test_connection_failure_is_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport, http = make_transport(handler)
    async with http:
        with pytest.raises(HCloudError) as info:
            await transport.get("/servers")

    assert info.value.code == "NETWORK_ERROR"
    assert info.value.status_code == 0
    assert info.value.message.startswith("Request failed: ")
    assert info.value.is_network_error
    assert not info.value.is_timeout


@pytest.mark.asyncio
async def test_injected_client_is_not_closed_by_transport() -> None:
    transport, http = make_transport(Router())
    async with http:
        await transport.aclose()
        assert not http.is_closed
