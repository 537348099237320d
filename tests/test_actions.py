"""Action poller."""

from __future__ import annotations

import asyncio
import itertools

import httpx
import pytest

from hcloud_client import HCloudError, PollOptions, poll_action, poll_actions
from hcloud_client.core.services import actions as actions_service

from tests.payloads import action_payload

FAST = PollOptions(interval_ms=0)


def action_reply(action_id: int = 1, **kwargs) -> httpx.Response:
    return httpx.Response(200, json={"action": action_payload(action_id, **kwargs)})


@pytest.mark.asyncio
async def test_success_returns_after_single_fetch(client, router) -> None:
    router.add("GET", "/actions/1", action_reply(status="success", progress=100))

    action = await poll_action(client, 1, FAST)

    assert action.is_successful
    assert len(router.requests) == 1


@pytest.mark.asyncio
async def test_polls_until_finished_and_reports_progress(client, router) -> None:
    router.add(
        "GET",
        "/actions/1",
        action_reply(progress=10),
        action_reply(progress=60),
        action_reply(status="success", progress=100),
    )
    seen: list[int] = []

    action = await poll_action(client, 1, PollOptions(interval_ms=0, on_progress=lambda a: seen.append(a.progress)))

    assert action.progress == 100
    assert seen == [10, 60]
    assert len(router.requests) == 3


@pytest.mark.asyncio
async def test_async_progress_callback_is_awaited(client, router) -> None:
    router.add("GET", "/actions/1", action_reply(progress=5), action_reply(status="success", progress=100))
    seen: list[int] = []

    async def on_progress(action) -> None:
        seen.append(action.id)

    await poll_action(client, 1, PollOptions(interval_ms=0, on_progress=on_progress))

    assert seen == [1]


@pytest.mark.asyncio
async def test_failed_action_raises_with_its_error(client, router) -> None:
    router.add(
        "GET",
        "/actions/1",
        action_reply(status="error", progress=100, error={"code": "action_failed", "message": "disk full"}),
    )

    with pytest.raises(HCloudError) as info:
        await poll_action(client, 1, FAST)

    assert info.value.message == "disk full"
    assert info.value.code == "action_failed"
    assert info.value.status_code == 0


@pytest.mark.asyncio
async def test_failed_action_without_error_uses_fallbacks(client, router) -> None:
    router.add("GET", "/actions/3", action_reply(3, status="error", progress=100))

    with pytest.raises(HCloudError) as info:
        await poll_action(client, 3, FAST)

    assert info.value.message == "Action 3 failed"
    assert info.value.code == "ACTION_ERROR"


@pytest.mark.asyncio
async def test_failed_action_is_returned_when_not_throwing(client, router) -> None:
    router.add(
        "GET",
        "/actions/1",
        action_reply(status="error", progress=100, error={"code": "action_failed", "message": "disk full"}),
    )

    action = await poll_action(client, 1, PollOptions(interval_ms=0, throw_on_error=False))

    assert action.is_failed
    assert action.error.code == "action_failed"


@pytest.mark.asyncio
async def test_deadline_is_checked_before_each_fetch(client, router, monkeypatch) -> None:
    clock = itertools.chain([0.0, 0.0], itertools.repeat(10.0))
    monkeypatch.setattr(actions_service, "_monotonic", lambda: next(clock))
    router.add("GET", "/actions/1", action_reply(progress=50))

    with pytest.raises(HCloudError) as info:
        await poll_action(client, 1, PollOptions(interval_ms=0, timeout_ms=5000))

    assert info.value.code == "TIMEOUT"
    assert info.value.status_code == 0
    assert info.value.message == "Action 1 did not complete within 5000ms"
    assert len(router.requests) == 1


@pytest.mark.asyncio
async def test_poll_actions_keeps_input_order(client, router) -> None:
    router.add("GET", "/actions/1", action_reply(1, progress=20), action_reply(1, status="success", progress=100))
    router.add("GET", "/actions/2", action_reply(2, status="success", progress=100))

    actions = await poll_actions(client, [1, 2], FAST)

    assert [a.id for a in actions] == [1, 2]


@pytest.mark.asyncio
async def test_poll_actions_fails_fast(client, router) -> None:
    router.add("GET", "/actions/1", action_reply(1, progress=20))
    router.add("GET", "/actions/2", action_reply(2, status="error", progress=100))

    with pytest.raises(HCloudError) as info:
        await poll_actions(client, [1, 2], PollOptions(interval_ms=10))

    assert info.value.code == "ACTION_ERROR"


@pytest.mark.asyncio
async def test_poll_actions_cancels_remaining_pollers_on_failure(client, router) -> None:
    fetches = {1: 0, 2: 0}

    def counted(action_id: int, **kwargs):
        def reply(request: httpx.Request) -> httpx.Response:
            fetches[action_id] += 1
            return action_reply(action_id, **kwargs)

        return reply

    router.add("GET", "/actions/1", counted(1, progress=20))
    router.add("GET", "/actions/2", counted(2, status="error", progress=100))

    with pytest.raises(HCloudError):
        await poll_actions(client, [1, 2], PollOptions(interval_ms=10))
    before = fetches[1]
    await asyncio.sleep(0.1)

    assert fetches[2] == 1
    assert fetches[1] == before


@pytest.mark.asyncio
async def test_poll_actions_with_no_ids(client) -> None:
    assert await poll_actions(client, []) == []
