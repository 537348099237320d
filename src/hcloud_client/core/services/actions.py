"""Waiting for actions to reach a final state.

`poll_action` re-fetches an action until it is `success` or `error`, or until
its own deadline (independent of the per-request timeout) is exceeded.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Awaitable, Callable, Iterable, Union

from hcloud_client.core.domain.actions import Action
from hcloud_client.core.errors import ACTION_ERROR, TIMEOUT, HCloudError

if TYPE_CHECKING:
    from hcloud_client.client import HCloudClient

logger = logging.getLogger(__name__)

# Module attribute so a fake clock can be swapped in.
_monotonic = time.monotonic

ProgressCallback = Callable[[Action], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class PollOptions:
    """Polling knobs; times are milliseconds."""

    interval_ms: int = 1000
    timeout_ms: int = 300_000
    throw_on_error: bool = True
    on_progress: ProgressCallback | None = None


DEFAULT_POLL_OPTIONS = PollOptions()


async def poll_action(
    client: HCloudClient,
    action_id: int,
    options: PollOptions | None = None,
) -> Action:
    """Wait until `action_id` finishes and return it.

    Raises `HCloudError`:
    - `TIMEOUT` (status 0) once more than `timeout_ms` elapsed; checked
      before every fetch, so no request is made after the deadline.
    - the action's own error code (or `ACTION_ERROR`) when it fails and
      `throw_on_error` is set. Otherwise the failed action is returned.
    """

    opts = options or DEFAULT_POLL_OPTIONS
    started = _monotonic()

    while True:
        elapsed_ms = (_monotonic() - started) * 1000
        if elapsed_ms > opts.timeout_ms:
            raise HCloudError(
                f"Action {action_id} did not complete within {opts.timeout_ms}ms",
                TIMEOUT,
                0,
            )

        action = await client.actions.get(action_id)
        logger.debug("action %s: %s (%s%%)", action_id, action.status, action.progress)

        if action.status == "success":
            return action

        if action.status == "error":
            if not opts.throw_on_error:
                return action
            message = action.error.message if action.error and action.error.message else None
            code = action.error.code if action.error and action.error.code else None
            raise HCloudError(
                message or f"Action {action_id} failed",
                code or ACTION_ERROR,
                0,
            )

        if opts.on_progress is not None:
            result = opts.on_progress(action)
            if inspect.isawaitable(result):
                await result

        await asyncio.sleep(opts.interval_ms / 1000)


async def poll_actions(
    client: HCloudClient,
    action_ids: Iterable[int],
    options: PollOptions | None = None,
) -> list[Action]:
    """Poll several actions concurrently; results keep the input order.

    The first failure cancels the remaining pollers and is re-raised.
    """

    tasks = [asyncio.ensure_future(poll_action(client, action_id, options)) for action_id in action_ids]
    if not tasks:
        return []
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
