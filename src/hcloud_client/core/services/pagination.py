"""Walking paginated list endpoints.

List responses carry `meta.pagination.next_page`; iteration starts at page 1
and follows it until it is null (or the response has no `meta`).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 50

ListFn = Callable[..., Awaitable[Any]]


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _next_page(result: Any) -> int | None:
    pagination = _field(_field(result, "meta"), "pagination")
    if pagination is None:
        return None
    return _field(pagination, "next_page")


async def paginate(
    list_fn: ListFn,
    items_key: str,
    *,
    max_pages: int | None = None,
    delay_ms: int = 0,
    per_page: int = DEFAULT_PER_PAGE,
) -> AsyncIterator[list[Any]]:
    """Yield the items of each page; empty pages are skipped.

    `list_fn` is called as `list_fn(page=..., per_page=...)`; both pydantic
    list responses and plain dicts are understood.
    """

    page: int | None = 1
    fetched = 0
    while page is not None:
        if max_pages is not None and fetched >= max_pages:
            break
        result = await list_fn(page=page, per_page=per_page)
        fetched += 1

        items = _field(result, items_key) or []
        logger.debug("page %s: %d %s", page, len(items), items_key)
        if items:
            yield list(items)

        page = _next_page(result)
        if page is not None and delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)


async def get_all_pages(
    list_fn: ListFn,
    items_key: str,
    *,
    max_pages: int | None = None,
    delay_ms: int = 0,
    per_page: int = DEFAULT_PER_PAGE,
) -> list[Any]:
    """Concatenate every page in order."""

    out: list[Any] = []
    async for items in paginate(list_fn, items_key, max_pages=max_pages, delay_ms=delay_ms, per_page=per_page):
        out.extend(items)
    return out
