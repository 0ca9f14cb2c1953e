"""Cursor walking over list endpoints that return ``list_metadata``."""
from __future__ import annotations

import dataclasses
from typing import Any, AsyncIterator, Awaitable, Callable, List, Optional

from .types import PaginatedList, PaginationParams

ListPage = Callable[..., Awaitable[PaginatedList]]


async def iterate_all(
    list_page: ListPage,
    pagination: Optional[PaginationParams] = None,
    **filters: Any,
) -> AsyncIterator[Any]:
    params = dataclasses.replace(pagination) if pagination else PaginationParams()
    seen_cursors = set()

    while True:
        page = await list_page(pagination=params, **filters)
        for item in page.data:
            yield item
        next_cursor = page.metadata.after
        if not next_cursor or next_cursor in seen_cursors:
            break
        seen_cursors.add(next_cursor)
        params = dataclasses.replace(params, after=next_cursor, before=None)


async def fetch_all(
    list_page: ListPage,
    pagination: Optional[PaginationParams] = None,
    **filters: Any,
) -> List[Any]:
    """Collect every item across pages by following ``after`` cursors."""
    return [item async for item in iterate_all(list_page, pagination, **filters)]
