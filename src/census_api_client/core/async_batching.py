"""Async batch collection over start/limit paging."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from ..query import CensusQuery
from .batching import (
    CancelSignal,
    advance_start,
    exceeded_pages_error,
    log_batch_complete,
    prepare_batch_query,
    raise_if_cancelled,
)


async def acollect_batch(
    fetch_page: Callable[[CensusQuery], Awaitable[list[object]]],
    query: CensusQuery,
    *,
    batch_limit: int,
    max_pages: int = 10_000,
    cancel_event: CancelSignal | None = None,
) -> list[object]:
    initial_start = prepare_batch_query(query, batch_limit=batch_limit)
    raise_if_cancelled(cancel_event, query)
    page = await fetch_page(query)
    pages = 1
    if len(page) < batch_limit:
        log_batch_complete(query, pages=pages, records=len(page))
        return list(page)

    collected: list[object] = []
    while True:
        collected.extend(page)
        if len(page) < batch_limit:
            break
        if pages >= max_pages:
            raise exceeded_pages_error(max_pages)
        advance_start(query, initial_start=initial_start, fetched=len(collected))
        raise_if_cancelled(cancel_event, query)
        page = await fetch_page(query)
        pages += 1
        if not page:
            break

    log_batch_complete(query, pages=pages, records=len(collected))
    return collected


__all__ = [
    "acollect_batch",
]
