"""Batch collection over start/limit paging."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from ..query import CensusQuery
from .errors import CensusCancelledError, CensusProtocolError

logger = logging.getLogger("census_api_client")


class CancelSignal(Protocol):
    """Anything exposing ``is_set()``, e.g. ``threading.Event`` or ``asyncio.Event``."""

    def is_set(self) -> bool: ...


def prepare_batch_query(query: CensusQuery, *, batch_limit: int) -> int:
    """Fill in limit and start when absent and return the initial offset."""

    if query.limit is None:
        query.set_limit(batch_limit)
    if query.start is None:
        query.set_start(0)
    return query.start


def raise_if_cancelled(cancel_event: CancelSignal | None, query: CensusQuery) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise CensusCancelledError(f"batch for '{query.service_name}' was cancelled")


def advance_start(query: CensusQuery, *, initial_start: int, fetched: int) -> None:
    query.set_start(initial_start + fetched)


def log_batch_complete(query: CensusQuery, *, pages: int, records: int) -> None:
    logger.info(
        "batch complete service=%s pages=%s records=%s",
        query.service_name,
        pages,
        records,
    )


def exceeded_pages_error(max_pages: int) -> CensusProtocolError:
    return CensusProtocolError(f"Exceeded batch guardrail (max_pages={max_pages})")


def collect_batch(
    fetch_page: Callable[[CensusQuery], list[object]],
    query: CensusQuery,
    *,
    batch_limit: int,
    max_pages: int = 10_000,
    cancel_event: CancelSignal | None = None,
) -> list[object]:
    """Fetch pages until a short or empty page and return all raw records.

    A page shorter than ``batch_limit`` ends the batch. After each full page
    the query start moves to the initial start plus everything fetched so
    far. Errors propagate as-is and discard collected pages.
    """

    initial_start = prepare_batch_query(query, batch_limit=batch_limit)
    raise_if_cancelled(cancel_event, query)
    page = fetch_page(query)
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
        page = fetch_page(query)
        pages += 1
        if not page:
            break

    log_batch_complete(query, pages=pages, records=len(collected))
    return collected


__all__ = [
    "CancelSignal",
    "prepare_batch_query",
    "raise_if_cancelled",
    "advance_start",
    "log_batch_complete",
    "exceeded_pages_error",
    "collect_batch",
]
