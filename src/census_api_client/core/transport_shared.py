"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

import httpx

from ..config import CensusClientConfig
from .errors import CensusConnectionError


def build_default_headers(config: CensusClientConfig) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if config.user_agent:
        headers["User-Agent"] = config.user_agent
    return headers


def build_default_timeout(config: CensusClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def connection_error_from(exc: Exception, *, uri: str) -> CensusConnectionError:
    cause = exc.__cause__ or exc.__context__
    detail = str(cause) if cause is not None and str(cause) else str(exc)
    if not detail:
        detail = exc.__class__.__name__
    return CensusConnectionError(
        f"Census query failed for query: {uri}: {detail}",
        uri=uri,
    )


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "connection_error_from",
]
