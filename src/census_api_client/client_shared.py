"""Shared helpers for sync/async client bootstrap and error reporting."""

from __future__ import annotations

import logging

from .config import CensusClientConfig
from .core.errors import (
    CensusConfigError,
    CensusConnectionError,
    CensusServerError,
    CensusServiceUnavailableError,
)

logger = logging.getLogger("census_api_client")


def validate_client_config(config: CensusClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise CensusConfigError(str(exc)) from exc


def log_census_error(config: CensusClientConfig, exc: BaseException, uri: str) -> None:
    """Report a failed query when ``log_census_errors`` is enabled."""

    if not config.log_census_errors:
        return
    if isinstance(exc, CensusServiceUnavailableError):
        logger.error("Census service unavailable during query: %s", uri, exc_info=exc)
    elif isinstance(exc, CensusServerError):
        logger.error("Census server failed for query: %s", uri, exc_info=exc)
    elif isinstance(exc, CensusConnectionError):
        logger.error("Census connection failed for query: %s", uri, exc_info=exc)
    else:
        logger.error(
            "Unknown exception thrown when processing census query: %s",
            uri,
            exc_info=exc,
        )


__all__ = [
    "validate_client_config",
    "log_census_error",
]
