"""Public package exports for Census API client."""

from .async_client import AsyncCensusClient
from .client import CensusClient
from .config import CensusClientConfig, TransportConfig
from .core.errors import (
    CensusCancelledError,
    CensusClientClosedError,
    CensusConfigError,
    CensusConnectionError,
    CensusError,
    CensusProtocolError,
    CensusResultFieldError,
    CensusServerError,
    CensusServiceUnavailableError,
)
from .query import CensusJoin, CensusQuery, CensusTree

__all__ = [
    "CensusClient",
    "AsyncCensusClient",
    "CensusClientConfig",
    "TransportConfig",
    "CensusQuery",
    "CensusJoin",
    "CensusTree",
    "CensusError",
    "CensusConnectionError",
    "CensusProtocolError",
    "CensusServerError",
    "CensusServiceUnavailableError",
    "CensusClientClosedError",
    "CensusConfigError",
    "CensusCancelledError",
    "CensusResultFieldError",
]
