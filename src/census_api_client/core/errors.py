"""Error types for Census queries."""

from __future__ import annotations

SERVICE_UNAVAILABLE_SENTINEL = "service_unavailable"


class CensusError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        uri: str | None = None,
    ) -> None:
        super().__init__(message)
        self.uri = uri


class CensusConnectionError(CensusError):
    """Network/transport-level failure or non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        uri: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, uri=uri)
        self.status_code = status_code


class CensusProtocolError(CensusError):
    """Response body is not valid JSON or has an unusable shape."""


class CensusServerError(CensusError):
    """Error reported by the Census service in the response body."""

    def __init__(
        self,
        message: str,
        *,
        uri: str | None = None,
        error_code: str | None = None,
    ) -> None:
        super().__init__(message, uri=uri)
        self.error_code = error_code


class CensusServiceUnavailableError(CensusError):
    """Census reported itself as unavailable."""

    def __init__(self, message: str = "Census service is unavailable", *, uri: str | None = None) -> None:
        super().__init__(message, uri=uri)


class CensusClientClosedError(CensusError):
    """Raised when client is used after close."""


class CensusConfigError(CensusError):
    """Invalid client configuration."""


class CensusCancelledError(CensusError):
    """Raised when a batch is cancelled before completion."""


class CensusResultFieldError(KeyError):
    """Expected ``<service>_list`` collection is missing from a success payload.

    Indicates the queried service does not match the response shape.
    Not part of the ``CensusError`` hierarchy.
    """

    def __init__(self, field_name: str) -> None:
        super().__init__(field_name)
        self.field_name = field_name

    def __str__(self) -> str:
        return f"response has no '{self.field_name}' collection"


__all__ = [
    "SERVICE_UNAVAILABLE_SENTINEL",
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
