"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from .errors import (
    SERVICE_UNAVAILABLE_SENTINEL,
    CensusConnectionError,
    CensusProtocolError,
    CensusResultFieldError,
    CensusServerError,
    CensusServiceUnavailableError,
)

_MAINTENANCE_MESSAGE = "Failed to read JSON. Endpoint may be in maintenance mode."


class JsonPayloadResponse(Protocol):
    status_code: int

    def json(self) -> object: ...


def ensure_success_status(response: JsonPayloadResponse, *, uri: str) -> None:
    """Reject non-2xx responses before the body is looked at."""

    status_code = response.status_code
    if not 200 <= status_code < 300:
        raise CensusConnectionError(
            f"Census returned status code {status_code}",
            uri=uri,
            status_code=status_code,
        )


def parse_json_payload(response: JsonPayloadResponse, *, uri: str) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        payload = response.json()
    except ValueError as exc:
        raise CensusProtocolError(_MAINTENANCE_MESSAGE, uri=uri) from exc

    if not isinstance(payload, dict):
        raise CensusProtocolError(
            "response JSON root must be an object",
            uri=uri,
        )
    return payload


def _optional_text(payload: Mapping[str, object], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    return str(value)


def raise_for_service_error(payload: Mapping[str, object], *, uri: str | None = None) -> None:
    """Raise the domain error described by the payload, if any."""

    error = _optional_text(payload, "error")
    if error is not None:
        if error == SERVICE_UNAVAILABLE_SENTINEL:
            raise CensusServiceUnavailableError(uri=uri)
        raise CensusServerError(error, uri=uri)

    error_code = _optional_text(payload, "errorCode")
    if error_code is not None:
        error_message = _optional_text(payload, "errorMessage") or ""
        raise CensusServerError(
            f"{error_code}: {error_message}",
            uri=uri,
            error_code=error_code,
        )


def result_field_name(service_name: str) -> str:
    return f"{service_name}_list"


def interpret_payload(
    payload: Mapping[str, object],
    service_name: str,
    *,
    uri: str | None = None,
) -> list[object]:
    """Return the ``<service_name>_list`` records in source order."""

    raise_for_service_error(payload, uri=uri)

    field_name = result_field_name(service_name)
    if field_name not in payload:
        raise CensusResultFieldError(field_name)
    records = payload[field_name]
    if not isinstance(records, list):
        raise CensusProtocolError(f"{field_name} must be a list", uri=uri)
    return list(records)


__all__ = [
    "JsonPayloadResponse",
    "ensure_success_status",
    "parse_json_payload",
    "raise_for_service_error",
    "result_field_name",
    "interpret_payload",
]
