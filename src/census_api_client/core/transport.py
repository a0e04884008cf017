"""Sync HTTP transport with status and JSON evaluation."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import CensusClientConfig
from .errors import CensusClientClosedError
from .response_parsing import JsonPayloadResponse, ensure_success_status, parse_json_payload
from .transport_shared import build_default_headers, build_default_timeout, connection_error_from

logger = logging.getLogger("census_api_client")


class SyncTransportClient(Protocol):
    def get(self, url: str) -> JsonPayloadResponse: ...
    def close(self) -> None: ...


class SyncTransport:
    """Blocking transport for the Census API."""

    def __init__(
        self,
        config: CensusClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def get_json(self, uri: str) -> dict[str, object]:
        if self._closed:
            raise CensusClientClosedError("transport is already closed", uri=uri)

        logger.debug("request start uri=%s", uri)
        try:
            response = self._client.get(uri)
        except httpx.RequestError as exc:
            logger.debug("request network error uri=%s error=%s", uri, exc.__class__.__name__)
            raise connection_error_from(exc, uri=uri) from exc

        logger.debug("response received uri=%s http_status=%s", uri, response.status_code)
        ensure_success_status(response, uri=uri)
        return parse_json_payload(response, uri=uri)


__all__ = [
    "SyncTransport",
]
