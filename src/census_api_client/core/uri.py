"""Request URI construction."""

from __future__ import annotations

import httpx

from ..config import CensusClientConfig
from ..query import CensusQuery


def build_request_uri(config: CensusClientConfig, query: CensusQuery) -> str:
    """Compose ``http(s)://<endpoint>/s:<id>/get/<namespace>/<query>``.

    Query-level service id and namespace win over the configured defaults.
    The encoded query passes through unchanged; invalid results raise
    ``httpx.InvalidURL``.
    """

    scheme = "https" if config.use_https else "http"
    service_id = query.service_id if query.service_id is not None else config.service_id
    namespace = (
        query.service_namespace if query.service_namespace is not None else config.service_namespace
    )
    encoded = query.encode()
    raw = f"{scheme}://{config.api_endpoint}/s:{service_id}/get/{namespace}/{encoded}"
    httpx.URL(raw)
    return raw


__all__ = [
    "build_request_uri",
]
