"""Public client entrypoint."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Any

from .client_shared import log_census_error, validate_client_config
from .config import CensusClientConfig
from .core.batching import collect_batch
from .core.decoding import ItemModel, convert_items
from .core.errors import CensusClientClosedError
from .core.response_parsing import interpret_payload
from .core.transport import SyncTransport
from .core.uri import build_request_uri
from .query import CensusQuery


class CensusClient:
    """Public Census API client."""

    def __init__(
        self,
        *,
        config: CensusClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or CensusClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._closed = False

    @property
    def config(self) -> CensusClientConfig:
        return self._config

    def create_query(
        self,
        service_name: str,
        *,
        service_id: str | None = None,
        service_namespace: str | None = None,
    ) -> CensusQuery:
        return CensusQuery(
            service_name,
            service_id=service_id,
            service_namespace=service_namespace,
            client=self,
        )

    def build_request_uri(self, query: CensusQuery) -> str:
        return build_request_uri(self._config, query)

    def execute_single(self, query: CensusQuery, model: ItemModel | None = None) -> list[Any]:
        """Run one request and return its records converted with ``model``."""

        return convert_items(self._fetch_records(query), model)

    def execute_first(self, query: CensusQuery, model: ItemModel | None = None) -> Any | None:
        items = self.execute_single(query, model)
        return items[0] if items else None

    def execute_batch(
        self,
        query: CensusQuery,
        model: ItemModel | None = None,
        *,
        cancel_event: threading.Event | None = None,
    ) -> list[Any]:
        """Page through the full result set and return every record.

        Missing ``limit``/``start`` on ``query`` are set to the configured
        batch limit and ``0``; the query is mutated while paging.
        """

        self._ensure_open()
        records = collect_batch(
            self._fetch_records,
            query,
            batch_limit=self._config.batch_limit,
            max_pages=self._config.max_batch_pages,
            cancel_event=cancel_event,
        )
        return convert_items(records, model)

    def _fetch_records(self, query: CensusQuery) -> list[object]:
        self._ensure_open()
        uri = self.build_request_uri(query)
        try:
            payload = self._transport.get_json(uri)
            return interpret_payload(payload, query.service_name, uri=uri)
        except Exception as exc:
            log_census_error(self._config, exc, uri)
            raise

    def _ensure_open(self) -> None:
        if self._closed:
            raise CensusClientClosedError("CensusClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "CensusClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "CensusClient",
]
