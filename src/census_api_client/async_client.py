"""Public async client entrypoint."""

from __future__ import annotations

import asyncio
from types import TracebackType
from typing import Any

from .client_shared import log_census_error, validate_client_config
from .config import CensusClientConfig
from .core.async_batching import acollect_batch
from .core.async_transport import AsyncTransport
from .core.decoding import ItemModel, convert_items
from .core.errors import CensusClientClosedError
from .core.response_parsing import interpret_payload
from .core.uri import build_request_uri
from .query import CensusQuery


class AsyncCensusClient:
    """Public async Census API client.

    Safe to share between concurrent tasks as long as each task uses its own
    ``CensusQuery``; the underlying connection pool is shared.
    """

    def __init__(
        self,
        *,
        config: CensusClientConfig | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = config or CensusClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
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

    async def execute_single(self, query: CensusQuery, model: ItemModel | None = None) -> list[Any]:
        return convert_items(await self._fetch_records(query), model)

    async def execute_first(self, query: CensusQuery, model: ItemModel | None = None) -> Any | None:
        items = await self.execute_single(query, model)
        return items[0] if items else None

    async def execute_batch(
        self,
        query: CensusQuery,
        model: ItemModel | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> list[Any]:
        self._ensure_open()
        records = await acollect_batch(
            self._fetch_records,
            query,
            batch_limit=self._config.batch_limit,
            max_pages=self._config.max_batch_pages,
            cancel_event=cancel_event,
        )
        return convert_items(records, model)

    async def _fetch_records(self, query: CensusQuery) -> list[object]:
        self._ensure_open()
        uri = self.build_request_uri(query)
        try:
            payload = await self._transport.get_json(uri)
            return interpret_payload(payload, query.service_name, uri=uri)
        except Exception as exc:
            log_census_error(self._config, exc, uri)
            raise

    def _ensure_open(self) -> None:
        if self._closed:
            raise CensusClientClosedError("AsyncCensusClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncCensusClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncCensusClient",
]
