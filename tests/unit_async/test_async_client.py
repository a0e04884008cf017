from __future__ import annotations

import asyncio

import pytest

from census_api_client.async_client import AsyncCensusClient
from census_api_client.core.async_transport import AsyncTransport
from census_api_client.core.errors import (
    CensusClientClosedError,
    CensusConnectionError,
    CensusResultFieldError,
    CensusServiceUnavailableError,
)
from tests.shared.payloads import make_list_payload, make_records
from tests.shared.transport import AsyncSequencedClient, Response, build_config


def _client(steps, **config_kwargs) -> tuple[AsyncCensusClient, AsyncSequencedClient]:
    http = AsyncSequencedClient(steps)
    config = build_config(**config_kwargs)
    return AsyncCensusClient(config=config, transport=AsyncTransport(config, client=http)), http


def _ids(items) -> list[str]:
    return [item["character_id"] for item in items]


@pytest.mark.asyncio
async def test_async_execute_single_returns_records_in_order():
    client, http = _client([Response(200, make_list_payload("character", make_records("9", "4")))])
    async with client:
        result = await client.execute_single(client.create_query("character").set_limit(2))
    assert _ids(result) == ["9", "4"]
    assert http.calls == 1


@pytest.mark.asyncio
async def test_async_execute_batch_offsets_by_cumulative_count():
    client, http = _client(
        [
            Response(200, make_list_payload("character", make_records("a", "b", "c"))),
            Response(200, make_list_payload("character", make_records("d", "e"))),
        ]
    )
    async with client:
        result = await client.execute_batch(client.create_query("character"))
    assert _ids(result) == ["a", "b", "c", "d", "e"]
    assert http.starts == [0, 3]


@pytest.mark.asyncio
async def test_async_execute_batch_aborts_on_service_unavailable():
    client, http = _client(
        [
            Response(200, make_list_payload("character", make_records("a", "b", "c"))),
            Response(200, {"error": "service_unavailable"}),
        ]
    )
    async with client:
        with pytest.raises(CensusServiceUnavailableError):
            await client.execute_batch(client.create_query("character"))
    assert http.calls == 2


@pytest.mark.asyncio
async def test_async_non_2xx_short_circuits_before_body():
    client, _ = _client([Response(404, make_list_payload("character", make_records("a")))])
    async with client:
        with pytest.raises(CensusConnectionError):
            await client.execute_single(client.create_query("character"))


@pytest.mark.asyncio
async def test_async_missing_list_is_lookup_failure():
    client, _ = _client([Response(200, make_list_payload("world"))])
    async with client:
        with pytest.raises(CensusResultFieldError):
            await client.execute_single(client.create_query("character"))


@pytest.mark.asyncio
async def test_async_bound_query_returns_awaitables():
    client, _ = _client(
        [
            Response(200, make_list_payload("character", make_records("1"))),
            Response(200, make_list_payload("character")),
        ]
    )
    async with client:
        assert _ids(await client.create_query("character").get_batch()) == ["1"]
        assert await client.create_query("character").get() is None


@pytest.mark.asyncio
async def test_async_concurrent_queries_use_independent_descriptors():
    client, http = _client(
        [
            Response(200, make_list_payload("character", make_records("1"))),
            Response(200, make_list_payload("character", make_records("2"))),
        ]
    )
    first = client.create_query("character")
    second = client.create_query("character")
    async with client:
        results = await asyncio.gather(client.execute_batch(first), client.execute_batch(second))
    assert sorted(_ids(results[0]) + _ids(results[1])) == ["1", "2"]
    assert first.start == 0 and second.start == 0
    assert http.calls == 2


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_transport():
    http = AsyncSequencedClient([])
    transport = AsyncTransport(build_config(), client=http)
    async with AsyncCensusClient(config=build_config(), transport=transport) as client:
        assert client is not None
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close():
    client, _ = _client([])
    await client.close()
    with pytest.raises(CensusClientClosedError):
        await client.execute_single(client.create_query("character"))
