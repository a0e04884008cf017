from __future__ import annotations

import os

import pytest

from census_api_client import CensusClient, CensusClientConfig

pytestmark = pytest.mark.live


def _require_live_flag() -> None:
    if os.getenv("CENSUS_LIVE_TESTS") != "1":
        pytest.skip("Set CENSUS_LIVE_TESTS=1 to run live contract tests")


def _live_client() -> CensusClient:
    cfg = CensusClientConfig(
        service_id=os.getenv("CENSUS_SERVICE_ID", "example"),
        batch_limit=50,
    )
    cfg.validate()
    return CensusClient(config=cfg)


def test_live_world_list_contract_minimum():
    _require_live_flag()
    with _live_client() as client:
        worlds = client.execute_single(client.create_query("world").set_limit(10))

    assert isinstance(worlds, list)
    assert len(worlds) > 0
    assert all("world_id" in world for world in worlds)


def test_live_batch_returns_more_than_one_page():
    _require_live_flag()
    with _live_client() as client:
        query = client.create_query("item").show_fields("item_id")
        items = client.execute_batch(query)

    assert len(items) > 50
    assert len({item["item_id"] for item in items}) == len(items)
