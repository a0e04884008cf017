from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from census_api_client.config import DEFAULT_BATCH_LIMIT, CensusClientConfig, TransportConfig


def test_config_defaults_target_public_census_endpoint():
    cfg = CensusClientConfig()
    assert cfg.api_endpoint == "census.daybreakgames.com"
    assert cfg.service_id == "example"
    assert cfg.service_namespace == "ps2:v2"
    assert cfg.use_https is True
    assert cfg.log_census_errors is True
    assert cfg.batch_limit == DEFAULT_BATCH_LIMIT
    cfg.validate()


def test_config_is_immutable():
    cfg = CensusClientConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.batch_limit = 10


@pytest.mark.parametrize(
    "kwargs",
    [
        {"api_endpoint": ""},
        {"service_id": ""},
        {"service_namespace": ""},
        {"batch_limit": 0},
        {"max_batch_pages": 0},
    ],
)
def test_config_validate_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        CensusClientConfig(**kwargs).validate()


@pytest.mark.parametrize(
    "field",
    [
        "timeout_connect_seconds",
        "timeout_read_seconds",
        "timeout_write_seconds",
        "timeout_pool_seconds",
    ],
)
def test_config_validate_rejects_non_positive_timeouts(field):
    cfg = CensusClientConfig(transport=TransportConfig(**{field: 0.0}))
    with pytest.raises(ValueError, match=f"transport.{field} must be > 0"):
        cfg.validate()


def test_config_validate_rejects_non_bool_flags():
    with pytest.raises(ValueError, match="use_https must be bool"):
        CensusClientConfig(use_https="yes").validate()  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="log_census_errors must be bool"):
        CensusClientConfig(log_census_errors=1).validate()  # type: ignore[arg-type]
