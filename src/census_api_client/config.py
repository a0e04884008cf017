"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BATCH_LIMIT = 5000


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class CensusClientConfig:
    """Runtime configuration for Census client."""

    api_endpoint: str = "census.daybreakgames.com"
    service_id: str = "example"
    service_namespace: str = "ps2:v2"
    use_https: bool = True
    user_agent: str | None = "census-api-client/0.1.0"
    log_census_errors: bool = True
    batch_limit: int = DEFAULT_BATCH_LIMIT
    max_batch_pages: int = 10_000

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.api_endpoint:
            raise ValueError("api_endpoint must not be empty")
        if not self.service_id:
            raise ValueError("service_id must not be empty")
        if not self.service_namespace:
            raise ValueError("service_namespace must not be empty")
        if not isinstance(self.use_https, bool):
            raise ValueError("use_https must be bool")
        if not isinstance(self.log_census_errors, bool):
            raise ValueError("log_census_errors must be bool")
        if self.batch_limit < 1:
            raise ValueError("batch_limit must be >= 1")
        if self.max_batch_pages < 1:
            raise ValueError("max_batch_pages must be >= 1")
        self.transport.validate()


__all__ = [
    "DEFAULT_BATCH_LIMIT",
    "TransportConfig",
    "CensusClientConfig",
]
