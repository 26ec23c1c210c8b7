"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PATHFINDER_ENGINE_SKIP_STALE=true
- PATHFINDER_ENGINE_REJECT_NEGATIVE_WEIGHTS=true
- PATHFINDER_CACHE_ENABLED=false
- PATHFINDER_CACHE_MAX_SIZE=512
- PATHFINDER_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Shortest-path engine behaviour.

    Environment variables prefixed with PATHFINDER_ENGINE_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_ENGINE_")

    skip_stale: bool = False
    reject_negative_weights: bool = False


class CacheConfig(BaseSettings):
    """Caching of shortest-path trees per source vertex.

    Environment variables prefixed with PATHFINDER_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_CACHE_")

    enabled: bool = True
    max_size: Optional[int] = 128
    ttl_seconds: Optional[float] = None

    @field_validator("max_size")
    @classmethod
    def _max_size_positive(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise ValueError("max_size must be at least 1")
        return value

    @field_validator("ttl_seconds")
    @classmethod
    def _ttl_positive(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("ttl_seconds must be positive")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PATHFINDER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.engine.skip_stale)
        print(config.cache.max_size)

    Environment variables prefixed with PATHFINDER_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_")

    engine: EngineConfig = Field(default_factory=EngineConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
