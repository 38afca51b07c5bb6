"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration.
Values can be overridden via environment variables:
- CITY_ROUTES_ROUTING_DISTANCE_UNIT=mi
- CITY_ROUTES_ROUTING_ALLOW_PARALLEL_ROUTES=false
- CITY_ROUTES_ROUTING_EXPLAIN=false
- CITY_ROUTES_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class RoutingConfig(BaseSettings):
    """Route graph configuration.

    Environment variables prefixed with CITY_ROUTES_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_ROUTES_ROUTING_")

    distance_unit: str = "km"
    allow_parallel_routes: bool = True
    explain: bool = True  # print algorithm explanations in the menu


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITY_ROUTES_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_ROUTES_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.routing.distance_unit)

    Environment variables prefixed with CITY_ROUTES_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_ROUTES_")

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the cached application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        errors = e.errors()
        setting = ".".join(str(part) for part in errors[0]["loc"]) if errors else ""
        raise ConfigurationError(
            f"Invalid configuration in {e.title}",
            setting_name=setting,
            cause=e,
        ) from e


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
