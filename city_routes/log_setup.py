"""Logging setup driven by the observability settings.

Applies CITY_ROUTES_LOG_LEVEL and CITY_ROUTES_LOG_FORMAT to the root
logger; components log through logging.getLogger(__name__).
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> int:
    """Configure root logging from the observability settings.

    Returns:
        The numeric level that was applied.

    Raises:
        ConfigurationError: If the configured level is not a known level name.
    """
    config = config or get_config().observability
    level_name = config.level.upper()
    if level_name not in _LEVELS:
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="CITY_ROUTES_LOG_LEVEL",
            expected_type=" | ".join(_LEVELS),
        )

    level = getattr(logging, level_name)
    logging.basicConfig(level=level, format=config.format)
    return level
