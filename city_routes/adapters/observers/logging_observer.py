"""Logging observer adapter.

Turns graph and algorithm events into DEBUG log records with the event
fields passed as structured ``extra`` context.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from ...domain.events import RouteEvent


def _flatten(event: RouteEvent) -> Dict[str, Any]:
    extra: Dict[str, Any] = {"event": type(event).__name__}
    for name, value in asdict(event).items():
        if isinstance(value, dict):
            for key, nested in value.items():
                extra[f"{name}_{key}"] = nested
        else:
            extra[name] = value
    return extra


@dataclass
class LoggingRouteObserver:
    """Observer that logs every event it receives.

    Attributes:
        logger_name: Name of the logger records are sent to
        level: Logging level used for the records
    """

    logger_name: str = __name__
    level: int = logging.DEBUG
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(self.logger_name)

    def notify(self, event: RouteEvent) -> None:
        if not self._logger.isEnabledFor(self.level):
            return
        self._logger.log(self.level, type(event).__name__, extra=_flatten(event))
