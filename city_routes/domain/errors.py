"""Typed domain errors for the city route manager.

Every error inherits from RouteManagementError and can optionally
wrap a root cause exception for debugging.

The graph core itself reports missing routes and unreachable
destinations as result values (an empty tuple, ``None`` or an empty
PathResult). RouteNotFoundError and PathNotFoundError are raised by
the service layer for callers that prefer exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RouteManagementError(Exception):
    """Base error for the route management domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidWeightError(RouteManagementError):
    """A route distance is negative or not an integer.

    Attributes:
        weight: The rejected value
    """

    weight: Any = None


@dataclass
class DuplicateRouteError(RouteManagementError):
    """A route between the same ordered pair already exists.

    Only raised when parallel routes are disabled.
    """

    source: str = ""
    destination: str = ""


@dataclass
class RouteNotFoundError(RouteManagementError):
    """No route matches the ordered pair given to remove/update.

    Attributes:
        source: Start node of the missing route
        destination: End node of the missing route
    """

    source: str = ""
    destination: str = ""


@dataclass
class PathNotFoundError(RouteManagementError):
    """No path exists between the requested nodes.

    Attributes:
        source: Start node
        destination: End node
    """

    source: str = ""
    destination: str = ""


@dataclass
class ConfigurationError(RouteManagementError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
