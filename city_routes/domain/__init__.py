"""Domain layer - Core models, events and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateRouteError,
    InvalidWeightError,
    PathNotFoundError,
    RouteManagementError,
    RouteNotFoundError,
)
from .events import (
    EdgeRelaxed,
    NodeFinalized,
    RouteAdded,
    RouteEvent,
    RouteRemoved,
    RouteUpdated,
)
from .models import PathResult, Route

__all__ = [
    # Models
    "Route",
    "PathResult",
    # Events
    "RouteEvent",
    "NodeFinalized",
    "EdgeRelaxed",
    "RouteAdded",
    "RouteRemoved",
    "RouteUpdated",
    # Errors
    "RouteManagementError",
    "InvalidWeightError",
    "DuplicateRouteError",
    "RouteNotFoundError",
    "PathNotFoundError",
    "ConfigurationError",
]
