"""Structured events emitted by the graph and the path finder.

Observers receive these records instead of the core printing
explanations itself. The presentation layer decides how to render them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .models import Route


@dataclass(frozen=True, slots=True)
class NodeFinalized:
    """Dijkstra settled ``node``; its shortest distance is ``distance``."""

    node: str
    distance: int


@dataclass(frozen=True, slots=True)
class EdgeRelaxed:
    """The route ``node -> neighbor`` lowered the neighbor's distance."""

    node: str
    neighbor: str
    new_distance: int


@dataclass(frozen=True, slots=True)
class RouteAdded:
    route: Route


@dataclass(frozen=True, slots=True)
class RouteRemoved:
    route: Route


@dataclass(frozen=True, slots=True)
class RouteUpdated:
    previous: Route
    current: Route


RouteEvent = Union[NodeFinalized, EdgeRelaxed, RouteAdded, RouteRemoved, RouteUpdated]
