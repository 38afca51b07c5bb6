"""Immutable domain models for the city route manager.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the road network.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Route:
    """A directed, weighted connection between two intersections.

    Attributes:
        route_id: Slot index of the route in the graph's arena
        source: Start node label
        destination: End node label
        distance: Non-negative integer distance
    """

    route_id: int
    source: str
    destination: str
    distance: int

    @property
    def key(self) -> tuple[str, str]:
        """Return the ordered (source, destination) pair."""
        return self.source, self.destination


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    An empty ``path`` with ``total_distance`` set to None means no path
    exists between ``source`` and ``destination``.

    Attributes:
        source: Requested start node
        destination: Requested end node
        path: Ordered tuple of nodes from source to destination
        total_distance: Sum of the route distances along the path
    """

    source: str
    destination: str
    path: tuple[str, ...] = ()
    total_distance: Optional[int] = None

    @property
    def is_found(self) -> bool:
        """Check if a path was found."""
        return len(self.path) > 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.path)

    @classmethod
    def not_found(cls, source: str, destination: str) -> PathResult:
        return cls(source=source, destination=destination)
