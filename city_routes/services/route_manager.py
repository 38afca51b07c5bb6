"""Route management service - Operator-facing facade over the graph.

The graph reports missing routes and unreachable destinations as
result values. This service turns those into typed errors for callers
that handle failures with ``except`` (the console menu), and logs every
operation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ..domain.errors import PathNotFoundError, RouteNotFoundError
from ..domain.models import PathResult, Route
from ..graph.digraph import WeightedDigraph


@dataclass
class RouteManagementService:
    """Main service for managing city routes.

    Attributes:
        graph: The road network being managed
    """

    graph: WeightedDigraph

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_route(self, source: str, destination: str, distance: int) -> Route:
        """Add a route to the network.

        Raises:
            InvalidWeightError: If the distance is negative or not an integer.
            DuplicateRouteError: If parallel routes are disabled and one exists.
        """
        route = self.graph.add_route(source, destination, distance)
        self._logger.info(
            "Route added",
            extra={"source": source, "destination": destination, "distance": distance},
        )
        return route

    def remove_route(self, source: str, destination: str) -> Tuple[Route, ...]:
        """Remove all routes from ``source`` to ``destination``.

        Raises:
            RouteNotFoundError: If no such route exists.
        """
        removed = self.graph.remove_route(source, destination)
        if not removed:
            self._logger.warning(
                "Route not found for removal",
                extra={"source": source, "destination": destination},
            )
            raise RouteNotFoundError(
                f"Route {source} -> {destination} not found",
                source=source,
                destination=destination,
            )
        self._logger.info(
            "Routes removed",
            extra={"source": source, "destination": destination, "count": len(removed)},
        )
        return removed

    def update_route(self, source: str, destination: str, distance: int) -> Route:
        """Change the distance of the first route from ``source`` to ``destination``.

        Raises:
            InvalidWeightError: If the distance is negative or not an integer.
            RouteNotFoundError: If no such route exists.
        """
        route = self.graph.update_route(source, destination, distance)
        if route is None:
            self._logger.warning(
                "Route not found for update",
                extra={"source": source, "destination": destination},
            )
            raise RouteNotFoundError(
                f"Route {source} -> {destination} not found",
                source=source,
                destination=destination,
            )
        self._logger.info(
            "Route updated",
            extra={"source": source, "destination": destination, "distance": distance},
        )
        return route

    def list_routes(self) -> List[Route]:
        return self.graph.list_routes()

    def sorted_routes(self, persist: bool = False) -> List[Route]:
        """Return routes by ascending distance.

        Args:
            persist: Also reorder the graph's listing, as the original
                menu's sort option did.
        """
        if persist:
            return self.graph.sort_by_weight()
        return self.graph.sorted_routes()

    def find_shortest_path(self, source: str, destination: str) -> PathResult:
        """Find the shortest path between two nodes.

        Raises:
            PathNotFoundError: If ``destination`` cannot be reached.
        """
        result = self.find_shortest_path_safe(source, destination)
        if not result.is_found:
            raise PathNotFoundError(
                f"No path found from {source} to {destination}",
                source=source,
                destination=destination,
            )
        return result

    def find_shortest_path_safe(self, source: str, destination: str) -> PathResult:
        """Like find_shortest_path(), but returns an empty result instead of raising."""
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )
        result = self.graph.shortest_path(source, destination)
        if result.is_found:
            self._logger.info(
                "Route found",
                extra={
                    "source": source,
                    "destination": destination,
                    "stops": result.num_stops,
                    "distance": result.total_distance,
                },
            )
        else:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
        return result
