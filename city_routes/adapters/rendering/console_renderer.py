"""Console text renderer adapter.

Formats routes, shortest-path results and explanation events as the
plain-text lines shown by the interactive menu.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...domain.events import (
    EdgeRelaxed,
    NodeFinalized,
    RouteAdded,
    RouteEvent,
    RouteRemoved,
    RouteUpdated,
)
from ...domain.models import PathResult, Route


@dataclass
class ConsoleRouteRenderer:
    """Plain-text renderer implementing RouteRendererPort.

    Attributes:
        unit: Distance unit appended to every distance
    """

    unit: str = "km"

    def render_route(self, route: Route) -> str:
        return f"{route.source} -> {route.destination} : {route.distance} {self.unit}"

    def render_routes(self, routes: Sequence[Route], title: str) -> str:
        lines = [title]
        lines.extend(self.render_route(route) for route in routes)
        return "\n".join(lines)

    def render_path(self, result: PathResult) -> str:
        if not result.is_found:
            return f"No path found from {result.source} to {result.destination}."
        return (
            f"Shortest path from {result.source} to {result.destination}:\n"
            f"{' -> '.join(result.path)}\n"
            f"Total distance: {result.total_distance} {self.unit}"
        )

    def render_event(self, event: RouteEvent) -> str:
        """Render an explanation line for ``event``.

        Raises:
            TypeError: If ``event`` is not a known event type.
        """
        if isinstance(event, NodeFinalized):
            return f"Node {event.node} selected with distance {event.distance}"
        if isinstance(event, EdgeRelaxed):
            return (
                f"Distance updated for neighbor {event.neighbor} "
                f"to {event.new_distance} {self.unit}"
            )
        if isinstance(event, RouteAdded):
            route = event.route
            return (
                f"Route {route.source} -> {route.destination} added "
                f"with distance {route.distance} {self.unit}."
            )
        if isinstance(event, RouteRemoved):
            return f"Route {event.route.source} -> {event.route.destination} removed."
        if isinstance(event, RouteUpdated):
            current = event.current
            return (
                f"Route {current.source} -> {current.destination} updated "
                f"to {current.distance} {self.unit}."
            )
        raise TypeError(f"Unknown route event: {event!r}")
