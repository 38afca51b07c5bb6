"""Rendering port - Abstraction for turning results into text.

This protocol defines the contract for presenting routes, paths and
explanation events, allowing the console menu (or any other front-end)
to choose its own formatting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.events import RouteEvent
    from ..domain.models import PathResult, Route


class RouteRendererPort(Protocol):
    """Port for route rendering.

    Implementation: adapters/rendering/console_renderer.py
    """

    def render_route(self, route: Route) -> str:
        """Render a single route as one line."""
        ...

    def render_routes(self, routes: Sequence[Route], title: str) -> str:
        """Render a titled listing of routes.

        Args:
            routes: Routes in the order they should appear.
            title: Heading printed before the listing.

        Returns:
            The listing, one route per line.
        """
        ...

    def render_path(self, result: PathResult) -> str:
        """Render a shortest-path result, found or not."""
        ...

    def render_event(self, event: RouteEvent) -> str:
        """Render an explanation line for a graph or algorithm event."""
        ...
