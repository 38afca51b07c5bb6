"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and the adapters
that observe it or present its results. They make the system testable
without any particular output mechanism.
"""

from .graph import Graph, PathFinder
from .observer import RouteObserverPort
from .rendering import RouteRendererPort

__all__ = [
    # Graph
    "Graph",
    "PathFinder",
    # Observation
    "RouteObserverPort",
    # Rendering
    "RouteRendererPort",
]
