"""Top-level package for the city route manager.

The road network is a directed graph of routes with integer distances.
This package exposes the graph, the shortest-path routine running over
it, and the service and console menu built on top.
"""

from .domain.models import PathResult, Route
from .graph import WeightedDigraph, dijkstra
from .services import RouteManagementService

__all__ = ["WeightedDigraph", "dijkstra", "Route", "PathResult", "RouteManagementService"]
