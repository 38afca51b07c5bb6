"""Graph core for the road network.

This subpackage contains the mutable weighted digraph holding the
city's routes and the Dijkstra path finder that runs over it.
"""

from .digraph import WeightedDigraph, validate_distance
from .dijkstra import dijkstra

__all__ = ["WeightedDigraph", "dijkstra", "validate_distance"]
