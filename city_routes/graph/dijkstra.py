"""Shortest-path computation using Dijkstra's algorithm.

Distances are non-negative integers; the graph boundary rejects
anything else before it reaches this module.
"""

import heapq
from typing import Dict, List, Optional, Tuple

from ..domain.events import EdgeRelaxed, NodeFinalized
from ..ports.graph import Graph
from ..ports.observer import RouteObserverPort


def dijkstra(
    graph: Graph,
    start: str,
    end: str,
    observer: Optional[RouteObserverPort] = None,
) -> Tuple[List[str], float]:
    """Compute the shortest path between two nodes using Dijkstra.

    Parameters
    ----------
    graph:
        Adjacency mapping as produced by ``WeightedDigraph.adjacency``.
    start:
        Identifier of the departure node.
    end:
        Identifier of the arrival node.
    observer:
        Optional observer notified with ``NodeFinalized`` each time a
        node is settled and ``EdgeRelaxed`` each time a tentative
        distance is lowered.

    Returns
    -------
    list[str], float
        The sequence of nodes from ``start`` to ``end`` (inclusive) and
        the total distance. If no path exists, returns
        ``([], float("inf"))``.
    """
    distances: Dict[str, float] = {node: float("inf") for node in graph}
    previous: Dict[str, str] = {}
    distances[start] = 0

    heap: List[Tuple[float, str]] = [(0, start)]
    visited = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        # stale entry left behind by a later relaxation
        if u in visited:
            continue

        visited.add(u)
        if observer is not None:
            observer.notify(NodeFinalized(node=u, distance=int(current_distance)))

        for v, weight in graph.get(u, []):
            new_distance = current_distance + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))
                if observer is not None:
                    observer.notify(
                        EdgeRelaxed(node=u, neighbor=v, new_distance=int(new_distance))
                    )

    if distances.get(end, float("inf")) == float("inf"):
        return [], float("inf")

    path: List[str] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)

    path.reverse()
    return path, distances[end]
