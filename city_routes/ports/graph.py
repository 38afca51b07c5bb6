"""Graph ports - Shapes shared by the graph and its path finders.

Maps node label -> list of (neighbor_label, distance). Every known node
is a key, sinks included.
"""

from __future__ import annotations

from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .observer import RouteObserverPort

Graph = Mapping[str, Sequence[Tuple[str, int]]]

# (graph, start, end, observer) -> (path, total distance); ([], inf) when unreachable
PathFinder = Callable[
    [Graph, str, str, Optional[RouteObserverPort]], Tuple[List[str], float]
]
