"""Mutable weighted directed graph of city routes.

Routes are stored once, in an arena indexed by ``route_id``. The
adjacency projection and the listing order only hold arena indices,
so every mutation is seen by both views at the same time.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import DuplicateRouteError, InvalidWeightError
from ..domain.events import RouteAdded, RouteEvent, RouteRemoved, RouteUpdated
from ..domain.models import PathResult, Route
from ..ports.graph import PathFinder
from ..ports.observer import RouteObserverPort
from .dijkstra import dijkstra


def validate_distance(distance: object) -> int:
    """Return ``distance`` if it is a non-negative integer.

    Raises:
        InvalidWeightError: For negative values, floats, bools, strings...
    """
    if isinstance(distance, bool) or not isinstance(distance, int):
        raise InvalidWeightError(
            f"Distance must be an integer, got {distance!r}",
            weight=distance,
        )
    if distance < 0:
        raise InvalidWeightError(
            f"Distance must be non-negative, got {distance}",
            weight=distance,
        )
    return distance


@dataclass
class WeightedDigraph:
    """Directed graph whose edges are routes with integer distances.

    Nodes are created implicitly the first time they appear as a route
    endpoint and are never removed. Parallel routes between the same
    ordered pair are kept unless ``allow_parallel_routes`` is False.

    Removed routes leave an empty arena slot behind so that ``route_id``
    values are never reused; the arena grows with every add and is not
    compacted.

    Not thread-safe: callers sharing an instance must serialise
    mutating calls.

    Attributes:
        allow_parallel_routes: Accept several routes for one (source, destination)
        path_finder: Shortest-path routine run by ``shortest_path``
    """

    allow_parallel_routes: bool = True
    path_finder: PathFinder = field(default=dijkstra, repr=False)

    _arena: List[Optional[Route]] = field(default_factory=list, repr=False)
    _order: List[int] = field(default_factory=list, repr=False)
    _adjacency: Dict[str, List[int]] = field(default_factory=dict, repr=False)
    _observers: List[RouteObserverPort] = field(default_factory=list, repr=False)

    # Observation channel

    def subscribe(self, observer: RouteObserverPort) -> None:
        # identity, not equality
        if not any(o is observer for o in self._observers):
            self._observers.append(observer)

    def unsubscribe(self, observer: RouteObserverPort) -> None:
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self, event: RouteEvent) -> None:
        """Forward ``event`` to every subscribed observer, in order."""
        for observer in list(self._observers):
            observer.notify(event)

    # Mutations

    def add_route(self, source: str, destination: str, distance: int) -> Route:
        """Append a new route from ``source`` to ``destination``.

        Args:
            source: Start node label.
            destination: End node label.
            distance: Non-negative integer distance.

        Returns:
            The stored route, carrying its ``route_id``.

        Raises:
            InvalidWeightError: If ``distance`` is negative or not an integer.
            DuplicateRouteError: If parallel routes are disabled and the
                pair already has a route.
        """
        validate_distance(distance)
        if not self.allow_parallel_routes and self._first_match(source, destination) is not None:
            raise DuplicateRouteError(
                f"Route {source} -> {destination} already exists",
                source=source,
                destination=destination,
            )

        route = Route(
            route_id=len(self._arena),
            source=source,
            destination=destination,
            distance=distance,
        )
        self._arena.append(route)
        self._order.append(route.route_id)
        self._adjacency.setdefault(source, []).append(route.route_id)
        self._adjacency.setdefault(destination, [])
        self.notify(RouteAdded(route=route))
        return route

    def remove_route(self, source: str, destination: str) -> Tuple[Route, ...]:
        """Remove every route from ``source`` to ``destination``.

        Returns:
            The removed routes in insertion order. An empty tuple means
            nothing matched and the graph is unchanged.
        """
        indices = [
            index
            for index in self._adjacency.get(source, [])
            if self._route_at(index).destination == destination
        ]
        if not indices:
            return ()

        doomed = set(indices)
        self._adjacency[source] = [i for i in self._adjacency[source] if i not in doomed]
        self._order = [i for i in self._order if i not in doomed]

        removed = []
        for index in indices:
            route = self._route_at(index)
            self._arena[index] = None
            removed.append(route)
        for route in removed:
            self.notify(RouteRemoved(route=route))
        return tuple(removed)

    def update_route(
        self, source: str, destination: str, distance: int
    ) -> Optional[Route]:
        """Set the distance of the first matching route.

        "First" is insertion order (lowest ``route_id``), independent of
        any reordering done by ``sort_by_weight``.

        Returns:
            The updated route, or None when no route matches (the graph
            is unchanged).

        Raises:
            InvalidWeightError: If ``distance`` is negative or not an integer.
        """
        validate_distance(distance)
        index = self._first_match(source, destination)
        if index is None:
            return None

        previous = self._route_at(index)
        current = replace(previous, distance=distance)
        self._arena[index] = current
        self.notify(RouteUpdated(previous=previous, current=current))
        return current

    # Queries

    def list_routes(self) -> List[Route]:
        """Return live routes in the current listing order."""
        return [self._route_at(index) for index in self._order]

    def sorted_routes(self) -> List[Route]:
        """Return routes ordered by ascending distance without reordering the graph.

        Equal distances keep their listing order.
        """
        return sorted(self.list_routes(), key=lambda route: route.distance)

    def sort_by_weight(self) -> List[Route]:
        """Reorder the listing by ascending distance and return it.

        Later ``list_routes`` calls keep this order; new routes are
        appended after it.
        """
        self._order.sort(key=lambda index: self._route_at(index).distance)
        return self.list_routes()

    def adjacency(self) -> Dict[str, List[Tuple[str, int]]]:
        """Return a copy of the adjacency projection, sinks included."""
        return {
            node: [
                (self._route_at(i).destination, self._route_at(i).distance)
                for i in indices
            ]
            for node, indices in self._adjacency.items()
        }

    def shortest_path(self, source: str, destination: str) -> PathResult:
        """Find the shortest path from ``source`` to ``destination``.

        Algorithm events (``NodeFinalized``, ``EdgeRelaxed``) are
        forwarded to the subscribed observers.

        Returns:
            A PathResult; ``is_found`` is False when ``destination`` is
            unknown or unreachable.
        """
        path, distance = self.path_finder(
            self.adjacency(), source, destination, self if self._observers else None
        )
        if not path:
            return PathResult.not_found(source, destination)
        return PathResult(
            source=source,
            destination=destination,
            path=tuple(path),
            total_distance=int(distance),
        )

    @property
    def nodes(self) -> List[str]:
        """Known node labels in order of first appearance."""
        return list(self._adjacency)

    def get_route(self, route_id: int) -> Optional[Route]:
        if 0 <= route_id < len(self._arena):
            return self._arena[route_id]
        return None

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.list_routes())

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self._first_match(*pair) is not None

    # Internals

    def _route_at(self, index: int) -> Route:
        route = self._arena[index]
        if route is None:
            raise LookupError(f"Arena slot {index} holds no live route")
        return route

    def _first_match(self, source: str, destination: str) -> Optional[int]:
        for index in self._adjacency.get(source, []):
            if self._route_at(index).destination == destination:
                return index
        return None
