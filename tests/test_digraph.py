"""Tests for the arena-backed WeightedDigraph."""

from __future__ import annotations

import itertools
import logging
import random
from typing import Dict, List, Optional

import pytest

from city_routes.adapters.observers import RecordingRouteObserver
from city_routes.domain.errors import DuplicateRouteError, InvalidWeightError
from city_routes.domain.events import (
    EdgeRelaxed,
    NodeFinalized,
    RouteAdded,
    RouteRemoved,
    RouteUpdated,
)
from city_routes.domain.models import PathResult
from city_routes.graph import WeightedDigraph


@pytest.fixture
def graph() -> WeightedDigraph:
    g = WeightedDigraph()
    g.add_route("A", "B", 1)
    g.add_route("B", "C", 2)
    g.add_route("A", "C", 5)
    return g


def triples(routes):
    return [(r.source, r.destination, r.distance) for r in routes]


class TestMutations:
    def test_list_returns_routes_in_insertion_order(self, graph):
        assert triples(graph.list_routes()) == [
            ("A", "B", 1),
            ("B", "C", 2),
            ("A", "C", 5),
        ]

    def test_add_assigns_increasing_route_ids(self, graph):
        assert [r.route_id for r in graph.list_routes()] == [0, 1, 2]

    def test_add_does_not_dedupe(self, graph):
        graph.add_route("A", "B", 7)
        assert triples(graph.list_routes()).count(("A", "B", 1)) == 1
        assert ("A", "B", 7) in triples(graph.list_routes())
        assert len(graph) == 4

    def test_add_registers_both_endpoints(self):
        g = WeightedDigraph()
        g.add_route("X", "Y", 3)
        assert g.nodes == ["X", "Y"]
        assert g.adjacency() == {"X": [("Y", 3)], "Y": []}

    @pytest.mark.parametrize("bad", [-1, 1.5, "3", True, None])
    def test_add_rejects_invalid_distance(self, graph, bad):
        with pytest.raises(InvalidWeightError) as exc_info:
            graph.add_route("A", "D", bad)
        assert exc_info.value.weight == bad
        assert len(graph) == 3
        assert "D" not in graph.nodes

    def test_add_rejects_parallel_routes_when_disabled(self):
        g = WeightedDigraph(allow_parallel_routes=False)
        g.add_route("A", "B", 1)
        g.add_route("B", "A", 1)
        with pytest.raises(DuplicateRouteError) as exc_info:
            g.add_route("A", "B", 2)
        assert exc_info.value.source == "A"
        assert len(g) == 2

    def test_remove_deletes_all_matching_routes(self, graph):
        graph.add_route("A", "B", 9)
        removed = graph.remove_route("A", "B")

        assert triples(removed) == [("A", "B", 1), ("A", "B", 9)]
        assert all(r.key != ("A", "B") for r in graph.list_routes())
        assert ("A", "B") not in graph
        assert graph.adjacency()["A"] == [("C", 5)]

    def test_remove_missing_route_is_a_noop(self, graph):
        before = graph.list_routes()
        assert graph.remove_route("C", "A") == ()
        assert graph.remove_route("Nowhere", "A") == ()
        assert graph.list_routes() == before

    def test_removed_nodes_stay_known(self, graph):
        graph.remove_route("A", "B")
        graph.remove_route("B", "C")
        graph.remove_route("A", "C")
        assert len(graph) == 0
        assert set(graph.nodes) == {"A", "B", "C"}

    def test_route_ids_are_not_reused_after_removal(self, graph):
        graph.remove_route("A", "C")
        route = graph.add_route("A", "C", 4)
        assert route.route_id == 3
        assert graph.get_route(2) is None
        assert graph.get_route(3) == route
        assert graph.get_route(99) is None

    def test_update_changes_only_the_target(self, graph):
        updated = graph.update_route("B", "C", 10)

        assert updated is not None
        assert updated.distance == 10
        assert triples(graph.list_routes()) == [
            ("A", "B", 1),
            ("B", "C", 10),
            ("A", "C", 5),
        ]
        assert graph.adjacency()["B"] == [("C", 10)]

    def test_update_missing_route_mutates_nothing(self, graph):
        before = graph.list_routes()
        assert graph.update_route("C", "B", 1) is None
        assert graph.list_routes() == before

    def test_update_rejects_negative_distance(self, graph):
        with pytest.raises(InvalidWeightError):
            graph.update_route("A", "B", -4)
        assert graph.list_routes()[0].distance == 1

    def test_update_targets_first_parallel_route_in_both_views(self, graph):
        graph.add_route("A", "B", 0)
        graph.sort_by_weight()  # the newer A -> B now lists first
        assert graph.list_routes()[0].route_id == 3

        updated = graph.update_route("A", "B", 20)

        assert updated is not None and updated.route_id == 0
        listing = {r.route_id: r.distance for r in graph.list_routes()}
        assert listing[0] == 20
        assert listing[3] == 0
        assert graph.adjacency()["A"] == [("B", 20), ("C", 5), ("B", 0)]


class TestQueries:
    def test_list_is_idempotent(self, graph):
        assert graph.list_routes() == graph.list_routes()

    def test_list_returns_a_copy(self, graph):
        graph.list_routes().clear()
        assert len(graph.list_routes()) == 3

    def test_sorted_routes_is_stable_and_non_mutating(self):
        g = WeightedDigraph()
        g.add_route("P", "Q", 3)
        g.add_route("A", "B", 1)
        g.add_route("X", "Y", 3)
        g.add_route("M", "N", 1)

        ordered = g.sorted_routes()

        assert triples(ordered) == [
            ("A", "B", 1),
            ("M", "N", 1),
            ("P", "Q", 3),
            ("X", "Y", 3),
        ]
        assert triples(g.list_routes())[0] == ("P", "Q", 3)

    def test_sort_by_weight_reorders_listing(self, graph):
        sorted_view = graph.sort_by_weight()
        assert [r.distance for r in sorted_view] == [1, 2, 5]
        assert graph.list_routes() == sorted_view

        graph.add_route("Z", "A", 0)
        assert triples(graph.list_routes())[-1] == ("Z", "A", 0)

    def test_iteration_and_membership(self, graph):
        assert [r.key for r in graph] == [("A", "B"), ("B", "C"), ("A", "C")]
        assert ("A", "B") in graph
        assert ("B", "A") not in graph
        assert "A" not in graph


class TestShortestPath:
    def test_prefers_cheaper_multi_hop_path(self, graph):
        result = graph.shortest_path("A", "C")
        assert result == PathResult("A", "C", ("A", "B", "C"), 3)
        assert result.is_found
        assert result.num_stops == 3

    def test_same_node(self, graph):
        result = graph.shortest_path("A", "A")
        assert result.path == ("A",)
        assert result.total_distance == 0

    def test_disconnected_nodes(self, graph):
        graph.add_route("D", "E", 1)
        result = graph.shortest_path("A", "E")
        assert not result.is_found
        assert result.path == ()
        assert result.total_distance is None

    def test_unknown_destination(self, graph):
        assert not graph.shortest_path("A", "Q").is_found

    def test_same_unknown_node(self, graph):
        result = graph.shortest_path("X", "X")
        assert result == PathResult("X", "X", ("X",), 0)
        assert "X" not in graph.nodes

    def test_uses_updated_distances(self, graph):
        graph.update_route("B", "C", 10)
        assert graph.shortest_path("A", "C").path == ("A", "C")

    def test_uses_cheapest_parallel_route(self, graph):
        graph.add_route("A", "C", 1)
        assert graph.shortest_path("A", "C") == PathResult("A", "C", ("A", "C"), 1)

    def test_custom_path_finder_is_used(self):
        calls = []

        def finder(adjacency, start, end, observer):
            calls.append((dict(adjacency), start, end))
            return [start, end], 42

        g = WeightedDigraph(path_finder=finder)
        g.add_route("A", "B", 1)

        assert g.shortest_path("A", "B").total_distance == 42
        assert calls == [({"A": [("B", 1)], "B": []}, "A", "B")]


class TestObservation:
    def test_mutation_events(self, graph):
        recorder = RecordingRouteObserver()
        graph.subscribe(recorder)

        added = graph.add_route("C", "D", 4)
        updated = graph.update_route("C", "D", 6)
        removed = graph.remove_route("C", "D")

        assert recorder.events == [
            RouteAdded(route=added),
            RouteUpdated(previous=added, current=updated),
            RouteRemoved(route=removed[0]),
        ]

    def test_not_found_operations_emit_nothing(self, graph):
        recorder = RecordingRouteObserver()
        graph.subscribe(recorder)
        graph.remove_route("X", "Y")
        graph.update_route("X", "Y", 1)
        assert recorder.events == []

    def test_path_events_are_forwarded(self, graph):
        recorder = RecordingRouteObserver()
        graph.subscribe(recorder)

        graph.shortest_path("A", "C")

        assert recorder.events == [
            NodeFinalized(node="A", distance=0),
            EdgeRelaxed(node="A", neighbor="B", new_distance=1),
            EdgeRelaxed(node="A", neighbor="C", new_distance=5),
            NodeFinalized(node="B", distance=1),
            EdgeRelaxed(node="B", neighbor="C", new_distance=3),
            NodeFinalized(node="C", distance=3),
        ]

    def test_unsubscribe(self, graph):
        recorder = RecordingRouteObserver()
        graph.subscribe(recorder)
        graph.subscribe(recorder)
        graph.unsubscribe(recorder)
        graph.add_route("C", "A", 1)
        assert recorder.events == []


def _brute_force(
    adjacency: Dict[str, List[tuple]], source: str, destination: str
) -> Optional[int]:
    """Cheapest simple-path cost by enumerating node orderings."""
    if source == destination:
        return 0
    weights: Dict[tuple, int] = {}
    for u, edges in adjacency.items():
        for v, w in edges:
            weights[(u, v)] = min(w, weights.get((u, v), w))

    others = [n for n in adjacency if n not in (source, destination)]
    best: Optional[int] = None
    for size in range(len(others) + 1):
        for middle in itertools.permutations(others, size):
            hops = (source, *middle, destination)
            pairs = list(zip(hops, hops[1:]))
            if all(pair in weights for pair in pairs):
                cost = sum(weights[pair] for pair in pairs)
                if best is None or cost < best:
                    best = cost
    return best


@pytest.mark.parametrize("seed", range(12))
def test_distances_match_brute_force(seed):
    rng = random.Random(seed)
    labels = ["A", "B", "C", "D", "E", "F"]
    g = WeightedDigraph()
    for _ in range(rng.randint(4, 14)):
        u, v = rng.sample(labels, 2)
        g.add_route(u, v, rng.randint(0, 9))

    adjacency = g.adjacency()
    for source in g.nodes:
        for destination in g.nodes:
            expected = _brute_force(adjacency, source, destination)
            result = g.shortest_path(source, destination)
            if expected is None:
                assert not result.is_found
            else:
                assert result.total_distance == expected
                assert result.path[0] == source
                assert result.path[-1] == destination
                walked = sum(
                    min(w for v, w in adjacency[u] if v == nxt)
                    for u, nxt in zip(result.path, result.path[1:])
                )
                assert walked == expected


def test_equal_observers_are_both_subscribed():
    g = WeightedDigraph()
    first, second = RecordingRouteObserver(), RecordingRouteObserver()
    g.subscribe(first)
    g.subscribe(second)

    g.add_route("A", "B", 1)

    assert len(first.events) == 1
    assert len(second.events) == 1


def test_removed_slot_is_not_a_live_route(graph):
    graph.remove_route("A", "B")
    with pytest.raises(LookupError):
        graph._route_at(0)


def test_graph_leaves_logging_to_observers(graph, caplog):
    with caplog.at_level(logging.DEBUG, logger="city_routes"):
        graph.add_route("C", "D", 1)
        graph.update_route("C", "D", 2)
        graph.remove_route("C", "D")

    assert caplog.records == []
