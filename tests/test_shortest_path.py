"""Tests for Dijkstra and Bellman-Ford traces."""

from algorithms import EventKind, EdgePair
from algorithms.dijkstra import dijkstra
from algorithms.bellman_ford import bellman_ford

from conftest import kinds, make_graph, of_kind


def path_edges(trace):
    return [(ev.edges[0].source, ev.edges[0].target) for ev in of_kind(trace, EventKind.FINISH)]


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
class TestDijkstra:
    def test_triangle_sequence(self, triangle):
        trace = dijkstra(triangle, "A", "C")
        assert kinds(trace) == [
            "select",
            "visit", "explore", "select", "explore", "select",
            "visit", "explore", "select",
            "visit", "finish", "finish",
        ]

    def test_triangle_messages(self, triangle):
        trace = dijkstra(triangle, "A", "C")
        assert trace[0].message == "Starting Dijkstra's algorithm from node A"
        assert trace[1].message == "Visiting node A (distance: 0)"
        assert trace[2].message == "Checking distance to B: 1"
        assert trace[3].message == "Updated distance to B: 1"
        assert trace[7].message == "Checking distance to C: 3"
        assert trace[9].message == "Visiting node C (distance: 3)"
        assert trace[10].message == "Shortest path found! Total distance: 3"

    def test_path_goes_the_short_way(self, triangle):
        assert path_edges(dijkstra(triangle, "A", "C")) == [("A", "B"), ("B", "C")]

    def test_keeps_better_distance(self):
        g = make_graph(["A", "B", "C"], [("A", "B", 1), ("A", "C", 1), ("B", "C", 5)])
        trace = dijkstra(g, "A", "C")
        skips = of_kind(trace, EventKind.SKIP)
        assert [s.message for s in skips] == ["Keeping current distance to C: 1"]
        assert skips[0].edges == (EdgePair("B", "C"),)
        assert path_edges(trace) == [("A", "C")]

    def test_ties_break_by_declaration_order(self):
        g = make_graph(["A", "B", "C", "D"], [("A", "C", 1), ("A", "B", 1), ("B", "D", 1), ("C", "D", 1)])
        visits = [ev.nodes[0] for ev in of_kind(dijkstra(g, "A", "D"), EventKind.VISIT)]
        assert visits[:3] == ["A", "B", "C"]

    def test_unreachable_end_stops_silently(self):
        g = make_graph(["A", "B", "C"], [("A", "B", 1)])
        trace = dijkstra(g, "A", "C")
        assert trace
        assert of_kind(trace, EventKind.FINISH) == []
        assert trace[-1].kind is EventKind.VISIT

    def test_start_equals_end(self, triangle):
        assert kinds(dijkstra(triangle, "B", "B")) == ["select", "visit"]

    def test_requires_end(self, triangle):
        assert dijkstra(triangle, "A") == ()
        assert dijkstra(triangle, "A", "nope") == ()
        assert dijkstra(triangle, "nope", "A") == ()

    def test_float_weights_in_messages(self):
        g = make_graph(["A", "B"], [("A", "B", 2.5)])
        trace = dijkstra(g, "A", "B")
        assert trace[-1].message == "Shortest path found! Total distance: 2.5"


# ---------------------------------------------------------------------------
# Bellman-Ford
# ---------------------------------------------------------------------------
class TestBellmanFord:
    def test_triangle_sequence(self, triangle):
        trace = bellman_ford(triangle, "A", "C")
        assert kinds(trace) == [
            "select",
            "visit", "explore", "select", "explore", "select", "explore",
            "visit", "explore", "explore", "explore",
            "finish", "finish",
        ]

    def test_triangle_messages(self, triangle):
        trace = bellman_ford(triangle, "A", "C")
        assert trace[0].message == "Starting Bellman-Ford algorithm from node A"
        assert trace[1].message == "Starting iteration 1"
        assert trace[1].nodes == ()
        assert trace[2].message == "Checking edge A → B"
        assert trace[2].nodes == ("A", "B")
        assert trace[5].message == "Updated distance to C: 3"
        assert trace[7].message == "Starting iteration 2"
        assert trace[-1].message == "Shortest path found! Total distance: 3"
        assert path_edges(trace) == [("A", "B"), ("B", "C")]

    def test_edges_are_directed(self):
        g = make_graph(["A", "B"], [("B", "A", 1)])
        trace = bellman_ford(g, "A", "B")
        assert kinds(trace) == ["select", "visit", "explore"]

    def test_negative_edge_without_cycle(self):
        g = make_graph(["A", "B", "C"], [("A", "B", 4), ("A", "C", 2), ("B", "C", -3)])
        trace = bellman_ford(g, "A", "C")
        assert path_edges(trace) == [("A", "B"), ("B", "C")]
        assert trace[-1].message == "Shortest path found! Total distance: 1"

    def test_negative_cycle_is_last_event(self):
        g = make_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", -3), ("C", "B", 1)])
        trace = bellman_ford(g, "A", "C")
        last = trace[-1]
        assert last.kind is EventKind.FINISH
        assert last.message == "Negative cycle detected!"
        assert last.edges == (EdgePair("B", "C"),)
        assert len(of_kind(trace, EventKind.FINISH)) == 1

    def test_unreachable_negative_cycle_is_ignored(self):
        g = make_graph(["A", "B", "C", "D"], [("A", "B", 2), ("C", "D", -5), ("D", "C", 1)])
        trace = bellman_ford(g, "A", "B")
        assert trace[-1].kind is EventKind.FINISH
        assert trace[-1].message == "Shortest path found! Total distance: 2"
        assert path_edges(trace) == [("A", "B")]
        assert all(ev.message != "Negative cycle detected!" for ev in trace)

    def test_unreachable_end(self):
        g = make_graph(["A", "B", "C"], [("A", "B", 1)])
        assert of_kind(bellman_ford(g, "A", "C"), EventKind.FINISH) == []

    def test_requires_end(self, triangle):
        assert bellman_ford(triangle, "A") == ()
