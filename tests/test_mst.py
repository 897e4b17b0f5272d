"""Tests for the Kruskal and Prim traces and the disjoint-set forest."""

from algorithms import EventKind, EdgePair
from algorithms.kruskal import kruskal, DisjointSet
from algorithms.prim import prim

from conftest import kinds, make_graph, of_kind


class TestDisjointSet:
    def test_lazy_singletons(self):
        ds = DisjointSet()
        assert ds.find("a") == "a"
        assert not ds.connected("a", "b")

    def test_union(self):
        ds = DisjointSet()
        assert ds.union("a", "b")
        assert ds.union("b", "c")
        assert ds.connected("a", "c")
        assert not ds.union("c", "a")


# ---------------------------------------------------------------------------
# Kruskal
# ---------------------------------------------------------------------------
class TestKruskal:
    def test_triangle_sequence(self, triangle):
        trace = kruskal(triangle, "A")
        assert kinds(trace) == [
            "select",
            "explore", "select",
            "explore", "select",
            "explore", "skip",
            "finish",
        ]

    def test_triangle_messages(self, triangle):
        trace = kruskal(triangle, "A")
        assert trace[0].message == "Starting Kruskal's algorithm"
        assert trace[0].nodes == ()
        assert trace[1].message == "Checking edge A → B (weight: 1)"
        assert trace[2].message == "Added edge to MST (total weight: 1)"
        assert trace[4].message == "Added edge to MST (total weight: 3)"
        assert trace[6].message == "Edge would create a cycle, skipping"
        assert trace[6].edges == (EdgePair("A", "C"),)

    def test_summary(self, triangle):
        summary = kruskal(triangle, "A")[-1]
        assert summary.nodes == ("A", "B", "C")
        assert summary.edges == (EdgePair("A", "B"), EdgePair("B", "C"))
        assert summary.message == "MST completed! Total weight: 3"

    def test_spanning_forest(self, disconnected):
        summary = kruskal(disconnected, "A")[-1]
        assert len(summary.edges) == 2
        assert summary.nodes == ("A", "B", "C", "D", "E")

    def test_stable_on_equal_weights(self):
        g = make_graph(["A", "B", "C"], [("B", "C", 1), ("A", "B", 1)])
        explores = of_kind(kruskal(g, "A"), EventKind.EXPLORE)
        assert [e.edges[0] for e in explores] == [EdgePair("B", "C"), EdgePair("A", "B")]

    def test_start_only_gates_the_run(self, triangle):
        assert kruskal(triangle, "C") == kruskal(triangle, "A")
        assert kruskal(triangle, "nope") == ()


# ---------------------------------------------------------------------------
# Prim
# ---------------------------------------------------------------------------
class TestPrim:
    def test_triangle_sequence(self, triangle):
        trace = prim(triangle, "A")
        assert kinds(trace) == ["select", "explore", "select", "explore", "select", "finish"]
        assert trace[0].message == "Starting Prim's algorithm"
        assert trace[1].message == "Checking edge to B (weight: 1)"
        assert trace[2].message == "Added node B to MST"
        assert trace[-1].message == "MST completed! Total weight: 3"

    def test_stale_edge_is_skipped(self):
        g = make_graph(
            ["A", "B", "C", "D"],
            [("A", "B", 1), ("A", "C", 1), ("B", "C", 1), ("C", "D", 5)],
        )
        trace = prim(g, "A")
        assert kinds(trace) == [
            "select",
            "explore", "select",
            "explore", "select",
            "skip",
            "explore", "select",
            "finish",
        ]
        assert trace[5].message == "Both nodes already in MST, skipping"
        assert trace[5].edges == (EdgePair("B", "C"),)
        summary = trace[-1]
        assert summary.nodes == ("A", "B", "C", "D")
        assert summary.edges == (EdgePair("A", "B"), EdgePair("A", "C"), EdgePair("C", "D"))
        assert summary.message == "MST completed! Total weight: 7"

    def test_only_start_component(self, disconnected):
        summary = prim(disconnected, "A")[-1]
        assert summary.nodes == ("A", "B")
        assert summary.message == "MST completed! Total weight: 1"

    def test_isolated_start(self, disconnected):
        trace = prim(disconnected, "E")
        assert kinds(trace) == ["select", "finish"]
        assert trace[-1].message == "MST completed! Total weight: 0"

    def test_unknown_start(self, triangle):
        assert prim(triangle, "nope") == ()
