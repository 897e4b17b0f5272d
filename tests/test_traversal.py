"""Event-by-event tests for the two unweighted traversals."""

from algorithms import EventKind, EdgePair
from algorithms.bfs import bfs
from algorithms.dfs import dfs

from conftest import kinds, make_graph, of_kind


# ---------------------------------------------------------------------------
# BFS
# ---------------------------------------------------------------------------
class TestBFS:
    def test_triangle_sequence(self, triangle):
        trace = bfs(triangle, "A")
        assert kinds(trace) == [
            "select",
            "visit", "explore", "explore", "finish",
            "visit", "skip", "skip", "finish",
            "visit", "skip", "skip", "finish",
        ]

    def test_messages(self, triangle):
        trace = bfs(triangle, "A")
        assert trace[0].message == "Starting BFS from node A"
        assert trace[1].message == "Visiting node A"
        assert trace[2].message == "Discovered node B from A"
        assert trace[2].edges == (EdgePair("A", "B"),)
        assert trace[4].message == "Finished processing node A"
        assert trace[6].message == "Node A already visited"

    def test_layer_order(self):
        # A's neighbours are discovered before any grandchild is visited
        g = make_graph(
            ["A", "B", "C", "D"],
            [("A", "B", 1), ("B", "D", 1), ("A", "C", 1)],
        )
        visits = [ev.nodes[0] for ev in of_kind(bfs(g, "A"), EventKind.VISIT)]
        assert visits == ["A", "B", "C", "D"]

    def test_stays_in_component(self, disconnected):
        visits = [ev.nodes[0] for ev in of_kind(bfs(disconnected, "C"), EventKind.VISIT)]
        assert visits == ["C", "D"]

    def test_isolated_start(self, disconnected):
        assert kinds(bfs(disconnected, "E")) == ["select", "visit", "finish"]

    def test_start_by_label(self, labelled):
        trace = bfs(labelled, "Zed")
        assert trace[0].nodes == ("z",)
        assert trace[0].message == "Starting BFS from node Zed"

    def test_end_is_ignored(self, triangle):
        assert bfs(triangle, "A", "C") == bfs(triangle, "A")

    def test_unknown_start(self, triangle):
        assert bfs(triangle, "nope") == ()


# ---------------------------------------------------------------------------
# DFS
# ---------------------------------------------------------------------------
class TestDFS:
    def test_triangle_sequence(self, triangle):
        trace = dfs(triangle, "A")
        assert kinds(trace) == [
            "select", "visit",
            "explore", "visit",            # A → B
            "skip",                        # B → A
            "explore", "visit",            # B → C
            "skip", "skip", "finish",      # C's neighbours, C done
            "finish",                      # B done
            "skip", "finish",              # A → C already seen, A done
        ]

    def test_messages(self, triangle):
        trace = dfs(triangle, "A")
        assert trace[0].message == "Starting DFS from node A"
        assert trace[2].message == "Exploring edge to node B"
        assert trace[2].edges == (EdgePair("A", "B"),)
        assert trace[9].message == "Finished exploring node C"

    def test_goes_deep_first(self):
        g = make_graph(
            ["A", "B", "C", "D"],
            [("A", "B", 1), ("A", "C", 1), ("B", "D", 1)],
        )
        visits = [ev.nodes[0] for ev in of_kind(dfs(g, "A"), EventKind.VISIT)]
        assert visits == ["A", "B", "D", "C"]

    def test_finish_order_is_post_order(self):
        g = make_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1)])
        finishes = [ev.nodes[0] for ev in of_kind(dfs(g, "A"), EventKind.FINISH)]
        assert finishes == ["C", "B", "A"]

    def test_long_chain_does_not_recurse(self):
        n = 2000
        ids = [f"n{i}" for i in range(n)]
        g = make_graph(ids, [(ids[i], ids[i + 1], 1) for i in range(n - 1)])
        trace = dfs(g, "n0")
        assert len(of_kind(trace, EventKind.VISIT)) == n

    def test_unknown_start(self, triangle):
        assert dfs(triangle, None) == ()
