"""
Pytest configuration and shared fixtures.

Graphs are built as GraphSnapshot objects, the shape every algorithm reads.
"""

import random
from typing import List, Optional, Tuple

import pytest

from graph import GraphSnapshot
from algorithms import EventKind


def make_graph(nodes, edges) -> GraphSnapshot:
    """nodes: ids (or (id, label) pairs); edges: (source, target, weight)."""
    node_pairs = [n if isinstance(n, tuple) else (n, None) for n in nodes]
    return GraphSnapshot.build(node_pairs, edges)


def random_graph(
    seed: int,
    n: int = 7,
    p: float = 0.4,
    weights: Tuple[int, int] = (1, 9),
    dag: bool = False,
    connected: bool = True,
) -> GraphSnapshot:
    """
    Seeded random graph without parallel edges or self-loops.  With `dag`
    every edge points from a lower to a higher index (no directed cycles).
    With `connected` a backbone path 0-1-…-(n-1) is always present.
    """
    rng = random.Random(seed)
    ids = [f"n{i}" for i in range(n)]
    pairs = set()
    edges = []
    if connected:
        for i in range(1, n):
            pairs.add((i - 1, i))
            edges.append((ids[i - 1], ids[i], rng.randint(*weights)))
    for i in range(n):
        for j in range(i + 1, n):
            if (i, j) not in pairs and rng.random() < p:
                pairs.add((i, j))
                a, b = (i, j) if dag or rng.random() < 0.5 else (j, i)
                edges.append((ids[a], ids[b], rng.randint(*weights)))
    rng.shuffle(edges)
    return make_graph(ids, edges)


def kinds(trace) -> List[str]:
    return [ev.kind.value for ev in trace]


def of_kind(trace, kind: EventKind):
    return [ev for ev in trace if ev.kind is kind]


def edge_weight(graph: GraphSnapshot, a: str, b: str, directed: bool = False) -> Optional[float]:
    for e in graph.edges:
        if (e.source, e.target) == (a, b) or (not directed and (e.source, e.target) == (b, a)):
            return e.weight
    return None


@pytest.fixture
def triangle() -> GraphSnapshot:
    """A-B (1), B-C (2), A-C (5): the short way round beats the direct edge."""
    return make_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])


@pytest.fixture
def disconnected() -> GraphSnapshot:
    """Two components plus an isolated node: {A, B}, {C, D}, {E}."""
    return make_graph(["A", "B", "C", "D", "E"], [("A", "B", 1), ("C", "D", 2)])


@pytest.fixture
def labelled() -> GraphSnapshot:
    """Ids differ from labels; node 'y' is also the label of node 'x'."""
    return make_graph(
        [("x", "y"), ("y", "Why"), ("z", "Zed")],
        [("x", "y", 1), ("y", "z", 1)],
    )
