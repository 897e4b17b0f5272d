"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Edge-centric MST: consider edges by ascending weight and accept any edge
joining two different components.

Emits:
  1. select  – "Starting Kruskal's algorithm" (no nodes)
  2. explore – each edge in sorted order
  3. select  – edge accepted (message carries the running total)
     skip    – edge would close a cycle
  4. finish  – every node of the graph plus every accepted edge

The sort is stable, so equal weights keep their declaration order.  On a
disconnected graph the result is a minimum spanning FOREST; isolated nodes
are never unioned and stay singleton components.
"""

from typing import Dict, List, Optional, Tuple

from graph import GraphSnapshot
from algorithms.step import Trace, TraceBuilder, format_number


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                         # 0
    "    mst ← []",                                # 1
    "    edges ← sort(graph.edges, by weight)",    # 2
    "    dsu ← DisjointSet()",                     # 3
    "    for each edge (u, v, w) in edges:",       # 4
    "        if dsu.find(u) != dsu.find(v):",      # 5
    "            dsu.union(u, v)",                 # 6
    "            mst.add((u, v, w))",              # 7
    "        else: skip (cycle)",                  # 8
    "    return mst",                              # 9
]


class DisjointSet:
    """
    Union-find over node ids with union by rank and path compression.
    Sets are created lazily the first time an id is looked up.
    """

    def __init__(self):
        self.parent: Dict[str, str] = {}
        self.rank:   Dict[str, int] = {}

    def find(self, node_id: str) -> str:
        if node_id not in self.parent:
            self.parent[node_id] = node_id
            self.rank[node_id]   = 0
            return node_id

        root = node_id
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[node_id] != root:
            self.parent[node_id], node_id = root, self.parent[node_id]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets holding a and b.  False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        return True

    def connected(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)


def kruskal(graph: GraphSnapshot, start: str, end: Optional[str] = None) -> Trace:
    """
    `start` only has to resolve (uniform empty-trace contract); the MST
    itself does not depend on it.
    """
    tb = TraceBuilder()
    if graph.resolve(start) is None:
        return tb.build()

    label = graph.label_of
    dsu   = DisjointSet()
    mst:   List[Tuple[str, str]] = []
    total: float = 0

    tb.select([], "Starting Kruskal's algorithm")

    for edge in sorted(graph.edges, key=lambda e: e.weight):
        u, v = edge.source, edge.target
        tb.explore(
            [u, v],
            f"Checking edge {label(u)} → {label(v)} (weight: {format_number(edge.weight)})",
            edge=(u, v),
        )

        if not dsu.connected(u, v):
            dsu.union(u, v)
            mst.append((u, v))
            total += edge.weight
            tb.select([u, v], f"Added edge to MST (total weight: {format_number(total)})", edge=(u, v))
        else:
            tb.skip([u, v], "Edge would create a cycle, skipping", edge=(u, v))

    tb.finish(graph.node_ids(), f"MST completed! Total weight: {format_number(total)}", edges=mst)
    return tb.build()
