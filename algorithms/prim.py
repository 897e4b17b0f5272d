"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows a tree outward from the start node by always taking the lightest
edge in the candidate pool.

Emits:
  1. select  – the start node
  2. skip    – popped edge whose endpoints are both in the tree already
     explore – popped edge reaching a new node
  3. select  – the new node joins the tree
  4. finish  – every tree node plus every accepted edge, with total weight

The pool is a heap keyed on (weight, insertion sequence): the same order a
full stable re-sort of an append-only list would give.  Entries are not
de-duplicated when pushed; stale ones surface as skip events when popped.
Nodes outside the start node's component are silently left out.
"""

import heapq
import itertools
from typing import List, Optional, Set, Tuple

from graph import GraphSnapshot, EdgeRef
from algorithms.step import Trace, TraceBuilder, format_number


PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                      # 0
    "    tree ← {start}",                           # 1
    "    pool ← edges(start)",                      # 2
    "    while pool and |tree| < |V|:",             # 3
    "        (u, v, w) ← pool.pop_min()",           # 4
    "        if u in tree and v in tree: skip",     # 5
    "        new ← the endpoint not in tree",       # 6
    "        tree.add(new); mst.add((u, v, w))",    # 7
    "        pool.add(edges(new) leaving tree)",    # 8
    "    return mst",                               # 9
]


def prim(graph: GraphSnapshot, start: str, end: Optional[str] = None) -> Trace:
    tb = TraceBuilder()
    start_node = graph.resolve(start)
    if start_node is None:
        return tb.build()

    label   = graph.label_of
    visited: List[str] = [start_node.id]          # join order, reported in the summary
    in_tree: Set[str]  = {start_node.id}
    mst:     List[Tuple[str, str]] = []
    total:   float = 0

    seq = itertools.count()
    pool: List[Tuple[float, int, EdgeRef]] = []

    def push(edge: EdgeRef) -> None:
        heapq.heappush(pool, (edge.weight, next(seq), edge))

    tb.select([start_node.id], "Starting Prim's algorithm")

    for edge in graph.edges_for(start_node.id):
        push(edge)

    while pool and len(in_tree) < len(graph.nodes):
        _, _, edge = heapq.heappop(pool)
        u, v = edge.source, edge.target

        if v not in in_tree:
            new = v
        elif u not in in_tree:
            new = u
        else:
            tb.skip([u, v], "Both nodes already in MST, skipping", edge=(u, v))
            continue

        tb.explore([u, v], f"Checking edge to {label(new)} (weight: {format_number(edge.weight)})", edge=(u, v))

        mst.append((u, v))
        total += edge.weight
        in_tree.add(new)
        visited.append(new)

        tb.select([new], f"Added node {label(new)} to MST", edge=(u, v))

        for candidate in graph.edges_for(new):
            if candidate.source not in in_tree or candidate.target not in in_tree:
                push(candidate)

    tb.finish(visited, f"MST completed! Total weight: {format_number(total)}", edges=mst)
    return tb.build()
