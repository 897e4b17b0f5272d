"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
Single-pair shortest path over DIRECTED edges (source → target only),
supporting negative weights and detecting negative cycles.

Structure:
  • exactly |V|-1 passes relaxing every edge in declaration order
    (no early exit on convergence, so the trace length is predictable);
  • one detector pass that flags a negative cycle.

Emits:
  1. select  – the start node
  2. visit   – a pass boundary ("Starting iteration i"), no nodes attached
  3. explore – every edge examined (both endpoints)
  4. select  – only when the edge strictly improves its target
               (no skip events: failed relaxations stay silent)
  5. finish  – the negative-cycle edge, and nothing after it
     finish  – otherwise one per edge on the path to `end`

If `end` was never reached the path degenerates to the lone end node and
no finish events are emitted.
"""

import math
from typing import Dict, List, Optional

from graph import GraphSnapshot
from algorithms.step import Trace, TraceBuilder, format_number, reconstruct_path


PSEUDOCODE: List[str] = [
    "def BellmanFord(graph, start, end):",         # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[start] ← 0",                         # 2
    "    for i in 1 … |V|-1:",                     # 3
    "        for each edge (u, v, w):",            # 4
    "            if dist[u] + w < dist[v]:",       # 5
    "                dist[v] ← dist[u] + w",       # 6
    "                parent[v] ← u",               # 7
    "    for each edge (u, v, w):",                # 8
    "        if dist[u] + w < dist[v]:",           # 9
    "            return NEGATIVE CYCLE",           # 10
    "    return path to end",                      # 11
]


def bellman_ford(graph: GraphSnapshot, start: str, end: Optional[str] = None) -> Trace:
    tb = TraceBuilder()
    start_node = graph.resolve(start)
    end_node   = graph.resolve(end)
    if start_node is None or end_node is None:
        return tb.build()

    INF   = math.inf
    label = graph.label_of

    dist:   Dict[str, float] = {nid: INF for nid in graph.node_ids()}
    parent: Dict[str, str]   = {}
    dist[start_node.id] = 0

    tb.select([start_node.id], f"Starting Bellman-Ford algorithm from node {start_node.label}")

    for i in range(len(graph.nodes) - 1):
        tb.visit([], f"Starting iteration {i + 1}")

        for edge in graph.edges:
            u, v = edge.source, edge.target
            du = dist.get(u, INF)
            new_dist = du + edge.weight

            tb.explore([u, v], f"Checking edge {label(u)} → {label(v)}", edge=(u, v))

            if du != INF and new_dist < dist.get(v, INF):
                dist[v]   = new_dist
                parent[v] = u
                tb.select([v], f"Updated distance to {label(v)}: {format_number(new_dist)}", edge=(u, v))

    # -- negative-cycle detector --
    for edge in graph.edges:
        u, v = edge.source, edge.target
        du = dist.get(u, INF)
        if du != INF and du + edge.weight < dist.get(v, INF):
            tb.finish([u, v], "Negative cycle detected!", edge=(u, v))
            return tb.build()

    path = reconstruct_path(parent, end_node.id)
    total = format_number(dist[end_node.id])
    for a, b in zip(path, path[1:]):
        tb.finish([a, b], f"Shortest path found! Total distance: {total}", edge=(a, b))

    return tb.build()
