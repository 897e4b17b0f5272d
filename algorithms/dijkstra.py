"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-pair shortest path over an undirected, non-negative-weight graph,
using a min-heap (heapq).

Emits:
  1. select  – the start node
  2. visit   – each node popped with the smallest tentative distance
  3. explore – each incident edge to a still-unvisited node, with the
               candidate distance
  4. select  – candidate improved the recorded distance
     skip    – candidate did not
  5. finish  – one per edge on the reconstructed path, once `end` is popped

Tie-break: the heap is keyed on (distance, node declaration index), so among
equal distances the node declared first wins, which is exactly what a
linear "first minimum" scan over the unvisited set would pick.  Stale heap
entries are discarded on pop.

If `end` is unreachable the trace simply stops after the last reachable
node; remaining nodes are never processed once `end` is found.

Correctness note: Dijkstra requires non-negative weights.  Negative weights
are not rejected; the result is whatever the arithmetic produces.
"""

import heapq
import math
from typing import Dict, List, Optional, Set, Tuple

from graph import GraphSnapshot
from algorithms.step import Trace, TraceBuilder, format_number, reconstruct_path


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start, end):",           # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[start] ← 0",                         # 2
    "    unvisited ← V",                           # 3
    "    while some unvisited v has dist[v] < ∞:", # 4
    "        node ← unvisited v with min dist",    # 5
    "        if node == end: return path",         # 6
    "        unvisited.remove(node)",              # 7
    "        for edge (node, nbr, w) in adj(node):",  # 8
    "            if nbr not in unvisited: continue",  # 9
    "            new_dist ← dist[node] + w",       # 10
    "            if new_dist < dist[nbr]:",        # 11
    "                dist[nbr] ← new_dist",        # 12
    "                parent[nbr] ← node",          # 13
]


def dijkstra(graph: GraphSnapshot, start: str, end: Optional[str] = None) -> Trace:
    tb = TraceBuilder()
    start_node = graph.resolve(start)
    end_node   = graph.resolve(end)
    if start_node is None or end_node is None:
        return tb.build()

    INF   = math.inf
    label = graph.label_of
    order: Dict[str, int] = {}
    for i, nid in enumerate(graph.node_ids()):
        order.setdefault(nid, i)

    dist:      Dict[str, float] = {nid: INF for nid in order}
    parent:    Dict[str, str]   = {}
    unvisited: Set[str]         = set(order)
    dist[start_node.id] = 0

    pq: List[Tuple[float, int, str]] = [(0, order[start_node.id], start_node.id)]

    tb.select([start_node.id], f"Starting Dijkstra's algorithm from node {start_node.label}")

    while pq:
        d, _, current = heapq.heappop(pq)
        if current not in unvisited or d > dist[current]:
            continue            # stale entry

        tb.visit([current], f"Visiting node {label(current)} (distance: {format_number(d)})")

        if current == end_node.id:
            path = reconstruct_path(parent, current)
            for a, b in zip(path, path[1:]):
                tb.finish([a, b], f"Shortest path found! Total distance: {format_number(d)}", edge=(a, b))
            break

        unvisited.discard(current)

        for edge in graph.edges_for(current):
            nbr = edge.other_end(current)
            if nbr not in unvisited:
                continue

            new_dist = dist[current] + edge.weight
            tb.explore([nbr], f"Checking distance to {label(nbr)}: {format_number(new_dist)}", edge=(current, nbr))

            if new_dist < dist[nbr]:
                dist[nbr]   = new_dist
                parent[nbr] = current
                heapq.heappush(pq, (new_dist, order[nbr], nbr))
                tb.select([nbr], f"Updated distance to {label(nbr)}: {format_number(new_dist)}", edge=(current, nbr))
            else:
                tb.skip([nbr], f"Keeping current distance to {label(nbr)}: {format_number(dist[nbr])}", edge=(current, nbr))

    return tb.build()
