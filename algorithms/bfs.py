"""
bfs.py — Breadth-First Search
==============================
FIFO traversal from a single start node.  Emits:
  1. select  – the start node
  2. visit   – each node as it is dequeued
  3. explore – each newly discovered neighbour (enqueued)
     skip    – each neighbour already seen
  4. finish  – the dequeued node once all its neighbours are handled

Neighbours come in edge-declaration order; edges are undirected.
Nodes outside the start node's component never appear.
"""

from collections import deque
from typing import List, Optional, Set

from graph import GraphSnapshot
from algorithms.step import Trace, TraceBuilder


PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                   # 0
    "    queue ← [start]",                      # 1
    "    visited ← {start}",                    # 2
    "    while queue is not empty:",             # 3
    "        node ← queue.dequeue()",           # 4
    "        for neighbour in adj(node):",      # 5
    "            if neighbour not visited:",     # 6
    "                visited.add(neighbour)",   # 7
    "                queue.enqueue(neighbour)", # 8
    "        node is finished",                 # 9
]


def bfs(graph: GraphSnapshot, start: str, end: Optional[str] = None) -> Trace:
    """
    Args:
        graph : Read-only snapshot.
        start : Start node id or label.
        end   : Ignored; accepted so every algorithm shares one signature.

    Returns:
        The full trace, or () if `start` cannot be resolved.
    """
    tb = TraceBuilder()
    start_node = graph.resolve(start)
    if start_node is None:
        return tb.build()

    label = graph.label_of
    visited: Set[str] = {start_node.id}
    queue = deque([start_node.id])

    tb.select([start_node.id], f"Starting BFS from node {start_node.label}")

    while queue:
        current = queue.popleft()
        tb.visit([current], f"Visiting node {label(current)}")

        for nbr in graph.neighbours(current):
            if nbr not in visited:
                visited.add(nbr)
                queue.append(nbr)
                tb.explore([nbr], f"Discovered node {label(nbr)} from {label(current)}", edge=(current, nbr))
            else:
                tb.skip([nbr], f"Node {label(nbr)} already visited", edge=(current, nbr))

        tb.finish([current], f"Finished processing node {label(current)}")

    return tb.build()
