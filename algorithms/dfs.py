"""
dfs.py — Depth-First Search
=============================
Recursive-order DFS driven by an explicit stack of neighbour iterators
(no Python recursion limit issues on long paths).

Unlike BFS, exploring a new neighbour immediately descends into it, so the
events nest:

    visit A
      explore B → visit B
        skip A
      finish B
    finish A

A node is finished only after every neighbour (and its subtree) is done.
"""

from typing import Iterator, List, Optional, Set, Tuple

from graph import GraphSnapshot
from algorithms.step import Trace, TraceBuilder


PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",                   # 0
    "    visited ← {}",                         # 1
    "    visit(start)",                         # 2
    "def visit(node):",                         # 3
    "    visited.add(node)",                    # 4
    "    for neighbour in adj(node):",          # 5
    "        if neighbour not visited:",         # 6
    "            visit(neighbour)",             # 7
    "    node is finished",                     # 8
]


def dfs(graph: GraphSnapshot, start: str, end: Optional[str] = None) -> Trace:
    tb = TraceBuilder()
    start_node = graph.resolve(start)
    if start_node is None:
        return tb.build()

    label = graph.label_of
    visited: Set[str] = set()
    stack: List[Tuple[str, Iterator[str]]] = []

    def enter(node_id: str) -> None:
        visited.add(node_id)
        tb.visit([node_id], f"Visiting node {label(node_id)}")
        stack.append((node_id, iter(graph.neighbours(node_id))))

    tb.select([start_node.id], f"Starting DFS from node {start_node.label}")
    enter(start_node.id)

    while stack:
        node, pending = stack[-1]
        nbr = next(pending, None)

        if nbr is None:
            stack.pop()
            tb.finish([node], f"Finished exploring node {label(node)}")
        elif nbr not in visited:
            tb.explore([nbr], f"Exploring edge to node {label(nbr)}", edge=(node, nbr))
            enter(nbr)
        else:
            tb.skip([nbr], f"Node {label(nbr)} already visited", edge=(node, nbr))

    return tb.build()
