"""
graph.py — Editable Graph Container
====================================
The mutable graph the editor works on.  The trace engine never reads it
directly: every run is handed `graph.snapshot()`.

Responsibilities:
  1. CRUD on nodes & edges                  (add / update / remove / get)
  2. Derived views                          (adjacency list, adjacency matrix)
  3. Snapshotting                           (→ GraphSnapshot for the engine)
  4. Serialisation round-trip               (to_dict / from_dict)
  5. Reset helpers                          (wipe decorations, keep structure)

Design decisions:
  - Nodes are stored in a dict keyed by id (insertion-ordered), edges in a
    plain list: both orders are significant for algorithm tie-breaks.
  - Edges are undirected from the editor's point of view; update / remove
    match a (source, target) pair in either direction.
"""

import math
from typing import Any, Dict, List, Optional, Tuple

from graph.node import Node
from graph.edge import Edge
from graph.snapshot import GraphSnapshot


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}  (insertion order = declaration order)
        edges : [Edge]           (declaration order)
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.edges: List[Edge]      = []

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        return node

    def create_node(self, x: float, y: float, label: Optional[str] = None, node_id: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(x=x, y=y, label=label, node_id=node_id))

    def update_node(self, node_id: str, **fields: Any) -> Optional[Node]:
        node = self.nodes.get(node_id)
        if node is not None:
            node.update(**fields)
        return node

    def remove_node(self, node_id: str) -> None:
        if node_id not in self.nodes:
            return
        # remove every edge touching this node
        self.edges = [e for e in self.edges if e.source != node_id and e.target != node_id]
        del self.nodes[node_id]

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        self.edges.append(edge)
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1, color: Optional[str] = None) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight, color=color))

    def update_edge(self, source: str, target: str, **fields: Any) -> None:
        for e in self.edges:
            if e.connects(source, target):
                for name, value in fields.items():
                    setattr(e, name, value)

    def remove_edge(self, source: str, target: str) -> None:
        self.edges = [e for e in self.edges if not e.connects(source, target)]

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b, in either direction."""
        for e in self.edges:
            if e.connects(a, b):
                return e
        return None

    # ==================================================================
    # DERIVED VIEWS
    # ==================================================================
    def adjacency_list(self) -> Dict[str, List[Tuple[str, float]]]:
        """{node_id: [(neighbour_id, weight), …]} with both directions of every edge."""
        adj: Dict[str, List[Tuple[str, float]]] = {nid: [] for nid in self.nodes}
        for e in self.edges:
            adj.setdefault(e.source, []).append((e.target, e.weight))
            adj.setdefault(e.target, []).append((e.source, e.weight))
        return adj

    def adjacency_matrix(self) -> Tuple[List[str], List[List[float]]]:
        """
        (ids, matrix) where matrix[i][j] is the weight between ids[i] and ids[j],
        `inf` when there is no edge and 0 on the diagonal.  Symmetric.
        """
        ids = list(self.nodes)
        index = {nid: i for i, nid in enumerate(ids)}
        n = len(ids)
        matrix = [[math.inf] * n for _ in range(n)]
        for i in range(n):
            matrix[i][i] = 0
        for e in self.edges:
            i, j = index.get(e.source), index.get(e.target)
            if i is None or j is None:
                continue
            matrix[i][j] = e.weight
            matrix[j][i] = e.weight
        return ids, matrix

    def snapshot(self) -> GraphSnapshot:
        """Freeze the current structure for one algorithm run."""
        return GraphSnapshot.build(
            ((n.id, n.label) for n in self.nodes.values()),
            ((e.source, e.target, e.weight) for e in self.edges),
        )

    # ==================================================================
    # RESET (keep structure, wipe decorations)
    # ==================================================================
    def reset(self) -> None:
        for node in self.nodes.values():
            node.reset()
        for edge in self.edges:
            edge.reset()

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
