"""
snapshot.py — Read-only Graph Snapshot
=======================================
The only graph shape the trace engine reads.

A snapshot is taken from the editable `Graph` (or built straight from the
wire format) at invocation time.  It is a frozen dataclass holding tuples,
so an algorithm cannot mutate its input and two runs over the same
snapshot are guaranteed to see the same nodes and edges in the same order.

Node order is the default iteration / tie-break order.  Edge order is the
neighbour-discovery order for the undirected algorithms and the relaxation
order for Bellman-Ford.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class NodeRef:
    id:    str
    label: str


@dataclass(frozen=True)
class EdgeRef:
    source: str
    target: str
    weight: float = 1

    def other_end(self, node_id: str) -> str:
        return self.target if self.source == node_id else self.source


@dataclass(frozen=True)
class GraphSnapshot:
    nodes: Tuple[NodeRef, ...] = ()
    edges: Tuple[EdgeRef, ...] = ()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def build(
        cls,
        nodes: Iterable[Tuple[str, Optional[str]]],
        edges: Iterable[Tuple[str, str, float]],
    ) -> "GraphSnapshot":
        """Build from plain tuples: nodes as (id, label), edges as (source, target, weight)."""
        return cls(
            nodes=tuple(NodeRef(id=nid, label=label or nid) for nid, label in nodes),
            edges=tuple(EdgeRef(source=s, target=t, weight=w) for s, t, w in edges),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "GraphSnapshot":
        """Wire format: {"nodes": [{"id", "label"?}], "edges": [{"source", "target", "weight"?}]}."""
        return cls.build(
            ((nd["id"], nd.get("label")) for nd in data.get("nodes", [])),
            ((ed["source"], ed["target"], ed.get("weight", 1)) for ed in data.get("edges", [])),
        )

    def to_dict(self) -> dict:
        return {
            "nodes": [{"id": n.id, "label": n.label} for n in self.nodes],
            "edges": [{"source": e.source, "target": e.target, "weight": e.weight} for e in self.edges],
        }

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def resolve(self, ref: Optional[str]) -> Optional[NodeRef]:
        """
        Resolve a user-supplied reference to a node.

        An exact identifier match wins; otherwise the first node whose label
        matches.  Returns None when nothing matches.
        """
        if ref is None:
            return None
        by_label: Optional[NodeRef] = None
        for node in self.nodes:
            if node.id == ref:
                return node
            if by_label is None and node.label == ref:
                by_label = node
        return by_label

    def label_of(self, node_id: str) -> str:
        return self._labels.get(node_id, node_id)

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    # ------------------------------------------------------------------
    # Adjacency (undirected view, edge-declaration order)
    # ------------------------------------------------------------------
    def edges_for(self, node_id: str) -> List[EdgeRef]:
        return [e for e in self.edges if e.source == node_id or e.target == node_id]

    def neighbours(self, node_id: str) -> List[str]:
        return [e.other_end(node_id) for e in self.edges_for(node_id)]

    # ------------------------------------------------------------------
    @cached_property
    def _labels(self) -> Dict[str, str]:
        return {n.id: n.label for n in self.nodes}

    def __len__(self) -> int:
        return len(self.nodes)
