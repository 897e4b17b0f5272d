"""
edge.py — Graph Edge
====================
Connects two nodes.  Carries a weight and an optional presentation colour.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Edges have no id of their own: the editor and the trace both identify
    an edge by its (source, target) pair, matched in either direction.
  - Weight defaults to 1 for unweighted graphs and may be negative
    (Bellman-Ford demos).
"""

from typing import Optional, Dict, Any


class Edge:
    """
    Attributes:
        source : ID of the first endpoint (the tail for Bellman-Ford).
        target : ID of the second endpoint (the head for Bellman-Ford).
        weight : Numeric cost (default 1).
        color  : Optional stroke colour set by the presentation layer.
    """

    __slots__ = ("source", "target", "weight", "color")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1,
        color: Optional[str] = None,
    ):
        self.source: str           = source
        self.target: str           = target
        self.weight: float         = weight
        self.color:  Optional[str] = color

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Wipe visual state between algorithm runs."""
        self.color = None

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b, in either direction."""
        return (
            (self.source == node_a and self.target == node_b)
            or (self.source == node_b and self.target == node_a)
        )

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other.  None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }
        if self.color is not None:
            data["color"] = self.color
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1),
            color=data.get("color"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.source == other.source
            and self.target == other.target
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash((self.source, self.target, self.weight))
