from typing import Optional, Dict, Any
import uuid


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Stable identity (id, label), mutable position and presentation decorations.

    Attributes:
        id       : Unique identifier (uuid string by default, or user-supplied).
        label    : Human-readable name shown on the canvas (falls back to id).
        x, y     : Canvas coordinates.  Never read by the algorithms.
        color    : Optional fill colour set by the presentation layer.
        visited  : Optional visited flag painted during playback.
        distance : Optional distance badge painted during playback.
        parent   : Optional predecessor id painted during playback.

    The decoration fields belong to the editor / renderer.  The trace engine
    only ever sees a `GraphSnapshot`, so nothing here can leak into a trace.
    """

    __slots__ = ("id", "label", "x", "y", "color", "visited", "distance", "parent")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
    ):
        self.id: str                  = node_id or str(uuid.uuid4())[:8]
        self.label: str               = label or self.id
        self.x: float                 = x
        self.y: float                 = y
        self.color: Optional[str]     = None
        self.visited: Optional[bool]  = None
        self.distance: Optional[float] = None
        self.parent: Optional[str]    = None

    # ------------------------------------------------------------------
    # Decorations
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Wipe presentation decorations back to defaults — called between runs."""
        self.color    = None
        self.visited  = None
        self.distance = None
        self.parent   = None

    def update(self, **fields: Any) -> None:
        """Apply a partial update.  Unknown field names raise AttributeError."""
        for name, value in fields.items():
            if name == "id":
                continue          # identity is stable
            setattr(self, name, value)

    # ------------------------------------------------------------------
    # Serialisation  (for save / export / import)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id":    self.id,
            "label": self.label,
            "x":     self.x,
            "y":     self.y,
        }
        for name in ("color", "visited", "distance", "parent"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        node = cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=data.get("label"),
            node_id=data["id"],
        )
        node.color    = data.get("color")
        node.visited  = data.get("visited")
        node.distance = data.get("distance")
        node.parent   = data.get("parent")
        return node

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
