"""
step.py — Trace Event Vocabulary
=================================
Every algorithm returns an ordered tuple of TraceEvent objects.
A TraceEvent is one discrete moment the visualizer replays as a frame:

    • kind    – select / visit / explore / skip / finish
    • nodes   – the node ids the moment concerns (0, 1 or 2; all nodes
                for the MST summary)
    • edges   – the (source, target) pairs it concerns, weight stripped
    • message – plain-English description of what just happened

Design decisions:
  - TraceEvent is a frozen dataclass holding tuples: once emitted it
    cannot change, so a trace can be replayed forward or backward.
  - Algorithms write through a TraceBuilder (append-only scratch pad)
    and hand back `builder.build()`, a tuple.  Nothing is streamed.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Any


class EventKind(Enum):
    SELECT  = "select"    # start node chosen / distance improved / edge or node accepted
    VISIT   = "visit"     # node taken off the frontier (Bellman-Ford: pass boundary)
    EXPLORE = "explore"   # neighbour / edge being examined
    SKIP    = "skip"      # examined and rejected
    FINISH  = "finish"    # node done / path edge / MST summary / negative cycle


@dataclass(frozen=True)
class EdgePair:
    source: str
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {"source": self.source, "target": self.target}


@dataclass(frozen=True)
class TraceEvent:
    kind:    EventKind
    nodes:   Tuple[str, ...]      = ()
    edges:   Tuple[EdgePair, ...] = ()
    message: str                  = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type":    self.kind.value,
            "nodes":   list(self.nodes),
            "edges":   [e.to_dict() for e in self.edges],
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TraceEvent":
        return cls(
            kind=EventKind(data["type"]),
            nodes=tuple(data.get("nodes", ())),
            edges=tuple(EdgePair(e["source"], e["target"]) for e in data.get("edges", ())),
            message=data.get("message", ""),
        )


Trace = Tuple[TraceEvent, ...]


# ---------------------------------------------------------------------------
# Builder so algorithms don't have to spell out every constructor call
# ---------------------------------------------------------------------------
class TraceBuilder:
    """
    Usage inside an algorithm:
        tb = TraceBuilder()
        tb.visit([node], f"Visiting node {label}")
        tb.explore([nbr], f"…", edge=(node, nbr))
        return tb.build()
    """

    def __init__(self):
        self._events: List[TraceEvent] = []

    def emit(
        self,
        kind: EventKind,
        nodes: Iterable[str] = (),
        message: str = "",
        edge: Optional[Tuple[str, str]] = None,
        edges: Iterable[Tuple[str, str]] = (),
    ) -> None:
        pairs = [EdgePair(s, t) for s, t in edges]
        if edge is not None:
            pairs.insert(0, EdgePair(*edge))
        self._events.append(TraceEvent(kind=kind, nodes=tuple(nodes), edges=tuple(pairs), message=message))

    # -- one helper per kind --
    def select(self, nodes: Iterable[str], message: str, **kw) -> None:
        self.emit(EventKind.SELECT, nodes, message, **kw)

    def visit(self, nodes: Iterable[str], message: str, **kw) -> None:
        self.emit(EventKind.VISIT, nodes, message, **kw)

    def explore(self, nodes: Iterable[str], message: str, **kw) -> None:
        self.emit(EventKind.EXPLORE, nodes, message, **kw)

    def skip(self, nodes: Iterable[str], message: str, **kw) -> None:
        self.emit(EventKind.SKIP, nodes, message, **kw)

    def finish(self, nodes: Iterable[str], message: str, **kw) -> None:
        self.emit(EventKind.FINISH, nodes, message, **kw)

    def __len__(self) -> int:
        return len(self._events)

    def build(self) -> Trace:
        return tuple(self._events)


# ---------------------------------------------------------------------------
# Helpers shared by the algorithms
# ---------------------------------------------------------------------------
def format_number(value: float) -> str:
    """Render a weight / distance for a message: 3.0 → '3', inf → 'Infinity'."""
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def reconstruct_path(parent: Dict[str, str], end: str) -> List[str]:
    """Follow parent pointers back from `end`; returns [root, …, end]."""
    path = [end]
    seen = {end}
    cur = end
    while cur in parent:
        cur = parent[cur]
        if cur in seen:
            break
        seen.add(cur)
        path.append(cur)
    path.reverse()
    return path
