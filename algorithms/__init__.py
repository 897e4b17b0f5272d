"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm, run_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, tags, requires_end, …),
        …
    }

Every `fn` shares one contract:

    fn(graph: GraphSnapshot, start: str, end: Optional[str]) -> Trace

and returns () when a required node reference does not resolve.
Adding an algorithm is: write the function, add one entry here.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

from graph import GraphSnapshot
from algorithms.step         import EventKind, EdgePair, TraceEvent, TraceBuilder, Trace
from algorithms.bfs          import bfs          as _bfs,          PSEUDOCODE as _bfs_pc
from algorithms.dfs          import dfs          as _dfs,          PSEUDOCODE as _dfs_pc
from algorithms.dijkstra     import dijkstra     as _dijkstra,     PSEUDOCODE as _dij_pc
from algorithms.bellman_ford import bellman_ford as _bf,           PSEUDOCODE as _bf_pc
from algorithms.kruskal      import kruskal      as _kruskal,      PSEUDOCODE as _kr_pc
from algorithms.prim         import prim         as _prim,         PSEUDOCODE as _prim_pc

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable[..., Trace]   # the trace function
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)
    requires_end:      bool     = False       # Dijkstra / Bellman-Ford need an end node
    supports_negative: bool     = False       # can handle negative edges?
    directed:          bool     = False       # reads edges as source → target only
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""

    def to_dict(self) -> dict:
        return {
            "key":               self.key,
            "label":             self.label,
            "pseudocode":        list(self.pseudocode),
            "tags":              list(self.tags),
            "requires_end":      self.requires_end,
            "supports_negative": self.supports_negative,
            "directed":          self.directed,
            "complexity_time":   self.complexity_time,
            "complexity_space":  self.complexity_space,
            "description":       self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer from the start node.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        requires_end=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest node. Optimal for non-negative weights.",
    ),

    "bellman_ford": AlgoInfo(
        key="bellman_ford", label="Bellman–Ford", fn=_bf, pseudocode=_bf_pc,
        tags=["weighted", "shortest-path", "negative-edges"],
        requires_end=True, supports_negative=True, directed=True,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Relaxes every directed edge |V|-1 times. Detects negative cycles.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", fn=_kruskal, pseudocode=_kr_pc,
        tags=["weighted", "mst"],
        supports_negative=True,
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Accepts the lightest edges that do not close a cycle.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", fn=_prim, pseudocode=_prim_pc,
        tags=["weighted", "mst"],
        supports_negative=True,
        complexity_time="O(E log E)", complexity_space="O(E)",
        description="Grows a tree from the start node one lightest edge at a time.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def run_algorithm(
    key: str,
    graph: GraphSnapshot,
    start: Optional[str],
    end: Optional[str] = None,
) -> Trace:
    """
    Compute the full trace for one run.

    Raises ValueError for an unknown key.  Unresolvable node references are
    an input condition, not an error: they produce an empty trace.
    """
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")

    trace = info.fn(graph, start, end)
    if not trace:
        logger.debug(f"{info.label}: start={start!r} end={end!r} did not resolve, empty trace")
    else:
        logger.debug(f"{info.label}: {len(trace)} events from start={start!r}")
    return trace


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "run_algorithm",
    "EventKind",
    "EdgePair",
    "TraceEvent",
    "TraceBuilder",
    "Trace",
]
