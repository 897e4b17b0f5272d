"""
recorder.py — Run Recorder & Analytics
========================================
Runs one algorithm over one snapshot, keeps the trace, and derives the
numbers the analytics panel shows.

Usage:
    rec = Recorder()
    rec.run("dijkstra", snapshot, start="A", end="F")
    metrics = rec.metrics            # the analytics card
    rec.export()                     # JSON-ready snapshot for save / replay

Comparison Mode:
    Run two Recorders on the SAME snapshot, then compare(rec1, rec2).
    Kruskal vs Prim on a connected graph must agree on total weight.
"""

import logging
import time
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any, Tuple

from graph import GraphSnapshot
from algorithms import get_algorithm, AlgoInfo, EventKind, Trace

logger = logging.getLogger(__name__)

NEGATIVE_CYCLE_MESSAGE = "Negative cycle detected!"


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class TraceMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    start:           Optional[str] = None
    end:             Optional[str] = None
    total_steps:     int   = 0
    counts:          Dict[str, int] = field(default_factory=dict)   # per event kind
    nodes_visited:   int   = 0          # distinct nodes named by visit events
    accepted_edges:  int   = 0          # MST edges / shortest-path edges
    path:            List[str] = field(default_factory=list)
    total_weight:    float = 0          # weight of the accepted / path edges
    negative_cycle:  bool  = False
    empty:           bool  = True       # nothing to replay
    wall_time_ms:    float = 0.0


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  TraceMetrics = field(default_factory=TraceMetrics)
    right: TraceMetrics = field(default_factory=TraceMetrics)
    winner_steps:  str  = ""      # which run needed fewer events
    same_weight:   bool = False   # accepted / path weights agree


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        trace   : The full trace of the last run.
        metrics : Computed TraceMetrics (available after run()).
    """

    def __init__(self):
        self.trace:   Trace                  = ()
        self.metrics: Optional[TraceMetrics] = None

        self._algo_info: Optional[AlgoInfo]      = None
        self._graph:     Optional[GraphSnapshot] = None
        self._start:     Optional[str]           = None
        self._end:       Optional[str]           = None

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(
        self,
        algo_key: str,
        graph: GraphSnapshot,
        start: Optional[str],
        end: Optional[str] = None,
    ) -> TraceMetrics:
        """Compute the trace and its metrics.  Unknown key → ValueError."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._graph     = graph
        self._start     = start
        self._end       = end

        t0 = time.monotonic()
        self.trace = info.fn(graph, start, end)
        wall_ms = (time.monotonic() - t0) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        if self.metrics.empty:
            logger.debug(f"{info.label}: empty trace for start={start!r} end={end!r}")
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "start":    self._start,
            "end":      self._end,
            "graph":    self._graph.to_dict() if self._graph else {},
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [e.to_dict() for e in self.trace],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> TraceMetrics:
        info  = self._algo_info
        trace = self.trace

        counts = {kind.value: 0 for kind in EventKind}
        visited: List[str] = []
        for ev in trace:
            counts[ev.kind.value] += 1
            if ev.kind is EventKind.VISIT:
                for nid in ev.nodes:
                    if nid not in visited:
                        visited.append(nid)

        last = trace[-1] if trace else None
        negative_cycle = bool(
            last is not None
            and last.kind is EventKind.FINISH
            and last.message == NEGATIVE_CYCLE_MESSAGE
        )

        accepted = [] if negative_cycle else self._result_edges()
        path     = self._path_from(accepted) if info is not None and info.requires_end else []

        return TraceMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            start=self._start,
            end=self._end,
            total_steps=len(trace),
            counts=counts,
            nodes_visited=len(visited),
            accepted_edges=len(accepted),
            path=path,
            total_weight=self._weight_of(accepted),
            negative_cycle=negative_cycle,
            empty=not trace,
            wall_time_ms=round(wall_ms, 2),
        )

    def _result_edges(self) -> List[Tuple[str, str]]:
        """
        MST runs report their edges on the single summary event; shortest-path
        runs report one path edge per trailing finish event.  BFS / DFS
        finish events carry no edges, so they contribute nothing.
        """
        edges: List[Tuple[str, str]] = []
        for ev in self.trace:
            if ev.kind is EventKind.FINISH:
                edges.extend((e.source, e.target) for e in ev.edges)
        return edges

    @staticmethod
    def _path_from(edges: List[Tuple[str, str]]) -> List[str]:
        if not edges:
            return []
        return [edges[0][0]] + [t for _, t in edges]

    def _weight_of(self, edges: List[Tuple[str, str]]) -> float:
        """
        Sum snapshot weights of the reported edges.  Parallel edges are
        consumed lightest-first, which is the one every algorithm here picks.
        """
        if self._graph is None:
            return 0
        directed = bool(self._algo_info and self._algo_info.directed)
        pool = list(self._graph.edges)
        total: float = 0
        for s, t in edges:
            matches = [
                i for i, e in enumerate(pool)
                if (e.source, e.target) == (s, t)
                or (not directed and (e.source, e.target) == (t, s))
            ]
            if not matches:
                continue
            best = min(matches, key=lambda i: pool[i].weight)
            total += pool[best].weight
            del pool[best]
        return total


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or TraceMetrics()
    r = right.metrics or TraceMetrics()

    if l.total_steps == r.total_steps:
        winner = "tie"
    else:
        winner = l.algo_label if l.total_steps < r.total_steps else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner,
        same_weight=l.total_weight == r.total_weight,
    )
