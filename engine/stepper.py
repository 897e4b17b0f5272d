"""
stepper.py — Trace Playback Controller
=======================================
Walks a finished trace forward and backward.  The trace engine never
touches this object; the UI drives it.

State:
    is_running   – a trace is loaded and playback is active
    current_step – index of the displayed event; -1 = before the first event
    steps        – the loaded trace
    speed        – milliseconds between auto-advanced events
    start_node / end_node – the references the run was started with

Transitions:
    start(steps, …)  →  running, current_step = -1
    next_step()      →  current_step + 1, clamped to the last event
    previous_step()  →  current_step - 1, clamped to -1
    stop()           →  back to defaults

Thread safety:
  This class is NOT thread-safe.  The service rebuilds one from the
  session on every request, so each request owns its copy.
"""

import time
from typing import Callable, List, Optional, Sequence

from algorithms.step import TraceEvent
from config import DEFAULT_SPEED_MS, MIN_SPEED_MS


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per event)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1000,    # teaching mode
    "medium": DEFAULT_SPEED_MS,
    "fast":   150,     # demo mode
    "turbo":  50,
}


class Stepper:
    """
    Attributes:
        is_running   : True between start() and stop().
        current_step : Displayed index into `steps` (-1 before the first event).
        steps        : The trace being replayed.
        speed        : Milliseconds between auto-advance ticks.
        start_node   : Start reference of the active run.
        end_node     : End reference of the active run (shortest-path only).
        on_step      : Optional callback(TraceEvent | None) fired whenever the
                       displayed position changes.  The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Optional[TraceEvent]], None]] = None):
        self.on_step: Optional[Callable[[Optional[TraceEvent]], None]] = on_step
        self._last_tick: float = 0.0
        self._defaults()

    def _defaults(self) -> None:
        self.is_running:   bool               = False
        self.current_step: int                = -1
        self.steps:        List[TraceEvent]   = []
        self.speed:        int                = DEFAULT_SPEED_MS
        self.start_node:   Optional[str]      = None
        self.end_node:     Optional[str]      = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(
        self,
        steps: Sequence[TraceEvent],
        speed: Optional[int] = None,
        start_node: Optional[str] = None,
        end_node: Optional[str] = None,
    ) -> None:
        """Load a trace, positioned before its first event."""
        self.is_running   = True
        self.current_step = -1
        self.steps        = list(steps)
        self.speed        = self._clamp(speed if speed is not None else self.speed)
        self.start_node   = start_node
        self.end_node     = end_node
        self._last_tick   = time.monotonic()
        self._notify()

    def stop(self) -> None:
        """Back to defaults — caller must call start() again."""
        self._defaults()
        self._notify()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one event.  Returns False if already at the last event."""
        target = min(self.current_step + 1, len(self.steps) - 1)
        if target == self.current_step:
            return False
        self._goto(target)
        return True

    def previous_step(self) -> bool:
        """Rewind one event.  Returns False if already before the first event."""
        target = max(self.current_step - 1, -1)
        if target == self.current_step:
            return False
        self._goto(target)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary index (-1 … len-1)."""
        if -1 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        self._goto(-1)

    def jump_to_end(self) -> None:
        self._goto(len(self.steps) - 1)

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        If running and at least `speed` ms have elapsed since the last
        advance, advance one event.  Returns True if an event was taken.
        """
        if not self.is_running:
            return False
        now = time.monotonic() if now is None else now
        if (now - self._last_tick) * 1000 >= self.speed:
            self._last_tick = now
            return self.next_step()
        return False

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, speed_ms: int) -> None:
        self.speed = self._clamp(speed_ms)

    def set_speed_preset(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, DEFAULT_SPEED_MS)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_event(self) -> Optional[TraceEvent]:
        if 0 <= self.current_step < len(self.steps):
            return self.steps[self.current_step]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_at_end(self) -> bool:
        return self.current_step >= len(self.steps) - 1

    # ------------------------------------------------------------------
    # Session round-trip
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "is_running":   self.is_running,
            "current_step": self.current_step,
            "steps":        [e.to_dict() for e in self.steps],
            "speed":        self.speed,
            "start_node":   self.start_node,
            "end_node":     self.end_node,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Stepper":
        st = cls()
        st.is_running   = data.get("is_running", False)
        st.steps        = [TraceEvent.from_dict(e) for e in data.get("steps", [])]
        st.current_step = max(-1, min(data.get("current_step", -1), len(st.steps) - 1))
        st.speed        = data.get("speed", DEFAULT_SPEED_MS)
        st.start_node   = data.get("start_node")
        st.end_node     = data.get("end_node")
        return st

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @staticmethod
    def _clamp(speed_ms: int) -> int:
        return max(MIN_SPEED_MS, int(speed_ms))

    def _goto(self, idx: int) -> None:
        self.current_step = idx
        self._notify()

    def _notify(self) -> None:
        if self.on_step:
            self.on_step(self.current_event)
