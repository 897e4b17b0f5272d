"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, compare
"""

from engine.stepper  import Stepper, SPEED_PRESETS
from engine.recorder import Recorder, TraceMetrics, ComparisonResult, compare

__all__ = [
    "Stepper",
    "SPEED_PRESETS",
    "Recorder",
    "TraceMetrics",
    "ComparisonResult",
    "compare",
]
