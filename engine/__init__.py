"""
engine/
-------
Run & recording layer.

    from engine import SortEngine, Recorder
"""

from engine.runner   import SortEngine, RunState, CancelToken
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "SortEngine",
    "RunState",
    "CancelToken",
    "Recorder",
    "RunMetrics",
]
