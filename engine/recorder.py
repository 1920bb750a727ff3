"""
recorder.py — Run Recorder & Analytics
========================================
A render callback that keeps every Snapshot of a run, then computes the
numbers shown in the post-run summary.

Usage:
    rec = Recorder(forward=renderer)     # or Recorder() to capture only
    engine.run("quick", rec)
    metrics = rec.metrics()

With no `forward`, nothing is drawn: this is how tests capture a trace.
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from sorts.step import Snapshot, StepKind


# ---------------------------------------------------------------------------
# Metrics dataclass — what the summary line renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    size:         int   = 0
    total_steps:  int   = 0          # stepped snapshots, completion frame excluded
    comparisons:  int   = 0
    swaps:        int   = 0          # SWAP + PIVOT frames
    writes:       int   = 0          # SHIFT + WRITE frames
    wall_time_ms: float = 0.0        # first frame to last frame, pacing included
    completed:    bool  = False
    sorted_ok:    bool  = False


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        snapshots : Every Snapshot received, completion frame included.
        forward   : Optional downstream render callback.
        algo_key  : Registry key of the run, copied into RunMetrics.
    """

    def __init__(self, forward: Optional[Callable[[Snapshot], None]] = None, algo_key: str = ""):
        self.snapshots: List[Snapshot] = []
        self.forward = forward
        self.algo_key = algo_key
        self._start_time: Optional[float] = None
        self._end_time:   float           = 0.0

    def __call__(self, snap: Snapshot) -> None:
        if self._start_time is None:
            self._start_time = time.monotonic()
        self.snapshots.append(snap)
        if self.forward is not None:
            self.forward(snap)
        self._end_time = time.monotonic()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def steps(self) -> List[Snapshot]:
        """Stepped snapshots only."""
        return [s for s in self.snapshots if not s.is_final]

    @property
    def final(self) -> Optional[Snapshot]:
        last = self.snapshots[-1] if self.snapshots else None
        return last if last is not None and last.is_final else None

    def count(self, *kinds: StepKind) -> int:
        return sum(1 for s in self.snapshots if s.kind in kinds)

    def metrics(self) -> RunMetrics:
        steps = self.steps
        final = self.final
        last  = self.snapshots[-1] if self.snapshots else None
        wall_ms = (self._end_time - self._start_time) * 1000 if self._start_time is not None else 0.0

        label = steps[0].algorithm if steps else (final.algorithm if final else "")
        values = list(last.values) if last else []

        return RunMetrics(
            algo_key=self.algo_key,
            algo_label=label,
            size=len(values),
            total_steps=len(steps),
            comparisons=self.count(StepKind.COMPARE),
            swaps=self.count(StepKind.SWAP, StepKind.PIVOT),
            writes=self.count(StepKind.SHIFT, StepKind.WRITE),
            wall_time_ms=round(wall_ms, 2),
            completed=final is not None,
            sorted_ok=all(a <= b for a, b in zip(values, values[1:])),
        )

    def clear(self) -> None:
        self.snapshots = []
        self._start_time = None
        self._end_time = 0.0
