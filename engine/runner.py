"""
runner.py — Step-Emitting Sort Engine
======================================
The SortEngine drives one sort generator over the ArrayModel and hands
every Snapshot to a render callback, synchronously.  The callback blocks
the sort until its frame has been drawn and paced, so computing the
next step never overlaps rendering the current one.

State machine:
    IDLE      →  run()              →  RUNNING
    RUNNING   →  (generator done)   →  FINISHED
    RUNNING   →  cancel()           →  CANCELLED

Thread safety:
  This class is NOT thread-safe, and the render callback must not start
  another run while one is in flight (run() refuses re-entry).
"""

import logging
from enum import Enum
from typing import Callable, Optional, Union

from model import ArrayModel
from sorts import AlgoInfo, get_algorithm
from sorts.step import Snapshot, SnapshotBuilder

logger = logging.getLogger(__name__)

RenderFn = Callable[[Snapshot], None]


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    FINISHED  = "finished"
    CANCELLED = "cancelled"


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------
class CancelToken:
    """Checked by the engine at every step boundary."""

    def __init__(self):
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


# ---------------------------------------------------------------------------
# SortEngine
# ---------------------------------------------------------------------------
class SortEngine:
    """
    Attributes:
        model      : The array every run sorts in place.
        state      : Current RunState.
        steps      : Stepped snapshots emitted by the last run (completion frame excluded).
        last_algo  : AlgoInfo of the last run.
    """

    def __init__(self, model: ArrayModel):
        self.model:     ArrayModel          = model
        self.state:     RunState            = RunState.IDLE
        self.steps:     int                 = 0
        self.last_algo: Optional[AlgoInfo]  = None
        self._token:    Optional[CancelToken] = None

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(
        self,
        algorithm: Union[str, AlgoInfo],
        render_fn: RenderFn,
        token: Optional[CancelToken] = None,
    ) -> int:
        """
        Sort the model in place, rendering every step, then render the
        completion frame.  Returns the number of stepped snapshots.
        """
        info = algorithm if isinstance(algorithm, AlgoInfo) else get_algorithm(algorithm)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        if self.state == RunState.RUNNING:
            raise RuntimeError("A sort is already running.")

        self.last_algo = info
        self.steps     = 0
        self._token    = token or CancelToken()
        self.state     = RunState.RUNNING
        logger.info("Running %s on %d values", info.label, len(self.model))

        sb  = SnapshotBuilder(self.model, info.label)
        gen = info.fn(self.model, sb)
        try:
            for snap in gen:
                if self._token.cancelled:
                    break
                render_fn(snap)
                self.steps += 1
                if self._token.cancelled:
                    break

            if self._token.cancelled:
                self.state = RunState.CANCELLED
            else:
                render_fn(sb.completed())
                self.state = RunState.FINISHED
        except BaseException:
            # Ctrl+C inside a frame's delay lands here
            self.state = RunState.CANCELLED
            raise
        finally:
            # lets a suspended sort restore anything it holds outside the array
            gen.close()
            self._token = None

        logger.info("%s %s after %d steps (sorted: %s)",
                    info.label, self.state.value, self.steps, self.model.is_sorted())
        return self.steps

    def cancel(self) -> None:
        """Stop the current run at the next step boundary."""
        if self._token is not None:
            self._token.cancel()
