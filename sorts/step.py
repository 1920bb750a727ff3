"""
step.py — Sort Step Snapshot
=============================
Every sort is a generator that yields Snapshot objects.
A Snapshot is a frozen-in-time picture of everything the renderer
needs to draw one frame:

    • The array contents at this instant
    • Which algorithm is running and the step number
    • Up to two highlighted indices (primary / secondary)
    • What kind of event produced the frame (compare, swap, shift, …)

Design decisions:
  - Snapshot is a plain frozen dataclass.  The sort generator is the
    only writer of the array; the engine / renderer are pure readers.
  - `values` is a tuple copy, so a recorder can keep snapshots around
    after the array has moved on.
  - `None` is the "no highlight" sentinel for both roles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from model import ArrayModel


class StepKind(Enum):
    COMPARE = "compare"    # two elements are about to be compared
    SWAP    = "swap"       # two elements were just exchanged
    SELECT  = "select"     # selection sort: new outer position, min reset
    PICK    = "pick"       # insertion sort: key lifted out
    SHIFT   = "shift"      # insertion sort: element moved one slot right
    WRITE   = "write"      # insertion sort: key dropped into place
    PIVOT   = "pivot"      # quick sort: pivot moved to its final slot
    DONE    = "done"       # completion frame
    DISPLAY = "display"    # plain display outside a run


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        values      : Array contents at this instant.
        algorithm   : Label shown in the header ("" = no header).
        step_number : 0-based index of this step in the run (None = not a step).
        primary     : Index drawn in the first highlight colour.
        secondary   : Index drawn in the second highlight colour.
        max_value   : Height of the tallest bar; the renderer draws this many rows.
        kind        : The event that produced this frame.
        is_final    : True on the completion frame.
    """

    values:      Tuple[int, ...]
    algorithm:   str            = ""
    step_number: Optional[int]  = None
    primary:     Optional[int]  = None
    secondary:   Optional[int]  = None
    max_value:   int            = 1
    kind:        StepKind       = StepKind.DISPLAY
    is_final:    bool           = False

    @classmethod
    def of(cls, model: ArrayModel, label: str = "") -> "Snapshot":
        """A highlight-free frame of the model, outside any run."""
        return cls(values=tuple(model.values), algorithm=label, max_value=model.max_value)


# ---------------------------------------------------------------------------
# Builder shared by a whole run, so the step counter is too
# ---------------------------------------------------------------------------
class SnapshotBuilder:
    """
    Owns the step counter of one run.

    Usage inside a sort generator:
        yield sb.emit(StepKind.COMPARE, j, j + 1)

    Recursive sorts pass the same builder down every call, so step
    numbers keep increasing across the whole recursion tree.
    """

    def __init__(self, model: ArrayModel, label: str):
        self.model   = model
        self.label   = label
        self.step_no = 0

    def emit(
        self,
        kind: StepKind,
        primary: Optional[int] = None,
        secondary: Optional[int] = None,
    ) -> Snapshot:
        snap = Snapshot(
            values=tuple(self.model.values),
            algorithm=self.label,
            step_number=self.step_no,
            primary=primary,
            secondary=secondary,
            max_value=self.model.max_value,
            kind=kind,
        )
        self.step_no += 1
        return snap

    def completed(self) -> Snapshot:
        """The closing frame: no step number, no highlights."""
        return Snapshot(
            values=tuple(self.model.values),
            algorithm=f"{self.label} - COMPLETED!",
            max_value=self.model.max_value,
            kind=StepKind.DONE,
            is_final=True,
        )
