"""
insertion.py — Insertion Sort
==============================
Generator-based insertion sort.  Yields a Snapshot at every event:
  1. Key lifted out of position i                  →  PICK  (i, —)
  2. Larger element shifted one slot to the right  →  SHIFT (j, j+1)
  3. Key written into the gap                      →  WRITE (j+1, —)

Between frames the key lives only in this generator and slot j+1 is the
gap.  If the generator is closed mid-shift the key is still written
back, so an interrupted run leaves a permutation of the input.
"""

from typing import Generator

from model import ArrayModel
from sorts.step import Snapshot, SnapshotBuilder, StepKind


def insertion_sort(model: ArrayModel, sb: SnapshotBuilder) -> Generator[Snapshot, None, None]:
    for i in range(1, len(model)):
        key = model.get(i)
        j = i - 1
        try:
            yield sb.emit(StepKind.PICK, i)

            while j >= 0 and model.get(j) > key:
                model.set(j + 1, model.get(j))
                j -= 1
                yield sb.emit(StepKind.SHIFT, j + 1, j + 2)
        finally:
            model.set(j + 1, key)

        yield sb.emit(StepKind.WRITE, j + 1)
