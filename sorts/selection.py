"""
selection.py — Selection Sort
==============================
Generator-based selection sort.  Yields a Snapshot at every event:
  1. New outer position i, minimum reset to i   →  SELECT  (i, min_idx)
  2. About to compare j against the minimum     →  COMPARE (j, min_idx)
  3. Minimum moved into position i              →  SWAP    (i, min_idx)

The COMPARE frame is taken before the comparison, so it shows the
minimum as it stood when j was reached, not after j may replace it.
"""

from typing import Generator

from model import ArrayModel
from sorts.step import Snapshot, SnapshotBuilder, StepKind


def selection_sort(model: ArrayModel, sb: SnapshotBuilder) -> Generator[Snapshot, None, None]:
    n = len(model)
    for i in range(n - 1):
        min_idx = i
        yield sb.emit(StepKind.SELECT, i, min_idx)

        for j in range(i + 1, n):
            yield sb.emit(StepKind.COMPARE, j, min_idx)
            if model.get(j) < model.get(min_idx):
                min_idx = j

        if min_idx != i:
            model.swap(i, min_idx)
            yield sb.emit(StepKind.SWAP, i, min_idx)
