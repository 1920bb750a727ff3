"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Snapshot at every event:
  1. About to compare neighbours j, j+1   →  COMPARE (j, j+1)
  2. They were out of order and swapped   →  SWAP    (j, j+1)
"""

from typing import Generator

from model import ArrayModel
from sorts.step import Snapshot, SnapshotBuilder, StepKind


def bubble_sort(model: ArrayModel, sb: SnapshotBuilder) -> Generator[Snapshot, None, None]:
    n = len(model)
    for i in range(n - 1):
        for j in range(n - 1 - i):
            yield sb.emit(StepKind.COMPARE, j, j + 1)
            if model.get(j) > model.get(j + 1):
                model.swap(j, j + 1)
                yield sb.emit(StepKind.SWAP, j, j + 1)
