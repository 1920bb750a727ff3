"""
quick.py — Quick Sort
======================
Generator-based quick sort, Lomuto partition around the last element.
Yields a Snapshot at every event:
  1. About to compare j against the pivot   →  COMPARE (j, high)
  2. j was smaller, moved into the low side →  SWAP    (i, j)
  3. Pivot placed at its final index        →  PIVOT   (i+1, high)

The same SnapshotBuilder is handed to every recursive call, so step
numbers run on across the whole recursion tree.
"""

from typing import Generator

from model import ArrayModel
from sorts.step import Snapshot, SnapshotBuilder, StepKind


def quick_sort(model: ArrayModel, sb: SnapshotBuilder) -> Generator[Snapshot, None, None]:
    yield from _quick_sort(model, 0, len(model) - 1, sb)


def _quick_sort(model: ArrayModel, low: int, high: int, sb: SnapshotBuilder):
    if low < high:
        pivot_idx = yield from _partition(model, low, high, sb)
        yield from _quick_sort(model, low, pivot_idx - 1, sb)
        yield from _quick_sort(model, pivot_idx + 1, high, sb)


def _partition(model: ArrayModel, low: int, high: int, sb: SnapshotBuilder):
    """Yields the partition's frames, returns the pivot's final index."""
    pivot = model.get(high)
    i = low - 1

    for j in range(low, high):
        yield sb.emit(StepKind.COMPARE, j, high)
        if model.get(j) < pivot:
            i += 1
            model.swap(i, j)
            yield sb.emit(StepKind.SWAP, i, j)

    model.swap(i + 1, high)
    yield sb.emit(StepKind.PIVOT, i + 1, high)
    return i + 1
