"""
sorts/__init__.py — Algorithm Registry
=======================================
Single source of truth for every sort the visualizer knows about.

    from sorts import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, complexity, description),
        …
    }

Every `fn` has the same shape: fn(model, builder) → generator of
Snapshots.  The engine and the menu both consume AlgoInfo, so adding a
sort is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from sorts.bubble    import bubble_sort
from sorts.selection import selection_sort
from sorts.insertion import insertion_sort
from sorts.quick     import quick_sort
from sorts.step      import Snapshot, SnapshotBuilder, StepKind


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each sort
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:             str          # registry key, e.g. "bubble"
    label:           str          # human label, e.g. "Bubble Sort"
    fn:              Callable     # the generator function
    complexity_time: str = ""     # e.g. "O(n²)"
    description:     str = ""     # one-liner shown before the run


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=bubble_sort,
        complexity_time="O(n²)",
        description="Swaps neighbours until the largest values bubble to the end.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=selection_sort,
        complexity_time="O(n²)",
        description="Finds the minimum of the unsorted tail and moves it to the front.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=insertion_sort,
        complexity_time="O(n²)",
        description="Lifts each value out and shifts larger ones right to make room.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=quick_sort,
        complexity_time="O(n log n)",
        description="Partitions around the last element, then sorts each side.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered sorts in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "Snapshot",
    "SnapshotBuilder",
    "StepKind",
]
