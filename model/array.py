"""
array.py — Array Container & Generator
=======================================
Single source of truth for the array being sorted.  The sort generators
and the renderer both talk to this object.

Responsibilities:
  1. Element access for the sort generators   (get / set / swap)
  2. Wholesale replacement                    (random generation, custom input)
  3. The derived maximum used to scale bar heights
  4. Serialisation for the debug log          (to_dict)

Design decisions:
  - `max_value` is recomputed only when the array is replaced.  Sorting
    permutes values, it never changes the multiset, so the maximum is
    stable for the whole run.
  - `max_value` is clamped to 1 so the renderer's row loop always has
    at least one row to draw.
"""

import logging
import random
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)


class ArrayModel:
    """
    Attributes:
        _values    : The mutable list of ints.
        max_value  : Largest element (≥ 1), recomputed on replacement.
    """

    def __init__(self, values: Optional[Iterable[int]] = None):
        self._values: List[int] = []
        self.max_value: int     = 1
        if values is not None:
            self.set_custom(values)

    # ==================================================================
    # REPLACEMENT
    # ==================================================================
    def generate(self, n: int, rng: Optional[random.Random] = None) -> None:
        """
        Replace the array with `n` values drawn uniformly from [1, n].
        The value range scales with n so the chart is as tall as it is wide.
        """
        rng = rng or random.Random()
        self._values = [rng.randint(1, n) for _ in range(n)]
        self._recompute_max()
        logger.debug("Generated random array: %s", self.to_dict())

    def set_custom(self, values: Iterable[int]) -> None:
        """Replace the array with caller-provided values."""
        self._values = [int(v) for v in values]
        self._recompute_max()
        logger.debug("Custom array set: %s", self.to_dict())

    def _recompute_max(self) -> None:
        # non-positive (or empty) arrays still need one row to draw
        self.max_value = max(max(self._values, default=1), 1)

    # ==================================================================
    # ELEMENT ACCESS — used by the sort generators
    # ==================================================================
    def get(self, i: int) -> int:
        return self._values[i]

    def set(self, i: int, value: int) -> None:
        self._values[i] = value

    def swap(self, i: int, j: int) -> None:
        self._values[i], self._values[j] = self._values[j], self._values[i]

    # ==================================================================
    # QUERIES
    # ==================================================================
    @property
    def values(self) -> List[int]:
        """A copy; mutate through get/set/swap."""
        return list(self._values)

    def is_sorted(self) -> bool:
        return all(a <= b for a, b in zip(self._values, self._values[1:]))

    def non_positive_count(self) -> int:
        return sum(1 for v in self._values if v <= 0)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {"values": list(self._values), "max_value": self.max_value}

    def __repr__(self) -> str:
        return f"ArrayModel(n={len(self._values)}, max={self.max_value})"
