"""
Axis-aligned bounding boxes for uncertain objects.

A bounding box constrains the region in which an uncertain object may
be located. Samples drawn from a probability density are only accepted
if every coordinate lies within [min, max] of the box.
"""

import numpy as np
from typing import Sequence


class HyperBoundingBox:
    """
    Axis-aligned hyper-rectangle given by per-dimension minima and maxima.

    Parameters
    ----------
    min_values : sequence of float
        Lower corner of the box.
    max_values : sequence of float
        Upper corner of the box. Must have the same length as min_values
        and satisfy min_values[i] <= max_values[i].

    Invariant: the box is immutable after construction.
    """

    def __init__(self, min_values: Sequence[float], max_values: Sequence[float]):
        mins = np.array(min_values, dtype=float).ravel()
        maxs = np.array(max_values, dtype=float).ravel()
        if len(mins) != len(maxs):
            raise ValueError(
                f"Bounds dimensionality mismatch: {len(mins)} minima, "
                f"{len(maxs)} maxima."
            )
        if np.any(mins > maxs):
            bad = int(np.argmax(mins > maxs))
            raise ValueError(
                f"Lower bound exceeds upper bound in dimension {bad}: "
                f"{mins[bad]} > {maxs[bad]}"
            )
        mins.setflags(write=False)
        maxs.setflags(write=False)
        self._min = mins
        self._max = maxs

    @classmethod
    def unbounded(cls, dimensions: int) -> "HyperBoundingBox":
        """Box covering the whole space, [-inf, +inf] in every dimension."""
        return cls(np.full(dimensions, -np.inf), np.full(dimensions, np.inf))

    @property
    def dimensionality(self) -> int:
        return len(self._min)

    def get_min(self, dimension: int) -> float:
        return float(self._min[dimension])

    def get_max(self, dimension: int) -> float:
        return float(self._max[dimension])

    @property
    def min_values(self) -> np.ndarray:
        return self._min

    @property
    def max_values(self) -> np.ndarray:
        return self._max

    def contains(self, vector: Sequence[float]) -> bool:
        """True if every coordinate lies within [min, max] (inclusive)."""
        v = np.asarray(vector, dtype=float)
        if v.shape != self._min.shape:
            return False
        return bool(np.all(v >= self._min) and np.all(v <= self._max))

    def center(self) -> np.ndarray:
        """
        Centre of the box.

        Unbounded dimensions have no meaningful centre and yield NaN.
        """
        with np.errstate(invalid="ignore"):
            return (self._min + self._max) * 0.5

    def __eq__(self, other) -> bool:
        if not isinstance(other, HyperBoundingBox):
            return NotImplemented
        return bool(
            np.array_equal(self._min, other._min)
            and np.array_equal(self._max, other._max)
        )

    def __repr__(self) -> str:
        return f"HyperBoundingBox(min={self._min.tolist()}, max={self._max.tolist()})"
