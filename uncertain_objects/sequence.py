"""
Indexable numeric sequences.

Uncertainification accepts any vector-like input that supports len() and
integer indexing yielding numbers: lists, tuples, numpy arrays or custom
feature-vector classes. This module names that contract and provides the
two accessors the core relies on.
"""

import numpy as np
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NumericSequence(Protocol):
    """Anything with a length and numeric values at integer positions."""

    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> Any:
        ...


def sequence_size(seq: NumericSequence) -> int:
    if isinstance(seq, np.ndarray):
        if seq.ndim != 1:
            raise ValueError(f"Expected a 1D vector, got shape {seq.shape}")
        return int(seq.shape[0])
    return len(seq)


def value_at(seq: NumericSequence, index: int) -> float:
    return float(seq[index])


def to_vector(seq: NumericSequence) -> np.ndarray:
    """Copy a numeric sequence into a new float64 numpy vector."""
    n = sequence_size(seq)
    return np.array([value_at(seq, i) for i in range(n)], dtype=float)
