"""
Integer weights for mixture components.

Mixture components carry non-negative integer weights; a component is
selected with probability weight[i] / weight_total. Two partitioning
modes are provided:

- Uniform: every component gets total // k. The remainder is dropped, so
  the effective total is (total // k) * k.
- Random: each component takes a random share of the remaining budget,
  the last one receives whatever is left. The sum is always exact.
"""

import numpy as np
from typing import Sequence

from uncertain_objects.random_source import RandomSource


DEFAULT_WEIGHT_TOTAL = 10000


def uniform_integer_weights(k: int, total: int = DEFAULT_WEIGHT_TOTAL) -> np.ndarray:
    """
    Split `total` evenly across `k` components using integer division.

    Parameters
    ----------
    k : int
        Number of components (>= 1).
    total : int
        Requested weight total.

    Returns
    -------
    np.ndarray, shape (k,), dtype int64
        All entries equal total // k. Their sum is (total // k) * k,
        which is smaller than `total` whenever k does not divide it.
    """
    if k < 1:
        raise ValueError(f"Need at least one component, got k={k}")
    if total < 0:
        raise ValueError(f"Weight total must be non-negative, got {total}")
    return np.full(k, total // k, dtype=np.int64)


def random_integer_weights(
    k: int, total: int, rng: RandomSource
) -> np.ndarray:
    """
    Draw `k` random non-negative integer weights summing exactly to `total`.

    Component i (for i < k - 1) receives a uniform share in
    [0, remaining]; the last component receives the remainder.

    Parameters
    ----------
    k : int
        Number of components (>= 1).
    total : int
        Exact weight total (>= 0).
    rng : RandomSource
        Source of randomness; consumes k - 1 integer draws.

    Returns
    -------
    np.ndarray, shape (k,), dtype int64
    """
    if k < 1:
        raise ValueError(f"Need at least one component, got k={k}")
    if total < 0:
        raise ValueError(f"Weight total must be non-negative, got {total}")

    weights = np.zeros(k, dtype=np.int64)
    remaining = int(total)
    for i in range(k - 1):
        share = rng.uniform_int(remaining + 1)
        weights[i] = share
        remaining -= share
    weights[k - 1] = remaining
    return weights


def draw_index_from_integer_weights(
    rng: RandomSource, weights: Sequence[int], total: int
) -> int:
    """
    Select a component index with probability weights[i] / total.

    Draws r uniformly in [0, total) and walks the cumulative sum until it
    exceeds r.

    Returns len(weights) (an invalid index) if total is not positive or
    the weights do not reach r; callers discard such draws. No randomness
    is consumed when total <= 0.
    """
    if total <= 0:
        return len(weights)
    r = rng.uniform_int(int(total))
    cumulative = 0
    for i, w in enumerate(weights):
        cumulative += int(w)
        if cumulative > r:
            return i
    return len(weights)
