"""
Seeded random source owned by a single sampling context.

Every uncertain object and every uncertainification factory holds its own
RandomSource. Drawing numbers advances the source's internal state, so a
source must never be shared between concurrently running sampling calls.
"""

import numpy as np
from typing import Optional


class RandomSource:
    """
    Thin wrapper around numpy.random.RandomState.

    Parameters
    ----------
    seed : int, optional
        Random seed for reproducibility. If None, the source is seeded
        from the operating system.

    Usage
    -----
    >>> rng = RandomSource(42)
    >>> u = rng.uniform_real()       # in [0, 1)
    >>> k = rng.uniform_int(10)      # in [0, 10)
    >>> z = rng.standard_normal()
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._state = np.random.RandomState(seed)

    def uniform_real(self) -> float:
        """Uniform double in [0, 1)."""
        return float(self._state.random_sample())

    def uniform_int(self, bound: int) -> int:
        """Uniform integer in [0, bound). Requires bound >= 1."""
        if bound < 1:
            raise ValueError(f"bound must be positive, got {bound}")
        return int(self._state.randint(bound))

    def standard_normal(self) -> float:
        """Draw from N(0, 1)."""
        return float(self._state.standard_normal())

    def spawn(self) -> "RandomSource":
        """
        Derive an independent source seeded from this one.

        Consumes one integer draw.
        """
        return RandomSource(self.uniform_int(2**31 - 1))

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
