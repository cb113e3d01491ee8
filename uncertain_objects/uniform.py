"""
Uniform density over an axis-aligned box.

Samples are drawn uniformly from the intersection of the density's own
box with the bounds passed in at sampling time.
"""

import numpy as np
from typing import Optional, Sequence

from uncertain_objects.bounds import HyperBoundingBox
from uncertain_objects.density import ProbabilityDensityFunction, uniform_in_range
from uncertain_objects.random_source import RandomSource
from uncertain_objects.sequence import sequence_size, value_at


class UniformDistributionFunction(ProbabilityDensityFunction):
    """
    Uniform distribution on [min, max] per dimension.

    Parameters
    ----------
    min_values, max_values : sequence of float
        Corners of the support. Validated like HyperBoundingBox.
    """

    def __init__(self, min_values: Sequence[float], max_values: Sequence[float]):
        self._box = HyperBoundingBox(min_values, max_values)

    @property
    def dimensionality(self) -> int:
        return self._box.dimensionality

    @property
    def support(self) -> HyperBoundingBox:
        return self._box

    def draw_value(
        self, bounds: HyperBoundingBox, rng: RandomSource
    ) -> Optional[np.ndarray]:
        lows = np.maximum(self._box.min_values, bounds.min_values)
        highs = np.minimum(self._box.max_values, bounds.max_values)
        if np.any(lows > highs) or not np.all(np.isfinite(lows) & np.isfinite(highs)):
            return None
        values = np.zeros(self.dimensionality)
        for d in range(self.dimensionality):
            values[d] = uniform_in_range(rng, lows[d], highs[d])
        return values

    def get_mean(self, bounds: HyperBoundingBox) -> np.ndarray:
        return self._box.center()

    def default_bounds(self, dimensions: int) -> HyperBoundingBox:
        if dimensions != self.dimensionality:
            raise ValueError(
                f"Density has dimensionality {self.dimensionality}, "
                f"requested {dimensions}."
            )
        return self._box

    @classmethod
    def uncertainify(
        cls,
        array,
        blur: bool,
        config,
        rng: RandomSource,
        sample_rng: Optional[RandomSource] = None,
    ):
        """
        Build a uniform box around a deterministic vector.

        Per dimension a lower deviation in [lbound_min, lbound_max] and an
        upper deviation in [ubound_min, ubound_max] are drawn. The box is
        [c - lower, c + upper] where c is the original value, or with blur
        a value drawn uniformly from [original - lower, original + upper].
        """
        from uncertain_objects.uncertain_object import UncertainObject

        dim = sequence_size(array)
        mins = np.zeros(dim)
        maxs = np.zeros(dim)
        for i in range(dim):
            original = value_at(array, i)
            lower = uniform_in_range(rng, config.lbound_min, config.lbound_max)
            upper = uniform_in_range(rng, config.ubound_min, config.ubound_max)
            centre = original
            if blur:
                centre = uniform_in_range(rng, original - lower, original + upper)
            mins[i] = centre - lower
            maxs[i] = centre + upper

        density = cls(mins, maxs)
        if sample_rng is None:
            sample_rng = rng.spawn()
        return UncertainObject(density.default_bounds(dim), density, sample_rng)

    def __repr__(self) -> str:
        return f"UniformDistributionFunction({self._box!r})"
