"""
Probability density contract for continuous uncertain objects.

A density knows how to
- draw a sample that respects a bounding box (or report that it could not),
- compute its expected value,
- propose default bounds for a given dimensionality, and
- build a new uncertain object from a deterministic feature vector.

Variants: IndependentGaussianDistributionFunction (weighted mixture of
axis-independent Gaussians) and UniformDistributionFunction.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from uncertain_objects.bounds import HyperBoundingBox
from uncertain_objects.random_source import RandomSource


# Rejection sampling attempts per draw
DEFAULT_TRY_LIMIT = 1000


def uniform_in_range(rng: RandomSource, low: float, high: float) -> float:
    """Uniform value in [low, high), one uniform_real draw."""
    return rng.uniform_real() * (high - low) + low


class ProbabilityDensityFunction(ABC):
    """Abstract density backing a continuous uncertain object."""

    @property
    @abstractmethod
    def dimensionality(self) -> int:
        ...

    @abstractmethod
    def draw_value(
        self, bounds: HyperBoundingBox, rng: RandomSource
    ) -> Optional[np.ndarray]:
        """
        Draw one sample inside `bounds`.

        Returns None when no admissible sample was found within the
        attempt budget. This is an expected outcome, not an error.
        """

    @abstractmethod
    def get_mean(self, bounds: HyperBoundingBox) -> np.ndarray:
        """Expected value of the density."""

    @abstractmethod
    def default_bounds(self, dimensions: int) -> HyperBoundingBox:
        """Bounds used when an object is built without explicit ones."""

    @classmethod
    @abstractmethod
    def uncertainify(
        cls,
        array,
        blur: bool,
        config,
        rng: RandomSource,
        sample_rng: Optional[RandomSource] = None,
    ):
        """
        Build a new UncertainObject around a deterministic vector.

        Parameters
        ----------
        array : NumericSequence
            The deterministic feature vector. Never modified.
        blur : bool
            Whether to perturb the original coordinates.
        config : UncertainifyConfig
            Validated generation parameters.
        rng : RandomSource
            Source consumed while generating the density.
        sample_rng : RandomSource, optional
            Source handed to the new object for sampling. If None, one is
            spawned from `rng` after the density has been built.
        """
