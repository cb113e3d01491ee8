"""
Weighted mixture of dimension-wise independent Gaussians.

Each component h has a mean vector mu_h and a standard-deviation vector
sigma_h (called "variances" for historical reasons, but used directly as
the Gaussian scale). Component h is chosen with probability
w_h / sum(w), then every coordinate is drawn as

    x_d = mu_h[d] + z * sigma_h[d],    z ~ N(0, 1)

Samples outside the bounding box are rejected and redrawn, up to
DEFAULT_TRY_LIMIT attempts per call.
"""

import numpy as np
from typing import List, Optional, Sequence
import warnings

from uncertain_objects.bounds import HyperBoundingBox
from uncertain_objects.density import (
    DEFAULT_TRY_LIMIT,
    ProbabilityDensityFunction,
    uniform_in_range,
)
from uncertain_objects.random_source import RandomSource
from uncertain_objects.sequence import sequence_size, value_at
from uncertain_objects.weights import (
    DEFAULT_WEIGHT_TOTAL,
    draw_index_from_integer_weights,
    random_integer_weights,
    uniform_integer_weights,
)


class IndependentGaussianDistributionFunction(ProbabilityDensityFunction):
    """
    Gaussian mixture with independent dimensions and integer weights.

    Parameters
    ----------
    means : sequence of vectors, shape (K, D)
        Component means.
    variances : sequence of vectors, shape (K, D)
        Component standard deviations (non-negative).
    weights : sequence of int, shape (K,), optional
        Component weights. If None, DEFAULT_WEIGHT_TOTAL is split evenly
        by integer division and the stored total is the truncated sum.

    Raises
    ------
    ValueError
        If no components are given, the lists differ in length, or any
        component does not match the mixture dimensionality.
    """

    def __init__(
        self,
        means: Sequence[Sequence[float]],
        variances: Sequence[Sequence[float]],
        weights: Optional[Sequence[int]] = None,
    ):
        if len(means) == 0:
            raise ValueError("A mixture needs at least one component.")
        if len(means) != len(variances) or (
            weights is not None and len(variances) != len(weights)
        ):
            raise ValueError(
                "Size of 'means' and 'variances' has to be the same, "
                "as does the length of 'weights'."
            )

        dim = len(means[0])
        for i in range(len(means)):
            if len(means[i]) != dim or len(variances[i]) != dim:
                raise ValueError(
                    f"Component {i}: mean and variance must both have "
                    f"dimensionality {dim}, got {len(means[i])} and "
                    f"{len(variances[i])}."
                )

        self._means = np.array([np.asarray(m, dtype=float) for m in means]).reshape(
            len(means), dim
        )
        self._variances = np.array(
            [np.asarray(v, dtype=float) for v in variances]
        ).reshape(len(variances), dim)
        if np.any(self._variances < 0):
            raise ValueError("Standard deviations must be non-negative.")

        if weights is None:
            self._weights = uniform_integer_weights(len(means), DEFAULT_WEIGHT_TOTAL)
        else:
            self._weights = np.array(weights, dtype=np.int64).ravel()
            if np.any(self._weights < 0):
                raise ValueError("Weights must be non-negative.")
        self._weight_total = int(np.sum(self._weights))

        if self._weight_total == 0 and len(self._weights) > 1:
            warnings.warn(
                "Mixture weights sum to zero; sampling will not succeed "
                "and the mean is reported as the zero vector."
            )

        for arr in (self._means, self._variances, self._weights):
            arr.setflags(write=False)

    # -----------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------

    @property
    def dimensionality(self) -> int:
        return self._means.shape[1]

    @property
    def multiplicity(self) -> int:
        return self._means.shape[0]

    @property
    def means(self) -> np.ndarray:
        return self._means

    @property
    def variances(self) -> np.ndarray:
        return self._variances

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def weight_total(self) -> int:
        return self._weight_total

    # -----------------------------------------------------------------
    # Sampling
    # -----------------------------------------------------------------

    def _select_component(self, rng: RandomSource) -> int:
        if len(self._weights) <= 1:
            return 0
        return draw_index_from_integer_weights(rng, self._weights, self._weight_total)

    def draw_value(
        self, bounds: HyperBoundingBox, rng: RandomSource
    ) -> Optional[np.ndarray]:
        """
        Draw one sample from the mixture restricted to `bounds`.

        Parameters
        ----------
        bounds : HyperBoundingBox
            Admissible region.
        rng : RandomSource
            Source of randomness, owned by the caller.

        Returns
        -------
        np.ndarray, shape (D,), or None
            None if DEFAULT_TRY_LIMIT attempts all fell outside the bounds.
        """
        n_dims = bounds.dimensionality
        lows = [bounds.get_min(d) for d in range(n_dims)]
        highs = [bounds.get_max(d) for d in range(n_dims)]
        values = np.zeros(n_dims)

        for _ in range(DEFAULT_TRY_LIMIT):
            index = self._select_component(rng)
            in_bounds = index < len(self._weights)
            if not in_bounds:
                continue
            mean = self._means[index]
            scale = self._variances[index]
            for d in range(n_dims):
                values[d] = mean[d] + rng.standard_normal() * scale[d]
                in_bounds &= lows[d] <= values[d] <= highs[d]
            if in_bounds:
                return values.copy()

        return None

    def get_mean(self, bounds: HyperBoundingBox) -> np.ndarray:
        """
        Weighted average of the component means.

        mu = sum_h w_h * mu_h / sum_h w_h

        Bounds only determine the dimensionality; they are not enforced.
        Returns the zero vector if the weights sum to zero.
        """
        n_dims = bounds.dimensionality
        mean = np.zeros(n_dims)
        if self._weight_total == 0:
            return mean
        for h in range(self.multiplicity):
            mean += self._weights[h] * self._means[h, :n_dims]
        return mean / self._weight_total

    def default_bounds(self, dimensions: int) -> HyperBoundingBox:
        return HyperBoundingBox.unbounded(dimensions)

    # -----------------------------------------------------------------
    # Uncertainification
    # -----------------------------------------------------------------

    @staticmethod
    def _blur_coordinate(
        original: float,
        stddev: float,
        lower: float,
        upper: float,
        rng: RandomSource,
    ) -> float:
        """
        Perturb one coordinate within [original - lower, original + upper].

        If no candidate is accepted, the value is left at 0.0 and then
        clamped to original - lower * stddev or original + upper * stddev
        by a coin flip. The clamp only triggers when the result is
        exactly 0.0 and 0.0 lies outside the scaled window, so a true
        zero inside that window is kept.
        """
        value = 0.0
        for _ in range(DEFAULT_TRY_LIMIT):
            candidate = rng.standard_normal() * stddev + original
            if original - lower <= candidate <= original + upper:
                value = candidate
                break
        low_clamp = original - lower * stddev
        high_clamp = original + upper * stddev
        if value == 0.0 and (value < low_clamp or value > high_clamp):
            value = low_clamp if rng.uniform_int(2) == 1 else high_clamp
        return value

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
        Build a random Gaussian mixture around a deterministic vector.

        Steps:
            1. Multiplicity M uniform in [mult_min, mult_max].
            2. Random integer weights summing to DEFAULT_WEIGHT_TOTAL.
            3. Per component: one lower and one upper deviation window,
               then per dimension a standard deviation in
               [stddev_min, stddev_max] and a mean (blurred or original).
            4. The new object uses the unbounded default box.

        Returns
        -------
        UncertainObject
        """
        from uncertain_objects.uncertain_object import UncertainObject

        dim = sequence_size(array)
        multiplicity = rng.uniform_int(config.mult_max - config.mult_min + 1) + config.mult_min
        weights = random_integer_weights(multiplicity, DEFAULT_WEIGHT_TOTAL, rng)

        means: List[np.ndarray] = []
        variances: List[np.ndarray] = []
        for _ in range(multiplicity):
            imeans = np.zeros(dim)
            ivariances = np.zeros(dim)
            lower = uniform_in_range(rng, config.lbound_min, config.lbound_max)
            upper = uniform_in_range(rng, config.ubound_min, config.ubound_max)
            for i in range(dim):
                ivariances[i] = uniform_in_range(rng, config.stddev_min, config.stddev_max)
                original = value_at(array, i)
                if blur:
                    imeans[i] = cls._blur_coordinate(
                        original, ivariances[i], lower, upper, rng
                    )
                else:
                    imeans[i] = original
            means.append(imeans)
            variances.append(ivariances)

        density = cls(means, variances, weights)
        if sample_rng is None:
            sample_rng = rng.spawn()
        return UncertainObject(density.default_bounds(dim), density, sample_rng)

    def __repr__(self) -> str:
        return (
            f"IndependentGaussianDistributionFunction(multiplicity="
            f"{self.multiplicity}, dimensionality={self.dimensionality}, "
            f"weight_total={self.weight_total})"
        )
