"""
Continuous uncertain objects.

An uncertain object is a point whose true location is unknown. It is
described by a bounding box (where it can be) and a probability density
(where it is likely to be). Objects are immutable; each one owns the
random source used to draw samples from it.

Objects are built either directly from a box and a density, or from a
deterministic feature vector through uncertainification:

>>> factory = UncertainObjectFactory(config=UncertainifyConfig(seed=0))
>>> obj = factory.uncertainify([1.0, 2.0, 3.0])
>>> sample = obj.draw_sample()   # np.ndarray of shape (3,) or None
"""

import numpy as np
from typing import Optional, Sequence, Tuple, Type
import warnings

from uncertain_objects.bounds import HyperBoundingBox
from uncertain_objects.config import UncertainifyConfig
from uncertain_objects.density import ProbabilityDensityFunction
from uncertain_objects.random_source import RandomSource


class UncertainObject:
    """
    Bounding box plus probability density, with an owned random source.

    Parameters
    ----------
    bounds : HyperBoundingBox
        Region that every sample must lie in.
    density : ProbabilityDensityFunction
        Distribution of the object's location. Must have the same
        dimensionality as `bounds`.
    rng : RandomSource, optional
        Random source owned by this object. A new unseeded source is
        created if None.
    """

    def __init__(
        self,
        bounds: HyperBoundingBox,
        density: ProbabilityDensityFunction,
        rng: Optional[RandomSource] = None,
    ):
        if bounds.dimensionality != density.dimensionality:
            raise ValueError(
                f"Bounds dimensionality {bounds.dimensionality} does not match "
                f"density dimensionality {density.dimensionality}."
            )
        self._bounds = bounds
        self._density = density
        self._rng = rng if rng is not None else RandomSource()
        self._dimensions = bounds.dimensionality

    @classmethod
    def from_density(
        cls,
        density: ProbabilityDensityFunction,
        dimensions: int,
        rng: Optional[RandomSource] = None,
    ) -> "UncertainObject":
        """Object bounded by the density's default bounds."""
        return cls(density.default_bounds(dimensions), density, rng)

    @classmethod
    def from_min_max(
        cls,
        min_values: Sequence[float],
        max_values: Sequence[float],
        density: ProbabilityDensityFunction,
        rng: Optional[RandomSource] = None,
    ) -> "UncertainObject":
        return cls(HyperBoundingBox(min_values, max_values), density, rng)

    @property
    def bounds(self) -> HyperBoundingBox:
        return self._bounds

    @property
    def density(self) -> ProbabilityDensityFunction:
        return self._density

    @property
    def dimensionality(self) -> int:
        return self._dimensions

    def draw_sample(self) -> Optional[np.ndarray]:
        """
        Draw one sample inside the object's bounds.

        Returns None if the density could not produce an admissible sample
        within its attempt budget. Callers must check for None.
        """
        return self._density.draw_value(self._bounds, self._rng)

    def draw_samples(self, n_samples: int) -> Tuple[np.ndarray, int]:
        """
        Draw `n_samples` samples.

        Returns
        -------
        samples : np.ndarray, shape (M, D)
            Successful samples, M <= n_samples.
        n_failed : int
            Number of draws that returned no sample.
        """
        samples = []
        n_failed = 0
        for _ in range(n_samples):
            value = self.draw_sample()
            if value is None:
                n_failed += 1
            else:
                samples.append(value)

        if n_samples > 0 and n_failed == n_samples:
            warnings.warn(
                f"All {n_samples} draws failed; the bounds may be too tight "
                f"for the density."
            )

        if samples:
            return np.vstack(samples), n_failed
        return np.zeros((0, self._dimensions)), n_failed

    def get_mean(self) -> np.ndarray:
        """Expected value of the object's density."""
        return self._density.get_mean(self._bounds)

    def get_value(self, dimension: int) -> float:
        # Centre of the box; NaN for unbounded dimensions.
        return float(self._bounds.center()[dimension])

    def __repr__(self) -> str:
        return f"UncertainObject(bounds={self._bounds!r}, density={self._density!r})"


class UncertainObjectFactory:
    """
    Turns deterministic feature vectors into uncertain objects.

    Parameters
    ----------
    density_type : type, optional
        ProbabilityDensityFunction subclass used for generation.
        Default: IndependentGaussianDistributionFunction.
    config : UncertainifyConfig, optional
        Generation parameters; validated on construction.
    blur : bool
        Whether to perturb the original coordinates.

    The factory owns one RandomSource seeded from config.seed, consumed by
    successive uncertainify calls.
    """

    def __init__(
        self,
        density_type: Optional[Type[ProbabilityDensityFunction]] = None,
        config: Optional[UncertainifyConfig] = None,
        blur: bool = True,
    ):
        if density_type is None:
            from uncertain_objects.gaussian import IndependentGaussianDistributionFunction
            density_type = IndependentGaussianDistributionFunction
        self.density_type = density_type
        self.config = config if config is not None else UncertainifyConfig()
        self.config.validate()
        self.blur = blur
        self._rng = RandomSource(self.config.seed)

    def uncertainify(self, array) -> UncertainObject:
        """Build a new uncertain object around `array` (not modified)."""
        return self.density_type.uncertainify(array, self.blur, self.config, self._rng)

    # Name used by dataset conversion code
    new_feature_vector = uncertainify


def uncertainify(
    array,
    blur: bool = True,
    config: Optional[UncertainifyConfig] = None,
    rng: Optional[RandomSource] = None,
    density_type: Optional[Type[ProbabilityDensityFunction]] = None,
) -> UncertainObject:
    """
    Convert one deterministic vector into an uncertain object.

    Parameters
    ----------
    array : NumericSequence
        Feature vector.
    blur : bool
        Perturb the original coordinates.
    config : UncertainifyConfig, optional
        Generation parameters. Default: UncertainifyConfig().
    rng : RandomSource, optional
        Source consumed during generation. If None, one is seeded from
        config.seed.
    density_type : type, optional
        Default: IndependentGaussianDistributionFunction.
    """
    if density_type is None:
        from uncertain_objects.gaussian import IndependentGaussianDistributionFunction
        density_type = IndependentGaussianDistributionFunction
    if config is None:
        config = UncertainifyConfig()
    config.validate()
    if rng is None:
        rng = RandomSource(config.seed)
    return density_type.uncertainify(array, blur, config, rng)
