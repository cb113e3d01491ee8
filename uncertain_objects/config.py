"""Uncertainification configuration and named presets."""

from dataclasses import dataclass, asdict
from typing import Dict, Optional


DEFAULT_STDDEV = 1.0
DEFAULT_BOUND_DEVIATION = 3.0
DEFAULT_MULTIPLICITY = 1


@dataclass
class UncertainifyConfig:
    """
    Parameters controlling how deterministic vectors become uncertain objects.

    stddev_min / stddev_max
        Range of the per-dimension standard deviation of each component.
    lbound_min / lbound_max
        Range of the deviation window below the original value.
    ubound_min / ubound_max
        Range of the deviation window above the original value.
    mult_min / mult_max
        Range of the number of mixture components (inclusive).
    seed
        Seed for the random source used during uncertainification.
    """

    stddev_min: float = DEFAULT_STDDEV
    stddev_max: float = DEFAULT_STDDEV
    lbound_min: float = DEFAULT_BOUND_DEVIATION
    lbound_max: float = DEFAULT_BOUND_DEVIATION
    ubound_min: float = DEFAULT_BOUND_DEVIATION
    ubound_max: float = DEFAULT_BOUND_DEVIATION
    mult_min: int = DEFAULT_MULTIPLICITY
    mult_max: int = DEFAULT_MULTIPLICITY
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.stddev_min < 0:
            raise ValueError("stddev_min must be non-negative.")
        if self.stddev_min > self.stddev_max:
            raise ValueError("stddev_min must not exceed stddev_max.")
        if self.lbound_min < 0 or self.ubound_min < 0:
            raise ValueError("bound deviations must be non-negative.")
        if self.lbound_min > self.lbound_max:
            raise ValueError("lbound_min must not exceed lbound_max.")
        if self.ubound_min > self.ubound_max:
            raise ValueError("ubound_min must not exceed ubound_max.")
        if self.mult_min < 1:
            raise ValueError("mult_min must be at least 1.")
        if self.mult_min > self.mult_max:
            raise ValueError("mult_min must not exceed mult_max.")

    def to_dict(self) -> Dict:
        return asdict(self)


UNCERTAINIFY_PRESETS = {
    "default": {},
    "tight": {
        "stddev_min": 0.05,
        "stddev_max": 0.2,
        "lbound_min": 0.5,
        "lbound_max": 1.0,
        "ubound_min": 0.5,
        "ubound_max": 1.0,
    },
    "wide": {
        "stddev_min": 1.0,
        "stddev_max": 5.0,
        "lbound_min": 5.0,
        "lbound_max": 10.0,
        "ubound_min": 5.0,
        "ubound_max": 10.0,
    },
    "multimodal": {
        "stddev_min": 0.5,
        "stddev_max": 1.5,
        "lbound_min": 2.0,
        "lbound_max": 4.0,
        "ubound_min": 2.0,
        "ubound_max": 4.0,
        "mult_min": 2,
        "mult_max": 5,
    },
}


def get_uncertainify_preset(name: str, seed: Optional[int] = None) -> UncertainifyConfig:
    """
    Get a predefined uncertainification configuration by name.

    Parameters
    ----------
    name : str
        One of: default, tight, wide, multimodal.
    seed : int, optional
        Seed to store in the returned configuration.

    Returns
    -------
    UncertainifyConfig
        A fresh, validated configuration.
    """
    if name not in UNCERTAINIFY_PRESETS:
        available = ", ".join(UNCERTAINIFY_PRESETS.keys())
        raise ValueError(
            f"Unknown uncertainify preset '{name}'. Available: {available}"
        )
    config = UncertainifyConfig(seed=seed, **UNCERTAINIFY_PRESETS[name])
    config.validate()
    return config
