"""
Uncertain objects with bounded probability-density sampling.

An uncertain object is a point whose exact location is unknown. It is
represented by a bounding box and a probability density; samples are drawn
by rejection sampling inside the box. Deterministic feature vectors can be
turned into uncertain objects ("uncertainification") by generating a
random Gaussian mixture around them.

Modules:
    bounds          - Axis-aligned bounding boxes
    random_source   - Seeded, per-object random source
    weights         - Integer mixture weights and weighted index draws
    density         - Probability density contract
    gaussian        - Mixture of dimension-wise independent Gaussians
    uniform         - Uniform density over a box
    uncertain_object - Uncertain objects and the uncertainify factory
    config          - Uncertainification parameters and presets
    filter          - Dataset-level uncertainification and summaries
    demo_data       - Synthetic feature vectors
    visualization   - Sample and displacement plots
"""

__version__ = "1.0.0"

from uncertain_objects.bounds import HyperBoundingBox
from uncertain_objects.random_source import RandomSource
from uncertain_objects.weights import (
    DEFAULT_WEIGHT_TOTAL,
    uniform_integer_weights,
    random_integer_weights,
    draw_index_from_integer_weights,
)
from uncertain_objects.density import DEFAULT_TRY_LIMIT, ProbabilityDensityFunction
from uncertain_objects.gaussian import IndependentGaussianDistributionFunction
from uncertain_objects.uniform import UniformDistributionFunction
from uncertain_objects.uncertain_object import (
    UncertainObject,
    UncertainObjectFactory,
    uncertainify,
)
from uncertain_objects.config import (
    UncertainifyConfig,
    get_uncertainify_preset,
)
from uncertain_objects.filter import uncertainify_dataset, summarize_objects
from uncertain_objects.demo_data import generate_feature_vectors
