"""
Synthetic demo data generator.

Produces clustered deterministic feature vectors so the uncertainification
and sampling pipeline can be exercised without an external dataset.
"""

import numpy as np
from typing import Optional, Tuple


def generate_feature_vectors(
    n_points: int = 200,
    n_dims: int = 2,
    n_clusters: int = 3,
    spread: float = 1.0,
    extent: float = 10.0,
    seed: int = 42,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate Gaussian blobs of feature vectors.

    Parameters
    ----------
    n_points : int
        Total number of vectors.
    n_dims : int
        Dimensionality.
    n_clusters : int
        Number of cluster centres, drawn uniformly in [-extent, extent].
    spread : float
        Standard deviation of each blob.
    extent : float
        Half-width of the region containing the centres.
    seed : int
        Random seed for reproducibility.

    Returns
    -------
    vectors : np.ndarray, shape (n_points, n_dims)
    labels : np.ndarray, shape (n_points,), dtype int
        Cluster index of each vector.
    """
    if n_points < 0 or n_dims < 1 or n_clusters < 1:
        raise ValueError("n_points must be >= 0, n_dims and n_clusters >= 1.")
    rng = np.random.RandomState(seed)
    centres = rng.uniform(-extent, extent, size=(n_clusters, n_dims))
    labels = rng.randint(0, n_clusters, size=n_points)
    vectors = centres[labels] + rng.normal(0.0, spread, size=(n_points, n_dims))
    return vectors, labels


def two_component_mixture_params(
    separation: float = 10.0,
    stddev: float = 1.0,
    n_dims: int = 2,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Means and deviations of a symmetric two-component mixture.

    Component 0 sits at the origin, component 1 at `separation` along
    every axis.
    """
    means = np.array([np.zeros(n_dims), np.full(n_dims, separation)])
    variances = np.full((2, n_dims), stddev)
    return means, variances


def describe_dataset(vectors: np.ndarray, labels: Optional[np.ndarray] = None) -> dict:
    """Basic shape and range information about a feature matrix."""
    vectors = np.asarray(vectors, dtype=float)
    info = {
        "n_points": int(vectors.shape[0]),
        "n_dims": int(vectors.shape[1]) if vectors.ndim == 2 else 0,
        "min": vectors.min(axis=0).tolist() if len(vectors) else [],
        "max": vectors.max(axis=0).tolist() if len(vectors) else [],
    }
    if labels is not None:
        info["n_clusters"] = int(len(np.unique(labels)))
    return info
