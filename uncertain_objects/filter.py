"""
Dataset-level uncertainification.

Applies an UncertainObjectFactory to every row of a feature matrix.
"""

import numpy as np
from typing import Dict, List, Optional

from uncertain_objects.uncertain_object import UncertainObject, UncertainObjectFactory


def uncertainify_dataset(
    vectors: np.ndarray,
    factory: Optional[UncertainObjectFactory] = None,
) -> List[UncertainObject]:
    """
    Convert each row of `vectors` into an uncertain object.

    Parameters
    ----------
    vectors : np.ndarray, shape (N, D)
        Deterministic feature vectors.
    factory : UncertainObjectFactory, optional
        Factory to use. Default: Gaussian mixture with default config.

    Returns
    -------
    list of UncertainObject, length N
    """
    vectors = np.asarray(vectors, dtype=float)
    if vectors.ndim != 2:
        raise ValueError(f"Expected 2D array, got {vectors.ndim}D")
    if factory is None:
        factory = UncertainObjectFactory()
    return [factory.uncertainify(row) for row in vectors]


def summarize_objects(
    objects: List[UncertainObject],
    originals: Optional[np.ndarray] = None,
    n_samples: int = 100,
) -> Dict[str, float]:
    """
    Sampling statistics over a collection of uncertain objects.

    Parameters
    ----------
    objects : list of UncertainObject
    originals : np.ndarray, shape (N, D), optional
        Deterministic vectors the objects were built from. Enables the
        mean displacement statistic.
    n_samples : int
        Draws per object.

    Returns
    -------
    dict with keys:
        'n_objects', 'n_samples', 'failure_rate', 'mean_spread',
        and, if originals are given, 'mean_displacement'.
    """
    total_draws = 0
    total_failed = 0
    spreads = []
    for obj in objects:
        samples, n_failed = obj.draw_samples(n_samples)
        total_draws += n_samples
        total_failed += n_failed
        if len(samples) > 1:
            spreads.append(float(np.mean(np.std(samples, axis=0, ddof=1))))

    summary = {
        "n_objects": len(objects),
        "n_samples": total_draws,
        "failure_rate": total_failed / total_draws if total_draws > 0 else 0.0,
        "mean_spread": float(np.mean(spreads)) if spreads else 0.0,
    }

    if originals is not None:
        originals = np.asarray(originals, dtype=float)
        if len(originals) != len(objects):
            raise ValueError(
                f"Got {len(originals)} original vectors for {len(objects)} objects."
            )
        displacements = [
            float(np.linalg.norm(obj.get_mean() - orig))
            for obj, orig in zip(objects, originals)
        ]
        summary["mean_displacement"] = float(np.mean(displacements)) if displacements else 0.0

    return summary
