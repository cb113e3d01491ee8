"""
Visualization module for uncertain objects.

Generates:
- Sample cloud of a single object with its bounds and mean
- Dataset overview: original vectors vs. uncertain-object means
- Component weight bar chart of a Gaussian mixture
"""

import numpy as np
from typing import Dict, List, Optional, Tuple

# Import matplotlib with non-interactive backend for compatibility
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from uncertain_objects.uncertain_object import UncertainObject


# Default style settings
STYLE = {
    "figure.figsize": (8, 5),
    "font.size": 11,
    "axes.grid": True,
    "grid.alpha": 0.3,
    "axes.spines.top": False,
    "axes.spines.right": False,
}


def _apply_style():
    plt.rcParams.update(STYLE)


def _draw_bounds(ax, obj: UncertainObject, dims: Tuple[int, int]):
    bx, by = dims
    x0, x1 = obj.bounds.get_min(bx), obj.bounds.get_max(bx)
    y0, y1 = obj.bounds.get_min(by), obj.bounds.get_max(by)
    if not np.all(np.isfinite([x0, x1, y0, y1])):
        return
    rect = mpatches.Rectangle(
        (x0, y0), x1 - x0, y1 - y0,
        fill=False, edgecolor="black", linestyle="--", linewidth=1.2,
        label="Bounds",
    )
    ax.add_patch(rect)


def plot_uncertain_object(
    obj: UncertainObject,
    n_samples: int = 500,
    dims: Tuple[int, int] = (0, 1),
    original: Optional[np.ndarray] = None,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """
    Scatter plot of samples drawn from one uncertain object.

    Shows the sample cloud, the bounding box (if finite), the density
    mean and optionally the original deterministic vector.
    """
    if obj.dimensionality < 2:
        raise ValueError("Need at least 2 dimensions to plot.")
    _apply_style()
    fig, ax = plt.subplots(figsize=(7, 6))

    samples, n_failed = obj.draw_samples(n_samples)
    bx, by = dims
    if len(samples) > 0:
        ax.scatter(samples[:, bx], samples[:, by], s=8, alpha=0.4,
                   color="#2196F3", label=f"Samples (n={len(samples)})")

    mean = obj.get_mean()
    ax.scatter([mean[bx]], [mean[by]], marker="x", s=120, color="#F44336",
               linewidth=2, label="Mean")
    if original is not None:
        ax.scatter([original[bx]], [original[by]], marker="o", s=80,
                   facecolors="none", edgecolors="black", linewidth=1.5,
                   label="Original")

    _draw_bounds(ax, obj, dims)

    ax.set_xlabel(f"Dimension {bx}")
    ax.set_ylabel(f"Dimension {by}")
    ax.set_title(f"Uncertain Object Samples ({n_failed} failed draws)")
    ax.legend(loc="best")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig


def plot_dataset_overview(
    objects: List[UncertainObject],
    originals: np.ndarray,
    dims: Tuple[int, int] = (0, 1),
    save_path: Optional[str] = None,
) -> plt.Figure:
    """
    Original vectors and the means of their uncertain counterparts.

    Each pair is joined by a line so the blur displacement is visible.
    """
    _apply_style()
    fig, ax = plt.subplots(figsize=(8, 6))

    bx, by = dims
    originals = np.asarray(originals, dtype=float)
    means = np.array([obj.get_mean() for obj in objects])

    for orig, mean in zip(originals, means):
        ax.plot([orig[bx], mean[bx]], [orig[by], mean[by]],
                color="gray", linewidth=0.5, alpha=0.5)
    ax.scatter(originals[:, bx], originals[:, by], s=20, color="black",
               alpha=0.7, label="Original")
    ax.scatter(means[:, bx], means[:, by], s=20, color="#FF9800",
               alpha=0.7, label="Uncertain mean")

    ax.set_xlabel(f"Dimension {bx}")
    ax.set_ylabel(f"Dimension {by}")
    ax.set_title("Uncertainification Displacement")
    ax.legend(loc="best")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig


def plot_component_weights(
    weights: np.ndarray,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Bar chart of mixture component weights as probabilities."""
    _apply_style()
    fig, ax = plt.subplots(figsize=(6, 4))

    weights = np.asarray(weights, dtype=float)
    total = weights.sum()
    probs = weights / total if total > 0 else np.zeros_like(weights)
    colors = plt.cm.Blues(np.linspace(0.4, 0.9, len(weights)))

    bars = ax.bar(np.arange(len(weights)), probs, color=colors,
                  edgecolor="black", linewidth=0.5)
    for bar, val in zip(bars, probs):
        ax.text(bar.get_x() + bar.get_width() / 2, val + 0.01, f"{val:.1%}",
                ha="center", fontsize=9)

    ax.set_xlabel("Component")
    ax.set_ylabel("Selection Probability")
    ax.set_title("Mixture Component Weights")
    ax.set_ylim(0, 1.1)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig


def save_all_figures(
    objects: List[UncertainObject],
    originals: np.ndarray,
    n_samples: int = 500,
    output_dir: str = "Analysis",
) -> Dict[str, plt.Figure]:
    """
    Generate all figures for a dataset and save to output directory.
    """
    import os
    os.makedirs(output_dir, exist_ok=True)

    figures = {}
    if not objects:
        return figures

    if objects[0].dimensionality >= 2:
        figures["object_samples"] = plot_uncertain_object(
            objects[0], n_samples=n_samples, original=originals[0],
            save_path=os.path.join(output_dir, "object_samples.png"),
        )
        figures["overview"] = plot_dataset_overview(
            objects, originals,
            save_path=os.path.join(output_dir, "uncertainify_overview.png"),
        )

    weights = getattr(objects[0].density, "weights", None)
    if weights is not None:
        figures["weights"] = plot_component_weights(
            weights,
            save_path=os.path.join(output_dir, "component_weights.png"),
        )

    plt.close("all")
    return figures
