#!/usr/bin/env python3
"""
End-to-End Uncertainification Demo.

Orchestrates the complete workflow:
    1. Synthetic feature vector generation (or loading from .npy/.csv)
    2. Uncertainification (Gaussian mixture or uniform box)
    3. Rejection sampling from every uncertain object
    4. Summary statistics (failure rate, spread, mean displacement)
    5. Visualization (sample cloud, displacement overview, weights)
    6. Results export (JSON)

Usage:
    # Synthetic data with default parameters:
    python scripts/run_demo.py

    # Multimodal preset without blur:
    python scripts/run_demo.py --preset multimodal --no_blur

    # Own data, uniform boxes:
    python scripts/run_demo.py --input vectors.npy --density uniform
"""

import argparse
import json
import os
import sys
import time

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def parse_args():
    parser = argparse.ArgumentParser(
        description="Uncertain object generation and sampling demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Data
    parser.add_argument("--input", type=str, default=None,
                        help="Feature vectors (.npy or .csv). "
                             "If not provided, synthetic data is generated.")
    parser.add_argument("--output_dir", type=str, default="Analysis",
                        help="Directory for output figures and results.")
    parser.add_argument("--n_points", type=int, default=200,
                        help="Number of synthetic vectors.")
    parser.add_argument("--n_dims", type=int, default=2,
                        help="Dimensionality of synthetic vectors.")
    parser.add_argument("--n_clusters", type=int, default=3,
                        help="Number of synthetic clusters.")

    # Uncertainification
    parser.add_argument("--density", type=str, choices=["gaussian", "uniform"],
                        default="gaussian", help="Density model to generate.")
    parser.add_argument("--preset", type=str, default="default",
                        help="Uncertainify preset: default, tight, wide, multimodal.")
    parser.add_argument("--no_blur", action="store_true",
                        help="Keep original coordinates as component means.")
    parser.add_argument("--n_samples", type=int, default=100,
                        help="Samples drawn per uncertain object.")
    parser.add_argument("--seed", type=int, default=42,
                        help="Random seed.")

    parser.add_argument("--skip_visualization", action="store_true",
                        help="Skip figure generation.")

    return parser.parse_args()


def load_vectors(args):
    """Stage 1: Load or generate deterministic feature vectors."""
    if args.input is None:
        from uncertain_objects.demo_data import generate_feature_vectors

        print("\n  Stage 1: Generating synthetic feature vectors...")
        vectors, _ = generate_feature_vectors(
            n_points=args.n_points,
            n_dims=args.n_dims,
            n_clusters=args.n_clusters,
            seed=args.seed,
        )
    else:
        print(f"\n  Stage 1: Loading feature vectors from: {args.input}")
        if args.input.endswith(".npy"):
            vectors = np.load(args.input)
        else:
            vectors = np.loadtxt(args.input, delimiter=",", ndmin=2)

    print(f"    {vectors.shape[0]} vectors, {vectors.shape[1]} dimensions")
    return vectors


def build_objects(vectors, args):
    """Stage 2: Uncertainify every vector."""
    from uncertain_objects.config import get_uncertainify_preset
    from uncertain_objects.filter import uncertainify_dataset
    from uncertain_objects.gaussian import IndependentGaussianDistributionFunction
    from uncertain_objects.uncertain_object import UncertainObjectFactory
    from uncertain_objects.uniform import UniformDistributionFunction

    print(f"\n  Stage 2: Uncertainifying ({args.density}, preset={args.preset}, "
          f"blur={not args.no_blur})...")
    config = get_uncertainify_preset(args.preset, seed=args.seed)
    density_type = {
        "gaussian": IndependentGaussianDistributionFunction,
        "uniform": UniformDistributionFunction,
    }[args.density]
    factory = UncertainObjectFactory(density_type, config, blur=not args.no_blur)
    objects = uncertainify_dataset(vectors, factory)
    print(f"    Built {len(objects)} uncertain objects")
    return objects, config


def sample_objects(objects, vectors, args):
    """Stage 3-4: Draw samples and summarize."""
    from uncertain_objects.filter import summarize_objects

    print(f"\n  Stage 3: Drawing {args.n_samples} samples per object...")
    summary = summarize_objects(objects, vectors, n_samples=args.n_samples)
    print(f"    Total draws:       {summary['n_samples']}")
    print(f"    Failure rate:      {summary['failure_rate']:.4f}")
    print(f"    Mean spread:       {summary['mean_spread']:.4f}")
    print(f"    Mean displacement: {summary['mean_displacement']:.4f}")
    return summary


def export_results(output_dir, summary, config, args):
    """Stage 6: Write JSON summary."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "uncertainify_summary.json")
    payload = {
        "density": args.density,
        "preset": args.preset,
        "blur": not args.no_blur,
        "config": config.to_dict(),
        "summary": summary,
    }
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)
    print(f"\n  Results written to: {path}")


def main():
    args = parse_args()

    print("=" * 65)
    print("  Uncertain Object Demo")
    print("=" * 65)
    print(f"\n  Output: {args.output_dir}")

    start_time = time.time()

    vectors = load_vectors(args)
    objects, config = build_objects(vectors, args)
    summary = sample_objects(objects, vectors, args)

    if not args.skip_visualization:
        from uncertain_objects.visualization import save_all_figures

        print("\n  Stage 5: Generating figures...")
        figures = save_all_figures(objects, vectors, n_samples=500,
                                   output_dir=args.output_dir)
        print(f"    Saved {len(figures)} figures")

    export_results(args.output_dir, summary, config, args)

    elapsed = time.time() - start_time
    print(f"\n{'=' * 65}")
    print(f"  Demo complete. Results in: {args.output_dir}/")
    print(f"  Elapsed: {elapsed:.1f}s")
    print(f"{'=' * 65}")


if __name__ == "__main__":
    main()
