#!/usr/bin/env python
"""
Inverse cumulative Gaussian generator demo.

Draws weighted Gaussian deviates from pseudo-random and Sobol uniform
sources, prints their weighted moments and optionally plots histograms
against the standard normal density.

Example usage:
    python scripts/gaussian_demo.py --n_samples 10000 --seed 42
    python scripts/gaussian_demo.py --rng_type sobol --no-scramble --plot
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mc_gaussian.rng.factory import make_gaussian_generator


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Inverse cumulative Gaussian generator demo",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--rng_type",
        type=str,
        choices=["pseudo", "sobol", "both"],
        default="both",
        help="Uniform source: pseudo, sobol, or both",
    )
    parser.add_argument("--n_samples", type=int, default=10000, help="Number of draws")
    parser.add_argument("--seed", type=int, default=42, help="Seed for the uniform source")
    parser.add_argument(
        "--no-scramble",
        dest="scramble",
        action="store_false",
        help="Disable digital shift scrambling of the Sobol sequence",
    )
    parser.add_argument("--plot", action="store_true", help="Plot histograms")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """Run the demo."""
    parsed = parse_args(args)

    if parsed.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )

    if parsed.n_samples <= 0:
        print("Error: --n_samples must be positive", file=sys.stderr)
        return 1

    rng_types = ["pseudo", "sobol"] if parsed.rng_type == "both" else [parsed.rng_type]

    print("=" * 70)
    print("Inverse Cumulative Gaussian Generator")
    print("=" * 70)
    print(f"\nSamples: {parsed.n_samples}, seed: {parsed.seed}, scramble: {parsed.scramble}\n")
    print(f"{'RNG':<8} {'Mean':<12} {'Std Dev':<12} {'Skew':<12} {'Excess Kurt':<12}")
    print("-" * 70)

    batches = {}
    for rng_type in rng_types:
        gen = make_gaussian_generator(rng_type=rng_type, seed=parsed.seed, scramble=parsed.scramble)
        batch = gen.draw(parsed.n_samples)
        batches[rng_type] = batch

        w = batch.weights / batch.weights.sum()
        mean = np.sum(w * batch.samples)
        std = np.sqrt(np.sum(w * (batch.samples - mean) ** 2))
        z = (batch.samples - mean) / std
        skew = np.sum(w * z**3)
        kurt = np.sum(w * z**4) - 3.0

        print(f"{rng_type:<8} {mean:<12.6f} {std:<12.6f} {skew:<12.6f} {kurt:<12.6f}")

    if parsed.plot:
        import matplotlib.pyplot as plt

        x = np.linspace(-4.0, 4.0, 400)
        density = np.exp(-0.5 * x**2) / np.sqrt(2.0 * np.pi)

        fig, axes = plt.subplots(1, len(batches), figsize=(6 * len(batches), 4), squeeze=False)
        for ax, (rng_type, batch) in zip(axes[0], batches.items()):
            ax.hist(batch.samples, bins=60, weights=batch.weights, density=True, alpha=0.6)
            ax.plot(x, density, "k-", linewidth=1.5, label="N(0,1)")
            ax.set_title(f"{rng_type} ({len(batch)} samples)")
            ax.legend()

        plt.tight_layout()
        output_file = "gaussian_demo.png"
        plt.savefig(output_file, dpi=150)
        print(f"\nPlot saved to: {output_file}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
