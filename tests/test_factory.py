"""
Unit tests for make_gaussian_generator.
"""

import numpy as np
import pytest

from mc_gaussian.distributions.inverse_normal import InverseCumulativeNormal
from mc_gaussian.rng.factory import make_gaussian_generator
from mc_gaussian.rng.gaussian import InverseCumulativeGaussian
from mc_gaussian.rng.sobol import SobolUniformGenerator
from mc_gaussian.rng.uniform import PseudoUniformGenerator


class TestMakeGaussianGenerator:
    """Test suite for the generator factory."""

    def test_pseudo_default(self):
        """Test that the default generator uses pseudo-random numbers."""
        gen = make_gaussian_generator(seed=42)

        assert isinstance(gen, InverseCumulativeGaussian)
        assert isinstance(gen.uniform_source, PseudoUniformGenerator)
        assert gen.uniform_source.seed == 42

    def test_sobol(self):
        """Test Sobol generator construction."""
        gen = make_gaussian_generator(rng_type="sobol", seed=3, scramble=False)

        assert isinstance(gen.uniform_source, SobolUniformGenerator)
        assert gen.uniform_source.seed == 3
        assert gen.uniform_source.scramble is False
        # First unscrambled Sobol point is 0.5
        assert gen.next_sample() == 0.0

    def test_sobol_scrambled_reproducibility(self):
        """Test that scrambled Sobol generators are reproducible by seed."""
        gen1 = make_gaussian_generator(rng_type="sobol", seed=11)
        gen2 = make_gaussian_generator(rng_type="sobol", seed=11)

        np.testing.assert_array_equal(gen1.draw(64).samples, gen2.draw(64).samples)

    def test_sobol_statistics(self):
        """Test that Sobol Gaussians have near-standard moments."""
        gen = make_gaussian_generator(rng_type="sobol", seed=0, scramble=False)
        batch = gen.draw(2**12 - 1)

        assert abs(np.mean(batch.samples)) < 0.01
        assert abs(np.std(batch.samples) - 1.0) < 0.02
        np.testing.assert_array_equal(batch.weights, 1.0)

    def test_inverse_cdf_override(self):
        """Test that a custom inverse CDF is passed through."""
        icn = InverseCumulativeNormal(average=2.0, sigma=0.5)
        gen = make_gaussian_generator(rng_type="sobol", scramble=False, inverse_cdf=icn)

        assert gen.inverse_cdf is icn
        assert gen.next_sample() == pytest.approx(2.0)

    def test_invalid_rng_type(self):
        """Test that unknown rng_type raises ValueError."""
        with pytest.raises(ValueError, match="rng_type must be 'pseudo' or 'sobol'"):
            make_gaussian_generator(rng_type="halton")
