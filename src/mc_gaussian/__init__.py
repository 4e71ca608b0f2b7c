"""
Inverse Cumulative Gaussian Generators

Weighted Gaussian deviates for Monte Carlo and Quasi-Monte Carlo simulation.
"""

from mc_gaussian._version import __version__

# Generators
from mc_gaussian.rng.factory import make_gaussian_generator
from mc_gaussian.rng.gaussian import InverseCumulativeGaussian, SampleBatch

# Uniform sources
from mc_gaussian.rng.sobol import SobolUniformGenerator
from mc_gaussian.rng.uniform import PseudoUniformGenerator, SequenceUniformSource, UniformSource

# Distributions
from mc_gaussian.distributions.inverse_normal import InverseCumulativeNormal, inverse_normal_cdf

__all__ = [
    # Version
    "__version__",
    # Generators
    "InverseCumulativeGaussian",
    "SampleBatch",
    "make_gaussian_generator",
    # Uniform sources
    "UniformSource",
    "PseudoUniformGenerator",
    "SequenceUniformSource",
    "SobolUniformGenerator",
    # Distributions
    "InverseCumulativeNormal",
    "inverse_normal_cdf",
]
