"""
Random number generation modules for Monte Carlo and Quasi-Monte Carlo.
"""

from mc_gaussian.rng.factory import make_gaussian_generator
from mc_gaussian.rng.gaussian import InverseCumulativeGaussian, SampleBatch
from mc_gaussian.rng.sobol import SobolUniformGenerator
from mc_gaussian.rng.uniform import PseudoUniformGenerator, SequenceUniformSource, UniformSource

__all__ = [
    "InverseCumulativeGaussian",
    "SampleBatch",
    "make_gaussian_generator",
    "UniformSource",
    "PseudoUniformGenerator",
    "SequenceUniformSource",
    "SobolUniformGenerator",
]
