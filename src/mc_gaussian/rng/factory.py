"""
Construction of Gaussian generators from a random number generator type.
"""

import logging
from collections.abc import Callable
from functools import partial
from typing import Literal

from mc_gaussian.rng.gaussian import InverseCumulativeGaussian
from mc_gaussian.rng.sobol import SobolUniformGenerator
from mc_gaussian.rng.uniform import PseudoUniformGenerator

logger = logging.getLogger(__name__)


def make_gaussian_generator(
    rng_type: Literal["pseudo", "sobol"] = "pseudo",
    seed: int = 0,
    scramble: bool = True,
    inverse_cdf: Callable[[float], float] | None = None,
) -> InverseCumulativeGaussian:
    """
    Build an inverse cumulative Gaussian generator.

    Parameters
    ----------
    rng_type : Literal["pseudo", "sobol"], optional
        Type of uniform source (default: "pseudo")
        - "pseudo": NumPy pseudo-random numbers
        - "sobol": Quasi-Monte Carlo Sobol sequence
    seed : int, optional
        Seed forwarded to the uniform source (default: 0)
    scramble : bool, optional
        Whether to scramble the Sobol sequence (only for rng_type="sobol")
    inverse_cdf : Callable[[float], float], optional
        Inverse cumulative normal override

    Returns
    -------
    InverseCumulativeGaussian
        Generator owning a freshly seeded uniform source
    """
    if rng_type == "pseudo":
        uniform_factory = PseudoUniformGenerator
    elif rng_type == "sobol":
        uniform_factory = partial(SobolUniformGenerator, scramble=scramble)
    else:
        raise ValueError(f"rng_type must be 'pseudo' or 'sobol', got {rng_type}")

    logger.debug("Building %s Gaussian generator (seed=%s)", rng_type, seed)
    return InverseCumulativeGaussian(uniform_factory, seed=seed, inverse_cdf=inverse_cdf)
