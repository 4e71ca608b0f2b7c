"""
Inverse cumulative Gaussian generator.

Turns a weighted uniform stream into a weighted standard normal stream by
pushing every uniform deviate through an inverse cumulative normal
distribution. The weight of each draw is carried over unchanged so that
quasi-random and weighted sampling schemes can correct their estimators
downstream.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import numpy as np

from mc_gaussian.distributions.inverse_normal import InverseCumulativeNormal
from mc_gaussian.rng.uniform import UniformSource

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=UniformSource)


@dataclass
class SampleBatch:
    """
    Container for a batch of weighted Gaussian draws.

    Attributes
    ----------
    samples : np.ndarray
        Gaussian deviates in draw order
    weights : np.ndarray
        Weight of each deviate, aligned with ``samples``
    """

    samples: np.ndarray
    weights: np.ndarray

    def __len__(self) -> int:
        return len(self.samples)


class InverseCumulativeGaussian(Generic[U]):
    """
    Gaussian deviate generator over an arbitrary weighted uniform source.

    Parameters
    ----------
    uniform_factory : Callable[[int], U]
        Builds the uniform source from the seed; usually the source class
        itself, e.g. ``PseudoUniformGenerator``
    seed : int, optional
        Seed forwarded untouched to ``uniform_factory`` (default: 0)
    inverse_cdf : Callable[[float], float], optional
        Inverse cumulative normal distribution (default:
        ``InverseCumulativeNormal()``)

    Notes
    -----
    The generator owns its uniform source. No check is made on the uniform
    values before inversion: what happens at or outside the interval
    boundaries is decided by ``inverse_cdf``. Errors raised by either
    collaborator propagate unchanged.

    ``current_weight()`` returns 0.0 until the first call to
    ``next_sample()``, after which it always holds the weight the source
    reported for the most recent draw.

    Instances are not thread-safe; use one generator per worker, each with
    its own seed.
    """

    sample_type = float
    dimension = 1

    def __init__(
        self,
        uniform_factory: Callable[[int], U],
        seed: int = 0,
        inverse_cdf: Callable[[float], float] | None = None,
    ):
        self.seed = seed
        self._uniform = uniform_factory(seed)
        self._inverse_cdf = inverse_cdf if inverse_cdf is not None else InverseCumulativeNormal()
        self._last_weight = 0.0
        self._has_sampled = False
        logger.debug(
            "InverseCumulativeGaussian created over %s with seed=%s",
            type(self._uniform).__name__,
            seed,
        )

    @property
    def uniform_source(self) -> U:
        """The uniform source owned by this generator."""
        return self._uniform

    @property
    def inverse_cdf(self) -> Callable[[float], float]:
        """The inverse cumulative normal distribution in use."""
        return self._inverse_cdf

    @property
    def has_sampled(self) -> bool:
        """Whether at least one sample has been drawn."""
        return self._has_sampled

    def next_sample(self) -> float:
        """
        Return the next Gaussian deviate.

        Returns
        -------
        float
            Inverse cumulative normal of the next uniform deviate
        """
        gauss_point = self._inverse_cdf(self._uniform.next())
        self._last_weight = self._uniform.weight()
        self._has_sampled = True
        return gauss_point

    def current_weight(self) -> float:
        """Return the weight of the last drawn sample (0.0 before any draw)."""
        return self._last_weight

    def next(self) -> float:
        """Alias of ``next_sample()``, giving the uniform source {next, weight} shape."""
        return self.next_sample()

    def weight(self) -> float:
        """Alias of ``current_weight()``."""
        return self.current_weight()

    def draw(self, n: int) -> SampleBatch:
        """
        Draw ``n`` consecutive samples together with their weights.

        Parameters
        ----------
        n : int
            Number of samples (must be an integer >= 0)

        Returns
        -------
        SampleBatch
            Samples and weights in draw order
        """
        if not isinstance(n, (int, np.integer)) or isinstance(n, bool) or n < 0:
            raise ValueError("n must be a non-negative integer")

        samples = np.empty(n, dtype=np.float64)
        weights = np.empty(n, dtype=np.float64)
        for i in range(n):
            samples[i] = self.next_sample()
            weights[i] = self._last_weight

        return SampleBatch(samples=samples, weights=weights)

    def __repr__(self) -> str:
        state = "ready" if self._has_sampled else "uninitialized"
        return (
            f"InverseCumulativeGaussian(uniform={type(self._uniform).__name__}, "
            f"seed={self.seed}, state={state})"
        )
