"""
Uniform deviate sources.

A uniform source yields values on the open interval (0, 1), each paired with
an importance weight. Plain pseudo-random sampling reports a weight of 1.0 for
every draw; weighted schemes report the weight their estimator needs.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for weighted uniform deviate sources."""

    def next(self) -> float:
        """
        Return the next uniform deviate in (0, 1).

        Returns
        -------
        float
            Uniform deviate, strictly between 0 and 1
        """
        ...

    def weight(self) -> float:
        """
        Return the weight of the deviate produced by the preceding ``next()``.

        Returns
        -------
        float
            Importance weight of the last draw
        """
        ...


class PseudoUniformGenerator:
    """
    Pseudo-random uniform source backed by NumPy's default bit generator.

    Parameters
    ----------
    seed : int, optional
        Seed forwarded to ``np.random.default_rng`` (default: 0)

    Notes
    -----
    ``Generator.random`` samples [0, 1); the rare exact zero is redrawn so
    every value lies in the open interval. Every draw has weight 1.0.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self._weight = 0.0
        logger.debug("PseudoUniformGenerator created with seed=%s", seed)

    def next(self) -> float:
        """Return the next pseudo-random deviate in (0, 1)."""
        u = self.rng.random()
        while u == 0.0:
            u = self.rng.random()
        self._weight = 1.0
        return u

    def weight(self) -> float:
        """Return the weight of the last draw (0.0 before any draw)."""
        return self._weight


class SequenceUniformSource:
    """
    Uniform source replaying a fixed sequence of (value, weight) pairs.

    Used to feed externally generated weighted streams (for instance points
    and weights from a stratified design) into a Gaussian generator, and to
    drive generators through known scenarios in tests.

    Parameters
    ----------
    values : Sequence[float]
        Uniform values, replayed in order
    weights : Sequence[float], optional
        Weight of each value (default: 1.0 for every value)
    """

    def __init__(self, values: Sequence[float], weights: Sequence[float] | None = None):
        if weights is None:
            weights = [1.0] * len(values)
        if len(weights) != len(values):
            raise ValueError(
                f"values and weights must have the same length, "
                f"got {len(values)} and {len(weights)}"
            )

        self.values = [float(v) for v in values]
        self.weights = [float(w) for w in weights]
        self._index = 0
        self._weight = 0.0

    @classmethod
    def factory(
        cls,
        values: Sequence[float],
        weights: Sequence[float] | None = None,
    ) -> Callable[[int], "SequenceUniformSource"]:
        """
        Build a seed-taking factory that ignores the seed.

        The replayed sequence is fully determined by ``values`` and
        ``weights``, so every seed yields the same stream.
        """

        def make(seed: int) -> "SequenceUniformSource":
            return cls(values, weights)

        return make

    @property
    def remaining(self) -> int:
        """Number of values not yet consumed."""
        return len(self.values) - self._index

    def next(self) -> float:
        """Return the next value of the sequence."""
        if self._index >= len(self.values):
            raise IndexError("uniform sequence exhausted")

        u = self.values[self._index]
        self._weight = self.weights[self._index]
        self._index += 1
        return u

    def weight(self) -> float:
        """Return the weight of the last draw (0.0 before any draw)."""
        return self._weight
