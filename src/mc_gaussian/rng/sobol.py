"""
One-dimensional Sobol quasi-random uniform source.

This module provides a streaming Sobol sequence with optional digital shift
scrambling, usable anywhere a weighted uniform source is expected.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

# Number of bits in the integer representation of each point
N_BITS = 32

# First-dimension direction numbers: v_i = 2^{32-i} for i = 1, ..., 32
DIRECTION_NUMBERS = tuple(1 << (N_BITS - i) for i in range(1, N_BITS + 1))

# Points are clipped to [EPS, 1 - EPS] to stay inside the open interval
EPS = 1e-10


def gray_code_position(n: int) -> int:
    """
    Find the position of the rightmost zero bit in the binary representation of n-1.

    This gives the index of which direction number to use for the Gray code
    construction of the Sobol sequence.

    Parameters
    ----------
    n : int
        Index in the sequence (1-indexed)

    Returns
    -------
    int
        Position of rightmost zero bit in n-1 (0-indexed)
    """
    x = n - 1
    c = 0
    while (x & 1) == 1:
        x >>= 1
        c += 1
    return c


class SobolUniformGenerator:
    """
    Sobol low-discrepancy uniform source with optional scrambling.

    Parameters
    ----------
    seed : int, optional
        Seed for the digital shift (default: 0). Ignored when
        ``scramble=False``, the unscrambled sequence being fixed.
    scramble : bool, optional
        Whether to XOR every point with a random 32-bit shift (default: True)

    Notes
    -----
    Points are produced incrementally with the Gray code construction, one
    XOR per draw. The all-zero point of the sequence is skipped, so the
    unscrambled stream starts 0.5, 0.75, 0.25, 0.375, ... and any run of the
    first 2^k - 1 points hits each interval [j/2^k, (j+1)/2^k), j >= 1,
    exactly once. Every point has weight 1.0. At most 2^32 - 1 points are
    available.
    """

    def __init__(self, seed: int = 0, scramble: bool = True):
        self.seed = seed
        self.scramble = scramble

        if scramble:
            rng = np.random.default_rng(seed)
            self._shift = int(rng.integers(0, 2**N_BITS, dtype=np.uint64))
        else:
            self._shift = 0

        self._index = 0
        self._x = 0
        self._weight = 0.0
        logger.debug("SobolUniformGenerator created with seed=%s, scramble=%s", seed, scramble)

    def next(self) -> float:
        """Return the next Sobol point in (0, 1)."""
        c = gray_code_position(self._index + 1)
        if c >= N_BITS:
            raise RuntimeError("Sobol sequence exhausted")

        self._x ^= DIRECTION_NUMBERS[c]
        self._index += 1
        self._weight = 1.0

        u = (self._x ^ self._shift) / 2**N_BITS
        return min(max(u, EPS), 1.0 - EPS)

    def weight(self) -> float:
        """Return the weight of the last draw (0.0 before any draw)."""
        return self._weight

    @property
    def index(self) -> int:
        """Number of points drawn so far."""
        return self._index

    def skip(self, n_points: int):
        """
        Advance the sequence by ``n_points`` without returning them.

        Parameters
        ----------
        n_points : int
            Number of points to skip (must be >= 0)
        """
        if n_points < 0:
            raise ValueError("n_points must be non-negative")

        for _ in range(n_points):
            self.next()

    def reset(self):
        """Reset the generator to start from the beginning of the sequence."""
        self._index = 0
        self._x = 0
        self._weight = 0.0
