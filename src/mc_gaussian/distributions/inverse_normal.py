"""
Inverse cumulative normal distribution.

Peter John Acklam's rational approximation, with a pure-Python scalar path for
per-draw use and a vectorised NumPy path for batches.
"""

import math

import numpy as np

# Coefficients for the rational approximation
A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
D = (7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e00, 3.754408661907416e00)

# Break-points between the tail and central regions
U_LOW = 0.02425
U_HIGH = 1 - U_LOW

# Probabilities are clipped to [EPS, 1 - EPS] before inversion
EPS = 1e-10


def _tail(q: float | np.ndarray) -> float | np.ndarray:
    """
    Evaluate the lower-tail rational approximation.

    Parameters
    ----------
    q : float or np.ndarray
        sqrt(-2 log p) for a tail probability p

    Returns
    -------
    float or np.ndarray
        Lower-tail quantile; negate it for the upper tail
    """
    return (((((C[0] * q + C[1]) * q + C[2]) * q + C[3]) * q + C[4]) * q + C[5]) / (
        (((D[0] * q + D[1]) * q + D[2]) * q + D[3]) * q + 1.0
    )


def _central(q: float | np.ndarray, r: float | np.ndarray) -> float | np.ndarray:
    """
    Evaluate the central-region rational approximation.

    Parameters
    ----------
    q : float or np.ndarray
        Probability minus 0.5
    r : float or np.ndarray
        q squared

    Returns
    -------
    float or np.ndarray
        Quantile for probabilities in [U_LOW, U_HIGH]
    """
    return (((((A[0] * r + A[1]) * r + A[2]) * r + A[3]) * r + A[4]) * r + A[5]) * q / (
        ((((B[0] * r + B[1]) * r + B[2]) * r + B[3]) * r + B[4]) * r + 1.0
    )


def _inverse_normal_scalar(u: float) -> float:
    if u < 0.0 or u > 1.0 or u != u:
        raise ValueError("probabilities must be in [0, 1]")

    u = min(max(u, EPS), 1.0 - EPS)

    if u < U_LOW:
        return _tail(math.sqrt(-2.0 * math.log(u)))
    if u > U_HIGH:
        return -_tail(math.sqrt(-2.0 * math.log(1.0 - u)))

    q = u - 0.5
    return _central(q, q * q)


def inverse_normal_cdf(u):
    """
    Convert uniform (0,1) samples to standard normal N(0,1) using inverse CDF.

    Parameters
    ----------
    u : float or np.ndarray
        Uniform random variables in (0, 1)

    Returns
    -------
    float or np.ndarray
        Standard normal quantiles, same shape as ``u``. Scalar input gives a
        Python float.

    Raises
    ------
    ValueError
        If any probability lies outside [0, 1].

    Notes
    -----
    Relative error is below 1.15e-9 over the whole domain. The endpoints 0 and
    1 are accepted and clipped to [1e-10, 1 - 1e-10], so they map to finite
    quantiles of roughly -6.36 and 6.36.

    Reference:
    https://web.archive.org/web/20150912080806/http://home.online.no/~pjacklam/notes/invnorm/
    """
    if np.ndim(u) == 0:
        return _inverse_normal_scalar(float(u))

    u = np.asarray(u, dtype=np.float64)
    if np.any(u < 0) or np.any(u > 1) or np.any(np.isnan(u)):
        raise ValueError("probabilities must be in [0, 1]")

    u = np.clip(u, EPS, 1 - EPS)
    z = np.zeros_like(u)

    # Region 1: lower tail
    mask_low = u < U_LOW
    if np.any(mask_low):
        z[mask_low] = _tail(np.sqrt(-2.0 * np.log(u[mask_low])))

    # Region 2: central region
    mask_central = (u >= U_LOW) & (u <= U_HIGH)
    if np.any(mask_central):
        q = u[mask_central] - 0.5
        z[mask_central] = _central(q, q * q)

    # Region 3: upper tail
    mask_high = u > U_HIGH
    if np.any(mask_high):
        z[mask_high] = -_tail(np.sqrt(-2.0 * np.log(1.0 - u[mask_high])))

    return z


class InverseCumulativeNormal:
    """
    Inverse cumulative normal distribution N(average, sigma^2).

    Stateless and therefore safe to share between generators and threads.

    Parameters
    ----------
    average : float, optional
        Mean of the distribution (default: 0.0)
    sigma : float, optional
        Standard deviation, must be > 0 (default: 1.0)
    """

    def __init__(self, average: float = 0.0, sigma: float = 1.0):
        if sigma <= 0:
            raise ValueError("sigma must be positive")

        self.average = average
        self.sigma = sigma

    def __call__(self, x):
        """
        Return the quantile for probability ``x``.

        Floats go through the scalar path; arrays are inverted element-wise.
        """
        if np.ndim(x) == 0:
            return self.average + self.sigma * _inverse_normal_scalar(float(x))
        return self.average + self.sigma * inverse_normal_cdf(x)

    def __repr__(self) -> str:
        return f"InverseCumulativeNormal(average={self.average}, sigma={self.sigma})"
