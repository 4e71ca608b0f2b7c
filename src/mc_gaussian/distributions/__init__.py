"""
Inverse cumulative distributions used to turn uniform deviates into Gaussians.
"""

from mc_gaussian.distributions.inverse_normal import InverseCumulativeNormal, inverse_normal_cdf

__all__ = ["InverseCumulativeNormal", "inverse_normal_cdf"]
