"""
Closed-form models for the Galton board: exact binomial coefficients,
the binomial PMF and its normal approximation, and an MSE comparison.
"""

from .combinatorics import PRECISION, binomial_coefficient
from .comparison import DistributionLengthError, mean_squared_error
from .distributions import Distribution, binomial_distribution, normal_distribution

__all__ = [
    "PRECISION",
    "Distribution",
    "DistributionLengthError",
    "binomial_coefficient",
    "binomial_distribution",
    "mean_squared_error",
    "normal_distribution",
]
