"""
basicstochastics — a small collection of utilities that make basic stochastic
calculations more convenient.

The package computes the mean, the population variance and the empiric
deviation of a finite sample, and tells whether a value lies within a sigma
environment of that sample. A table of named sigma constants makes call sites
readable (``TWO_SIGMA``, ``NINETY_FIVE_TO_SIGMA``, ...).

All statistics are pure functions over a read-only sequence of floats. An
empty sample raises `EmptyInputError` rather than dividing by zero.

Example
-------
>>> import basicstochastics as bs
>>> data = [1.0, 2.0, 3.0, 4.0, 2.0]
>>> bs.mean(data)
2.4
>>> bs.matches_sigma_environment(data, bs.ONE_SIGMA, 1.4)
True
"""

from basicstochastics.core.errors import EmptyInputError
from basicstochastics.core.names import (
    CONFIDENCE_TO_SIGMA,
    EIGHTY_TO_SIGMA,
    FIFTY_TO_SIGMA,
    NINETY_FIVE_TO_SIGMA,
    NINETY_NINE_TO_SIGMA,
    NINETY_TO_SIGMA,
    ONE_SIGMA,
    SEVENTY_TO_SIGMA,
    SIGMA_TO_CONFIDENCE,
    SIXTY_TO_SIGMA,
    THREE_SIGMA,
    TWO_SIGMA,
)
from basicstochastics.stats.common.descriptive import empiric_deviation, mean, variance
from basicstochastics.stats.common.sigma import (
    SigmaEnvironment,
    confidence_to_sigma,
    matches_sigma_environment,
    sigma_environment,
    sigma_to_confidence,
)

__all__ = [
    "EmptyInputError",
    "mean",
    "variance",
    "empiric_deviation",
    "matches_sigma_environment",
    "sigma_environment",
    "SigmaEnvironment",
    "sigma_to_confidence",
    "confidence_to_sigma",
    "SIGMA_TO_CONFIDENCE",
    "CONFIDENCE_TO_SIGMA",
    "ONE_SIGMA",
    "TWO_SIGMA",
    "THREE_SIGMA",
    "FIFTY_TO_SIGMA",
    "SIXTY_TO_SIGMA",
    "SEVENTY_TO_SIGMA",
    "EIGHTY_TO_SIGMA",
    "NINETY_TO_SIGMA",
    "NINETY_FIVE_TO_SIGMA",
    "NINETY_NINE_TO_SIGMA",
]
