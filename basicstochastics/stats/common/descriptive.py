"""
basicstochastics.stats.common.descriptive
=========================================

Core descriptive statistics over a finite sample.

Provides the mean, the population variance and its square root (the
"empiric deviation"). Sums are accumulated naively, left to right, in the
order of the sample, so results are reproducible bit for bit.

Examples
--------
>>> from basicstochastics.stats.common.descriptive import mean, variance, empiric_deviation
>>> data = [1.0, 2.0, 3.0, 4.0, 2.0]
>>> mean(data)
2.4
>>> variance(data)
1.04
>>> empiric_deviation(data)
1.019803902718557
"""

from __future__ import annotations
import math

from basicstochastics.core.errors import EmptyInputError
from basicstochastics.core.names import Sample


def _require_values(sample: Sample) -> int:
    n = len(sample)
    if n == 0:
        raise EmptyInputError()
    return n


def mean(sample: Sample) -> float:
    """Return the arithmetic mean of the sample.

    Args:
        sample: Non-empty sequence of floats

    Returns:
        Sum of all values divided by their count

    Raises:
        EmptyInputError: If the sample has no values
    """
    n = _require_values(sample)

    total = 0.0
    for x in sample:
        total += x

    return total / n


def variance(sample: Sample) -> float:
    """Return the population variance of the sample.

    The squared deviations from the mean are divided by the count ``n``
    rather than ``n - 1``; no Bessel correction is applied.

    Args:
        sample: Non-empty sequence of floats

    Returns:
        Mean of the squared deviations from the sample mean

    Raises:
        EmptyInputError: If the sample has no values

    See https://en.wikipedia.org/wiki/Variance for further explanation.
    """
    n = _require_values(sample)
    m = mean(sample)

    total = 0.0
    for x in sample:
        difference = x - m
        total += difference * difference

    return total / n


def empiric_deviation(sample: Sample) -> float:
    """Return the square root of the population variance.

    Raises:
        EmptyInputError: If the sample has no values
    """
    return math.sqrt(variance(sample))
