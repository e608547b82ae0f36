"""
basicstochastics.stats.common.sigma
===================================

Sigma environments and sigma/confidence conversions.

A sigma environment is the open interval ``(mean - k*s, mean + k*s)`` around
the mean of a sample, where ``s`` is the empiric deviation and ``k`` the sigma
multiple. The conversions between a multiple and the confidence it covers
assume a normal distribution.

Please see https://en.wikipedia.org/wiki/Normal_distribution and
https://en.wikipedia.org/wiki/68%E2%80%9395%E2%80%9399.7_rule for further
information.

Examples
--------
>>> from basicstochastics.core.names import ONE_SIGMA, TWO_SIGMA, THREE_SIGMA
>>> data = [1.0, 2.0, 3.0, 4.0, 2.0]
>>> matches_sigma_environment(data, ONE_SIGMA, 3.4)
True
>>> matches_sigma_environment(data, TWO_SIGMA, 5.0)
False
>>> matches_sigma_environment(data, THREE_SIGMA, 5.0)
True
>>> matches_sigma_environment(data, THREE_SIGMA, 5.0, scale_deviation=False)
False
>>> round(sigma_to_confidence(TWO_SIGMA), 4)
0.9545
"""

from __future__ import annotations
from dataclasses import dataclass

from scipy.stats import norm

from basicstochastics.core.names import ONE_SIGMA, Sample
from basicstochastics.stats.common.descriptive import empiric_deviation, mean


@dataclass(frozen=True)
class SigmaEnvironment:
    """
    Open interval spanning ``multiple`` deviations on both sides of ``center``.

    Attributes:
        center: Mean of the sample
        deviation: Empiric deviation of the sample
        multiple: Sigma multiple applied to the deviation

    Examples:
        >>> env = SigmaEnvironment(center=2.0, deviation=0.5, multiple=2.0)
        >>> env.lower, env.upper
        (1.0, 3.0)
        >>> env.contains(3.0)
        False
    """

    center: float
    deviation: float
    multiple: float = ONE_SIGMA

    @property
    def half_width(self) -> float:
        return self.deviation * self.multiple

    @property
    def lower(self) -> float:
        return self.center - self.half_width

    @property
    def upper(self) -> float:
        return self.center + self.half_width

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        """Return True if value lies strictly between the bounds."""
        return self.lower < value < self.upper


def sigma_environment(
    sample: Sample, sigma_multiple: float = ONE_SIGMA
) -> SigmaEnvironment:
    """
    Build the sigma environment of a sample.

    Args:
        sample: Non-empty sequence of floats
        sigma_multiple: Number of deviations on each side of the mean

    Returns:
        SigmaEnvironment centred on the sample mean

    Raises:
        EmptyInputError: If the sample has no values
    """
    return SigmaEnvironment(
        center=mean(sample),
        deviation=empiric_deviation(sample),
        multiple=sigma_multiple,
    )


def matches_sigma_environment(
    sample: Sample,
    sigma_multiple: float,
    value: float,
    *,
    scale_deviation: bool = True,
) -> bool:
    """
    Test whether value falls inside the sigma environment of the sample.

    You can either provide a specific sigma multiple or use one of the
    constants from `basicstochastics.core.names`.

    Args:
        sample: Non-empty sequence of floats
        sigma_multiple: Number of deviations on each side of the mean
        value: Value to check
        scale_deviation: If False, the multiple is ignored and the interval is
            always one deviation wide on each side (legacy unscaled
            behaviour).

    Returns:
        True if ``mean - k*s < value < mean + k*s``

    Raises:
        EmptyInputError: If the sample has no values

    Note:
        Bounds are exclusive. A sample whose values are all equal has zero
        deviation, so no value matches its environment.
    """
    multiple = sigma_multiple if scale_deviation else ONE_SIGMA
    return sigma_environment(sample, multiple).contains(value)


def sigma_to_confidence(sigma_multiple: float) -> float:
    """
    Probability mass of a normal distribution within k deviations of its mean.

    Args:
        sigma_multiple: Non-negative sigma multiple k

    Returns:
        ``2 * Phi(k) - 1``

    Examples:
        >>> round(sigma_to_confidence(1.0), 4)
        0.6827
    """
    if not sigma_multiple >= 0:
        raise ValueError(f"sigma_multiple must be non-negative, got {sigma_multiple}")

    return float(2.0 * norm.cdf(sigma_multiple) - 1.0)


def confidence_to_sigma(confidence: float) -> float:
    """
    Sigma multiple whose two-sided environment covers the given confidence.

    Args:
        confidence: Confidence level in (0, 1)

    Returns:
        ``Phi^-1((1 + confidence) / 2)``

    Examples:
        >>> round(confidence_to_sigma(0.95), 3)
        1.96
    """
    if not (0 < confidence < 1):
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")

    return float(norm.ppf((1.0 + confidence) / 2.0))
