"""
basicstochastics.api.describe
=============================

Facade for summarising a sample and screening it for outliers.

Examples
--------
>>> from basicstochastics.api.describe import describe, screen_outliers, SigmaScreenConfig
>>> summary = describe([1.0, 2.0, 3.0, 4.0, 2.0])
>>> summary.n, summary.mean, summary.variance
(5, 2.4, 1.04)
>>> screen_outliers([1.0, 2.0, 3.0, 4.0, 2.0])
[1.0, 4.0]
>>> screen_outliers([1.0, 2.0, 3.0, 4.0, 2.0], SigmaScreenConfig(sigma=2.0))
[]
"""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from basicstochastics.core.logging import get_logger
from basicstochastics.core.names import ONE_SIGMA, Sample
from basicstochastics.stats.common.descriptive import empiric_deviation, mean, variance
from basicstochastics.stats.common.sigma import sigma_environment


@dataclass(frozen=True)
class SampleSummary:
    """
    Descriptive statistics of one sample.

    Attributes
    ----------
    n : int
        Number of values
    mean : float
        Arithmetic mean
    variance : float
        Population variance
    empiric_deviation : float
        Square root of the population variance
    """

    n: int
    mean: float
    variance: float
    empiric_deviation: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SigmaScreenConfig:
    """
    Configuration for outlier screening.

    Parameters
    ----------
    sigma : float, default=ONE_SIGMA
        Sigma multiple defining the accepted environment
    scale_deviation : bool, default=True
        Scale the deviation by ``sigma``; False keeps the environment one
        deviation wide whatever ``sigma`` is

    Examples
    --------
    >>> SigmaScreenConfig(sigma=-1.0).validate()
    Traceback (most recent call last):
    ...
    ValueError: sigma must be non-negative, got -1.0
    """

    sigma: float = ONE_SIGMA
    scale_deviation: bool = True

    def validate(self) -> None:
        """Validate screening configuration."""
        if self.sigma < 0:
            raise ValueError(f"sigma must be non-negative, got {self.sigma}")


def describe(sample: Sample) -> SampleSummary:
    """
    Summarise a sample.

    Parameters
    ----------
    sample : Sequence[float]
        Non-empty sequence of values

    Returns
    -------
    SampleSummary

    Raises
    ------
    EmptyInputError
        If the sample has no values
    """
    summary = SampleSummary(
        n=len(sample),
        mean=mean(sample),
        variance=variance(sample),
        empiric_deviation=empiric_deviation(sample),
    )
    get_logger(__name__).debug("sample_described", **summary.to_dict())
    return summary


def screen_outliers(
    sample: Sample, config: Optional[SigmaScreenConfig] = None
) -> List[float]:
    """
    Return the values of a sample lying outside its sigma environment.

    Values are returned in input order. Values equal to a bound count as
    outliers since the environment is open.

    Parameters
    ----------
    sample : Sequence[float]
        Non-empty sequence of values
    config : SigmaScreenConfig, optional
        Screening configuration; one sigma, scaled, by default

    Raises
    ------
    EmptyInputError
        If the sample has no values
    ValueError
        If the configuration is invalid
    """
    config = config or SigmaScreenConfig()
    config.validate()

    multiple = config.sigma if config.scale_deviation else ONE_SIGMA
    env = sigma_environment(sample, multiple)
    outliers = [x for x in sample if not env.contains(x)]

    get_logger(__name__).debug(
        "outliers_screened",
        n=len(sample),
        sigma=config.sigma,
        scale_deviation=config.scale_deviation,
        lower=env.lower,
        upper=env.upper,
        outliers=len(outliers),
    )
    return outliers
