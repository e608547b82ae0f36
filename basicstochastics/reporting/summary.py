"""
basicstochastics.reporting.summary
==================================

Tabular reports as Polars DataFrames.

Examples
--------
>>> from basicstochastics.reporting.summary import summary_frame, sigma_table
>>> df = summary_frame({"a": [1.0, 2.0, 3.0, 4.0, 2.0], "b": [5.0, 5.0]})
>>> df.columns
['name', 'n', 'mean', 'variance', 'empiric_deviation']
>>> df.height
2
>>> sigma_table().height
10
"""

from __future__ import annotations
from typing import Mapping

import polars as pl

from basicstochastics.core.errors import EmptyInputError
from basicstochastics.core.names import SIGMA_CONSTANTS, Sample
from basicstochastics.stats.common.descriptive import empiric_deviation, mean, variance
from basicstochastics.stats.common.sigma import sigma_to_confidence

SUMMARY_SCHEMA = {
    "name": pl.Utf8,
    "n": pl.Int64,
    "mean": pl.Float64,
    "variance": pl.Float64,
    "empiric_deviation": pl.Float64,
}


def summary_frame(samples: Mapping[str, Sample]) -> pl.DataFrame:
    """
    One summary row per named sample, in mapping order.

    Raises:
        EmptyInputError: If any sample has no values; the message names it
    """
    rows = []
    for name, sample in samples.items():
        if len(sample) == 0:
            raise EmptyInputError(f"sample {name!r} must contain at least one value")
        rows.append(
            {
                "name": name,
                "n": len(sample),
                "mean": mean(sample),
                "variance": variance(sample),
                "empiric_deviation": empiric_deviation(sample),
            }
        )
    return pl.DataFrame(rows, schema=SUMMARY_SCHEMA)


def sigma_table() -> pl.DataFrame:
    """Sigma constants with the exact confidence each one covers."""
    return pl.DataFrame(
        {
            "name": list(SIGMA_CONSTANTS.keys()),
            "sigma": list(SIGMA_CONSTANTS.values()),
            "confidence": [sigma_to_confidence(v) for v in SIGMA_CONSTANTS.values()],
        },
        schema={"name": pl.Utf8, "sigma": pl.Float64, "confidence": pl.Float64},
    )
