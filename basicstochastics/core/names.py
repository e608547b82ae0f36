"""
basicstochastics.core.names
===========================

Typed names and constants shared across the package.

- `Sample`: the read-only sequence of floats every statistic consumes.
- Sigma constants: well-known multiples (``ONE_SIGMA`` ...) and the multiples
  matching common confidence levels (``FIFTY_TO_SIGMA`` ...).

The constants are rounded table values for readability at call sites; use
`basicstochastics.stats.common.sigma.confidence_to_sigma` for exact values.

Examples
--------
>>> from basicstochastics.core.names import TWO_SIGMA, CONFIDENCE_TO_SIGMA
>>> TWO_SIGMA
2.0
>>> CONFIDENCE_TO_SIGMA[0.95]
1.96
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Sequence

Sample = Sequence[float]

# sigma to percent
ONE_SIGMA = 1.0  # ~68.27%
TWO_SIGMA = 2.0  # ~95.45%
THREE_SIGMA = 3.0  # ~99.73%

# percent to sigma
FIFTY_TO_SIGMA = 0.675
SIXTY_TO_SIGMA = 0.842
SEVENTY_TO_SIGMA = 1.036
EIGHTY_TO_SIGMA = 1.282
NINETY_TO_SIGMA = 1.645
NINETY_FIVE_TO_SIGMA = 1.960
NINETY_NINE_TO_SIGMA = 2.576

SIGMA_TO_CONFIDENCE: Mapping[float, float] = MappingProxyType(
    {
        ONE_SIGMA: 0.6827,
        TWO_SIGMA: 0.9545,
        THREE_SIGMA: 0.9973,
    }
)

CONFIDENCE_TO_SIGMA: Mapping[float, float] = MappingProxyType(
    {
        0.50: FIFTY_TO_SIGMA,
        0.60: SIXTY_TO_SIGMA,
        0.70: SEVENTY_TO_SIGMA,
        0.80: EIGHTY_TO_SIGMA,
        0.90: NINETY_TO_SIGMA,
        0.95: NINETY_FIVE_TO_SIGMA,
        0.99: NINETY_NINE_TO_SIGMA,
    }
)

# Name -> value, in table order. Used by reporting.
SIGMA_CONSTANTS: Mapping[str, float] = MappingProxyType(
    {
        "ONE_SIGMA": ONE_SIGMA,
        "TWO_SIGMA": TWO_SIGMA,
        "THREE_SIGMA": THREE_SIGMA,
        "FIFTY_TO_SIGMA": FIFTY_TO_SIGMA,
        "SIXTY_TO_SIGMA": SIXTY_TO_SIGMA,
        "SEVENTY_TO_SIGMA": SEVENTY_TO_SIGMA,
        "EIGHTY_TO_SIGMA": EIGHTY_TO_SIGMA,
        "NINETY_TO_SIGMA": NINETY_TO_SIGMA,
        "NINETY_FIVE_TO_SIGMA": NINETY_FIVE_TO_SIGMA,
        "NINETY_NINE_TO_SIGMA": NINETY_NINE_TO_SIGMA,
    }
)
