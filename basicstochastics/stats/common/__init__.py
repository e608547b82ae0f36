"""
basicstochastics.stats.common
=============================

Generic descriptive statistics over a single sample.

- `descriptive`: mean, population variance, empiric deviation
- `sigma`: sigma environments and sigma/confidence conversions
"""
