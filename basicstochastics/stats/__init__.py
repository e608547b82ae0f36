"""
Statistical computations of the package.

Example:
--------
>>> from basicstochastics.stats.common.sigma import sigma_environment
>>> env = sigma_environment([1.0, 2.0, 3.0, 4.0, 2.0])
>>> env.center
2.4
"""
