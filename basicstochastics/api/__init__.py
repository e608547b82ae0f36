"""
basicstochastics.api - User-Friendly Facade
===========================================

Off-the-shelf entry points for the most common questions asked of a sample:
"what does it look like?" and "which values stand out?".

- `describe()`: count, mean, variance and empiric deviation in one result
- `screen_outliers()`: values outside a configurable sigma environment

The facade delegates to `basicstochastics.stats`.
"""
