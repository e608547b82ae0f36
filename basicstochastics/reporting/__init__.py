"""
basicstochastics.reporting
==========================

Polars-backed reports over one or more named samples.
"""
