"""
basicstochastics.core
=====================

Basic infrastructure: typed names, the sigma constant table, exceptions and
logging configuration.
"""
