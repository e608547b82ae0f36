"""
basicstochastics.core.errors
============================

Exceptions raised by the package.

>>> from basicstochastics.core.errors import EmptyInputError
>>> issubclass(EmptyInputError, ValueError)
True
"""


class EmptyInputError(ValueError):
    """Raised when a statistic is requested for a sample without elements."""

    def __init__(self, message: str = "sample must contain at least one value") -> None:
        super().__init__(message)
