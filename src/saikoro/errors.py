"""
Saikoro Errors

TigerStyle: Explicit error types. Every precondition failure is an
InvalidArgumentError, raised before any generator state is touched.
"""


class RandomSourceError(Exception):
    """Base error for random source operations."""

    pass


class InvalidArgumentError(RandomSourceError, ValueError):
    """An argument violates a documented precondition.

    Subclasses ValueError so callers catching the builtin still work.
    """

    pass
