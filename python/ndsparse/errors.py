"""Exceptions raised by ndsparse.

Every error also subclasses the closest builtin exception, so callers written
against plain Python containers (``except IndexError``) keep working.
"""

__all__ = [
    "InvalidArgumentError",
    "NDSparseError",
    "OutOfRangeError",
    "ShapeMismatchError",
]


class NDSparseError(Exception):
    """Base class for all ndsparse errors."""


class OutOfRangeError(NDSparseError, IndexError):
    """
    Raised when a coordinate or linear index falls outside the array bounds,
    or when an unassigned coordinate is read under the strict policy.
    """


class ShapeMismatchError(NDSparseError, ValueError):
    """Raised when the operands of a binary operation have different shapes."""


class InvalidArgumentError(NDSparseError, ValueError):
    """
    Raised for malformed arguments: a coordinate whose length does not match
    the array dimensionality, an invalid shape, or a value that cannot be
    stored in the array dtype without loss.
    """
