"""Coordinate system for N-dimensional sparse arrays.

Coordinates are tuples of 1-based positions, one per dimension. Linear
indices are 1-based as well and enumerate elements in column-major order
(the first dimension varies fastest)::

    linear = 1 + sum((c[i] - 1) * stride[i])
    stride[0] = 1, stride[i] = stride[i - 1] * shape[i - 1]

All functions here are pure and operate on plain tuples; the array class
calls them for every access.
"""

import operator
from itertools import product

from ..errors import InvalidArgumentError, OutOfRangeError

__all__ = [
    "from_linear",
    "iter_coords",
    "normalize_shape",
    "strides",
    "to_linear",
    "total_size",
    "validate",
    "validate_linear",
]


def normalize_shape(shape):
    """Return ``shape`` as a tuple of non-negative ints.

    Raises
    ------
    InvalidArgumentError
        If an extent is not an integer or is negative.
    """
    if isinstance(shape, int):
        shape = (shape,)
    try:
        dims = tuple(operator.index(d) for d in shape)
    except TypeError as e:
        raise InvalidArgumentError(f"shape must be a tuple of ints, got {shape!r}") from e
    for d in dims:
        if d < 0:
            raise InvalidArgumentError(f"shape extents must be >= 0, got {dims}")
    return dims


def total_size(shape) -> int:
    """Number of elements described by ``shape`` (1 for a 0-d shape)."""
    n = 1
    for d in shape:
        n *= d
    return n


def strides(shape):
    """Column-major strides of ``shape``."""
    out = []
    acc = 1
    for d in shape:
        out.append(acc)
        acc *= d
    return tuple(out)


def validate(shape, coord):
    """Check ``coord`` against ``shape`` and return it as a tuple of ints.

    Parameters
    ----------
    shape : tuple[int, ...]
        Array shape.
    coord : sequence of int
        Candidate coordinate, 1-based.

    Returns
    -------
    tuple[int, ...]
        The normalized coordinate.

    Raises
    ------
    InvalidArgumentError
        If ``len(coord) != len(shape)`` or a component is not an integer.
    OutOfRangeError
        If any component lies outside ``[1, shape[i]]``.
    """
    try:
        c = tuple(operator.index(x) for x in coord)
    except TypeError as e:
        raise InvalidArgumentError(f"coordinate must contain only integers, got {coord!r}") from e
    if len(c) != len(shape):
        raise InvalidArgumentError(
            f"coordinate {c} has {len(c)} components, array has {len(shape)} dimensions"
        )
    for ci, d in zip(c, shape):
        if ci < 1 or ci > d:
            raise OutOfRangeError(f"coordinate {c} is out of bounds for shape {tuple(shape)}")
    return c


def validate_linear(shape, index) -> int:
    """Check a 1-based linear index against ``shape`` and return it as an int."""
    try:
        k = operator.index(index)
    except TypeError as e:
        raise InvalidArgumentError(f"linear index must be an integer, got {index!r}") from e
    n = total_size(shape)
    if k < 1 or k > n:
        raise OutOfRangeError(f"linear index {k} is out of bounds for {n} elements")
    return k


def to_linear(shape, coord) -> int:
    """Column-major 1-based linear index of a valid coordinate."""
    k = 1
    for ci, s in zip(coord, strides(shape)):
        k += (ci - 1) * s
    return k


def from_linear(shape, index):
    """Coordinate of a valid 1-based linear index; inverse of :func:`to_linear`."""
    rem = index - 1
    out = []
    for d in shape:
        out.append(rem % d + 1)
        rem //= d
    return tuple(out)


def iter_coords(shape):
    """Yield every coordinate of ``shape`` in column-major order."""
    ranges = [range(1, d + 1) for d in reversed(shape)]
    for rc in product(*ranges):
        yield rc[::-1]
