"""Element dtypes: inference, promotion and lossless coercion.

Sparse arrays carry a ``numpy.dtype``. Numeric values use numpy's own
promotion table; anything numpy cannot represent natively (``Fraction``,
user-defined numbers) lives in an ``object`` array and is stored as-is.
"""

import numbers

import numpy as np

from ..errors import InvalidArgumentError

_OBJECT = np.dtype(object)


def as_dtype(dtype):
    """Normalize ``dtype`` (type, string or numpy.dtype) to a ``numpy.dtype``."""
    try:
        return np.dtype(dtype)
    except TypeError as e:
        raise InvalidArgumentError(f"unsupported dtype {dtype!r}") from e


def infer_dtype(value):
    """Dtype a single scalar would be stored as.

    Examples
    --------
    >>> infer_dtype(1.5)
    dtype('float64')
    >>> from fractions import Fraction
    >>> infer_dtype(Fraction(1, 2))
    dtype('O')
    """
    if isinstance(value, np.generic):
        return value.dtype
    if isinstance(value, (bool, int, float, complex)):
        return np.dtype(type(value))
    return _OBJECT


def promote(*types_or_values):
    """Smallest dtype every argument converts into without loss.

    Arguments may be dtypes or scalar values; values are first mapped through
    :func:`infer_dtype`. ``object`` absorbs everything.
    """
    dts = []
    for t in types_or_values:
        if isinstance(t, np.dtype):
            dts.append(t)
        elif isinstance(t, type) and issubclass(t, (np.generic, bool, int, float, complex)):
            dts.append(np.dtype(t))
        else:
            dts.append(infer_dtype(t))
    if any(d == _OBJECT for d in dts):
        return _OBJECT
    return np.result_type(*dts)


def is_floating(dtype) -> bool:
    """True for real floating dtypes; complex counts as exact."""
    return np.issubdtype(dtype, np.floating)


def zero_of(dtype):
    """Additive identity of ``dtype``."""
    if dtype == _OBJECT:
        return 0
    return dtype.type(0)


def coerce(value, dtype):
    """Convert ``value`` to ``dtype``, refusing lossy conversions.

    Raises
    ------
    InvalidArgumentError
        If the value does not fit (fractional float into an int dtype,
        non-zero imaginary part into a real dtype, overflow, or a type numpy
        cannot convert).
    """
    if dtype == _OBJECT:
        return value
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        if dtype.kind != "c" and value.imag != 0:
            raise InvalidArgumentError(f"cannot store complex value {value!r} as {dtype}")
        if dtype.kind != "c":
            value = value.real
    try:
        out = dtype.type(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgumentError(f"cannot store {value!r} as {dtype}") from e
    if dtype.kind in "iub" and out != value:
        raise InvalidArgumentError(f"cannot store {value!r} as {dtype} without loss")
    return out
