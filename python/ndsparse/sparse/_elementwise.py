"""Elementwise arithmetic over coordinate dictionaries.

Binary operations visit the union of the operands' stored keys and nothing
else, so their cost is proportional to ``nnz(a) + nnz(b)`` and never to the
number of elements. Coordinates stored in neither operand take the value of
the operation applied to the operands' implicit values; that value becomes
the result's default, which keeps the union walk exact even for non-zero
defaults.

Result policy: ``Strict`` when both operands are ``Strict``, otherwise
``DefaultSubstitution``. Under ``DefaultSubstitution`` a result exactly equal
to the default is dropped (no tolerance); under ``Strict`` every visited key
is kept.
"""

import logging
import numbers
import operator

import numpy as np

from ..errors import ShapeMismatchError
from .base import SparseArray
from .dtypes import coerce, promote
from .policy import DefaultSubstitution, Strict

logger = logging.getLogger(__name__)

_OBJECT = np.dtype(object)


def is_scalar(x) -> bool:
    return isinstance(x, (numbers.Number, np.generic)) and not isinstance(x, SparseArray)


def is_operand(x) -> bool:
    return isinstance(x, SparseArray) or is_scalar(x)


def _cast(value, dtype):
    if dtype == _OBJECT:
        return value
    return dtype.type(value)


def _check_shapes(a, b):
    if a.shape != b.shape:
        raise ShapeMismatchError(f"operand shapes {a.shape} and {b.shape} do not match")


def _empty_result(like, dtype, strict, default):
    cls = type(like)
    if strict:
        return cls(like.shape, dtype=dtype, policy=Strict())
    return cls(like.shape, dtype=dtype, default=_cast(default, dtype))


def _binary(a, b, op):
    _check_shapes(a, b)
    rtype = promote(a.dtype, b.dtype)
    da, db = a._zero, b._zero
    strict = a.is_strict and b.is_strict
    out = _empty_result(a, rtype, strict, op(da, db))
    adata, bdata = a._data, b._data
    for c, va in adata.items():
        out._store(c, _cast(op(va, bdata.get(c, db)), rtype))
    for c, vb in bdata.items():
        if c not in adata:
            out._store(c, _cast(op(da, vb), rtype))
    logger.debug(
        "%s: %d and %d stored entries -> %d (%s)", op.__name__, len(adata), len(bdata), out.nnz, rtype
    )
    return out


def _with_scalar(x, s, op, reflected):
    rtype = promote(x.dtype, s)
    if reflected:
        f = lambda v: op(s, v)  # noqa: E731
    else:
        f = lambda v: op(v, s)  # noqa: E731
    out = _empty_result(x, rtype, x.is_strict, None if x.is_strict else f(x.policy.default))
    for c, v in x._data.items():
        out._store(c, _cast(f(v), rtype))
    return out


def _dispatch(x, y, op, arrays=True):
    xs, ys = isinstance(x, SparseArray), isinstance(y, SparseArray)
    if xs and ys:
        return _binary(x, y, op) if arrays else NotImplemented
    if xs and is_scalar(y):
        return _with_scalar(x, y, op, reflected=False)
    if ys and is_scalar(x):
        return _with_scalar(y, x, op, reflected=True)
    return NotImplemented


def add(x, y):
    """``x + y`` for two same-shape arrays, or an array and a scalar.

    A scalar shifts every stored value and the default; under ``Strict``
    unassigned coordinates stay unassigned.
    """
    return _dispatch(x, y, operator.add)


def subtract(x, y):
    """``x - y``; same operand rules as :func:`add`."""
    return _dispatch(x, y, operator.sub)


def multiply(x, y):
    """Scalar multiplication, either side. Array-by-array is not supported."""
    return _dispatch(x, y, operator.mul, arrays=False)


def negative(x):
    out = _empty_result(x, x.dtype, x.is_strict, None if x.is_strict else -x.policy.default)
    for c, v in x._data.items():
        out._store(c, _cast(-v, x.dtype))
    return out


def _inplace(a, other, op, arrays=True):
    # Everything is computed and coerced before `a` is touched.
    da = a._zero
    if isinstance(other, SparseArray):
        if not arrays:
            raise TypeError("in-place multiplication takes a scalar operand")
        _check_shapes(a, other)
        db = other._zero
        odata = other._data
        updates = {c: coerce(op(v, odata.get(c, db)), a.dtype) for c, v in a._data.items()}
        for c, vb in odata.items():
            if c not in a._data:
                updates[c] = coerce(op(da, vb), a.dtype)
        implicit = db
        # same result policy as the allocating operation
        strict = a.is_strict and other.is_strict
    elif is_scalar(other):
        updates = {c: coerce(op(v, other), a.dtype) for c, v in a._data.items()}
        implicit = other
        strict = a.is_strict
    else:
        raise TypeError(f"unsupported operand type {type(other).__name__!r}")
    if not strict:
        a.policy = DefaultSubstitution(coerce(op(da, implicit), a.dtype))
    for c, v in updates.items():
        a._store(c, v)
    return a


def add_inplace(a, other):
    return _inplace(a, other, operator.add)


def subtract_inplace(a, other):
    return _inplace(a, other, operator.sub)


def multiply_inplace(a, scalar):
    return _inplace(a, scalar, operator.mul, arrays=False)
