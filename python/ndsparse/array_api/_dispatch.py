from ..sparse import _elementwise as _ew
from ..sparse.base import SparseArray
from ._namespace import _numpy_xp


def _is_sparse(x) -> bool:
    return isinstance(x, SparseArray)


def _sparse_or_raise(result, name, x, y):
    if result is NotImplemented:
        raise TypeError(
            f"{name} is not supported for operand types "
            f"{type(x).__name__!r} and {type(y).__name__!r}"
        )
    return result


def add(x, y):
    if _is_sparse(x) or _is_sparse(y):
        return _sparse_or_raise(_ew.add(x, y), "add", x, y)
    xp = _numpy_xp()
    return xp.add(x, y)


def subtract(x, y):
    if _is_sparse(x) or _is_sparse(y):
        return _sparse_or_raise(_ew.subtract(x, y), "subtract", x, y)
    xp = _numpy_xp()
    return xp.subtract(x, y)


def multiply(x, y):
    # scalar * sparse or sparse * scalar; sparse * sparse has no sparse path
    if _is_sparse(x) and _is_sparse(y):
        raise NotImplementedError(
            "multiply for sparse inputs is only implemented for scalar*sparse"
        )
    if _is_sparse(x) or _is_sparse(y):
        return _sparse_or_raise(_ew.multiply(x, y), "multiply", x, y)
    xp = _numpy_xp()
    return xp.multiply(x, y)


def negative(x):
    if _is_sparse(x):
        return _ew.negative(x)
    xp = _numpy_xp()
    return xp.negative(x)
