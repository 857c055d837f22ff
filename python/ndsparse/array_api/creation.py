import numpy as np

from ..sparse import NDSparseArray
from ..sparse.dtypes import infer_dtype
from . import _namespace as _ns


def _check_device(device):
    if device is not None and device != "cpu":
        raise ValueError("Only 'cpu' device is currently supported")


def asarray(obj, /, *, dtype=None, device=None, copy=None, atol=0, policy=None):
    """Convert ``obj`` to an :class:`NDSparseArray`.

    Parameters
    ----------
    obj : NDSparseArray or array_like
        Sparse arrays are returned as-is (copied when ``copy`` is true, cast
        when ``dtype`` differs). Anything else goes through ``numpy.asarray``
        and :meth:`NDSparseArray.from_dense`.
    dtype : dtype, optional
        Element dtype of the result.
    atol : float, optional
        Tolerance for dropping near-zero floating values; see
        :meth:`NDSparseArray.from_dense`.
    policy : Strict or DefaultSubstitution, optional
        Missing-entry policy for arrays built from dense input.

    Examples
    --------
    >>> import ndsparse.array_api as xp
    >>> A = xp.asarray([[1, 0, 3], [0, 0, 0], [2, 0, 4]])
    >>> A.nnz
    4
    """
    _check_device(device)
    if isinstance(obj, NDSparseArray):
        if dtype is not None and np.dtype(dtype) != obj.dtype:
            return obj.astype(dtype)
        return obj.copy() if copy else obj
    if copy is False:
        raise ValueError("building a sparse array from dense input always copies")
    dense = np.asarray(obj, dtype=dtype)
    return NDSparseArray.from_dense(dense, atol=atol, policy=policy)


def zeros(shape, *, dtype=None, device=None, policy=None):
    """Create an empty sparse array (every element reads as zero).

    Parameters
    ----------
    shape : tuple of int
        Array shape.
    dtype : dtype, optional
        Data type (default: float64).
    device : str, optional
        Device (default: "cpu").
    policy : Strict or DefaultSubstitution, optional
        Missing-entry policy (default: zero-default substitution).

    Examples
    --------
    >>> import ndsparse.array_api as xp
    >>> A = xp.zeros((10, 20))
    >>> A.nnz
    0
    """
    _check_device(device)
    if dtype is None:
        dtype = np.float64
    return NDSparseArray(shape, dtype=dtype, policy=policy)


def full(shape, fill_value, *, dtype=None, device=None, policy=None):
    """Sparse array with ``fill_value`` everywhere.

    A non-zero fill value is stored at every coordinate, so the result is
    dense in memory; see :meth:`NDSparseArray.fill`. A zero fill value
    stores nothing.
    """
    if dtype is None:
        dtype = infer_dtype(fill_value)
    out = zeros(shape, dtype=dtype, device=device, policy=policy)
    return out.fill(fill_value)


def ones(shape, *, dtype=None, device=None, policy=None):
    """Sparse array of ones, stored at every coordinate."""
    if dtype is None:
        dtype = np.float64
    return full(shape, 1, dtype=dtype, device=device, policy=policy)


def zeros_like(x, *, dtype=None, device=None):
    if isinstance(x, NDSparseArray):
        _check_device(device)
        return x.similar(dtype=dtype)
    return getattr(_ns, "zeros_like")(x, dtype=dtype, device=device)


def full_like(x, fill_value, *, dtype=None, device=None):
    if isinstance(x, NDSparseArray):
        return x.similar(dtype=dtype).fill(fill_value)
    return getattr(_ns, "full_like")(x, fill_value, dtype=dtype, device=device)


def empty(shape, *, dtype=None, device=None):
    return getattr(_ns, "empty")(shape, dtype=dtype, device=device)
