from ..sparse import NDSparseArray
from ..sparse.base import SparseArray
from ..sparse.dtypes import promote
from . import _namespace as _ns


def astype(x, dtype, /, *, copy=True):
    if isinstance(x, NDSparseArray):
        if not copy and x.dtype == dtype:
            return x
        return x.astype(dtype)
    return getattr(_ns, "astype")(x, dtype, copy=copy)


def result_type(*arrays_and_dtypes):
    """Promoted dtype of the arguments; sparse arrays contribute their dtype."""
    args = [a.dtype if isinstance(a, SparseArray) else a for a in arrays_and_dtypes]
    return promote(*args)


def can_cast(from_dtype, to_dtype, /):
    if isinstance(from_dtype, SparseArray):
        from_dtype = from_dtype.dtype
    return getattr(_ns, "can_cast")(from_dtype, to_dtype)


def isdtype(dtype, kind):
    return getattr(_ns, "isdtype")(dtype, kind)


def finfo(dtype):
    return getattr(_ns, "finfo")(dtype)


def iinfo(dtype):
    return getattr(_ns, "iinfo")(dtype)
