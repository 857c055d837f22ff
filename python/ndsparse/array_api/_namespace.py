import itertools
from typing import Any, Dict

from ..sparse.base import SparseArray


def _numpy_xp():
    import numpy as xp

    return xp


def __array_namespace_info__() -> Dict[str, Any]:
    return {
        "devices": ["cpu"],
        "default_device": "cpu",
        "dtypes": ["bool", "int64", "float64", "complex128", "object"],
        "default_dtypes": {
            "floating": "float64",
            "integral": "int64",
            "complex floating": "complex128",
            "boolean": "bool",
        },
        "capabilities": {
            # Global
            "sparse": True,
            # Sparse-first ops; everything else defers to numpy for dense inputs
            "elementwise": ["add", "subtract", "multiply", "negative"],
            "creation": ["asarray", "zeros", "ones", "full", "zeros_like", "full_like"],
            "dtypes": ["astype", "result_type"],
        },
    }


def __getattr__(name: str):
    xp = _numpy_xp()
    attr = getattr(xp, name)

    if callable(attr):

        def guarded(*args, **kwargs):
            if any(isinstance(v, SparseArray) for v in itertools.chain(args, kwargs.values())):
                raise NotImplementedError(f"ndsparse.array_api.{name} has no sparse implementation")
            return attr(*args, **kwargs)

        return guarded

    return attr
