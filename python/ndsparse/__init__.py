from ._runtime import get_fill_warn_size, set_fill_warn_size
from . import errors as errors
from .sparse import DefaultSubstitution, NDSparseArray, Strict, from_linear, to_linear
from . import array_api as array_api

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "set_fill_warn_size",
    "get_fill_warn_size",
    "errors",
    "NDSparseArray",
    "Strict",
    "DefaultSubstitution",
    "to_linear",
    "from_linear",
    "array_api",
]
