from .coords import from_linear, to_linear
from .ndsparse import NDSparseArray
from .policy import DefaultSubstitution, Strict

__all__ = [
    "NDSparseArray",
    "Strict",
    "DefaultSubstitution",
    "to_linear",
    "from_linear",
]
