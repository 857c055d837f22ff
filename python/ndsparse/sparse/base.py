"""Base class for sparse arrays.

This class defines the minimal interface shared by concrete sparse types in
`ndsparse.sparse`: shape/dtype bookkeeping and the array namespace hook.
"""

from .coords import normalize_shape, total_size


class SparseArray:
    """Abstract base class for sparse N-dimensional arrays.

    Parameters
    ----------
    shape : tuple[int, ...]
        Array shape. Stored as a tuple of non-negative ints.
    dtype : numpy.dtype, optional
        Element dtype.

    Attributes
    ----------
    shape : tuple[int, ...]
        Array shape.
    ndim : int
        Number of dimensions, equal to ``len(shape)``.
    dtype : numpy.dtype
        Element type.
    """

    # numpy must defer to our operators instead of broadcasting us as an object scalar
    __array_ufunc__ = None

    def __init__(self, shape, dtype=None):
        self.shape = normalize_shape(shape)
        self.ndim = len(self.shape)
        self.dtype = dtype

    @property
    def size(self) -> int:
        """Total number of elements (product of ``shape``; 1 for 0-d)."""
        return total_size(self.shape)

    def __len__(self):
        if self.ndim == 0:
            raise TypeError("len() of unsized object")
        return self.shape[0]

    def __array_namespace__(self, api_version=None):
        import ndsparse.array_api as xp

        return xp
