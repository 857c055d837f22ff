"""N-dimensional sparse array backed by a coordinate dictionary.

This module exposes `NDSparseArray`, an array that behaves like a dense
N-dimensional array (shape, element access, equality, arithmetic) but keeps
only explicitly assigned entries in a ``dict`` keyed by coordinate tuples.

Notes
-----
- Coordinates and linear indices are 1-based; linear indices run in
  column-major order (see `ndsparse.sparse.coords`).
- What an unassigned coordinate means is decided by the array's policy:
  `DefaultSubstitution` (reads return the default, writing the default
  deletes the entry) or `Strict` (reads fail, every write is kept).
- Arithmetic (``+``, ``-``, ``*``) allocates a new array and only visits
  stored keys; ``add_``/``sub_``/``mul_`` and the augmented operators update
  the receiver in place.
- Instances are not thread-safe. Allocating operations never mutate their
  operands; in-place operations need exclusive access to the receiver.
"""

import logging
import operator

import numpy as np

from .. import _runtime
from ..errors import InvalidArgumentError, OutOfRangeError
from . import _elementwise as _ew
from .base import SparseArray
from .coords import from_linear, iter_coords, validate, validate_linear
from .dtypes import as_dtype, coerce, is_floating, promote, zero_of
from .policy import DefaultSubstitution, Strict, is_strict

logger = logging.getLogger(__name__)


class NDSparseArray(SparseArray):
    """N-dimensional sparse array.

    Parameters
    ----------
    shape : tuple[int, ...]
        Array shape; any number of dimensions, including 0.
    dtype : numpy.dtype, optional
        Element dtype, defaults to ``np.float64``. Use ``object`` for values
        numpy has no native dtype for (``fractions.Fraction``, custom numbers).
    policy : Strict or DefaultSubstitution, optional
        Missing-entry policy. Defaults to ``DefaultSubstitution``.
    default : scalar, optional
        Default value for the ``DefaultSubstitution`` policy; the additive
        identity of ``dtype`` when omitted.

    Attributes
    ----------
    shape : tuple[int, ...]
        Array dimensions.
    ndim : int
        Number of dimensions (``len(shape)``).
    dtype : numpy.dtype
        Element dtype; every stored value is coerced to it.
    policy : Strict or DefaultSubstitution
        Missing-entry policy, with the default resolved.
    nnz : int
        Number of stored entries.

    Raises
    ------
    InvalidArgumentError
        If the shape is malformed, the default cannot be stored as ``dtype``,
        or a default is given together with a ``Strict`` policy.

    Examples
    --------
    Default substitution::

        >>> a = NDSparseArray((3, 3))
        >>> a[1, 1] = 5.0
        >>> float(a[1, 1]), float(a[1, 2]), a.nnz
        (5.0, 0.0, 1)
        >>> a[1, 1] = 0.0
        >>> a.nnz
        0

    Strict access::

        >>> b = NDSparseArray((3, 3), dtype=int, policy=Strict())
        >>> b[1, 2]
        Traceback (most recent call last):
        ...
        ndsparse.errors.OutOfRangeError: no value stored at (1, 2)
        >>> b[1, 2] = 0
        >>> b.nnz
        1
    """

    def __init__(self, shape, dtype=np.float64, policy=None, default=None):
        super().__init__(shape=shape, dtype=as_dtype(dtype))
        self.policy = self._resolve_policy(policy, default)
        self._data = {}

    def _resolve_policy(self, policy, default):
        if policy is None:
            policy = DefaultSubstitution(default)
        elif isinstance(policy, Strict):
            if default is not None:
                raise InvalidArgumentError("a Strict policy takes no default value")
            return Strict()
        elif isinstance(policy, DefaultSubstitution):
            if default is not None and policy.default is not None:
                raise InvalidArgumentError("default given both in the policy and as an argument")
            if default is not None:
                policy = DefaultSubstitution(default)
        else:
            raise InvalidArgumentError(f"unknown missing-entry policy {policy!r}")
        if policy.default is None:
            return DefaultSubstitution(zero_of(self.dtype))
        return DefaultSubstitution(coerce(policy.default, self.dtype))

    # ---------- construction ----------

    @classmethod
    def from_dense(cls, dense, atol=0, policy=None):
        """Build a sparse array from a dense array.

        Parameters
        ----------
        dense : array_like
            Source data; shape and dtype are taken from ``numpy.asarray(dense)``.
        atol : float, optional
            For real floating dtypes, values with ``abs(value - zero) <= atol``
            are not stored. Ignored for exact dtypes (bool, integer, complex,
            object), where only values equal to zero are skipped.
        policy : Strict or DefaultSubstitution, optional
            Policy of the result. "zero" is the policy's default, or the
            additive identity under ``Strict``.

        Returns
        -------
        NDSparseArray
        """
        arr = np.asarray(dense)
        if atol < 0:
            raise InvalidArgumentError(f"atol must be >= 0, got {atol!r}")
        out = cls(arr.shape, dtype=arr.dtype, policy=policy)
        zero = out._zero
        if is_floating(arr.dtype):
            keep = np.abs(arr - zero) > atol
        else:
            keep = np.asarray(arr != zero, dtype=bool)
        for idx in np.argwhere(keep):
            idx = tuple(int(i) for i in idx)
            out._data[tuple(i + 1 for i in idx)] = arr[idx]
        return out

    @classmethod
    def from_dict(cls, shape, entries, dtype=None, policy=None):
        """Build a sparse array from a ``{coordinate: value}`` mapping.

        Every entry goes through :meth:`set`, so bounds, coercion and the
        policy rules apply. Without ``dtype`` the values' promoted dtype is
        used (``float64`` for an empty mapping).
        """
        if dtype is None:
            dtype = promote(*entries.values()) if entries else np.float64
        out = cls(shape, dtype=dtype, policy=policy)
        for coord, value in entries.items():
            out.set(coord, value)
        return out

    # ---------- introspection ----------

    @property
    def nnz(self):
        """Number of stored entries."""
        return len(self._data)

    @property
    def sparsity(self):
        """Fraction of elements that are not stored (NaN for an empty shape)."""
        n = self.size
        if n == 0:
            return float("nan")
        return 1.0 - self.nnz / n

    @property
    def is_strict(self):
        return is_strict(self.policy)

    @property
    def default(self):
        """Value of unassigned coordinates, or ``None`` under ``Strict``."""
        return None if self.is_strict else self.policy.default

    @property
    def _zero(self):
        # value an unassigned coordinate stands for in arithmetic and compress()
        if self.is_strict:
            return zero_of(self.dtype)
        return self.policy.default

    # ---------- element access ----------

    def _resolve(self, key):
        if isinstance(key, (tuple, list)):
            return validate(self.shape, key)
        try:
            k = operator.index(key)
        except TypeError as e:
            raise InvalidArgumentError(
                f"index must be an int or a tuple of ints, got {type(key).__name__}"
            ) from e
        if self.ndim == 1:
            return validate(self.shape, (k,))
        return from_linear(self.shape, validate_linear(self.shape, k))

    def _store(self, coord, value):
        if not self.is_strict and value == self.policy.default:
            self._data.pop(coord, None)
        else:
            self._data[coord] = value

    def get(self, coord):
        """Value at ``coord``.

        ``coord`` is a tuple of 1-based positions, or a single 1-based
        column-major linear index.

        Raises
        ------
        InvalidArgumentError
            If the coordinate length does not match ``ndim``.
        OutOfRangeError
            If the coordinate is out of bounds, or nothing is stored there
            under the ``Strict`` policy.
        """
        c = self._resolve(coord)
        try:
            return self._data[c]
        except KeyError:
            if self.is_strict:
                raise OutOfRangeError(f"no value stored at {c}") from None
            return self.policy.default

    def set(self, coord, value):
        """Assign ``value`` at ``coord`` and return the stored form of it.

        Under ``DefaultSubstitution`` assigning the default removes the entry;
        under ``Strict`` every value is stored, zero included.
        """
        c = self._resolve(coord)
        v = coerce(value, self.dtype)
        self._store(c, v)
        return v

    def remove(self, coord):
        """Delete the entry at ``coord`` if present. Idempotent."""
        c = self._resolve(coord)
        self._data.pop(c, None)
        return self

    def has(self, coord) -> bool:
        """True if a value is stored at ``coord`` (regardless of policy)."""
        return self._resolve(coord) in self._data

    __getitem__ = get

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        self.remove(key)

    # ---------- iteration ----------

    def iterate_stored(self):
        """Iterate over stored ``(coordinate, value)`` pairs.

        Each call returns a fresh iterator; the order is stable while the array
        is not modified.
        """
        for coord, value in self._data.items():
            yield coord, value

    stored_pairs = iterate_stored

    def stored_coords(self):
        """Iterate over stored coordinates."""
        return iter(self._data)

    def stored_values(self):
        """Iterate over stored values."""
        return iter(self._data.values())

    def __iter__(self):
        return self.iterate_stored()

    def findnz(self):
        """Return ``(coords, values)`` lists of the stored entries."""
        return list(self._data.keys()), list(self._data.values())

    def findall(self, predicate):
        """Stored coordinates whose value satisfies ``predicate``.

        Only stored entries are searched; unassigned coordinates are never
        reported, even when the default would satisfy the predicate.
        """
        return [c for c, v in self._data.items() if predicate(v)]

    # ---------- conversion ----------

    def to_dense(self):
        """Convert to a dense ``numpy.ndarray`` of the same shape and dtype.

        Unassigned elements hold the default, or the additive identity under
        ``Strict``.
        """
        out = np.full(self.shape, self._zero, dtype=self.dtype)
        for coord, value in self._data.items():
            out[tuple(i - 1 for i in coord)] = value
        return out

    toarray = to_dense

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            raise ValueError("a dense array cannot be produced without a copy")
        out = self.to_dense()
        if dtype is not None:
            out = out.astype(dtype)
        return out

    def copy(self):
        """Independent copy with identical shape, policy and entries."""
        out = self.similar()
        out._data = dict(self._data)
        return out

    def similar(self, dtype=None, shape=None):
        """Empty array with the same policy.

        Changing ``dtype`` resets a ``DefaultSubstitution`` default to the new
        dtype's zero.
        """
        shape = self.shape if shape is None else shape
        if dtype is None:
            return type(self)(shape, dtype=self.dtype, policy=self.policy)
        if self.is_strict:
            return type(self)(shape, dtype=dtype, policy=Strict())
        return type(self)(shape, dtype=dtype)

    def astype(self, dtype):
        """Copy with every stored value (and the default) coerced to ``dtype``.

        Raises
        ------
        InvalidArgumentError
            If a value cannot be represented in ``dtype`` without loss.
        """
        dtype = as_dtype(dtype)
        if self.is_strict:
            out = type(self)(self.shape, dtype=dtype, policy=Strict())
        else:
            out = type(self)(self.shape, dtype=dtype, default=coerce(self.policy.default, dtype))
        for coord, value in self._data.items():
            out._store(coord, coerce(value, dtype))
        return out

    # ---------- maintenance ----------

    def drop_stored(self, value):
        """Remove every stored entry equal to ``value``; returns ``self``."""
        doomed = [c for c, v in self._data.items() if v == value]
        for c in doomed:
            del self._data[c]
        if doomed:
            logger.debug("dropped %d stored entries equal to %r", len(doomed), value)
        return self

    def compress(self):
        """Remove stored entries equal to the policy's zero; returns ``self``.

        Under ``Strict`` this is the only way to discard explicitly stored
        zeros, since writes never remove entries.
        """
        return self.drop_stored(self._zero)

    def fill(self, value):
        """Set every element to ``value``; returns ``self``.

        Filling with the default clears the array. Any other value is stored
        at every coordinate, which costs ``size`` entries; a warning is logged
        above the threshold set by :func:`ndsparse.set_fill_warn_size`.
        """
        v = coerce(value, self.dtype)
        self._data.clear()
        if not self.is_strict and v == self.policy.default:
            return self
        n = self.size
        limit = _runtime.get_fill_warn_size()
        if limit and n > limit:
            logger.warning(
                "fill(%r) materializes %d entries for shape %s; the result is dense",
                value,
                n,
                self.shape,
            )
        for coord in iter_coords(self.shape):
            self._data[coord] = v
        return self

    # ---------- comparison ----------

    def __eq__(self, other):
        if not isinstance(other, NDSparseArray):
            return NotImplemented
        return (
            self.shape == other.shape
            and self.policy == other.policy
            and self._data == other._data
        )

    __hash__ = None

    # ---------- arithmetic ----------

    def __add__(self, other):
        return _ew.add(self, other)

    def __radd__(self, other):
        return _ew.add(other, self)

    def __sub__(self, other):
        return _ew.subtract(self, other)

    def __rsub__(self, other):
        return _ew.subtract(other, self)

    def __mul__(self, other):
        return _ew.multiply(self, other)

    def __rmul__(self, other):
        return _ew.multiply(other, self)

    def __neg__(self):
        return _ew.negative(self)

    def add_(self, other):
        """In-place ``self += other``; keeps ``dtype`` and returns ``self``.

        ``other`` is an array of the same shape or a scalar. Needs exclusive
        access to ``self``. Nothing is modified if the shapes differ or a
        result cannot be stored as ``dtype``.

        The policy follows ``self + other``: a ``Strict`` receiver stays
        ``Strict`` only when ``other`` is a scalar or a ``Strict`` array.
        Otherwise it switches to ``DefaultSubstitution`` with default
        ``self_implicit + other_default``, so ``self.add_(other)`` holds the
        same elements as ``self + other`` (in ``self.dtype``).
        """
        return _ew.add_inplace(self, other)

    def sub_(self, other):
        """In-place ``self -= other``; same contract as :meth:`add_`."""
        return _ew.subtract_inplace(self, other)

    def mul_(self, scalar):
        """In-place multiplication by a scalar; same contract as :meth:`add_`."""
        return _ew.multiply_inplace(self, scalar)

    def __iadd__(self, other):
        if not _ew.is_operand(other):
            return NotImplemented
        return self.add_(other)

    def __isub__(self, other):
        if not _ew.is_operand(other):
            return NotImplemented
        return self.sub_(other)

    def __imul__(self, other):
        if not _ew.is_scalar(other):
            return NotImplemented
        return self.mul_(other)

    def __repr__(self):
        return (
            f"NDSparseArray(shape={self.shape}, nnz={self.nnz}, "
            f"dtype={self.dtype.name}, policy={self.policy!r})"
        )

    def __str__(self):
        return self.__repr__()
