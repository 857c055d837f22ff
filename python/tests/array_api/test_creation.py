import numpy as np
import pytest

import ndsparse.array_api as xp
from ndsparse import NDSparseArray, Strict


def test_zeros():
    A = xp.zeros((10, 20))
    assert isinstance(A, NDSparseArray)
    assert A.nnz == 0
    assert A.dtype == np.float64
    S = xp.zeros((2,), dtype=np.int64, policy=Strict())
    assert S.is_strict
    with pytest.raises(ValueError):
        xp.zeros((2,), device="gpu")


def test_ones_and_full():
    O = xp.ones((2, 3))
    assert O.nnz == 6
    np.testing.assert_array_equal(O.to_dense(), np.ones((2, 3)))

    F = xp.full((2, 2), 7)
    assert F.dtype == np.int64
    assert F.nnz == 4 and F[2, 2] == 7

    Z = xp.full((2, 2), 0.0)
    assert Z.nnz == 0


def test_like_builders():
    A = NDSparseArray((2, 2), dtype=np.int64)
    A[1, 1] = 3
    Z = xp.zeros_like(A)
    assert Z.shape == (2, 2) and Z.nnz == 0 and Z.dtype == np.int64
    F = xp.full_like(A, 2)
    assert F.nnz == 4
    np.testing.assert_array_equal(xp.zeros_like(np.ones(3)), np.zeros(3))


def test_asarray():
    A = xp.asarray([[1, 0, 3], [0, 0, 0], [2, 0, 4]])
    assert A.nnz == 4
    assert A[3, 3] == 4
    assert xp.asarray(A) is A
    assert xp.asarray(A, copy=True) is not A
    assert xp.asarray(A, copy=True) == A
    B = xp.asarray(A, dtype=np.float64)
    assert B.dtype == np.float64
    T = xp.asarray([1e-12, 1.0], atol=1e-9)
    assert T.nnz == 1
    with pytest.raises(ValueError):
        xp.asarray([1.0], copy=False)
