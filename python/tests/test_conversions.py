from fractions import Fraction

import numpy as np
import pytest

from ndsparse import DefaultSubstitution, NDSparseArray, Strict
from ndsparse.errors import InvalidArgumentError


def test_from_dense_integer_matrix():
    D = np.array([[1, 0, 3], [0, 0, 0], [2, 0, 4]])
    A = NDSparseArray.from_dense(D)
    assert A.shape == (3, 3)
    assert A.dtype == D.dtype
    assert A.nnz == 4
    assert A[1, 1] == 1
    assert A[1, 3] == 3
    assert A[3, 1] == 2
    assert A[3, 3] == 4
    np.testing.assert_array_equal(A.to_dense(), D)


def test_from_dense_atol_for_floats():
    D = np.array([1.0, 1e-10, -1e-9, 0.5, 0.0])
    assert NDSparseArray.from_dense(D).nnz == 4
    A = NDSparseArray.from_dense(D, atol=1e-8)
    assert A.nnz == 2
    assert sorted(A.stored_coords()) == [(1,), (4,)]
    np.testing.assert_allclose(A.to_dense(), D, atol=1e-8)


def test_from_dense_atol_ignored_for_exact_types():
    D = np.array([[0, 1], [2, 0]], dtype=np.int32)
    A = NDSparseArray.from_dense(D, atol=5)
    assert A.nnz == 2
    assert A.dtype == np.int32


def test_from_dense_complex_ignores_atol():
    D = np.array([[1 + 0.001j, 0j, 0.5 + 0j], [0.001 + 0.001j, 0j, 1j]])
    A = NDSparseArray.from_dense(D, atol=0.01)
    # complex is exact: even tiny non-zero values are stored
    assert A.nnz == 4
    assert A[2, 1] == 0.001 + 0.001j
    np.testing.assert_array_equal(A.to_dense(), D)

    B = NDSparseArray.from_dense(np.array([1e-12j, 1 + 0j, 0j]), atol=1e-9)
    assert B.nnz == 2
    assert B[1] == 1e-12j


def test_from_dense_strict_policy():
    D = np.array([[0.0, 2.0], [0.0, 0.0]])
    A = NDSparseArray.from_dense(D, policy=Strict())
    assert A.nnz == 1
    assert A.is_strict
    # unassigned elements of a strict array materialize as zero
    np.testing.assert_array_equal(A.to_dense(), D)


def test_from_dense_with_nonzero_default():
    D = np.array([5, 5, 1, 5])
    A = NDSparseArray.from_dense(D, policy=DefaultSubstitution(5))
    assert A.nnz == 1
    assert A[3] == 1
    np.testing.assert_array_equal(A.to_dense(), D)


def test_from_dense_nd_and_zero_dim():
    D = np.zeros((2, 3, 4))
    D[1, 2, 3] = 7.0
    A = NDSparseArray.from_dense(D)
    assert A.nnz == 1
    assert A[2, 3, 4] == 7.0

    S = NDSparseArray.from_dense(np.array(3.0))
    assert S.shape == ()
    assert S.nnz == 1
    assert S[()] == 3.0


def test_from_dense_nested_lists_and_objects():
    A = NDSparseArray.from_dense([[True, False], [False, True]])
    assert A.dtype == np.bool_
    assert A.nnz == 2

    F = NDSparseArray.from_dense(np.array([Fraction(1, 2), Fraction(0)], dtype=object))
    assert F.dtype == object
    assert F.nnz == 1
    assert F[1] == Fraction(1, 2)


def test_from_dense_negative_atol():
    with pytest.raises(InvalidArgumentError):
        NDSparseArray.from_dense([1.0], atol=-1.0)


def test_to_dense_and_array_protocol():
    A = NDSparseArray((2, 3), dtype=np.int64)
    A[2, 3] = 9
    out = A.toarray()
    assert out.dtype == np.int64
    np.testing.assert_array_equal(out, np.array([[0, 0, 0], [0, 0, 9]]))
    np.testing.assert_array_equal(np.asarray(A), out)
    assert np.asarray(A, dtype=np.float64).dtype == np.float64


def test_array_protocol_refuses_no_copy():
    A = NDSparseArray((2,), dtype=np.int64)
    A[1] = 4
    with pytest.raises(ValueError):
        A.__array__(copy=False)
    with pytest.raises(ValueError):
        np.asarray(A, copy=False)
    np.testing.assert_array_equal(np.asarray(A, copy=True), [4, 0])
