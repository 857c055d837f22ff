import numpy as np
import pytest

import ndsparse.array_api as xp
from ndsparse import NDSparseArray
from ndsparse.errors import ShapeMismatchError


def make_pair():
    A = xp.asarray([[1, 0], [0, 2]])
    B = xp.asarray([[0.5, 1.0], [0.0, -2.0]])
    return A, B


def test_add_subtract_sparse():
    A, B = make_pair()
    C = xp.add(A, B)
    assert isinstance(C, NDSparseArray)
    assert C.dtype == np.float64
    np.testing.assert_allclose(C.to_dense(), A.to_dense() + B.to_dense())
    # (2,2): 2 + -2 cancels
    assert not C.has((2, 2))
    D = xp.subtract(A, B)
    np.testing.assert_allclose(D.to_dense(), A.to_dense() - B.to_dense())
    with pytest.raises(ShapeMismatchError):
        xp.add(A, xp.zeros((3, 3)))


def test_multiply_scalar():
    A, _ = make_pair()
    np.testing.assert_array_equal(xp.multiply(A, 3).to_dense(), 3 * A.to_dense())
    np.testing.assert_array_equal(xp.multiply(3, A).to_dense(), 3 * A.to_dense())
    with pytest.raises(NotImplementedError):
        xp.multiply(A, A)
    with pytest.raises(TypeError):
        xp.add(A, np.ones((2, 2)))


def test_negative_and_dense_passthrough():
    A, _ = make_pair()
    np.testing.assert_array_equal(xp.negative(A).to_dense(), -A.to_dense())
    np.testing.assert_array_equal(xp.add(np.ones(2), np.ones(2)), np.full(2, 2.0))
    np.testing.assert_array_equal(xp.negative(np.ones(2)), -np.ones(2))


def test_result_type_and_astype():
    A, B = make_pair()
    assert xp.result_type(A, B) == np.float64
    assert xp.result_type(A, np.complex128) == np.complex128
    F = xp.astype(A, np.float64)
    assert F.dtype == np.float64
    assert xp.astype(A, A.dtype, copy=False) is A
    assert xp.can_cast(A, np.float64)
