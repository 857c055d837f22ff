import numpy as np
import pytest

import ndsparse.array_api as xp
from ndsparse import NDSparseArray


def test_namespace_info_capabilities():
    info = xp.__array_namespace_info__()
    caps = info["capabilities"]
    assert caps["sparse"] is True
    assert "add" in caps.get("elementwise", [])
    assert "subtract" in caps.get("elementwise", [])
    assert "multiply" in caps.get("elementwise", [])
    assert "zeros" in caps.get("creation", [])
    assert "full" in caps.get("creation", [])


def test_array_namespace_hook():
    A = NDSparseArray((2, 2))
    assert A.__array_namespace__() is xp


def test_numpy_fallthrough_guards_sparse_inputs():
    np.testing.assert_allclose(xp.sin(np.array([0.0])), np.array([0.0]))
    with pytest.raises(NotImplementedError):
        xp.sin(NDSparseArray((2,)))
    with pytest.raises(NotImplementedError):
        xp.divide(NDSparseArray((2,)), 2.0)
    with pytest.raises(NotImplementedError):
        xp.sin(np.ones(2), out=NDSparseArray((2,)))
    assert xp.pi == np.pi
