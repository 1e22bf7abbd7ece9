"""
Tests for the array backend abstraction.

Run with: pytest tests/test_backend.py -v
"""

import pytest
import numpy as np

from matrix_game_cfr.engine.backend import (
    get_backend,
    Backend
)


class TestNumpyBackend:
    """Test NumPy (CPU) backend."""

    @pytest.fixture
    def backend(self):
        return get_backend('numpy')

    def test_backend_name(self, backend):
        assert backend.name == 'numpy'
        assert isinstance(backend, Backend)

    def test_zeros(self, backend):
        arr = backend.zeros((2, 4))
        assert arr.shape == (2, 4)
        assert arr.dtype == np.float64
        assert np.all(arr == 0)

    def test_full(self, backend):
        arr = backend.full(4, 0.25)
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [0.25, 0.25, 0.25, 0.25])

    def test_maximum(self, backend):
        arr = np.array([-1.0, 0.0, 1.0, 2.0])
        result = backend.maximum(arr, 0)
        np.testing.assert_array_equal(result, [0, 0, 1, 2])

    def test_sum(self, backend):
        arr = np.array([[1.0, 2.0], [3.0, 4.0]])
        assert backend.sum(arr) == 10.0
        np.testing.assert_array_equal(backend.sum(arr, axis=1), [3.0, 7.0])

    def test_copy_is_independent(self, backend):
        arr = backend.full(3, 1.0)
        copied = backend.copy(arr)
        copied[0] = 99
        assert arr[0] == 1

    def test_matvec(self, backend):
        """[[1, 2], [3, 4]] @ [1, 1] = [3, 7]"""
        A = np.array([[1.0, 2.0], [3.0, 4.0]])
        x = np.array([1.0, 1.0])
        np.testing.assert_array_almost_equal(backend.matvec(A, x), [3, 7])

    def test_asnumpy_is_identity(self, backend):
        arr = backend.zeros(3)
        result = backend.asnumpy(arr)
        assert isinstance(result, np.ndarray)
        np.testing.assert_array_equal(result, arr)

    @pytest.mark.parametrize("method", ["array", "ones", "where"])
    def test_only_solver_operations_exposed(self, backend, method):
        """The backend carries only the operations the solvers call."""
        assert not hasattr(backend, method)


def test_get_backend_caches():
    """Verify backends are cached."""
    b1 = get_backend('numpy')
    b2 = get_backend('numpy')
    assert b1 is b2


def test_invalid_backend_raises():
    """Unknown backend names, including GPU ones, should raise."""
    with pytest.raises(ValueError, match="Unknown backend"):
        get_backend('cupy')
