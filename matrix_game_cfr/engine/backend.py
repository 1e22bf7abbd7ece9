"""
Backend abstraction for array computation.

All solver state lives in arrays created through a Backend, so array
allocation, dtype and conversion back to plain NumPy go through one place.

Usage:
    backend = get_backend('numpy')
    x = backend.zeros(10)
    y = backend.full(10, 0.1)
"""

from typing import Literal
from dataclasses import dataclass
import numpy as np


BackendType = Literal['numpy']


@dataclass
class Backend:
    """
    Array backend abstraction.

    Solvers accumulate in float64; long CFR+ runs add weights of order t^2.
    """
    name: BackendType
    xp: any  # numpy module

    def zeros(self, shape, dtype=np.float64):
        """Create zero-filled array."""
        return self.xp.zeros(shape, dtype=dtype)

    def full(self, shape, fill_value, dtype=np.float64):
        """Create array filled with value."""
        return self.xp.full(shape, fill_value, dtype=dtype)

    def copy(self, arr):
        """Copy array."""
        return arr.copy()

    def asnumpy(self, arr):
        """Convert to numpy array (for results)."""
        return np.asarray(arr)

    def maximum(self, arr, val):
        """Element-wise maximum."""
        return self.xp.maximum(arr, val)

    def sum(self, arr, axis=None):
        """Sum array."""
        return self.xp.sum(arr, axis=axis)

    def matvec(self, A, x):
        """Dense matrix-vector multiply: y = A @ x"""
        return A @ x


# Global backend cache
_backends = {}


def get_backend(name: BackendType = 'numpy') -> Backend:
    """
    Get or create a backend instance.

    Args:
        name: 'numpy' (the only supported backend)

    Returns:
        Backend instance
    """
    if name in _backends:
        return _backends[name]

    if name == 'numpy':
        backend = Backend(name='numpy', xp=np)
    else:
        raise ValueError(f"Unknown backend: {name}. Use 'numpy'.")

    _backends[name] = backend
    return backend
