"""
Square zero-sum payoff matrices.

A PayoffMatrix holds player 1's payoffs; player 2's payoffs are implied by the
zero-sum property. Matrices are either injected (known games, tests) or drawn
i.i.d. from the uniform distribution on [-1, 1].
"""

import numpy as np

from matrix_game_cfr.games.base import Game

MIN_SIZE = 2
PAYOFF_LOW = -1.0
PAYOFF_HIGH = 1.0


class PayoffMatrix(Game):
    """
    Immutable n x n zero-sum matrix game.

    The underlying buffer is copied and flagged read-only, so nothing can
    mutate the game once a solver holds it.
    """

    def __init__(self, payoffs, name: str = "matrix"):
        """
        Args:
            payoffs: Square array-like of player 1's payoffs
            name: Human-readable name for reports
        """
        matrix = np.array(payoffs, dtype=np.float64)

        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Payoff matrix must be square, got shape {matrix.shape}")
        if matrix.shape[0] < MIN_SIZE:
            raise ValueError(f"Matrix size must be at least {MIN_SIZE}, got {matrix.shape[0]}")
        if not np.all(np.isfinite(matrix)):
            raise ValueError("Payoff matrix contains NaN or Inf")

        matrix.setflags(write=False)
        self._payoffs = matrix
        self._name = name

    @classmethod
    def random(cls, size: int, rng: np.random.Generator) -> 'PayoffMatrix':
        """
        Draw a random game.

        Entries are filled in row-major order, each uniform on [-1, 1].

        Args:
            size: Number of actions per player (>= 2)
            rng: Random generator owned by the caller

        Returns:
            New PayoffMatrix
        """
        if size < MIN_SIZE:
            raise ValueError(f"Matrix size must be at least {MIN_SIZE}, got {size}")

        payoffs = rng.uniform(PAYOFF_LOW, PAYOFF_HIGH, size=(size, size))
        return cls(payoffs, name=f"random {size}x{size}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return self._payoffs.shape[0]

    @property
    def payoffs(self) -> np.ndarray:
        return self._payoffs

    def __repr__(self) -> str:
        return f"PayoffMatrix(name={self._name!r}, size={self.size})"


def make_random_game(size: int, rng: np.random.Generator) -> PayoffMatrix:
    """Create a random size x size zero-sum game from `rng`."""
    return PayoffMatrix.random(size, rng)
