"""
Builder for per-player payoff matrices.

Every solver operation is phrased from the acting player's point of view:
    P[p][a, b] = payoff to player p for playing a against the opponent's b

For a zero-sum game with player 1 matrix M:
    P[0] = M
    P[1] = -M^T

Stacking both views into one (2, n, n) array lets counterfactual utilities
and best responses be a single matrix-vector product per player.
"""

import numpy as np
from dataclasses import dataclass

from matrix_game_cfr.games.base import Game


@dataclass
class PlayerPayoffs:
    """Payoff matrices seen from each player's perspective."""

    # (2, num_actions, num_actions)
    # by_player[p, a, b] = payoff(p, a, b)
    by_player: np.ndarray

    num_actions: int

    def for_player(self, player: int) -> np.ndarray:
        """Payoff matrix (own action x opponent action) for `player`."""
        return self.by_player[player]


def build_player_payoffs(game: Game) -> PlayerPayoffs:
    """
    Build per-player payoff matrices from a game.

    Args:
        game: Square zero-sum matrix game

    Returns:
        PlayerPayoffs with read-only (2, n, n) float64 array
    """
    M = np.asarray(game.payoffs, dtype=np.float64)

    by_player = np.empty((2, game.size, game.size), dtype=np.float64)
    by_player[0] = M
    by_player[1] = -M.T
    by_player.setflags(write=False)

    return PlayerPayoffs(by_player=by_player, num_actions=game.size)


def validate_zero_sum(payoffs: PlayerPayoffs, tolerance: float = 0.0) -> bool:
    """
    Check payoff(0, a, b) == -payoff(1, b, a) for every action pair.

    Returns:
        True if the check passes, raises AssertionError otherwise
    """
    P = payoffs.by_player
    assert P.shape == (2, payoffs.num_actions, payoffs.num_actions), \
        f"Unexpected payoff shape {P.shape}"
    assert not np.any(np.isnan(P)), "payoffs contain NaN"
    assert not np.any(np.isinf(P)), "payoffs contain Inf"

    max_violation = np.max(np.abs(P[0] + P[1].T))
    assert max_violation <= tolerance, \
        f"Zero-sum property violated: max |P0 + P1^T| = {max_violation:.9f}"

    return True


def print_matrix_stats(payoffs: PlayerPayoffs):
    """Print statistics about the payoff matrices."""
    M = payoffs.by_player[0]
    print(f"Payoff Matrix Statistics:")
    print(f"  Actions per player: {payoffs.num_actions}")
    print(f"  Entries: {M.size}")
    print(f"  Min payoff: {M.min():.4f}")
    print(f"  Max payoff: {M.max():.4f}")
    print(f"  Mean payoff: {M.mean():.4f}")
