"""
Payoff matrix layer (Layer 2).

Builds per-player payoff views of a game. It may only import from
matrix_game_cfr.games.
"""

from matrix_game_cfr.matrix.builder import (
    PlayerPayoffs,
    build_player_payoffs,
    validate_zero_sum,
    print_matrix_stats,
)

__all__ = [
    'PlayerPayoffs',
    'build_player_payoffs',
    'validate_zero_sum',
    'print_matrix_stats',
]
