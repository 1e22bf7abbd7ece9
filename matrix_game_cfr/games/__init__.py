"""
Game definitions layer (Layer 1 - lowest).

This layer defines zero-sum matrix games. It has no internal dependencies.
"""

from matrix_game_cfr.games.base import Player, Game
from matrix_game_cfr.games.payoff_matrix import PayoffMatrix, make_random_game
from matrix_game_cfr.games.classic import (
    rock_paper_scissors,
    matching_pennies,
    zero_game,
)

__all__ = [
    'Player',
    'Game',
    'PayoffMatrix',
    'make_random_game',
    'rock_paper_scissors',
    'matching_pennies',
    'zero_game',
]
