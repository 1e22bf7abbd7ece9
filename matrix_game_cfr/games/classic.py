"""
Classic zero-sum matrix games with known equilibria.

Rock-Paper-Scissors:
    Actions: Rock, Paper, Scissors. Win = +1, lose = -1, tie = 0.
    Unique equilibrium: (1/3, 1/3, 1/3) for both players, value 0.

Biased Matching Pennies:
    Payoffs [[2, -1], [-1, 1]].
    Unique equilibrium: (0.4, 0.6) for both players, value 0.2.
"""

import numpy as np

from matrix_game_cfr.games.payoff_matrix import PayoffMatrix


RPS_ACTIONS = ('Rock', 'Paper', 'Scissors')


def rock_paper_scissors() -> PayoffMatrix:
    """Rock-Paper-Scissors with cyclic +1/-1/0 payoffs."""
    payoffs = [
        #  R    P    S
        [0.0, -1.0, 1.0],   # Rock
        [1.0, 0.0, -1.0],   # Paper
        [-1.0, 1.0, 0.0],   # Scissors
    ]
    return PayoffMatrix(payoffs, name="rock-paper-scissors")


def matching_pennies(heads_bonus: float = 2.0) -> PayoffMatrix:
    """
    Matching pennies where matching on heads pays `heads_bonus`.

    With the default bonus of 2 both players mix (0.4, 0.6) at equilibrium.
    """
    payoffs = [
        [heads_bonus, -1.0],
        [-1.0, 1.0],
    ]
    return PayoffMatrix(payoffs, name="matching pennies")


def zero_game(size: int = 2) -> PayoffMatrix:
    """Degenerate game where every payoff is 0; every strategy is optimal."""
    return PayoffMatrix(np.zeros((size, size)), name=f"zero {size}x{size}")
