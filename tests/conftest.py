"""Shared fixtures for solver tests."""

import pytest
import numpy as np

from matrix_game_cfr.games.payoff_matrix import make_random_game
from matrix_game_cfr.solvers.equilibrium import Algorithm


ALL_ALGORITHMS = [Algorithm.FICTITIOUS_PLAY, Algorithm.CFR, Algorithm.CFR_PLUS]
REGRET_ALGORITHMS = [Algorithm.CFR, Algorithm.CFR_PLUS]


@pytest.fixture
def random_game():
    """Fixed 5x5 random game."""
    return make_random_game(5, np.random.default_rng(12345))


def record_trajectory(solver, algorithm, iterations):
    """Run `iterations` steps and return per-step copies of both accumulators."""
    strategies, regrets = [], []
    for _ in range(iterations):
        solver.iterate(algorithm)
        strategies.append(np.stack([solver.cumulative_strategy(p) for p in range(2)]))
        regrets.append(np.stack([solver.cumulative_regret(p) for p in range(2)]))
    return np.array(strategies), np.array(regrets)
