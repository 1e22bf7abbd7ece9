"""
Compute engine layer (Layer 3).

This layer provides the array backend and the numeric operations shared by
all solvers. It may only import from: matrix_game_cfr.games, matrix_game_cfr.matrix
"""

from matrix_game_cfr.engine.backend import (
    get_backend,
    Backend,
)

from matrix_game_cfr.engine.ops import (
    uniform_strategy,
    normalize_strategy,
    regret_match,
    compute_counterfactual_utilities,
    compute_expected_value,
    compute_instant_regret,
    best_response,
)

__all__ = [
    'get_backend',
    'Backend',
    'uniform_strategy',
    'normalize_strategy',
    'regret_match',
    'compute_counterfactual_utilities',
    'compute_expected_value',
    'compute_instant_regret',
    'best_response',
]
