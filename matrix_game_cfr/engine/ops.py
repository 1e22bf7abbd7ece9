"""
Core equilibrium-finding operations on per-player vectors.

Notation (player p, opponent o = 1 - p, n actions each):
    P[p]        payoff matrix from p's view, P[p][a, b] = payoff(p, a, b)
    sigma_p     mixed strategy of p, shape (n,)
    cfu[a]      counterfactual utility of action a = (P[p] @ sigma_o)[a]
    ev          expected value of sigma_p = sum_a sigma_p[a] * cfu[a]
    r[a]        instantaneous regret = cfu[a] - ev

Both degenerate states are handled by policy rather than by raising:
an all-zero strategy accumulator and a regret vector with no positive
entry both map to the uniform distribution.

All operations take a Backend and return backend arrays unless noted.
"""

import numpy as np
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from matrix_game_cfr.matrix.builder import PlayerPayoffs
    from matrix_game_cfr.engine.backend import Backend


def uniform_strategy(num_actions: int, backend: 'Backend') -> np.ndarray:
    """
    Create uniform strategy (equal probability for every action).

    Args:
        num_actions: Number of actions
        backend: Backend

    Returns:
        strategy: Array of shape (num_actions,)
    """
    return backend.full(num_actions, 1.0 / num_actions)


def normalize_strategy(cumulative_strategy: np.ndarray, backend: 'Backend') -> np.ndarray:
    """
    Convert a strategy accumulator to the average strategy.

        if sum(S) > 0:  average = S / sum(S)
        else:           average = uniform

    Args:
        cumulative_strategy: Array of shape (num_actions,), non-negative
        backend: Backend

    Returns:
        strategy: Valid probability distribution of shape (num_actions,)
    """
    total = backend.sum(cumulative_strategy)

    if total > 0:
        return cumulative_strategy / total
    return uniform_strategy(cumulative_strategy.shape[0], backend)


def regret_match(cumulative_regret: np.ndarray, backend: 'Backend') -> np.ndarray:
    """
    Convert cumulative regrets to a strategy via regret matching.

        positive_regrets = max(0, regrets)
        if sum(positive_regrets) > 0:
            strategy = positive_regrets / sum(positive_regrets)
        else:
            strategy = uniform over actions

    Args:
        cumulative_regret: Array of shape (num_actions,)
        backend: Backend

    Returns:
        strategy: Valid probability distribution of shape (num_actions,)
    """
    positive_regrets = backend.maximum(cumulative_regret, 0.0)
    regret_sum = backend.sum(positive_regrets)

    if regret_sum > 0:
        return positive_regrets / regret_sum
    return uniform_strategy(cumulative_regret.shape[0], backend)


def compute_counterfactual_utilities(
    payoffs: 'PlayerPayoffs',
    player: int,
    opponent_strategy: np.ndarray,
    backend: 'Backend'
) -> np.ndarray:
    """
    Expected payoff of every pure action of `player` against a mixed opponent.

        cfu[a] = sum_b opponent_strategy[b] * payoff(player, a, b)

    Args:
        payoffs: Per-player payoff matrices
        player: Player index (0 or 1)
        opponent_strategy: Opponent's mixed strategy, shape (num_actions,)
        backend: Backend

    Returns:
        cfu: Array of shape (num_actions,)
    """
    assert player in (0, 1), f"Invalid player: {player}"
    return backend.matvec(payoffs.for_player(player), opponent_strategy)


def compute_expected_value(strategy: np.ndarray, cf_utilities: np.ndarray) -> float:
    """ev = sum_a strategy[a] * cfu[a]"""
    return float(strategy @ cf_utilities)


def compute_instant_regret(cf_utilities: np.ndarray, expected_value: float) -> np.ndarray:
    """
    Instantaneous counterfactual regret of each action.

        regret[a] = cfu[a] - ev

    A negative entry means the action did worse than the mixed strategy.
    """
    return cf_utilities - expected_value


def best_response(
    payoffs: 'PlayerPayoffs',
    player: int,
    opponent_strategy: np.ndarray,
    backend: 'Backend'
) -> Tuple[int, float]:
    """
    Pure best response of `player` to a fixed opponent strategy.

    Ties go to the lowest action index.

    Returns:
        (best_action, best_value)
    """
    action_values = backend.asnumpy(
        compute_counterfactual_utilities(payoffs, player, opponent_strategy, backend)
    )
    # np.argmax returns the first occurrence of the maximum
    best_action = int(np.argmax(action_values))
    return best_action, float(action_values[best_action])


# =============================================================================
# Invariant checks for debugging
# =============================================================================

def check_regret_invariant(
    strategy: np.ndarray,
    instant_regret: np.ndarray,
    backend: 'Backend',
    tolerance: float = 1e-9
) -> bool:
    """
    Check CFR invariant: sum_a sigma[a] * instant_regret[a] ~ 0.

    This must hold because:
    - instant_regret[a] = cfu[a] - ev
    - ev = sum_a sigma[a] * cfu[a]
    - Therefore: sum_a sigma[a] * (cfu[a] - ev) = ev - ev = 0

    Returns:
        True if invariant holds, raises AssertionError otherwise
    """
    strategy = backend.asnumpy(strategy)
    instant_regret = backend.asnumpy(instant_regret)

    sigma_regret_sum = np.sum(strategy * instant_regret)

    assert abs(sigma_regret_sum) < tolerance, \
        f"Regret invariant violated: " \
        f"sum(sigma * regret) = {sigma_regret_sum:.12f}, tolerance = {tolerance}"

    return True


def check_distribution_invariant(
    strategy: np.ndarray,
    backend: 'Backend',
    tolerance: float = 1e-9
) -> bool:
    """
    Check that a strategy is a probability distribution.

    Returns:
        True if invariant holds, raises AssertionError otherwise
    """
    strategy = backend.asnumpy(strategy)

    assert np.all(strategy >= 0.0), f"Negative probability in strategy: {strategy}"
    total = np.sum(strategy)
    assert abs(total - 1.0) < tolerance, \
        f"Strategy does not sum to 1: sum = {total:.12f}"

    return True
