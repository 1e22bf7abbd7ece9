"""
Equilibrium solver for two-player zero-sum matrix games.

One solver instance owns a game, a strategy accumulator and a regret
accumulator per player, and exposes one iteration step for each of three
algorithms:

    Fictitious Play: each player adds 1 to its best response against the
                     opponent's average strategy.
    CFR:             regret matching on cumulative counterfactual regrets,
                     uniform averaging of the current strategies.
    CFR+:            CFR with regrets floored at 0 after every update and
                     quadratic (t^2) weighting of the average strategy.

Within one iteration player 1 is updated after player 0 and sees the state
player 0 just wrote. Exploitability is always measured on the average
strategies.

Reference: Tammelin et al., "Solving Large Imperfect Information Games Using CFR+"
"""

import numpy as np
from enum import IntEnum
from typing import Literal, Union

from matrix_game_cfr.games.base import Game, Player
from matrix_game_cfr.matrix.builder import build_player_payoffs, validate_zero_sum
from matrix_game_cfr.engine.backend import get_backend
from matrix_game_cfr.engine.ops import (
    normalize_strategy,
    regret_match,
    compute_counterfactual_utilities,
    compute_expected_value,
    compute_instant_regret,
    best_response,
    check_regret_invariant,
    check_distribution_invariant,
)


class Algorithm(IntEnum):
    """Iteration rules, numbered as on the command line."""
    FICTITIOUS_PLAY = 0
    CFR = 1
    CFR_PLUS = 2

    @property
    def display_name(self) -> str:
        return _ALGORITHM_NAMES[self]


_ALGORITHM_NAMES = {
    Algorithm.FICTITIOUS_PLAY: "Fictitious play",
    Algorithm.CFR: "CFR",
    Algorithm.CFR_PLUS: "CFR+",
}


class EquilibriumSolver:
    """
    Iterative equilibrium finder for a single zero-sum matrix game.

    A solver is single-use: create it, call iterate() until exploitability()
    is small enough, then read the average strategies.
    """

    def __init__(
        self,
        game: Game,
        backend: Literal['numpy'] = 'numpy',
        check_invariants: bool = False
    ):
        """
        Initialize the solver.

        Args:
            game: Game to solve
            backend: Array backend name
            check_invariants: If True, check the payoffs are zero-sum and run
                invariant checks on every update (slower but useful for debugging)
        """
        self.game = game
        self.backend = get_backend(backend)
        self.payoffs = build_player_payoffs(game)
        self.num_actions = self.payoffs.num_actions
        self.check_invariants = check_invariants

        if check_invariants:
            validate_zero_sum(self.payoffs)

        # Accumulators, one row per player
        self._cumulative_strategy = self.backend.zeros((2, self.num_actions))
        self._cumulative_regret = self.backend.zeros((2, self.num_actions))

        self.iterations = 0

        self._updates = {
            Algorithm.FICTITIOUS_PLAY: self._fictitious_play,
            Algorithm.CFR: self._cfr,
            Algorithm.CFR_PLUS: self._cfr_plus,
        }

    def iterate(self, algorithm: Union[Algorithm, int]) -> None:
        """
        Run one iteration of `algorithm` for both players.

        Args:
            algorithm: Algorithm member or its integer selector (0, 1, 2)
        """
        update = self._updates[Algorithm(algorithm)]

        self.iterations += 1
        for player in Player:
            update(player)

    def solve(self, algorithm: Union[Algorithm, int], iterations: int = 1000) -> None:
        """
        Run a fixed number of iterations.

        Args:
            algorithm: Algorithm to run
            iterations: Number of iterations to run
        """
        for _ in range(iterations):
            self.iterate(algorithm)

    # ------------------------------------------------------------------
    # Per-player updates
    # ------------------------------------------------------------------

    def _fictitious_play(self, player: int) -> None:
        """Add one unit to the best response against the opponent's average."""
        best_action = self.best_response_action(player)
        self._cumulative_strategy[player, best_action] += 1.0

    def _regret_update(self, player: int):
        """
        Shared CFR / CFR+ step.

        Returns:
            (player's current strategy, instantaneous regrets)
        """
        sp = self.current_strategy(player)
        so = self.current_strategy(Player(player).opponent)

        cfu = compute_counterfactual_utilities(self.payoffs, player, so, self.backend)
        ev = compute_expected_value(sp, cfu)
        instant_regret = compute_instant_regret(cfu, ev)

        if self.check_invariants:
            check_distribution_invariant(sp, self.backend)
            check_distribution_invariant(so, self.backend)
            check_regret_invariant(sp, instant_regret, self.backend)

        return sp, instant_regret

    def _cfr(self, player: int) -> None:
        """Vanilla CFR: unclamped regrets, uniform strategy averaging."""
        sp, instant_regret = self._regret_update(player)

        self._cumulative_regret[player] += instant_regret
        self._cumulative_strategy[player] += sp

    def _cfr_plus(self, player: int) -> None:
        """CFR+: regrets floored at 0, strategy weighted by t^2."""
        sp, instant_regret = self._regret_update(player)

        self._cumulative_regret[player] = self.backend.maximum(
            self._cumulative_regret[player] + instant_regret,
            0.0
        )

        t = self.iterations
        self._cumulative_strategy[player] += sp * t * t

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def average_strategy(self, player: int) -> np.ndarray:
        """Get average strategy (converges to Nash equilibrium)."""
        strategy = normalize_strategy(self._cumulative_strategy[player], self.backend)
        return self.backend.asnumpy(strategy)

    def current_strategy(self, player: int) -> np.ndarray:
        """Get current strategy from regret matching."""
        strategy = regret_match(self._cumulative_regret[player], self.backend)
        return self.backend.asnumpy(strategy)

    def cumulative_strategy(self, player: int) -> np.ndarray:
        """Copy of the unnormalized strategy accumulator."""
        return self.backend.asnumpy(self.backend.copy(self._cumulative_strategy[player]))

    def cumulative_regret(self, player: int) -> np.ndarray:
        """Copy of the cumulative regret accumulator."""
        return self.backend.asnumpy(self.backend.copy(self._cumulative_regret[player]))

    # ------------------------------------------------------------------
    # Best response and exploitability
    # ------------------------------------------------------------------

    def best_response_action(self, player: int) -> int:
        """Lowest-index best response to the opponent's average strategy."""
        opponent = Player(player).opponent
        action, _ = best_response(
            self.payoffs, player, self.average_strategy(opponent), self.backend
        )
        return action

    def best_response_value(self, player: int) -> float:
        """
        Compute the best response value for a player.

        This is the expected value when the player plays optimally against
        the opponent's average strategy.
        """
        opponent = Player(player).opponent
        _, value = best_response(
            self.payoffs, player, self.average_strategy(opponent), self.backend
        )
        return value

    def exploitability(self) -> float:
        """
        Compute exploitability of the average strategy profile.

        Returns the mean of both players' best response values. This is 0 at
        a Nash equilibrium and positive otherwise.
        """
        return (self.best_response_value(0) + self.best_response_value(1)) / 2

    def print_strategy(self) -> None:
        """Print the average strategy of both players."""
        print(f"\nAverage Strategy after {self.iterations} iterations "
              f"({self.game.name}):")
        print("-" * 50)

        for player in Player:
            probs = self.average_strategy(player)
            action_strs = [f"a{a}={p:.3f}" for a, p in enumerate(probs)]
            print(f"P{player+1}: {', '.join(action_strs)}")

        print(f"Exploitability: {self.exploitability():.6f}")
