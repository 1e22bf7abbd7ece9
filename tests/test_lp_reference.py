"""
Tests for LP reference solutions and solver validation against them.

Run with: pytest tests/test_lp_reference.py -v
"""

import pytest
import numpy as np

from matrix_game_cfr.games.classic import matching_pennies, rock_paper_scissors
from matrix_game_cfr.games.payoff_matrix import PayoffMatrix, make_random_game
from matrix_game_cfr.solvers.equilibrium import Algorithm, EquilibriumSolver
from matrix_game_cfr.testing.lp_reference import (
    solve_maxmin,
    solve_reference,
    validate_against_reference,
)


class TestReferenceSolution:

    def test_matching_pennies(self):
        ref = solve_reference(matching_pennies())
        assert ref.value == pytest.approx(0.2, abs=1e-7)
        for strategy in ref.strategies:
            np.testing.assert_allclose(strategy, [0.4, 0.6], atol=1e-7)

    def test_rock_paper_scissors(self):
        ref = solve_reference(rock_paper_scissors())
        assert ref.value == pytest.approx(0.0, abs=1e-7)
        np.testing.assert_allclose(ref.strategies[0], [1 / 3] * 3, atol=1e-7)

    def test_saddle_point(self):
        """Row 0 / column 1 is a pure saddle point with value 1."""
        ref = solve_reference(PayoffMatrix([[3.0, 1.0], [0.0, -1.0]]))
        assert ref.value == pytest.approx(1.0, abs=1e-7)
        np.testing.assert_allclose(ref.strategies[0], [1.0, 0.0], atol=1e-7)
        np.testing.assert_allclose(ref.strategies[1], [0.0, 1.0], atol=1e-7)

    def test_maxmin_values_are_consistent(self):
        """Minimax theorem: v_1 = -v_2."""
        game = make_random_game(6, np.random.default_rng(8))
        _, v1 = solve_maxmin(game.payoffs)
        _, v2 = solve_maxmin(-game.payoffs.T)
        assert v1 == pytest.approx(-v2, abs=1e-7)


class TestSolverValidation:

    @pytest.mark.parametrize("seed", [10, 11, 12])
    def test_cfr_plus_matches_lp(self, seed):
        game = make_random_game(6, np.random.default_rng(seed))
        solver = EquilibriumSolver(game)
        solver.solve(Algorithm.CFR_PLUS, iterations=2000)

        report = validate_against_reference(solver, tolerance=0.01)
        assert report['passed'], report

    def test_exploitability_bounds_value_gap(self):
        """|profile value - game value| never exceeds twice the exploitability."""
        game = make_random_game(5, np.random.default_rng(21))
        solver = EquilibriumSolver(game)
        solver.solve(Algorithm.CFR, iterations=500)

        report = validate_against_reference(solver, tolerance=1.0)
        gap = abs(report['profile_value'] - report['game_value'])
        assert gap <= 2 * solver.exploitability() + 1e-7

    def test_unconverged_solver_fails(self):
        game = PayoffMatrix([[3.0, 1.0], [0.0, -1.0]])
        solver = EquilibriumSolver(game)

        report = validate_against_reference(solver, tolerance=0.01)
        assert not report['passed']
