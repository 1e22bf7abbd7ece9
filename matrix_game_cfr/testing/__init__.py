"""
Testing infrastructure.

This module provides exact reference equilibria for validating solver
output. It may import from any layer (test-only code).
"""

from matrix_game_cfr.testing.lp_reference import (
    ReferenceSolution,
    solve_reference,
    validate_against_reference,
)

__all__ = [
    'ReferenceSolution',
    'solve_reference',
    'validate_against_reference',
]
