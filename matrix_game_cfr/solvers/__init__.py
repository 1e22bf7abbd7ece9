"""
Equilibrium solver layer (Layer 4 - highest).

This layer implements Fictitious Play, CFR and CFR+ for matrix games.
It may import from: matrix_game_cfr.games, matrix_game_cfr.matrix, matrix_game_cfr.engine
"""

from matrix_game_cfr.solvers.equilibrium import Algorithm, EquilibriumSolver

__all__ = ['Algorithm', 'EquilibriumSolver']
