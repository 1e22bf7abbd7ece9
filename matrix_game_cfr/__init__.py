"""
Matrix Game CFR Solver

Approximate Nash equilibria of two-player zero-sum matrix games using
Fictitious Play, CFR and CFR+.
"""

__version__ = "0.1.0"
