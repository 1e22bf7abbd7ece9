"""
Convergence driver.

Runs a solver until the exploitability of its average strategies drops to a
threshold, either once with per-iteration progress or many times on fresh
random games with min/max/mean iteration statistics.

Each batch run gets its own generator spawned from one SeedSequence, so a
batch is reproducible from its seed and runs never share random state.
"""

import numbers
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np
from tqdm import tqdm

from matrix_game_cfr.games.payoff_matrix import PayoffMatrix
from matrix_game_cfr.matrix.builder import print_matrix_stats
from matrix_game_cfr.solvers.equilibrium import Algorithm, EquilibriumSolver


# (min, max) accepted by RunConfig
ALGORITHM_RANGE = (0, 2)
SIZE_RANGE = (2, 100000)
EPSILON_RANGE = (1e-12, 1.0)
RUNS_RANGE = (1, 100000)


@dataclass
class RunConfig:
    """Parameters of a convergence run."""
    algorithm: int = Algorithm.CFR_PLUS
    size: int = 1000
    epsilon: float = 0.0001
    runs: int = 1
    seed: Optional[int] = None
    max_iterations: Optional[int] = None

    def __post_init__(self):
        _check_range("algorithm", self.algorithm, ALGORITHM_RANGE, numbers.Integral)
        _check_range("size", self.size, SIZE_RANGE, numbers.Integral)
        _check_range("epsilon", self.epsilon, EPSILON_RANGE)
        _check_range("runs", self.runs, RUNS_RANGE, numbers.Integral)
        if self.max_iterations is not None:
            _check_range("max_iterations", self.max_iterations, (1, float("inf")),
                         numbers.Integral)

        self.algorithm = Algorithm(self.algorithm)


def _check_range(name, value, bounds, kind=numbers.Real):
    low, high = bounds
    # bool is an Integral subclass
    if isinstance(value, bool) or not isinstance(value, kind):
        expected = "an integer" if kind is numbers.Integral else "a number"
        raise ValueError(f"{name} must be {expected}, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


@dataclass
class RunStats:
    """Iteration counts of a batch of runs."""
    counts: List[int] = field(default_factory=list)

    @property
    def min(self) -> int:
        return min(self.counts)

    @property
    def max(self) -> int:
        return max(self.counts)

    @property
    def mean(self) -> float:
        return sum(self.counts) / len(self.counts)

    def summary(self) -> str:
        return f"min {self.min} | max {self.max} | avg {self.mean:.1f}"


def run_until_converged(
    solver: EquilibriumSolver,
    algorithm: Algorithm,
    epsilon: float,
    max_iterations: Optional[int] = None,
    callback: Optional[Callable[[int, float], None]] = None
) -> int:
    """
    Iterate until exploitability <= epsilon.

    At least one iteration is always run. Without `max_iterations` the loop
    is unbounded; an unreachable epsilon never returns.

    Args:
        solver: Fresh solver
        algorithm: Algorithm to iterate
        epsilon: Exploitability threshold
        max_iterations: Optional cap on the solver's iteration count
        callback: Called with (iteration, exploitability) after each iteration

    Returns:
        Solver iteration count when the loop stopped
    """
    while True:
        solver.iterate(algorithm)
        exploitability = solver.exploitability()

        if callback is not None:
            callback(solver.iterations, exploitability)

        if exploitability <= epsilon:
            break
        if max_iterations is not None and solver.iterations >= max_iterations:
            break

    return solver.iterations


def run_single(
    config: RunConfig,
    rng: np.random.Generator,
    progress: bool = True
) -> EquilibriumSolver:
    """
    Solve one random game, printing "i=... t=... e=..." per iteration.

    Returns:
        The solver after convergence
    """
    if progress:
        print("init")
    game = PayoffMatrix.random(config.size, rng)
    solver = EquilibriumSolver(game)

    if progress:
        print_matrix_stats(solver.payoffs)
        print("start")
    start = time.perf_counter()

    def report(iteration, exploitability):
        elapsed = time.perf_counter() - start
        print(f"i={iteration} t={elapsed:.2f} e={exploitability:.6f}")

    run_until_converged(
        solver,
        config.algorithm,
        config.epsilon,
        max_iterations=config.max_iterations,
        callback=report if progress else None,
    )
    return solver


def run_many(config: RunConfig, progress: bool = True) -> RunStats:
    """
    Solve `config.runs` independent random games.

    Returns:
        RunStats with one iteration count per run
    """
    children = np.random.SeedSequence(config.seed).spawn(config.runs)
    stats = RunStats()

    for child in tqdm(children, desc="runs", disable=not progress):
        rng = np.random.default_rng(child)
        solver = EquilibriumSolver(PayoffMatrix.random(config.size, rng))
        stats.counts.append(run_until_converged(
            solver,
            config.algorithm,
            config.epsilon,
            max_iterations=config.max_iterations,
        ))

    return stats
