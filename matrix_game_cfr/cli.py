"""
Command-line entry point.

    matrix-game-cfr -a 2 -s 100 -e 0.0001          # one run with progress
    matrix-game-cfr -a 0 -s 10 -e 0.01 -n 50       # batch statistics
"""

import argparse
from typing import List, Optional

import numpy as np

from matrix_game_cfr.solvers.equilibrium import Algorithm
from matrix_game_cfr.runner import RunConfig, run_many, run_single


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="matrix-game-cfr",
        description="Approximate Nash equilibria of random zero-sum matrix games",
    )
    p.add_argument("-a", "--algorithm", type=int, default=int(Algorithm.CFR_PLUS),
                   help="Algorithm (0 = Fictitious play, 1 = CFR, 2 = CFR+)")
    p.add_argument("-s", "--size", type=int, default=1000, help="Matrix size")
    p.add_argument("-e", "--epsilon", type=float, default=0.0001, help="Epsilon")
    p.add_argument("-n", "--runs", type=int, default=1, help="Number of times to run")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--max-iterations", type=int, default=None,
                   help="Stop a run after this many iterations")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = RunConfig(
            algorithm=args.algorithm,
            size=args.size,
            epsilon=args.epsilon,
            runs=args.runs,
            seed=args.seed,
            max_iterations=args.max_iterations,
        )
    except ValueError as e:
        parser.error(str(e))

    print(f"Algorithm: {config.algorithm.display_name}")
    print(f"Matrix size: {config.size}")
    print(f"Epsilon: {config.epsilon:f}")
    print(f"N: {config.runs}")

    if config.runs > 1:
        stats = run_many(config)
        print(stats.summary())
        return 0

    run_single(config, np.random.default_rng(config.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
