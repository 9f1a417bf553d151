#!/usr/bin/env python3
"""Quick Monty Hall simulation.

Plays a single round with step-by-step output, then runs a batch of
games and compares the stay and switch strategies.

Usage:
    python examples/quick_simulation.py [--games N] [--seed SEED] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np

from montyhall.analysis import MonteCarloRunner
from montyhall.output import ConsoleOutput
from montyhall.simulation import RoundSimulator


def main():
    parser = argparse.ArgumentParser(description="Monty Hall Monte Carlo simulation")
    parser.add_argument(
        "--games",
        "-n",
        type=int,
        default=100,
        help="Number of games to play (default: 100)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every game",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print("Monty Hall Simulation - Quick Example")
    print("=" * 50)

    # Single round first to show how a game unfolds
    rng = np.random.default_rng(args.seed)
    ConsoleOutput.print_game_round(RoundSimulator(rng=rng).play_round())

    print(f"\nRunning Monte Carlo simulation ({args.games} games)...")
    runner = MonteCarloRunner(seed=args.seed)
    report = runner.run(num_games=args.games)
    ConsoleOutput.print_trial_summary(report)

    print(f"\nSeed: {report.seed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
