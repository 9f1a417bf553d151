"""Monte Carlo runner comparing the stay and switch strategies."""

import logging
import numbers

import numpy as np

from montyhall.exceptions import InvalidArgumentError
from montyhall.models import RoundResult, Strategy, TrialReport
from montyhall.output import ConsoleOutput
from montyhall.simulation import RoundSimulator

logger = logging.getLogger(__name__)


class MonteCarloRunner:
    """Runs repeated Monty Hall rounds and collects the outcomes."""

    def __init__(self, seed: int | None = None):
        """Initialize Monte Carlo runner.

        Args:
            seed: Random seed for reproducibility
        """
        self.base_seed = seed if seed is not None else int(np.random.default_rng().integers(0, 2**31))

    def run(self, num_games: int = 100) -> TrialReport:
        """Play num_games rounds under both strategies.

        Args:
            num_games: Number of rounds to play; 0 gives an empty report

        Returns:
            TrialReport with all results in arrival order

        Raises:
            InvalidArgumentError: If num_games is negative or not an integer
        """
        num_games = _check_num_games(num_games)

        rng = np.random.default_rng(self.base_seed)
        simulator = RoundSimulator(rng=rng)
        logger.info(f"Playing {num_games} games (seed={self.base_seed})")

        results: list[RoundResult] = []
        for game in range(1, num_games + 1):
            game_round = simulator.play_round()
            logger.debug(
                f"Game {game}: board {game_round.board}, "
                f"pick {game_round.first_pick.value}, "
                f"opened {game_round.opened_door.value}"
            )
            results.extend(game_round.results(game))

        report = TrialReport(num_games=num_games, results=results, seed=self.base_seed)
        if report.has_data:
            logger.info(
                f"Finished: stay {report.win_rate(Strategy.STAY):.3f}, "
                f"switch {report.win_rate(Strategy.SWITCH):.3f}"
            )
        else:
            logger.info("Finished: no games played")
        return report


def _check_num_games(num_games: object) -> int:
    if isinstance(num_games, bool) or not isinstance(num_games, numbers.Integral):
        raise InvalidArgumentError(
            "Number of games must be an integer",
            {"num_games": num_games},
        )
    if num_games < 0:
        raise InvalidArgumentError(
            "Number of games must not be negative",
            {"num_games": num_games},
        )
    return int(num_games)


def play_n_games(
    n: int = 100,
    seed: int | None = None,
    verbose: bool = True,
) -> TrialReport:
    """Play n rounds and print the outcome proportions.

    Args:
        n: Number of rounds
        seed: Random seed for reproducibility
        verbose: Print the proportion table

    Returns:
        TrialReport, whether or not anything was printed
    """
    report = MonteCarloRunner(seed=seed).run(num_games=n)
    if verbose:
        ConsoleOutput.print_proportion_table(report)
    return report
