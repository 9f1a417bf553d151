"""Console output formatting."""

import math

from montyhall.models import GameRound, Strategy, TrialReport


class ConsoleOutput:
    """Formats simulation results for console display."""

    @staticmethod
    def print_game_round(game_round: GameRound) -> None:
        """Print a single round, step by step.

        Args:
            game_round: Round to display
        """
        print("\n" + "=" * 50)
        print("GAME ROUND")
        print("=" * 50)
        print(f"Board:       {game_round.board}")
        print(f"First pick:  door {game_round.first_pick.value}")
        print(f"Host opens:  door {game_round.opened_door.value}")
        print("-" * 50)
        print(f"{'Strategy':<10} {'Final pick':<12} {'Outcome':<8}")
        for strategy in Strategy:
            print(
                f"{strategy.value:<10} "
                f"{game_round.final_picks[strategy].value:<12} "
                f"{game_round.outcomes[strategy].value:<8}"
            )
        print("=" * 50)

    @staticmethod
    def print_proportion_table(report: TrialReport) -> None:
        """Print row-normalised outcome proportions rounded to 2 decimals.

        Args:
            report: Trial report to summarise
        """
        if not report.has_data:
            print("No games played - no outcome proportions to show")
            return

        table = report.proportion_table().round(2)
        print(f"{'strategy':<10}" + "".join(f"{col:>8}" for col in table.columns))
        for strategy, row in table.iterrows():
            print(f"{strategy:<10}" + "".join(f"{value:>8.2f}" for value in row))

    @staticmethod
    def print_trial_summary(report: TrialReport) -> None:
        """Print the outcome table and per-strategy win rates.

        Args:
            report: Trial report to summarise
        """
        print("\n" + "=" * 50)
        print("MONTY HALL SIMULATION RESULTS")
        print(f"({report.num_games} games)")
        print("=" * 50)

        ConsoleOutput.print_proportion_table(report)
        if not report.has_data:
            print("=" * 50)
            return

        print("\nWIN RATES:")
        print("-" * 50)
        for strategy, rate in report.get_win_rates().items():
            if math.isnan(rate):
                continue
            bar = "#" * int(rate * 40)
            print(
                f"{strategy.value:<10} "
                f"{report.wins(strategy):6d} wins "
                f"{rate * 100:5.1f}% {bar}"
            )

        print("=" * 50)
