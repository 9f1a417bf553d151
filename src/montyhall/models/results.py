"""Round and trial results."""

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
import pandas as pd

from montyhall.models.game import Door, GameBoard


class Strategy(str, Enum):
    """Contestant policy after the host opens a door."""

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Result of a final pick."""

    WIN = "WIN"
    LOSE = "LOSE"


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one strategy in one round."""

    game: int
    strategy: Strategy
    outcome: Outcome


@dataclass(frozen=True)
class GameRound:
    """Full record of a round played under both strategies."""

    board: GameBoard
    first_pick: Door
    opened_door: Door
    final_picks: dict[Strategy, Door]
    outcomes: dict[Strategy, Outcome]

    def results(self, game: int) -> list[RoundResult]:
        """Flatten into RoundResults, STAY first."""
        return [
            RoundResult(game=game, strategy=strategy, outcome=self.outcomes[strategy])
            for strategy in Strategy
        ]


@dataclass
class TrialReport:
    """All results from a batch of rounds plus derived win rates."""

    num_games: int
    results: list[RoundResult] = field(default_factory=list)
    seed: int | None = None

    @property
    def has_data(self) -> bool:
        return bool(self.results)

    def wins(self, strategy: Strategy) -> int:
        """Number of rounds the strategy won."""
        return sum(
            1 for r in self.results
            if r.strategy == strategy and r.outcome == Outcome.WIN
        )

    def win_rate(self, strategy: Strategy) -> float:
        """Fraction of rounds won by the strategy, NaN when no rounds were played."""
        won = [r.outcome == Outcome.WIN for r in self.results if r.strategy == strategy]
        if not won:
            return math.nan
        return float(np.mean(won))

    def get_win_rates(self) -> dict[Strategy, float]:
        """Win rate for each strategy."""
        return {strategy: self.win_rate(strategy) for strategy in Strategy}

    def to_dataframe(self) -> pd.DataFrame:
        """One row per (round, strategy), in arrival order."""
        return pd.DataFrame(
            {
                "game": [r.game for r in self.results],
                "strategy": [r.strategy.value for r in self.results],
                "outcome": [r.outcome.value for r in self.results],
            },
            columns=["game", "strategy", "outcome"],
        )

    def proportion_table(self) -> pd.DataFrame:
        """Row-normalised outcome proportions per strategy.

        Rows are strategies, columns are outcomes (LOSE, WIN). Values keep
        full precision; every cell is NaN when no rounds were played.
        """
        rows = [s.value for s in Strategy]
        columns = sorted(o.value for o in Outcome)

        if not self.has_data:
            table = pd.DataFrame(np.nan, index=rows, columns=columns)
        else:
            df = self.to_dataframe()
            table = pd.crosstab(df["strategy"], df["outcome"], normalize="index")
            table = table.reindex(index=rows, columns=columns, fill_value=0.0)

        table.index.name = "strategy"
        table.columns.name = "outcome"
        return table
