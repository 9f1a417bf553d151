"""One round played under both strategies."""

import numpy as np

from montyhall.models import GameRound, Outcome, Strategy
from montyhall.simulation.game import (
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)


class RoundSimulator:
    """Plays paired rounds: STAY and SWITCH against the same board."""

    def __init__(self, rng: np.random.Generator | None = None):
        """Initialize round simulator.

        Args:
            rng: Random number generator
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def play_round(self) -> GameRound:
        """Play a single round.

        The board, the first pick and the opened door are drawn once and
        shared by both strategies, so the two outcomes are always
        complementary.

        Returns:
            GameRound with both final picks and outcomes
        """
        board = create_game(self.rng)
        first_pick = select_door(self.rng)
        opened_door = open_goat_door(board, first_pick, self.rng)

        final_picks = {
            strategy: change_door(strategy == Strategy.STAY, opened_door, first_pick)
            for strategy in Strategy
        }
        outcomes = {
            strategy: determine_winner(final_picks[strategy], board)
            for strategy in Strategy
        }

        return GameRound(
            board=board,
            first_pick=first_pick,
            opened_door=opened_door,
            final_picks=final_picks,
            outcomes=outcomes,
        )


def play_game(rng: np.random.Generator | None = None) -> dict[Strategy, Outcome]:
    """Play one round and return the outcome for each strategy."""
    return RoundSimulator(rng=rng).play_round().outcomes
