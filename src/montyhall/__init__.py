"""Monte Carlo simulation of the Monty Hall problem."""

from montyhall.analysis import MonteCarloRunner, play_n_games
from montyhall.exceptions import (
    InvalidArgumentError,
    InvalidBoardError,
    InvalidDoorError,
    MontyHallError,
)
from montyhall.models import Door, GameBoard, Outcome, Prize, Strategy, TrialReport
from montyhall.simulation import (
    RoundSimulator,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    play_game,
    select_door,
)

__version__ = "0.1.0"

__all__ = [
    "Door",
    "GameBoard",
    "InvalidArgumentError",
    "InvalidBoardError",
    "InvalidDoorError",
    "MonteCarloRunner",
    "MontyHallError",
    "Outcome",
    "Prize",
    "RoundSimulator",
    "Strategy",
    "TrialReport",
    "change_door",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "play_game",
    "play_n_games",
    "select_door",
]
