"""Data models for the Monty Hall simulation."""

from .game import DOORS, Door, GameBoard, Prize, as_door
from .results import GameRound, Outcome, RoundResult, Strategy, TrialReport

__all__ = [
    "DOORS",
    "Door",
    "GameBoard",
    "GameRound",
    "Outcome",
    "Prize",
    "RoundResult",
    "Strategy",
    "TrialReport",
    "as_door",
]
