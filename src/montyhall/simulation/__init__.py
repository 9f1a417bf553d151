"""Simulation engine components."""

from .game import change_door, create_game, determine_winner, open_goat_door, select_door
from .round import RoundSimulator, play_game

__all__ = [
    "RoundSimulator",
    "change_door",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "play_game",
    "select_door",
]
