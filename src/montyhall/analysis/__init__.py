"""Monte Carlo analysis and statistics."""

from .montecarlo import MonteCarloRunner, play_n_games

__all__ = ["MonteCarloRunner", "play_n_games"]
