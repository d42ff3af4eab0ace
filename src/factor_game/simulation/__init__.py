"""
Simulation module - repeated games between two players.
"""

from factor_game.simulation.match import MatchResult, play_match

__all__ = [
    "MatchResult",
    "play_match",
]
