"""
Players module - move-selection strategies.

All players implement Player.select_move(game) -> int and never mutate the
game they are given.
"""

from factor_game.players.base import Player
from factor_game.players.random_player import RandomPlayer
from factor_game.players.greedy_player import GreedyPlayer
from factor_game.players.minimax_player import MinimaxPlayer
from factor_game.players.human_player import HumanPlayer

__all__ = [
    "Player",
    "RandomPlayer",
    "GreedyPlayer",
    "MinimaxPlayer",
    "HumanPlayer",
]
