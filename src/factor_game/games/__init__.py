"""
Games module - Factor Game state, rules and engine.
"""

from factor_game.games.game_state import GameState
from factor_game.games.game_base import GameBase
from factor_game.games.factor_rules import (
    proper_factors,
    open_factors,
    is_penalty_square,
    all_open_squares,
    all_non_penalty_squares,
    is_legal_move,
    all_legal_moves,
    is_game_over,
)
from factor_game.games.factor_game import FactorGame, new_game, DEFAULT_BOARD_SIZE

__all__ = [
    "GameState",
    "GameBase",
    "FactorGame",
    "new_game",
    "DEFAULT_BOARD_SIZE",
    "proper_factors",
    "open_factors",
    "is_penalty_square",
    "all_open_squares",
    "all_non_penalty_squares",
    "is_legal_move",
    "all_legal_moves",
    "is_game_over",
]
