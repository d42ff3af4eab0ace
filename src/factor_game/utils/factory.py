"""
Factory functions for creating games and players.
"""

import random
from typing import Optional

from factor_game.games.factor_game import FactorGame
from factor_game.players import Player, RandomPlayer
from factor_game.utils.config import PLAYERS, Config


def create_game(config: Config) -> FactorGame:
    """
    Create a fresh game from a configuration.

    Args:
        config: Board size and penalty mode

    Returns:
        New game with player 1 to move
    """
    return FactorGame(config.board_size, config.penalties_active)


def create_player(name: str, rng: Optional[random.Random] = None) -> Player:
    """
    Create a player by registry name.

    Args:
        name: Key from PLAYERS registry (e.g., "minimax")
        rng: Random source for players that use one

    Returns:
        Player instance
    """
    if name not in PLAYERS:
        available = ", ".join(PLAYERS.keys())
        raise ValueError(f"Unknown player: {name}. Available: {available}")

    player_class = PLAYERS[name]
    if player_class is RandomPlayer:
        return RandomPlayer(rng)
    return player_class()
