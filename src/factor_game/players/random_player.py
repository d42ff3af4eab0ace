"""
Random player - uniform choice among legal moves.
"""

from __future__ import annotations

import random
from typing import Optional

from factor_game.core.types import NO_MOVE
from factor_game.games.game_base import GameBase
from factor_game.players.base import Player


class RandomPlayer(Player):
    """Plays a uniformly random legal move. Seed the rng for reproducible games."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def select_move(self, game: GameBase) -> int:
        moves = game.valid_moves()
        if not moves:
            return NO_MOVE
        return self.rng.choice(moves)
