"""
Greedy player - one-ply lookahead on the signed result.
"""

from __future__ import annotations

from factor_game.core.types import NEG_INF, NO_MOVE
from factor_game.games.game_base import GameBase
from factor_game.players.base import Player


class GreedyPlayer(Player):
    """Maximizes its own point lead after the current move."""

    name = "greedy"

    def select_move(self, game: GameBase) -> int:
        best_value = NEG_INF
        best_move = NO_MOVE
        sign = 1 if game.current_player() == 1 else -1  # Player 2 minimizes the result

        for move in game.valid_moves():
            child = game.deep_clone()
            child.apply_move(move)
            value = sign * child.get_result()
            # >= lets later moves win ties
            if value >= best_value:
                best_value = value
                best_move = move

        return best_move
