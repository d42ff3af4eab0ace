"""
GameHost - runs a game between two players and narrates it.

Usage:
    from factor_game.games import FactorGame
    from factor_game.players import GreedyPlayer, MinimaxPlayer

    host = GameHost(FactorGame(20, penalties_active=False), GreedyPlayer(), MinimaxPlayer())
    result = host.play(print_results=True)
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TYPE_CHECKING

from factor_game.core.types import IllegalMoveError

if TYPE_CHECKING:
    from factor_game.games.factor_game import FactorGame
    from factor_game.players.base import Player

logger = logging.getLogger(__name__)


def stringify_list(items: Sequence[object]) -> str:
    """Join items in prose: 'a', 'a and b', 'a, b, and c'."""
    items = [str(x) for x in items]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + ", and " + items[-1]


def describe_move(game: "FactorGame", move: int) -> str:
    """Narrate `move` for the player to act, before it is applied."""
    player = game.current_player()
    if move == 0:
        return f"Player {player} loses their turn due to a penalty."

    factors = game.open_factors(move)
    if not factors:
        return f"Player {player} circles square {move}, causing them to receive a penalty."

    noun = "square" if len(factors) == 1 else "squares"
    return (
        f"Player {player} circles square {move}, causing player {3 - player} "
        f"to circle {noun} {stringify_list(factors)}."
    )


class GameHost:
    """Sequences turns between two players on one game."""

    def __init__(
        self,
        game: "FactorGame",
        player1: "Player",
        player2: "Player",
        output_fn: Callable[[str], None] = print,
    ):
        self.game = game
        self.players = {1: player1, 2: player2}
        self.output_fn = output_fn

    def play_turn(self, print_results: bool = False) -> int:
        """Ask the active player for a move and apply it. Returns the move."""
        game = self.game
        player = game.current_player()
        move = self.players[player].select_move(game.deep_clone())

        if not game.is_legal_move(move):
            raise IllegalMoveError(player, move)
        narration = describe_move(game, move)
        game.apply_move(move)

        logger.info(narration)
        if print_results:
            self.output_fn(narration)
            self.output_fn(game.state_string())
        return move

    def play(self, print_results: bool = False) -> int:
        """Play until the game is over and return the signed result."""
        if print_results:
            self.output_fn(self.game.state_string())

        try:
            while not self.game.is_over():
                self.play_turn(print_results)
        except EOFError:
            raise  # closed input is reported by the caller
        except Exception:
            logger.exception("Fatal error in game loop")
            raise

        result = self.game.get_result()
        logger.info("Game over: %d-%d", self.game.score1, self.game.score2)
        return result
