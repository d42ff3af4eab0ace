"""
Human player - reads moves from an injected input source.
"""

from __future__ import annotations

from typing import Callable

from factor_game.games.game_base import GameBase
from factor_game.players.base import Player


class HumanPlayer(Player):
    """
    Prompts until a legal move is entered.

    input_fn/output_fn default to the console and can be replaced for
    scripted play or tests.
    """

    name = "human"

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def select_move(self, game: GameBase) -> int:
        while True:
            raw = self.input_fn("Enter move: ").strip()
            try:
                move = int(raw)
            except ValueError:
                move = None

            if move is not None and move in game.valid_moves():
                return move
            self.output_fn("Illegal move. Please try again.")
