"""
Factor Game implementation.

Players take turns circling a numbered square. The mover scores the
square's value; the opponent circles every still-open proper factor of it
and scores their sum. A square with no open proper factors is a penalty
square: with penalties active, circling it costs the mover their next turn
(they must play 0); with penalties inactive it is simply illegal. The game
ends when no square captures anything.
"""

from __future__ import annotations

import math
from typing import List

from factor_game.core.types import Outcome, outcome_from_result
from factor_game.games import factor_rules as rules
from factor_game.games.game_base import GameBase
from factor_game.games.game_state import GameState

DEFAULT_BOARD_SIZE = 30


class FactorGame(GameBase):
    """Factor Game engine over a numpy-backed GameState."""

    __slots__ = ('state',)

    def __init__(self, board_size: int = DEFAULT_BOARD_SIZE, penalties_active: bool = True):
        self.state = GameState.initial(board_size, penalties_active)

    def deep_clone(self) -> "FactorGame":
        g = FactorGame.__new__(FactorGame)
        g.state = self.state.copy()
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def current_player(self) -> int:
        return self.state.current_player

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def board_size(self) -> int:
        return self.state.board_size

    @property
    def penalties_active(self) -> bool:
        return self.state.penalties_active

    @property
    def score1(self) -> int:
        return self.state.score1

    @property
    def score2(self) -> int:
        return self.state.score2

    # ------------------------------------------------------------------
    # Rule queries
    # ------------------------------------------------------------------

    @staticmethod
    def proper_factors(n: int) -> List[int]:
        return rules.proper_factors(n)

    def is_square_open(self, square: int) -> bool:
        return rules.is_square_open(self.state, square)

    def all_open_squares(self) -> List[int]:
        return rules.all_open_squares(self.state)

    def open_factors(self, square: int) -> List[int]:
        return rules.open_factors(self.state, square)

    def is_penalty_square(self, square: int) -> bool:
        return rules.is_penalty_square(self.state, square)

    def all_non_penalty_squares(self) -> List[int]:
        return rules.all_non_penalty_squares(self.state)

    def has_pending_penalty(self, player: int | None = None) -> bool:
        """Pending penalty of `player`, or of the player to move."""
        if player is None:
            return rules.has_pending_penalty(self.state)
        return bool(self.state.penalties[player - 1])

    def is_legal_move(self, move: int) -> bool:
        return rules.is_legal_move(self.state, move)

    def all_legal_moves(self) -> List[int]:
        return rules.all_legal_moves(self.state)

    def valid_moves(self) -> List[int]:
        return self.all_legal_moves()

    def is_game_over(self) -> bool:
        return rules.is_game_over(self.state)

    def is_over(self) -> bool:
        return self.is_game_over()

    def is_player1_turn(self) -> bool:
        return self.state.current_player == 1

    def get_result(self) -> int:
        return rules.get_result(self.state)

    def outcome(self, player: int) -> Outcome:
        if not self.is_game_over():
            return Outcome.NEUTRAL
        return outcome_from_result(self.get_result(), player)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, move: int) -> bool:
        return rules.apply_move(self.state, move)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def board_string(self) -> str:
        """Grid of open square numbers; circled squares are blank."""
        size = self.board_size
        cell_width = len(str(size))
        cols = math.isqrt(size)
        rows = math.ceil(size / cols)
        border = ("+" + "-" * cell_width) * cols + "+"

        lines = []
        for r in range(rows):
            lines.append(border)
            cells = []
            for c in range(cols):
                num = r * cols + c + 1
                if num <= size and self.is_square_open(num):
                    cells.append(str(num).rjust(cell_width))
                else:
                    cells.append(" " * cell_width)
            lines.append("|" + "|".join(cells) + "|")
        lines.append(border)
        return "\n".join(lines)

    def state_string(self) -> str:
        lines = [self.board_string(), f"Score: {self.score1}-{self.score2}"]
        if self.is_game_over():
            result = self.get_result()
            if result > 0:
                lines.append("Player 1 wins!")
            elif result < 0:
                lines.append("Player 2 wins!")
            else:
                lines.append("The game is a draw!")
        else:
            lines.append(f"Player {self.current_player()} to move.")
            for player in (1, 2):
                if self.has_pending_penalty(player):
                    lines.append(f"Player {player} loses their next turn.")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"FactorGame({self.state!r})"


def new_game(board_size: int = DEFAULT_BOARD_SIZE, penalties_active: bool = True) -> FactorGame:
    """Create a fresh game: all squares open, zero scores, player 1 to move."""
    return FactorGame(board_size, penalties_active)
