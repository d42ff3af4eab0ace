"""
GameState - Factor Game state container.

Optimized for fast copying during search.
"""

from __future__ import annotations

import numpy as np


class GameState:
    """
    Lightweight game state container.

    Uses numpy arrays so a copy is three contiguous buffer copies:
        board[i]      True if square i + 1 is circled
        scores[p]     points of player p + 1
        penalties[p]  True if player p + 1 must pass on their next turn
    """
    __slots__ = ('board', 'scores', 'penalties', 'current_player', 'penalties_active')

    def __init__(
        self,
        board: np.ndarray,
        current_player: int = 1,
        scores: np.ndarray | None = None,
        penalties: np.ndarray | None = None,
        penalties_active: bool = True,
    ):
        self.board = board
        self.current_player = current_player
        self.scores = scores if scores is not None else np.zeros(2, dtype=np.int64)
        self.penalties = penalties if penalties is not None else np.zeros(2, dtype=bool)
        self.penalties_active = penalties_active

    @classmethod
    def initial(cls, board_size: int, penalties_active: bool = True) -> "GameState":
        """Fresh state: every square open, zero scores, player 1 to move."""
        if board_size < 1:
            raise ValueError(f"board size must be positive, got {board_size}")
        return cls(np.zeros(board_size, dtype=bool), penalties_active=penalties_active)

    @property
    def board_size(self) -> int:
        return int(self.board.size)

    @property
    def score1(self) -> int:
        return int(self.scores[0])

    @property
    def score2(self) -> int:
        return int(self.scores[1])

    @property
    def penalty1(self) -> bool:
        return bool(self.penalties[0])

    @property
    def penalty2(self) -> bool:
        return bool(self.penalties[1])

    def copy(self) -> "GameState":
        """Independent copy - no numpy buffer is shared with the original."""
        return GameState(
            self.board.copy(),
            self.current_player,
            self.scores.copy(),
            self.penalties.copy(),
            self.penalties_active,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.current_player == other.current_player
            and self.penalties_active == other.penalties_active
            and np.array_equal(self.board, other.board)
            and np.array_equal(self.scores, other.scores)
            and np.array_equal(self.penalties, other.penalties)
        )

    def __repr__(self) -> str:
        return (
            f"GameState(size={self.board_size}, player={self.current_player}, "
            f"score={self.score1}-{self.score2}, "
            f"penalties=({self.penalty1}, {self.penalty2}))"
        )
