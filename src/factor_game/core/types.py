"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the package:
- Outcome: win/tie/loss from one player's point of view
- Stats: outcome counts collected over a match
- Search sentinels and the project exception
"""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import NamedTuple


class Outcome(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


# Sentinels for minimax bounds; real results are always finite ints
NEG_INF = -math.inf
POS_INF = math.inf

# Returned by players when no legal move exists
NO_MOVE = -1


class IllegalMoveError(RuntimeError):
    """A player returned a move the engine rejected."""

    def __init__(self, player: int, move: int):
        super().__init__(f"Player {player} selected illegal move {move}")
        self.player = player
        self.move = move


def outcome_from_result(result: int, player: int) -> Outcome:
    """Map a signed result (score1 - score2) to an Outcome for `player`."""
    if result == 0:
        return Outcome.TIE
    p1_won = result > 0
    return Outcome.WIN if p1_won == (player == 1) else Outcome.LOSS


class Stats(NamedTuple):
    """Outcome counts with derived properties."""

    wins: int = 0
    ties: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.ties + self.losses

    def record(self, outcome: Outcome) -> "Stats":
        """Return a new Stats with one more `outcome` counted."""
        if outcome is Outcome.WIN:
            return self._replace(wins=self.wins + 1)
        if outcome is Outcome.TIE:
            return self._replace(ties=self.ties + 1)
        if outcome is Outcome.LOSS:
            return self._replace(losses=self.losses + 1)
        return self

    def __str__(self) -> str:
        return f"W{self.wins}/T{self.ties}/L{self.losses}"
