"""
Factor Game rules as pure functions over a GameState.

Squares are numbered 1..board_size; move 0 is the forced pass a player
makes on the turn lost to a penalty. Only apply_move mutates its argument.
"""

from __future__ import annotations

import math
from typing import List

import numpy as np

from factor_game.games.game_state import GameState


def proper_factors(n: int) -> List[int]:
    """
    Return every divisor of n except n itself, ascending.

    Trial division up to isqrt(n): small divisors fill the front of the
    list, their cofactors are collected in reverse and appended, and a
    perfect square's root is only added once.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if n == 1:
        return []

    low = [1]
    high = []
    limit = math.isqrt(n)
    for i in range(2, limit + 1):
        if n % i == 0:
            low.append(i)
            if i != n // i:
                high.append(n // i)
    return low + high[::-1]


def is_square_open(state: GameState, square: int) -> bool:
    """Return True if square (1-based) has not been circled."""
    return not state.board[square - 1]


def all_open_squares(state: GameState) -> List[int]:
    """Open squares, ascending."""
    return (np.flatnonzero(~state.board) + 1).tolist()


def open_factors(state: GameState, square: int) -> List[int]:
    """Squares the opponent would circle if `square` were played."""
    return [f for f in proper_factors(square) if not state.board[f - 1]]


def is_penalty_square(state: GameState, square: int) -> bool:
    """A square is a penalty square when it captures nothing for the opponent."""
    return not open_factors(state, square)


def all_non_penalty_squares(state: GameState) -> List[int]:
    """Open squares that still have at least one open proper factor, ascending."""
    return [s for s in all_open_squares(state) if not is_penalty_square(state, s)]


def has_pending_penalty(state: GameState) -> bool:
    """Return True if the player to move must pass this turn."""
    return bool(state.penalties[state.current_player - 1])


def is_legal_move(state: GameState, move: int) -> bool:
    """
    Check whether `move` is legal for the player to move.

    - 0 is legal only when the mover has a pending penalty, and is then
      the only legal move.
    - With penalties active, any open square is legal.
    - With penalties inactive, only open non-penalty squares are legal.
    """
    if move < 0 or move > state.board_size:
        return False
    if has_pending_penalty(state):
        return move == 0
    if move == 0:
        return False
    if not is_square_open(state, move):
        return False
    if state.penalties_active:
        return True
    return not is_penalty_square(state, move)


def all_legal_moves(state: GameState) -> List[int]:
    """Legal moves, ascending over 0..board_size."""
    return [m for m in range(state.board_size + 1) if is_legal_move(state, m)]


def is_game_over(state: GameState) -> bool:
    """The game ends once no open square captures anything."""
    return not all_non_penalty_squares(state)


def get_result(state: GameState) -> int:
    """Signed result score1 - score2; positive favors player 1."""
    return int(state.scores[0] - state.scores[1])


def apply_move(state: GameState, move: int) -> bool:
    """
    Apply `move` to `state` in place.

    Returns False and leaves the state untouched if the move is illegal.
    """
    if not is_legal_move(state, move):
        return False

    mover = state.current_player - 1
    if move == 0:
        state.penalties[mover] = False
    else:
        state.board[move - 1] = True
        factors = open_factors(state, move)
        if not factors:
            state.penalties[mover] = True
        else:
            state.board[np.asarray(factors) - 1] = True
            state.scores[mover] += move
            state.scores[1 - mover] += sum(factors)

    state.current_player = 3 - state.current_player  # Toggle 1<->2
    return True
