"""
Minimax player - exhaustive search to game end with alpha-beta pruning.

Values are the signed result score1 - score2: player 1 maximizes, player 2
minimizes. There is no evaluation of non-terminal positions, so the search
always runs to the end of the game and is only practical on small boards
(roughly 20 squares or fewer).

Moves are explored highest first, which tends to find strong captures early
and tightens the bounds sooner.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from factor_game.core.types import NEG_INF, NO_MOVE, POS_INF
from factor_game.games.game_base import GameBase
from factor_game.players.base import Player

logger = logging.getLogger(__name__)

NodeCallback = Callable[[Sequence[int], int], None]


class MinimaxPlayer(Player):
    """
    Full-depth minimax with alpha-beta pruning.

    Attributes:
        minimax_calls: Nodes visited by the last select_move().
        last_value: Minimax value of the move chosen by the last select_move().
        on_node: Optional hook called as on_node(move_sequence, calls) for
            every visited node; move_sequence is the line from the root.
    """

    name = "minimax"

    def __init__(self, on_node: Optional[NodeCallback] = None):
        self.on_node = on_node
        self.minimax_calls = 0
        self.last_value: Optional[float] = None
        self._move_sequence: List[int] = []

    def minimax_value(
        self,
        game: GameBase,
        alpha: float = NEG_INF,
        beta: float = POS_INF,
    ) -> float:
        """
        Return the minimax value of `game`.

        Fail-hard: a node returns alpha (minimizing) or beta (maximizing) as
        soon as a child falls outside the window. Values inside [alpha, beta]
        are exact.
        """
        self.minimax_calls += 1
        if self.on_node is not None:
            self.on_node(tuple(self._move_sequence), self.minimax_calls)

        if game.is_over():
            return game.get_result()

        find_min = game.current_player() == 2
        value = POS_INF if find_min else NEG_INF

        for move in reversed(game.valid_moves()):
            child = game.deep_clone()
            child.apply_move(move)

            self._move_sequence.append(move)
            if find_min:
                v = self.minimax_value(child, alpha, value)
            else:
                v = self.minimax_value(child, value, beta)
            self._move_sequence.pop()

            if find_min and v < alpha:
                return alpha
            if not find_min and v > beta:
                return beta
            if (v < value) if find_min else (v > value):
                value = v

        return value

    def select_move(self, game: GameBase) -> int:
        self.minimax_calls = 0
        self._move_sequence.clear()

        find_min = game.current_player() == 2
        best_value = POS_INF if find_min else NEG_INF
        best_move = NO_MOVE

        for move in reversed(game.valid_moves()):
            child = game.deep_clone()
            child.apply_move(move)

            # Results are integers: widening the bound by one keeps a sibling
            # that ties the best value exact, while anything worse fails
            # strictly beyond it.
            self._move_sequence.append(move)
            if find_min:
                value = self.minimax_value(child, NEG_INF, best_value + 1)
            else:
                value = self.minimax_value(child, best_value - 1, POS_INF)
            self._move_sequence.pop()

            logger.debug("move %d -> value %s (%d nodes so far)", move, value, self.minimax_calls)

            # Non-strict: later (lower) moves win ties
            if (value <= best_value) if find_min else (value >= best_value):
                best_value = value
                best_move = move

        self.last_value = None if best_move == NO_MOVE else best_value
        logger.info(
            "Player %d minimax chose %d (value %s) after %d nodes",
            game.current_player(), best_move, self.last_value, self.minimax_calls,
        )
        return best_move
