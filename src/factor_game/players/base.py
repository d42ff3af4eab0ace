"""
Player - abstract base class for all move-selection strategies.
"""

from abc import ABC, abstractmethod

from factor_game.games.game_base import GameBase


class Player(ABC):
    """
    A strategy that picks a move for the player to act.

    The game passed to select_move() is a copy owned by the caller's host;
    implementations must treat it as read-only and simulate on
    game.deep_clone().
    """

    name: str = "player"

    @abstractmethod
    def select_move(self, game: GameBase) -> int:
        """Return a legal move for game.current_player()."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
