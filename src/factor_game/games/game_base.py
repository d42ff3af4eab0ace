"""
GameBase - abstract base class for the game engine.
"""

from abc import ABC, abstractmethod
from typing import List

from factor_game.core.types import Outcome
from factor_game.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for turn-based two-player games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The engine owning a GameState is its only mutator.
    - Players receive a deep_clone() and simulate moves on further clones.
    - apply_move() reports illegal moves by returning False, never by
      raising; illegal input is expected from interactive players.
    """

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Used heavily for lookahead and search.
        """
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return ID of player to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[int]:
        """Return all legal moves from the current state, ascending."""
        pass

    @abstractmethod
    def apply_move(self, move: int) -> bool:
        """
        Apply a move to the game. Mutates internal state.

        Returns:
            True if the move was legal and applied, False otherwise
            (in which case the state is unchanged).
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def get_result(self) -> int:
        """Return the signed result, positive when player 1 is ahead."""
        pass

    @abstractmethod
    def outcome(self, player: int) -> Outcome:
        """
        Return payoff for the player:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
