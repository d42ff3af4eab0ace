"""
Configuration and player registry.
"""

from typing import Optional

from factor_game.games.factor_game import DEFAULT_BOARD_SIZE
from factor_game.players import GreedyPlayer, HumanPlayer, MinimaxPlayer, RandomPlayer


# ---------------------------------------------------------------------------
# Player Registry
# ---------------------------------------------------------------------------

PLAYERS = {
    "human": HumanPlayer,
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
    "minimax": MinimaxPlayer,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Game and match configuration with sensible defaults."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        penalties_active: bool = True,
        player1: str = "greedy",
        player2: str = "greedy",
        games: int = 1,
        seed: Optional[int] = None,
    ):
        if board_size < 1:
            raise ValueError(f"board_size must be positive, got {board_size}")
        if games < 1:
            raise ValueError(f"games must be positive, got {games}")
        for name in (player1, player2):
            if name not in PLAYERS:
                available = ", ".join(PLAYERS.keys())
                raise ValueError(f"Unknown player: {name}. Available: {available}")

        self.board_size = board_size
        self.penalties_active = penalties_active
        self.player1 = player1
        self.player2 = player2
        self.games = games
        self.seed = seed

    def __repr__(self) -> str:
        return (
            f"Config(board_size={self.board_size}, penalties_active={self.penalties_active}, "
            f"player1={self.player1!r}, player2={self.player2!r}, "
            f"games={self.games}, seed={self.seed})"
        )

