"""
Shared test fixtures for factor_game tests.

Design principles:
- Small boards so exhaustive search stays fast
- Clean imports at module level
- Minimal, focused fixtures
"""

import random
from typing import Iterable

import numpy as np
import pytest

from factor_game.games.factor_game import FactorGame
from factor_game.games.game_state import GameState


def _make_game(
    board_size: int,
    circled: Iterable[int] = (),
    current_player: int = 1,
    penalties_active: bool = True,
) -> FactorGame:
    """Build a game with the given squares already circled and zero scores."""
    board = np.zeros(board_size, dtype=bool)
    for square in circled:
        board[square - 1] = True
    game = FactorGame(board_size, penalties_active)
    game.set_state(GameState(board, current_player, penalties_active=penalties_active))
    return game


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def make_game():
    """Factory for games with some squares already circled."""
    return _make_game


@pytest.fixture
def game6() -> FactorGame:
    """Fresh 6-square game with penalties active."""
    return FactorGame(6, penalties_active=True)


@pytest.fixture
def game6_no_penalties() -> FactorGame:
    """Fresh 6-square game where penalty squares are illegal."""
    return FactorGame(6, penalties_active=False)


@pytest.fixture
def default_game() -> FactorGame:
    """Game with default settings (30 squares, penalties active)."""
    return FactorGame()


@pytest.fixture
def finished_game() -> FactorGame:
    """3-square game with every square circled."""
    return _make_game(3, circled=[1, 2, 3])


# =============================================================================
# Randomness
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible games."""
    return random.Random(12345)
