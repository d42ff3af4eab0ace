"""
Core module - fundamental types and constants.

This module provides the building blocks used throughout the package.
"""

from factor_game.core.types import (
    Outcome,
    Stats,
    IllegalMoveError,
    NEG_INF,
    POS_INF,
    NO_MOVE,
    outcome_from_result,
)

__all__ = [
    # Types
    "Outcome",
    "Stats",
    "IllegalMoveError",
    # Constants
    "NEG_INF",
    "POS_INF",
    "NO_MOVE",
    # Functions
    "outcome_from_result",
]
