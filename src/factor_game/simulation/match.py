"""
Match runner - repeated games between two players.

Each game starts from a fresh board built from the configuration; the same
player objects are reused, so a seeded RandomPlayer keeps advancing its rng
and produces different games.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

from factor_game.core.types import Stats
from factor_game.host import GameHost
from factor_game.utils.factory import create_game

if TYPE_CHECKING:
    from factor_game.players.base import Player
    from factor_game.utils.config import Config

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Per-game results and the tally from player 1's point of view."""
    results: List[int] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)

    @property
    def mean_result(self) -> float:
        if not self.stats.total:
            return 0.0
        return sum(self.results) / self.stats.total


def play_match(
    config: "Config",
    player1: "Player",
    player2: "Player",
    games: int,
) -> MatchResult:
    """Play `games` quiet games and tally them for player 1."""
    if games < 1:
        raise ValueError(f"games must be positive, got {games}")

    match = MatchResult()
    for i in range(games):
        game = create_game(config)
        result = GameHost(game, player1, player2).play(print_results=False)

        match.results.append(result)
        match.stats = match.stats.record(game.outcome(1))
        logger.debug("Game %d/%d: result %d", i + 1, games, result)

    logger.info("Match finished: %s (mean result %.2f)", match.stats, match.mean_result)
    return match
