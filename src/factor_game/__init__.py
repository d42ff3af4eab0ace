"""
Factor Game - a two-player number-theory board game with computer players.

Players alternately circle squares numbered 1..N. The mover scores the
square; the opponent circles and scores every still-open proper factor.

Quick Start:
    from factor_game import FactorGame, GameHost, GreedyPlayer, MinimaxPlayer

    game = FactorGame(board_size=16, penalties_active=False)
    result = GameHost(game, GreedyPlayer(), MinimaxPlayer()).play(print_results=True)

Modules:
    core       - Outcome/Stats types, search sentinels, IllegalMoveError
    games      - GameState, rule functions and the FactorGame engine
    players    - Random, Greedy, Minimax and Human strategies
    simulation - Repeated games between two players
    utils      - Configuration and factories
"""

from factor_game.core import Outcome, Stats, IllegalMoveError
from factor_game.games import FactorGame, GameState, new_game, proper_factors
from factor_game.players import (
    Player,
    RandomPlayer,
    GreedyPlayer,
    MinimaxPlayer,
    HumanPlayer,
)
from factor_game.host import GameHost
from factor_game.simulation import play_match

__version__ = "1.0.0"

__all__ = [
    # Engine
    "FactorGame",
    "GameState",
    "new_game",
    "proper_factors",
    # Players
    "Player",
    "RandomPlayer",
    "GreedyPlayer",
    "MinimaxPlayer",
    "HumanPlayer",
    # Orchestration
    "GameHost",
    "play_match",
    # Types
    "Outcome",
    "Stats",
    "IllegalMoveError",
]
