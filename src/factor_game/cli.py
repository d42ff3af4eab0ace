"""
Command-line interface for playing the Factor Game.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from factor_game.games.factor_game import DEFAULT_BOARD_SIZE
from factor_game.host import GameHost
from factor_game.simulation import play_match
from factor_game.utils.config import Config, PLAYERS
from factor_game.utils.factory import create_game, create_player

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play the Factor Game between human and computer players"
    )
    parser.add_argument(
        "--board-size", "-n",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Number of squares on the board (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--no-penalties",
        action="store_true",
        help="Make penalty squares illegal instead of costing a turn",
    )
    parser.add_argument(
        "--player1",
        choices=list(PLAYERS.keys()),
        default="greedy",
        help="Strategy for player 1 (default: greedy)",
    )
    parser.add_argument(
        "--player2",
        choices=list(PLAYERS.keys()),
        default="greedy",
        help="Strategy for player 2 (default: greedy)",
    )
    parser.add_argument(
        "--games", "-g",
        type=int,
        default=1,
        help="Number of games; more than one runs a quiet match (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random players",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the final result",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log search and turn details (-v info, -vv debug)",
    )
    args = parser.parse_args(argv)

    if args.board_size < 1:
        parser.error("--board-size must be positive")
    if args.games < 1:
        parser.error("--games must be positive")
    if args.games > 1 and "human" in (args.player1, args.player2):
        parser.error("human players can only play single games")
    return args


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        board_size=args.board_size,
        penalties_active=not args.no_penalties,
        player1=args.player1,
        player2=args.player2,
        games=args.games,
        seed=args.seed,
    )
    logger.info("Starting with %r", config)

    rng = random.Random(config.seed)
    player1 = create_player(config.player1, rng)
    player2 = create_player(config.player2, rng)

    try:
        if config.games > 1:
            match = play_match(config, player1, player2, config.games)
            print(f"Player 1 ({config.player1}) vs player 2 ({config.player2}): {match.stats}")
            print(f"Mean result: {match.mean_result:.2f}")
        else:
            host = GameHost(create_game(config), player1, player2)
            result = host.play(print_results=not args.quiet)
            print(f"Game result: {result}")
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except EOFError:
        print("\nInput closed.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
