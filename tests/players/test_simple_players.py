"""
Tests for factor_game.players random, greedy and human players.
"""

import random
from unittest.mock import MagicMock

import pytest

from factor_game.core.types import NO_MOVE
from factor_game.games.factor_game import FactorGame
from factor_game.players import GreedyPlayer, HumanPlayer, Player, RandomPlayer


class TestPlayerContract:
    """All players share the select_move capability."""

    @pytest.mark.parametrize("player_class", [RandomPlayer, GreedyPlayer])
    def test_returns_legal_move(self, player_class, game6: FactorGame):
        player = player_class()
        assert isinstance(player, Player)
        assert game6.is_legal_move(player.select_move(game6))

    @pytest.mark.parametrize("player_class", [RandomPlayer, GreedyPlayer])
    def test_does_not_mutate(self, player_class, game6: FactorGame):
        before = game6.get_state().copy()
        player_class().select_move(game6)
        assert game6.get_state() == before

    @pytest.mark.parametrize("player_class", [RandomPlayer, GreedyPlayer])
    def test_pending_penalty_passes(self, player_class, game6: FactorGame):
        game6.apply_move(1)   # P1 penalty
        game6.apply_move(4)   # P2 reply
        assert player_class().select_move(game6) == 0

    @pytest.mark.parametrize("player_class", [RandomPlayer, GreedyPlayer])
    def test_no_moves_returns_sentinel(self, player_class, finished_game: FactorGame):
        assert player_class().select_move(finished_game) == NO_MOVE


class TestRandomPlayer:
    """RandomPlayer tests."""

    def test_seeded_is_reproducible(self, default_game: FactorGame):
        a = RandomPlayer(random.Random(7))
        b = RandomPlayer(random.Random(7))
        picks_a = [a.select_move(default_game) for _ in range(20)]
        picks_b = [b.select_move(default_game) for _ in range(20)]
        assert picks_a == picks_b

    def test_covers_all_moves(self, game6: FactorGame, rng: random.Random):
        player = RandomPlayer(rng)
        picks = {player.select_move(game6) for _ in range(300)}
        assert picks == set(game6.all_legal_moves())


class TestGreedyPlayer:
    """GreedyPlayer tests."""

    def test_fresh_six_takes_five(self, game6: FactorGame):
        """5 nets +4: the best single move on a fresh 6-square board."""
        assert GreedyPlayer().select_move(game6) == 5

    def test_player_two_uses_own_perspective(self, make_game):
        """Player 2 also wants 5; without negation it would pick 6."""
        game = make_game(6, current_player=2)
        assert GreedyPlayer().select_move(game) == 5

    @pytest.mark.parametrize("current_player", [1, 2])
    def test_ties_prefer_later_move(self, make_game, current_player):
        """2 and 4 both net +1 with 3 circled; the later move wins."""
        game = make_game(4, circled=[3], current_player=current_player)
        assert GreedyPlayer().select_move(game) == 4

    def test_reply_after_five(self, game6: FactorGame):
        game6.apply_move(5)
        assert GreedyPlayer().select_move(game6) == 4


class TestHumanPlayer:
    """HumanPlayer tests with a scripted input source."""

    def test_reprompts_until_legal(self, game6: FactorGame):
        input_fn = MagicMock(side_effect=["abc", "7", "", " 2 "])
        output_fn = MagicMock()
        player = HumanPlayer(input_fn=input_fn, output_fn=output_fn)

        assert player.select_move(game6) == 2
        assert input_fn.call_count == 4
        assert output_fn.call_count == 3
        output_fn.assert_called_with("Illegal move. Please try again.")

    def test_pass_rejected_without_penalty(self, game6: FactorGame):
        input_fn = MagicMock(side_effect=["0", "6"])
        player = HumanPlayer(input_fn=input_fn, output_fn=MagicMock())
        assert player.select_move(game6) == 6

    def test_prompt_text(self, game6: FactorGame):
        input_fn = MagicMock(return_value="3")
        HumanPlayer(input_fn=input_fn, output_fn=MagicMock()).select_move(game6)
        input_fn.assert_called_once_with("Enter move: ")
