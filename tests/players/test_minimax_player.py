"""
Tests for factor_game.players.minimax_player

Compares the pruned search against plain exhaustive minimax.
"""

import pytest

from factor_game.core.types import NO_MOVE
from factor_game.games.factor_game import FactorGame
from factor_game.players.minimax_player import MinimaxPlayer


def brute_force(game: FactorGame) -> tuple[int, int]:
    """Plain minimax without pruning. Returns (value, nodes visited)."""
    if game.is_over():
        return game.get_result(), 1

    values = []
    nodes = 1
    for move in game.valid_moves():
        child = game.deep_clone()
        child.apply_move(move)
        value, n = brute_force(child)
        values.append(value)
        nodes += n
    best = max(values) if game.is_player1_turn() else min(values)
    return best, nodes


def move_values(game: FactorGame) -> dict[int, int]:
    """Exact value of every legal move."""
    values = {}
    for move in game.valid_moves():
        child = game.deep_clone()
        child.apply_move(move)
        values[move] = brute_force(child)[0]
    return values


BOARDS = [(size, penalties) for size in range(2, 8) for penalties in (True, False)]


class TestKnownPositions:
    """Hand-solved small boards."""

    def test_board_three(self):
        """Circling 3 wins 3-1; nothing is left afterwards."""
        player = MinimaxPlayer()
        assert player.select_move(FactorGame(3)) == 3
        assert player.last_value == 2

    @pytest.mark.parametrize("penalties_active", [True, False])
    def test_board_four_prefers_lower_tied_move(self, penalties_active):
        """2 and 4 both end the game at +1; the lower move wins the tie."""
        player = MinimaxPlayer()
        assert player.select_move(FactorGame(4, penalties_active)) == 2
        assert player.last_value == 1

    def test_pending_penalty_passes(self, make_game):
        game = make_game(6, circled=[1, 5])
        game.get_state().penalties[0] = True
        assert MinimaxPlayer().select_move(game) == 0

    def test_no_moves_returns_sentinel(self, finished_game):
        player = MinimaxPlayer()
        assert player.select_move(finished_game) == NO_MOVE
        assert player.last_value is None


class TestAgainstBruteForce:
    """Alpha-beta never changes the value, only the node count."""

    @pytest.mark.parametrize("size,penalties_active", BOARDS)
    def test_root_value(self, size, penalties_active):
        game = FactorGame(size, penalties_active)
        expected, _ = brute_force(game)
        assert MinimaxPlayer().minimax_value(game) == expected

    @pytest.mark.parametrize("size,penalties_active", BOARDS)
    def test_selected_move_is_optimal(self, size, penalties_active):
        """Chosen move is optimal and the lowest of the optimal moves."""
        game = FactorGame(size, penalties_active)
        values = move_values(game)
        best = max(values.values())  # player 1 to move
        optimal = [m for m, v in values.items() if v == best]

        player = MinimaxPlayer()
        assert player.select_move(game) == min(optimal)
        assert player.last_value == best

    @pytest.mark.parametrize("opening,penalties_active", [
        ([6], True),          # player 2 to move
        ([8], False),         # player 2 to move
        ([9, 4], True),
        ([9, 4], False),
        ([7, 6], False),
        ([1, 10], True),      # player 1 must pass
    ])
    def test_reachable_positions(self, opening, penalties_active):
        """Mid-game positions on a 10-square board, either player to move."""
        game = FactorGame(10, penalties_active=penalties_active)
        for move in opening:
            assert game.apply_move(move)
        assert not game.is_over()

        values = move_values(game)
        pick = max if game.is_player1_turn() else min
        best = pick(values.values())

        player = MinimaxPlayer()
        move = player.select_move(game)
        assert values[move] == best
        assert player.last_value == best
        assert player.minimax_value(game) == brute_force(game)[0]

    @pytest.mark.parametrize("size", [5, 6, 7])
    def test_pruning_visits_no_more_nodes(self, size):
        game = FactorGame(size)
        _, brute_nodes = brute_force(game)
        player = MinimaxPlayer()
        player.select_move(game)
        assert player.minimax_calls <= brute_nodes - 1  # root is not counted


class TestDeterminism:
    """Search is repeatable and side-effect free."""

    def test_repeatable(self):
        game = FactorGame(6)
        first = MinimaxPlayer()
        second = MinimaxPlayer()
        assert first.select_move(game) == second.select_move(game)
        assert first.minimax_calls == second.minimax_calls
        assert first.last_value == second.last_value

    def test_does_not_mutate_game(self):
        game = FactorGame(6)
        before = game.get_state().copy()
        MinimaxPlayer().select_move(game)
        assert game.get_state() == before

    def test_counter_resets_between_calls(self):
        player = MinimaxPlayer()
        player.select_move(FactorGame(6))
        calls = player.minimax_calls
        player.select_move(FactorGame(6))
        assert player.minimax_calls == calls


class TestNodeHook:
    """on_node observability hook."""

    def test_called_once_per_node(self):
        seen = []
        player = MinimaxPlayer(on_node=lambda seq, calls: seen.append((seq, calls)))
        player.select_move(FactorGame(5))

        assert len(seen) == player.minimax_calls
        assert [calls for _, calls in seen] == list(range(1, player.minimax_calls + 1))
        assert seen[0][0] == (5,)  # highest move is searched first
        assert all(isinstance(seq, tuple) and seq for seq, _ in seen)

    def test_hook_does_not_change_result(self):
        plain = MinimaxPlayer()
        hooked = MinimaxPlayer(on_node=lambda seq, calls: None)
        game = FactorGame(6, penalties_active=False)
        assert plain.select_move(game) == hooked.select_move(game)
        assert plain.last_value == hooked.last_value
