"""
Test script for the AI player.
Tests the minimax search, the difficulty levels and full self-play games.

Usage:
    python test_ai_player.py   # Run all tests
    pytest test_ai_player.py
"""

import random
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.ai_player import AIPlayer, Difficulty
from logic.board import GameStatus, Player, board_from_string, empty_board
from logic.config import GameConfig
from logic.exceptions import NoLegalMove
from logic.game_state import GameState


class FixedRandom(random.Random):
    """Random source with a fixed roll that always picks the first choice."""

    def __init__(self, roll: float):
        super().__init__(0)
        self.roll = roll

    def random(self):
        return self.roll

    def choice(self, seq):
        return seq[0]


# ==================== OPTIMAL SEARCH ====================

def test_empty_board_plays_center():
    ai = AIPlayer(Player.O)
    assert ai.get_best_move(empty_board()) == GameConfig.CENTER_CELL
    # No search was needed
    assert ai.positions_evaluated == 0


def test_takes_own_win_over_block():
    # O can complete the top row; X threatens the middle row
    ai = AIPlayer(Player.O)
    board = board_from_string("OO_" "XX_" "X__")
    assert ai.select_move(board, Difficulty.HARD) == 2


def test_takes_win_before_blocking_row():
    # X threatens 2, but O completes its own row at 5 for an immediate win
    ai = AIPlayer(Player.O)
    board = board_from_string("XX_" "OO_" "___")
    assert ai.select_move(board, Difficulty.HARD) == 5


def test_blocks_opponent_win():
    ai = AIPlayer(Player.O)
    board = board_from_string("XX_" "_O_" "___")
    assert ai.select_move(board, Difficulty.HARD) == 2


def test_blocks_column():
    ai = AIPlayer(Player.O)
    board = board_from_string("X__" "XO_" "___")
    assert ai.select_move(board, Difficulty.HARD) == 6


def test_answers_center_with_corner():
    # Against a center opening only a corner avoids a forced loss
    ai = AIPlayer(Player.O)
    board = board_from_string("____X____")
    assert ai.select_move(board, Difficulty.HARD) == 0


def test_prefers_fastest_win():
    # O wins at 8 right away; 0 blocks X and forks, winning two moves later
    ai = AIPlayer(Player.O)
    board = board_from_string("__O" "XXO" "X__")
    assert ai.get_best_move(board) == 8


def test_search_does_not_modify_board():
    ai = AIPlayer(Player.O)
    board = board_from_string("X__" "_O_" "__X")
    before = list(board)

    ai.get_best_move(board)

    assert board == before
    assert ai.positions_evaluated > 0


def test_accepts_tuple_snapshot():
    ai = AIPlayer(Player.O)
    board = tuple(board_from_string("XX_" "_O_" "___"))
    assert ai.get_best_move(board) == 2


def test_x_perspective():
    ai = AIPlayer(Player.X)
    board = board_from_string("XX_" "OO_" "___")
    assert ai.get_best_move(board) == 2


def test_minimax_scores():
    ai = AIPlayer(Player.O)

    won = board_from_string("OOO" "XX_" "X__")
    assert ai._minimax(won, 2, True) == GameConfig.WIN_SCORE - 2

    lost = board_from_string("XXX" "OO_" "___")
    assert ai._minimax(lost, 3, False) == 3 - GameConfig.WIN_SCORE

    drawn = board_from_string("XOX" "XOO" "OXX")
    assert ai._minimax(drawn, 5, True) == 0


# ==================== NO LEGAL MOVE ====================

def test_full_board_raises():
    ai = AIPlayer(Player.O)
    full = board_from_string("XOX" "XOO" "OXX")

    for difficulty in Difficulty:
        with pytest.raises(NoLegalMove):
            ai.select_move(full, difficulty)
    with pytest.raises(NoLegalMove):
        ai.get_best_move(full)
    with pytest.raises(NoLegalMove):
        ai.get_random_move(full)


# ==================== DIFFICULTY ====================

def test_difficulty_from_name():
    assert Difficulty.from_name("easy") == Difficulty.EASY
    assert Difficulty.from_name(" Medium ") == Difficulty.MEDIUM
    assert Difficulty.from_name("HARD") == Difficulty.HARD

    with pytest.raises(ValueError):
        Difficulty.from_name("impossible")


def test_easy_picks_only_empty_cells():
    ai = AIPlayer(Player.O, rng=random.Random(42))
    board = board_from_string("XOX" "_O_" "X_X")
    empty = {3, 5, 7}

    picks = {ai.select_move(board, Difficulty.EASY) for _ in range(200)}

    assert picks == empty


def test_easy_ignores_winning_move():
    # FixedRandom picks the first empty cell, not the win at 5
    ai = AIPlayer(Player.O, rng=FixedRandom(0.0))
    board = board_from_string("XX_" "OO_" "___")
    assert ai.select_move(board, Difficulty.EASY) == 2


def test_medium_random_branch():
    # Roll below 0.4: random move
    ai = AIPlayer(Player.O, rng=FixedRandom(0.1))
    board = board_from_string("X__" "_O_" "__X")
    assert ai.select_move(board, Difficulty.MEDIUM) == 1


def test_medium_optimal_branch():
    # Roll at or above 0.4: same move as HARD
    ai = AIPlayer(Player.O, rng=FixedRandom(GameConfig.MEDIUM_RANDOM_CHANCE))
    board = board_from_string("XX_" "OO_" "___")
    assert ai.select_move(board, Difficulty.MEDIUM) == 5


def test_hard_ignores_rng():
    ai = AIPlayer(Player.O, rng=FixedRandom(0.0))
    board = board_from_string("XX_" "_O_" "___")
    assert ai.select_move(board, Difficulty.HARD) == 2


# ==================== SELF PLAY ====================

def test_hard_vs_hard_is_draw():
    game = GameState()
    players = {Player.X: AIPlayer(Player.X), Player.O: AIPlayer(Player.O)}

    while game.is_active:
        mover = game.current_player
        game.make_move(players[mover].select_move(game.snapshot(), Difficulty.HARD), mover)

    assert game.status == GameStatus.DRAW
    assert all(cell is not None for cell in game.board)
    assert game.moves[0].index == GameConfig.CENTER_CELL


def test_hard_never_loses_as_second_player():
    """Try every X strategy against HARD O: X must never win."""
    ai = AIPlayer(Player.O)
    replies = {}

    def explore(game: GameState):
        if not game.is_active:
            assert game.winner != Player.X, f"X won: {game.pretty()}"
            return

        if game.current_player == Player.O:
            key = game.snapshot()
            if key not in replies:
                replies[key] = ai.select_move(key, Difficulty.HARD)
            child = game.copy()
            child.make_move(replies[key])
            explore(child)
            return

        for index in game.get_empty_cells():
            child = game.copy()
            child.make_move(index)
            explore(child)

    explore(GameState())


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - AI Player Tests")
    print("="*60)

    tests = [(name, func) for name, func in globals().items()
             if name.startswith("test_") and callable(func)]

    failed = 0
    for name, func in tests:
        try:
            func()
            print(f"[PASS] {name}")
        except Exception as e:
            failed += 1
            print(f"[FAIL] {name}: {e!r}")

    print("="*60)
    print(f"   {len(tests) - failed} passed, {failed} failed")
    print("="*60)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
