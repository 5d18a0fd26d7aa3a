"""
AI player for TicTacToe.
Picks the computer's move for a difficulty level, using the Minimax
algorithm for optimal play.
"""

import random
from enum import Enum
from typing import Optional, Sequence

from .board import Board, Player, get_empty_cells
from .config import GameConfig
from .exceptions import NoLegalMove
from .win_checker import WinChecker


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Random 40% of the time, otherwise optimal
    HARD = "hard"        # Full minimax

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Look up a difficulty by name, ignoring case."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {name!r} (expected one of: {valid})") from None


class AIPlayer:
    """
    An AI that plays TicTacToe.

    On HARD it always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Player = Player.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            rng: Random source for EASY/MEDIUM. Seed one for repeatable games.
        """
        self.player = player
        self.opponent = player.opposite()
        self.rng = rng or random.Random()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def select_move(self, board: Sequence[Optional[Player]], difficulty: Difficulty = Difficulty.HARD) -> int:
        """
        Pick a move for the given difficulty.

        Args:
            board: Current board (not modified).
            difficulty: How well to play.

        Returns:
            Index of an empty cell.

        Raises:
            NoLegalMove: If the board is full.
        """
        if not get_empty_cells(list(board)):
            raise NoLegalMove("No empty cell left to play")

        if difficulty == Difficulty.EASY:
            return self.get_random_move(board)

        if difficulty == Difficulty.MEDIUM:
            if self.rng.random() < GameConfig.MEDIUM_RANDOM_CHANCE:
                return self.get_random_move(board)
            return self.get_best_move(board)

        return self.get_best_move(board)

    def get_random_move(self, board: Sequence[Optional[Player]]) -> int:
        """
        Get a random empty cell (easy difficulty).

        Raises:
            NoLegalMove: If the board is full.
        """
        empty_cells = get_empty_cells(list(board))
        if not empty_cells:
            raise NoLegalMove("No empty cell left to play")
        return self.rng.choice(empty_cells)

    def get_best_move(self, board: Sequence[Optional[Player]]) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Current board (not modified).

        Returns:
            Index of the best move. Ties go to the lowest index.

        Raises:
            NoLegalMove: If the board is full.
        """
        self.positions_evaluated = 0

        # Work on our own copy - cells are set and undone during the search
        board = list(board)
        valid_moves = get_empty_cells(board)

        if not valid_moves:
            raise NoLegalMove("No empty cell left to play")

        # Special case: center is the best opening, no need to search
        if len(valid_moves) == len(board):
            return GameConfig.CENTER_CELL

        best_score = float('-inf')
        best_move = valid_moves[0]

        for index in valid_moves:
            # Try this move
            board[index] = self.player
            score = self._minimax(board, depth=0, is_maximizing=False)
            board[index] = None

            if score > best_score:
                best_score = score
                best_move = index

        if GameConfig.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Minimax algorithm over the full game tree.

        Args:
            board: Board to evaluate. Restored before returning.
            depth: Moves played since the root (prefer faster wins).
            is_maximizing: True if it's the AI's turn in this line.

        Returns:
            The score of the position from the AI's point of view.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if self.win_checker.has_won(board, self.player):
            return GameConfig.WIN_SCORE - depth
        if self.win_checker.has_won(board, self.opponent):
            return depth - GameConfig.WIN_SCORE

        valid_moves = get_empty_cells(board)
        if not valid_moves:
            return 0  # Draw

        if is_maximizing:
            max_score = float('-inf')
            for index in valid_moves:
                board[index] = self.player
                score = self._minimax(board, depth + 1, False)
                board[index] = None
                max_score = max(max_score, score)
            return max_score
        else:
            min_score = float('inf')
            for index in valid_moves:
                board[index] = self.opponent
                score = self._minimax(board, depth + 1, True)
                board[index] = None
                min_score = min(min_score, score)
            return min_score


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing AIPlayer...")

    ai = AIPlayer(Player.O)

    # Test 1: AI should block a winning move
    board = board_from_string("XX_" "_O_" "___")
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = board_from_string("OO_" "XX_" "X__")
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
