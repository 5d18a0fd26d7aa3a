"""
Board primitives for TicTacToe.
Players, game status and helpers for the 9-cell board.
"""

from enum import Enum
from typing import List, Optional

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# A board is 9 cells in row-major order - None means empty
Board = List[Optional[Player]]


def empty_board() -> Board:
    """Create a fresh, empty board."""
    return [None] * GameConfig.CELL_COUNT


def get_empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells, in order 0-8."""
    return [i for i, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9-character string like "XX_OO____".

    Args:
        text: 'X', 'O', and '_', '.', '-' or ' ' for empty cells.

    Returns:
        The board as a list of cells.
    """
    cells = [c for c in text if c not in "\n|"]
    if len(cells) != GameConfig.CELL_COUNT:
        raise ValueError(f"Expected {GameConfig.CELL_COUNT} cells, got {len(cells)}")

    board = empty_board()
    for i, c in enumerate(cells):
        c = c.upper()
        if c in ("X", "O"):
            board[i] = Player(c)
        elif c not in "_.- ":
            raise ValueError(f"Unknown cell value {c!r} at index {i}")
    return board
