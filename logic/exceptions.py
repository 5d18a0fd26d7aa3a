"""
Errors raised by the TicTacToe game logic.
"""


class TicTacToeError(Exception):
    """Base class for all game logic errors."""


class InvalidMove(TicTacToeError, ValueError):
    """
    A move broke the rules (occupied cell, wrong turn, out of range,
    or the game is already over). The board is left unchanged.
    """


class NoLegalMove(TicTacToeError, RuntimeError):
    """The AI was asked to move on a full board."""


class InvalidBoard(TicTacToeError, ValueError):
    """Both players hold a winning line - no legal game reaches this."""
