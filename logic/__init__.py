"""
Logic module for TicTacToe.
Handles game state, rules, and AI opponent.
"""

__version__ = "1.0.0"

from .board import Player, GameStatus
from .exceptions import TicTacToeError, InvalidMove, NoLegalMove, InvalidBoard
from .game_state import GameState, Move
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer, Difficulty
from .game_session import GameSession
