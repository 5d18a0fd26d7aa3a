"""
Display module for TicTacToe.
Draws the board and result badges as images for the UI and console.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
