"""
Game configuration for TicTacToe.
Board constants, AI scoring and pacing settings.
"""


class GameConfig:
    """
    Configuration class for game and AI settings.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8 row-major

    # Center cell - always the opening move on an empty board
    CENTER_CELL = 4

    # ==================== AI SETTINGS ====================
    # Base score of a won position (minus search depth)
    WIN_SCORE = 10

    # Chance that MEDIUM plays a random move instead of the best one
    MEDIUM_RANDOM_CHANCE = 0.4

    # The computer always plays O
    COMPUTER_PLAYER = "O"

    # Valid values: "easy", "medium", "hard"
    DEFAULT_DIFFICULTY = "hard"

    # Pause before the computer moves (milliseconds, UI only)
    COMPUTER_MOVE_DELAY_MS = 400

    # ==================== DEBUG SETTINGS ====================
    # Print search statistics for every AI move
    DEBUG_MODE = False
