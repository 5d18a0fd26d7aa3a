"""
Display configuration for TicTacToe.
Sizes, colours and fonts for the board image and the Tkinter UI.
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Colours for OpenCV drawing are BGR, colours for Tkinter are hex strings.
    """

    # ==================== BOARD IMAGE ====================
    # Output size for the rendered board image (pixels)
    BOARD_OUTPUT_SIZE = 360
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // 3  # 120 pixels per cell

    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    MARK_MARGIN = CELL_OUTPUT_SIZE // 5  # Gap between mark and cell border
    WIN_LINE_THICKNESS = 8

    # Cell number labels on empty cells
    SHOW_CELL_NUMBERS = True
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    CELL_NUMBER_SCALE = 0.6

    # ==================== COLOURS (BGR) ====================
    BACKGROUND_COLOR = (46, 26, 26)      # '#1a1a2e'
    GRID_COLOR = (62, 33, 22)            # '#16213e'
    X_COLOR = (113, 113, 248)            # '#f87171' - red
    O_COLOR = (128, 222, 74)             # '#4ade80' - green
    WIN_LINE_COLOR = (36, 191, 251)      # '#fbbf24' - amber
    CELL_NUMBER_COLOR = (120, 100, 100)

    # ==================== RESULT BADGE ====================
    BADGE_SIZE = 160

    # ==================== UI (Tkinter) ====================
    UI_BG = '#1a1a2e'
    UI_PANEL_BG = '#16213e'
    UI_TEXT = 'white'
    UI_ACCENT = '#00d4ff'
    UI_X = '#f87171'
    UI_O = '#4ade80'
    UI_ACTIVE_BOX = '#fbbf24'
    UI_INACTIVE_BOX = '#2d3748'
    UI_FONT = 'Segoe UI'
