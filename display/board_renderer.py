"""
Board renderer for TicTacToe.
Draws the board, the marks and the winning line with OpenCV.
"""

import cv2
import numpy as np
from typing import Optional, Sequence, Tuple

from logic.board import Player
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders TicTacToe boards to BGR images.

    Used by the Tkinter UI (shown through Pillow) and by the console
    mode to save the final board as a PNG.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()
        self.size = self.config.BOARD_OUTPUT_SIZE
        self.cell_size = self.size // 3

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel center (x, y) of a cell."""
        row, col = divmod(index, 3)
        cx = col * self.cell_size + self.cell_size // 2
        cy = row * self.cell_size + self.cell_size // 2
        return cx, cy

    def point_to_cell(self, x: int, y: int) -> Optional[int]:
        """
        Convert a pixel position on the board image to a cell index.

        Args:
            x: X coordinate in pixels.
            y: Y coordinate in pixels.

        Returns:
            Cell index (0-8), or None if the point is off the board.
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None

        col = min(int(x) // self.cell_size, 2)
        row = min(int(y) // self.cell_size, 2)
        return row * 3 + col

    def render(
        self,
        board: Sequence[Optional[Player]],
        winning_line: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: 9 cells, None for empty.
            winning_line: Cells to strike through, if the game is won.

        Returns:
            BGR image of the board.
        """
        cfg = self.config
        image = np.full((self.size, self.size, 3), cfg.BACKGROUND_COLOR, dtype=np.uint8)

        # Draw grid lines
        for i in range(1, 3):
            offset = i * self.cell_size
            cv2.line(image, (offset, 0), (offset, self.size), cfg.GRID_COLOR, cfg.GRID_THICKNESS)
            cv2.line(image, (0, offset), (self.size, offset), cfg.GRID_COLOR, cfg.GRID_THICKNESS)

        for index, cell in enumerate(board):
            cx, cy = self.cell_center(index)

            if cell is None:
                if cfg.SHOW_CELL_NUMBERS:
                    cv2.putText(image, str(index), (cx - 6, cy + 8),
                                cfg.FONT, cfg.CELL_NUMBER_SCALE, cfg.CELL_NUMBER_COLOR, 1)
                continue

            self._draw_mark(image, cell, (cx, cy), self.cell_size // 2 - cfg.MARK_MARGIN)

        if winning_line is not None:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            cv2.line(image, start, end, cfg.WIN_LINE_COLOR, cfg.WIN_LINE_THICKNESS, cv2.LINE_AA)

        return image

    def render_result_badge(self, winner: Optional[Player]) -> np.ndarray:
        """
        Draw the icon shown on the result overlay.

        Args:
            winner: The winning player, or None for a draw.

        Returns:
            BGR image - the winner's mark, or X and O side by side for a draw.
        """
        cfg = self.config
        size = cfg.BADGE_SIZE
        image = np.full((size, size, 3), cfg.BACKGROUND_COLOR, dtype=np.uint8)

        if winner is None:
            # Draw: both marks, half size
            half = size // 4
            self._draw_mark(image, Player.X, (size // 4, size // 2), half - 8)
            self._draw_mark(image, Player.O, (3 * size // 4, size // 2), half - 8)
        else:
            self._draw_mark(image, winner, (size // 2, size // 2), size // 2 - cfg.MARK_MARGIN)

        return image

    def _draw_mark(self, image: np.ndarray, player: Player, center: Tuple[int, int], radius: int):
        """Draw an X (two strokes) or an O (circle) centred on a point."""
        cx, cy = center
        thickness = self.config.MARK_THICKNESS

        if player == Player.X:
            color = self.config.X_COLOR
            cv2.line(image, (cx - radius, cy - radius), (cx + radius, cy + radius),
                     color, thickness, cv2.LINE_AA)
            cv2.line(image, (cx + radius, cy - radius), (cx - radius, cy + radius),
                     color, thickness, cv2.LINE_AA)
        else:
            cv2.circle(image, (cx, cy), radius, self.config.O_COLOR, thickness, cv2.LINE_AA)

    @staticmethod
    def to_rgb(image: np.ndarray) -> np.ndarray:
        """Convert a rendered BGR image to RGB (for Pillow)."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    @staticmethod
    def save(image: np.ndarray, path: str) -> bool:
        """
        Save a rendered image.

        Returns:
            True if the file was written.
        """
        ok = cv2.imwrite(path, image)
        if ok:
            print(f"Saved: {path}")
        else:
            print(f"ERROR: Could not write {path}")
        return ok
