"""
Test script for the display module.
Tests the board renderer without opening any window.

Usage:
    python test_display.py     # Run all tests
    pytest test_display.py
"""

import sys
import tempfile
from pathlib import Path

import cv2
import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from display import BoardRenderer, DisplayConfig
from logic.board import Player, board_from_string, empty_board


def has_color(image: np.ndarray, color, center, radius: int = 6) -> bool:
    """True if any pixel near `center` has exactly `color`."""
    x, y = center
    region = image[max(y - radius, 0):y + radius + 1, max(x - radius, 0):x + radius + 1]
    return bool(np.any(np.all(region == np.array(color, dtype=np.uint8), axis=-1)))


def test_config_values():
    config = DisplayConfig()
    assert config.BOARD_OUTPUT_SIZE > 0
    assert config.CELL_OUTPUT_SIZE * 3 == config.BOARD_OUTPUT_SIZE
    for color in (config.BACKGROUND_COLOR, config.X_COLOR, config.O_COLOR, config.WIN_LINE_COLOR):
        assert len(color) == 3


def test_render_shape():
    renderer = BoardRenderer()
    image = renderer.render(empty_board())

    size = renderer.config.BOARD_OUTPUT_SIZE
    assert image.shape == (size, size, 3)
    assert image.dtype == np.uint8
    # Corner pixel is plain background
    assert tuple(image[2, 2]) == renderer.config.BACKGROUND_COLOR


def test_render_marks():
    renderer = BoardRenderer()
    cfg = renderer.config
    image = renderer.render(board_from_string("X___O____"))

    # X strokes cross at the cell center
    assert has_color(image, cfg.X_COLOR, renderer.cell_center(0))

    # O is a ring: its edge is coloured, its center is not
    cx, cy = renderer.cell_center(4)
    radius = renderer.cell_size // 2 - cfg.MARK_MARGIN
    assert has_color(image, cfg.O_COLOR, (cx + radius, cy))
    assert not has_color(image, cfg.O_COLOR, (cx, cy), radius=3)

    # Empty cells have no marks
    assert not has_color(image, cfg.X_COLOR, renderer.cell_center(8), radius=20)
    assert not has_color(image, cfg.O_COLOR, renderer.cell_center(8), radius=20)


def test_render_winning_line():
    renderer = BoardRenderer()
    cfg = renderer.config
    board = board_from_string("XXX" "OO_" "___")

    plain = renderer.render(board)
    struck = renderer.render(board, winning_line=(0, 1, 2))

    # Between two X's on the top row
    x0, y0 = renderer.cell_center(0)
    x1, _ = renderer.cell_center(1)
    point = ((x0 + x1) // 2, y0)

    assert has_color(struck, cfg.WIN_LINE_COLOR, point)
    assert not has_color(plain, cfg.WIN_LINE_COLOR, point)


def test_result_badges():
    renderer = BoardRenderer()
    cfg = renderer.config
    size = cfg.BADGE_SIZE

    x_badge = renderer.render_result_badge(Player.X)
    assert x_badge.shape == (size, size, 3)
    assert has_color(x_badge, cfg.X_COLOR, (size // 2, size // 2))
    assert not np.any(np.all(x_badge == np.array(cfg.O_COLOR, dtype=np.uint8), axis=-1))

    draw_badge = renderer.render_result_badge(None)
    assert np.any(np.all(draw_badge == np.array(cfg.X_COLOR, dtype=np.uint8), axis=-1))
    assert np.any(np.all(draw_badge == np.array(cfg.O_COLOR, dtype=np.uint8), axis=-1))


def test_point_to_cell():
    renderer = BoardRenderer()
    last = renderer.size - 1
    cell = renderer.cell_size

    assert renderer.point_to_cell(0, 0) == 0
    assert renderer.point_to_cell(cell + 5, 5) == 1
    assert renderer.point_to_cell(5, cell + 5) == 3
    assert renderer.point_to_cell(last, last) == 8
    assert renderer.point_to_cell(-1, 5) is None
    assert renderer.point_to_cell(renderer.size, 0) is None

    for index in range(9):
        assert renderer.point_to_cell(*renderer.cell_center(index)) == index


def test_to_rgb():
    renderer = BoardRenderer()
    image = renderer.render(empty_board())
    rgb = renderer.to_rgb(image)

    assert tuple(rgb[2, 2]) == tuple(reversed(renderer.config.BACKGROUND_COLOR))


def test_save():
    renderer = BoardRenderer()
    image = renderer.render(board_from_string("XO_" "_X_" "__O"))

    with tempfile.TemporaryDirectory() as tmp:
        path = str(Path(tmp) / "board.png")
        assert renderer.save(image, path)

        loaded = cv2.imread(path)
        assert loaded is not None
        assert np.array_equal(loaded, image)


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Display Tests")
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
