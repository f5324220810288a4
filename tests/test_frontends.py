from __future__ import annotations

import pytest

from twenty48.engine import Direction

pygame = pytest.importorskip("pygame")


def test_pygame_arrow_keys_map_to_directions() -> None:
    from twenty48.pygame_app import direction_for_key

    assert direction_for_key(pygame.K_UP) is Direction.UP
    assert direction_for_key(pygame.K_DOWN) is Direction.DOWN
    assert direction_for_key(pygame.K_LEFT) is Direction.LEFT
    assert direction_for_key(pygame.K_RIGHT) is Direction.RIGHT
    assert direction_for_key(pygame.K_SPACE) is None


def test_pygame_cells_fit_on_board() -> None:
    from twenty48.pygame_app import BOARD_MARGIN, BOARD_SIZE, TILE_GAP, cell_position, tile_size

    for grid_size in (3, 4, 5):
        x, _ = cell_position(0, grid_size - 1, grid_size)
        assert x + tile_size(grid_size) + TILE_GAP <= BOARD_MARGIN + BOARD_SIZE


def test_canvas_keysyms_map_to_directions() -> None:
    pytest.importorskip("tkinter")
    from twenty48.canvas_app import direction_for_keysym, tile_font_size

    assert direction_for_keysym("Up") is Direction.UP
    assert direction_for_keysym("Right") is Direction.RIGHT
    assert direction_for_keysym("space") is None
    assert tile_font_size(2) > tile_font_size(2048)
