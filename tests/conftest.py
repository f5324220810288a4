from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from twenty48.engine import Game2048, GameState


@pytest.fixture()
def game() -> Game2048:
    return Game2048(rng=random.Random(1234))


@pytest.fixture()
def load_board(game: Game2048) -> Callable[[list[list[int]]], Game2048]:
    """Put a running game into a known position (0 marks an empty cell)."""

    def _load(rows: list[list[int]]) -> Game2048:
        game.state = GameState.RUNNING
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                game.set_tile(r, c, value or None)
        return game

    return _load
