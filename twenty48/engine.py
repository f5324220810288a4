import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple


GRID_SIZE = 4
TARGET = 2048

logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def row_step(self) -> int:
        return self.value[0]

    @property
    def col_step(self) -> int:
        return self.value[1]


class GameState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    WON = "won"
    LOST = "lost"


@dataclass
class Tile:
    value: int
    merged: bool = False

    def can_merge_with(self, other: "Tile") -> bool:
        return not self.merged and not other.merged and self.value == other.value


def is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class Game2048:
    """Board engine: grid, score and game state.

    The engine knows nothing about drawing. Front-ends call `start_game` and
    `move` and then read `values()`, `score` and `state` to redraw.
    """

    def __init__(self, size: int = GRID_SIZE, target: int = TARGET, rng: Optional[random.Random] = None) -> None:
        if size < 2:
            raise ValueError(f"board size must be at least 2, got {size}")
        if target < 4 or not is_power_of_two(target):
            raise ValueError(f"target must be a power of two >= 4, got {target}")
        self.size = size
        self.target = target
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.state = GameState.NOT_STARTED
        self.grid: List[List[Optional[Tile]]] = self._empty_grid()

    def _empty_grid(self) -> List[List[Optional[Tile]]]:
        return [[None for _ in range(self.size)] for _ in range(self.size)]

    def start_game(self) -> None:
        if self.state is GameState.RUNNING:
            logger.debug("start_game ignored: game already running")
            return
        self.grid = self._empty_grid()
        self.score = 0
        self.state = GameState.RUNNING
        self.spawn_random_tile()
        self.spawn_random_tile()
        logger.debug("Started %dx%d game with target %d", self.size, self.size, self.target)

    def spawn_random_tile(self) -> Optional[Tuple[int, int, int]]:
        empty_cells = self.empty_cells()
        if not empty_cells:
            return None
        r, c = self.rng.choice(empty_cells)
        value = self.rng.choice((2, 4))
        self.grid[r][c] = Tile(value)
        logger.debug("Spawned %d at (%d, %d)", value, r, c)
        return r, c, value

    def move(self, direction: Direction) -> bool:
        if not isinstance(direction, Direction):
            raise TypeError(f"expected a Direction, got {direction!r}")
        if self.state is not GameState.RUNNING:
            logger.debug("move %s ignored: game is %s", direction.name, self.state.value)
            return False

        is_moved = self._slide(direction, commit=True)
        if is_moved:
            self._clear_merges()
            self.spawn_random_tile()
            # Loss is checked first so that reaching the target on the last
            # possible move still ends as a win.
            if not self.move_available():
                self.state = GameState.LOST
            if self.score == self.target:
                self.state = GameState.WON
            if self.state is not GameState.RUNNING:
                logger.info("Game %s with score %d", self.state.value, self.score)
        logger.debug("move %s -> moved=%s score=%d", direction.name, is_moved, self.score)
        return is_moved

    def move_up(self) -> bool:
        return self.move(Direction.UP)

    def move_down(self) -> bool:
        return self.move(Direction.DOWN)

    def move_left(self) -> bool:
        return self.move(Direction.LEFT)

    def move_right(self) -> bool:
        return self.move(Direction.RIGHT)

    def move_available(self) -> bool:
        return any(self._slide(direction, commit=False) for direction in Direction)

    def _cell_order(self, direction: Direction) -> Iterator[Tuple[int, int]]:
        # UP and LEFT start at the top-left cell, DOWN and RIGHT at the bottom-right.
        total = self.size * self.size
        start = 0 if direction in (Direction.UP, Direction.LEFT) else total - 1
        for i in range(total):
            yield divmod(abs(start - i), self.size)

    def _in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def _slide(self, direction: Direction, commit: bool) -> bool:
        """Slide every tile one way.

        With `commit` False nothing is changed and the first possible step or
        merge returns True.
        """
        dr, dc = direction.row_step, direction.col_step
        moved = False
        for r, c in self._cell_order(direction):
            if self.grid[r][c] is None:
                continue
            nr, nc = r + dr, c + dc
            while self._in_bounds(nr, nc):
                current = self.grid[r][c]
                neighbour = self.grid[nr][nc]
                if neighbour is None:
                    if not commit:
                        return True
                    self.grid[nr][nc] = current
                    self.grid[r][c] = None
                    r, c = nr, nc
                    nr, nc = r + dr, c + dc
                    moved = True
                elif neighbour.can_merge_with(current):
                    if not commit:
                        return True
                    neighbour.value *= 2
                    neighbour.merged = True
                    self.score += neighbour.value
                    self.grid[r][c] = None
                    moved = True
                    break
                else:
                    break
        return moved

    def _clear_merges(self) -> None:
        for row in self.grid:
            for tile in row:
                if tile is not None:
                    tile.merged = False

    def value_at(self, row: int, col: int) -> Optional[int]:
        tile = self.grid[row][col]
        return tile.value if tile is not None else None

    def values(self) -> List[List[int]]:
        return [[tile.value if tile is not None else 0 for tile in row] for row in self.grid]

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [(r, c) for r in range(self.size) for c in range(self.size) if self.grid[r][c] is None]

    def tile_count(self) -> int:
        return self.size * self.size - len(self.empty_cells())

    def tile_sum(self) -> int:
        return sum(sum(row) for row in self.values())

    def set_tile(self, row: int, col: int, value: Optional[int]) -> None:
        if not self._in_bounds(row, col):
            raise ValueError(f"cell ({row}, {col}) is outside a {self.size}x{self.size} board")
        if value is None:
            self.grid[row][col] = None
            return
        if not is_power_of_two(value) or value < 2:
            raise ValueError(f"tile value must be a power of two >= 2, got {value}")
        self.grid[row][col] = Tile(value)
