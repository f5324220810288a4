import logging
import tkinter as tk
from typing import Dict, List, Optional, Tuple

from twenty48.engine import Direction, Game2048, GameState
from twenty48.session import GameSession


logger = logging.getLogger(__name__)

TILE_COLORS = {
    0: "#cdc1b4",
    2: "#eee4da",
    4: "#ede0c8",
    8: "#f2b179",
    16: "#f59563",
    32: "#f67c5f",
    64: "#f65e3b",
    128: "#edcf72",
    256: "#edcc61",
    512: "#edc850",
    1024: "#edc53f",
    2048: "#edc22e",
}
BACKGROUND_COLOR = "#faf8ef"
BOARD_COLOR = "#bbada0"
TEXT_COLOR = "#776e65"
LIGHT_TEXT_COLOR = "#f9f6f2"
OTHER_TILE_COLOR = "#3c3a32"

CANVAS_WIDTH = 560
CANVAS_HEIGHT = 660
BOARD_MARGIN = 30
BOARD_TOP = 120
TILE_GAP = 10
BOARD_SIZE = CANVAS_WIDTH - 2 * BOARD_MARGIN

KEYSYM_DIRECTIONS = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
}


def direction_for_keysym(keysym: str) -> Optional[Direction]:
    return KEYSYM_DIRECTIONS.get(keysym)


def tile_font_size(value: int) -> int:
    if value < 100:
        return 36
    if value < 1000:
        return 30
    if value < 10000:
        return 24
    return 18


class CanvasRenderer:
    """Retained-mode renderer.

    Every rectangle and label lives on the canvas for the whole session;
    `render` only reconfigures the existing items.
    """

    def __init__(self, canvas: tk.Canvas, session: GameSession) -> None:
        self.canvas = canvas
        self.session = session
        self.cells: Dict[Tuple[int, int], Tuple[int, int]] = {}
        self._build(session.game.size)

    def _build(self, grid_size: int) -> None:
        self.canvas.create_rectangle(
            BOARD_MARGIN, BOARD_TOP, BOARD_MARGIN + BOARD_SIZE, BOARD_TOP + BOARD_SIZE,
            fill=BOARD_COLOR, outline="",
        )
        self.canvas.create_text(BOARD_MARGIN, 60, text="2048", anchor="w", fill=TEXT_COLOR,
                                font=("Arial", 44, "bold"))
        self.score_item = self.canvas.create_text(CANVAS_WIDTH - BOARD_MARGIN, 60, anchor="e",
                                                  fill=TEXT_COLOR, font=("Arial", 22, "bold"))

        size = (BOARD_SIZE - (grid_size + 1) * TILE_GAP) / grid_size
        for r in range(grid_size):
            for c in range(grid_size):
                x = BOARD_MARGIN + TILE_GAP + c * (size + TILE_GAP)
                y = BOARD_TOP + TILE_GAP + r * (size + TILE_GAP)
                rect = self.canvas.create_rectangle(x, y, x + size, y + size, outline="")
                label = self.canvas.create_text(x + size / 2, y + size / 2)
                self.cells[(r, c)] = (rect, label)

        self.overlay_item = self.canvas.create_rectangle(
            0, 0, CANVAS_WIDTH, CANVAS_HEIGHT, fill="white", stipple="gray50", outline="", state="hidden",
        )
        self.message_item = self.canvas.create_text(
            CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2, fill=TEXT_COLOR, font=("Arial", 26, "bold"),
            justify="center", state="hidden",
        )

    def render(self, game: Game2048) -> None:
        for (r, c), (rect, label) in self.cells.items():
            value = game.value_at(r, c) or 0
            self.canvas.itemconfigure(rect, fill=TILE_COLORS.get(value, OTHER_TILE_COLOR))
            self.canvas.itemconfigure(
                label,
                text=str(value) if value else "",
                fill=LIGHT_TEXT_COLOR if value >= 8 else TEXT_COLOR,
                font=("Arial", tile_font_size(value), "bold"),
            )
        self.canvas.itemconfigure(self.score_item, text=f"SCORE: {game.score}")

        lines: List[str] = list(self.session.status_text())
        overlay_state = "hidden" if game.state is GameState.RUNNING else "normal"
        self.canvas.itemconfigure(self.overlay_item, state=overlay_state)
        self.canvas.itemconfigure(self.message_item, text="\n".join(lines), state=overlay_state)
        self.canvas.tag_raise(self.overlay_item)
        self.canvas.tag_raise(self.message_item)


class CanvasApp:
    def __init__(self, session: GameSession) -> None:
        self.session = session
        self.root = tk.Tk()
        self.root.title("2048")
        self.root.resizable(False, False)
        self.canvas = tk.Canvas(self.root, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                                background=BACKGROUND_COLOR, highlightthickness=0)
        self.canvas.pack()
        self.renderer = CanvasRenderer(self.canvas, session)
        session.attach(self.renderer)
        self.root.bind("<Key>", self._on_key)
        self.canvas.bind("<Button-1>", self._on_click)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_key(self, event: tk.Event) -> None:
        if event.keysym in ("Escape", "q"):
            self._quit()
            return
        direction = direction_for_keysym(event.keysym)
        if direction:
            self.session.press(direction)

    def _on_click(self, event: tk.Event) -> None:
        self.session.click()

    def _quit(self) -> None:
        self.session.detach(self.renderer)
        self.root.destroy()

    def run(self) -> None:
        logger.info("Starting tkinter canvas front-end")
        self.root.mainloop()


def run(session: GameSession) -> None:
    CanvasApp(session).run()
