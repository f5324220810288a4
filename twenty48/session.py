import logging
from typing import List, Optional, Protocol, Tuple

from twenty48.engine import Direction, Game2048, GameState


logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, game: Game2048) -> None:
        ...


class GameSession:
    """One engine shared by any number of renderers.

    Front-ends translate their own key and mouse events into `press` and
    `click`; every attached renderer is redrawn after each call.
    """

    def __init__(self, game: Optional[Game2048] = None) -> None:
        self.game = game if game is not None else Game2048()
        self.renderers: List[Renderer] = []

    def attach(self, renderer: Renderer) -> None:
        self.renderers.append(renderer)
        logger.debug("Attached %s", type(renderer).__name__)
        renderer.render(self.game)

    def detach(self, renderer: Renderer) -> None:
        self.renderers.remove(renderer)

    def press(self, direction: Direction) -> bool:
        moved = self.game.move(direction)
        self.render_all()
        return moved

    def click(self) -> None:
        self.game.start_game()
        self.render_all()

    def render_all(self) -> None:
        for renderer in self.renderers:
            renderer.render(self.game)

    def status_text(self) -> Tuple[str, ...]:
        state = self.game.state
        if state is GameState.NOT_STARTED:
            return ("click to start", "use arrow keys to move")
        if state is GameState.WON:
            return ("Target achieved!", f"Score: {self.game.score}", "Click to start a new game")
        if state is GameState.LOST:
            return ("Game over", f"Score: {self.game.score}", "Click to start a new game")
        return ()
