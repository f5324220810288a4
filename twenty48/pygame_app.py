import logging
import sys
from typing import Optional, Tuple

import pygame

from twenty48.engine import Direction, Game2048, GameState
from twenty48.session import GameSession


logger = logging.getLogger(__name__)

TILE_COLORS = {
    0: (204, 192, 179),
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}
BACKGROUND_COLOR = (250, 248, 239)
BOARD_COLOR = (187, 173, 160)
TEXT_COLOR = (119, 110, 101)
LIGHT_TEXT_COLOR = (249, 246, 242)

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 720
BOARD_MARGIN = 32
BOARD_TOP = 150
TILE_GAP = 12
BOARD_SIZE = WINDOW_WIDTH - 2 * BOARD_MARGIN
FPS = 60

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)


def tile_size(grid_size: int) -> int:
    return (BOARD_SIZE - (grid_size + 1) * TILE_GAP) // grid_size


def cell_position(row: int, col: int, grid_size: int) -> Tuple[float, float]:
    step = tile_size(grid_size) + TILE_GAP
    x = BOARD_MARGIN + TILE_GAP + col * step
    y = BOARD_TOP + TILE_GAP + row * step
    return float(x), float(y)


class PygameRenderer:
    """Immediate-mode renderer: repaints the whole window from engine state."""

    def __init__(self, screen: pygame.Surface, session: GameSession) -> None:
        self.screen = screen
        self.session = session
        self.font_large = pygame.font.SysFont("arial", 48, bold=True)
        self.font_medium = pygame.font.SysFont("arial", 28, bold=True)
        self.font_small = pygame.font.SysFont("arial", 20)
        self.font_tile_big = pygame.font.SysFont("arial", 36, bold=True)
        self.font_tile_medium = pygame.font.SysFont("arial", 30, bold=True)
        self.font_tile_small = pygame.font.SysFont("arial", 24, bold=True)
        self.font_tile_tiny = pygame.font.SysFont("arial", 20, bold=True)

    def render(self, game: Game2048) -> None:
        self.screen.fill(BACKGROUND_COLOR)
        self._draw_header(game)
        self._draw_board(game)
        if game.state is not GameState.RUNNING:
            self._draw_overlay()

    def _draw_header(self, game: Game2048) -> None:
        title_surface = self.font_large.render("2048", True, TEXT_COLOR)
        title_rect = title_surface.get_rect()
        title_rect.topleft = (BOARD_MARGIN, 36)
        self.screen.blit(title_surface, title_rect)

        box_width = 152
        box_height = 68
        score_rect = pygame.Rect(WINDOW_WIDTH - BOARD_MARGIN - box_width, 36, box_width, box_height)
        self._draw_score_box(score_rect, "SCORE", game.score)

    def _draw_score_box(self, rect: pygame.Rect, label: str, value: int) -> None:
        pygame.draw.rect(self.screen, BOARD_COLOR, rect, border_radius=8)
        label_surface = self.font_small.render(label, True, LIGHT_TEXT_COLOR)
        label_rect = label_surface.get_rect(center=(rect.centerx, rect.top + label_surface.get_height() / 2 + 6))
        value_surface = self.font_medium.render(str(value), True, LIGHT_TEXT_COLOR)
        value_rect = value_surface.get_rect(center=(rect.centerx, rect.bottom - value_surface.get_height() / 2 - 6))
        self.screen.blit(label_surface, label_rect)
        self.screen.blit(value_surface, value_rect)

    def _draw_board(self, game: Game2048) -> None:
        pygame.draw.rect(
            self.screen,
            BOARD_COLOR,
            (BOARD_MARGIN, BOARD_TOP, BOARD_SIZE, BOARD_SIZE),
            border_radius=8,
        )
        size = tile_size(game.size)
        for r, row in enumerate(game.values()):
            for c, value in enumerate(row):
                x, y = cell_position(r, c, game.size)
                self._draw_tile(value, x, y, size)

    def _draw_tile(self, value: int, x: float, y: float, size: float) -> None:
        color = TILE_COLORS.get(value, (60, 58, 50))
        rect = pygame.Rect(x, y, size, size)
        pygame.draw.rect(self.screen, color, rect, border_radius=6)
        if value:
            text_color = LIGHT_TEXT_COLOR if value >= 8 else TEXT_COLOR
            font = self._tile_font(value)
            text = font.render(str(value), True, text_color)
            text_rect = text.get_rect(center=rect.center)
            self.screen.blit(text, text_rect)

    def _tile_font(self, value: int) -> pygame.font.Font:
        if value < 100:
            return self.font_tile_big
        if value < 1000:
            return self.font_tile_medium
        if value < 10000:
            return self.font_tile_small
        return self.font_tile_tiny

    def _draw_overlay(self) -> None:
        overlay = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        overlay.fill((255, 255, 255, 200))
        self.screen.blit(overlay, (0, 0))

        headline, *details = self.session.status_text()
        message_surface = self.font_large.render(headline, True, TEXT_COLOR)
        message_rect = message_surface.get_rect(center=(WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 - 80))
        self.screen.blit(message_surface, message_rect)

        top = message_rect.bottom + 30
        for line in details:
            detail_surface = self.font_medium.render(line, True, TEXT_COLOR)
            detail_rect = detail_surface.get_rect(center=(WINDOW_WIDTH / 2, top))
            self.screen.blit(detail_surface, detail_rect)
            top = detail_rect.bottom + 20


class PygameApp:
    def __init__(self, session: GameSession) -> None:
        pygame.init()
        pygame.display.set_caption("2048")
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        self.clock = pygame.time.Clock()
        self.session = session
        self.renderer = PygameRenderer(self.screen, session)
        session.attach(self.renderer)

    def run(self) -> None:
        logger.info("Starting pygame front-end")
        while True:
            self.clock.tick(FPS)
            self._handle_events()
            pygame.display.flip()

    def _quit(self) -> None:
        self.session.detach(self.renderer)
        pygame.quit()
        sys.exit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.session.click()
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self._quit()
                direction = direction_for_key(event.key)
                if direction:
                    self.session.press(direction)


def run(session: GameSession) -> None:
    PygameApp(session).run()
