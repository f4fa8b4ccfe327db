"""
pygame_context.py: Pygame window that renders the character grid and reads the keyboard.
"""

import logging
from typing import Dict, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, RENDER_FPS, CELL_SIZE, BLACK
)
from .context import Color, ContextError, GridContext, Key

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_SPACE: Key.FLAP,
    pygame.K_p: Key.PLAY,
    pygame.K_q: Key.QUIT,
}


def map_key(pygame_key: int) -> Key:
    return KEY_BINDINGS.get(pygame_key, Key.OTHER)


class PygameContext(GridContext):
    def __init__(self, title: str = WINDOW_TITLE, fps: int = RENDER_FPS,
                 cell_size: int = CELL_SIZE,
                 width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        super().__init__(width, height)
        self.fps = fps
        self.cell_size = cell_size

        try:
            pygame.init()
            self.screen = pygame.display.set_mode((width * cell_size, height * cell_size))
            pygame.display.set_caption(title)
            self.font = pygame.font.Font(None, cell_size + cell_size // 2)
        except pygame.error as e:
            pygame.quit()
            raise ContextError(f"Unable to open display: {e}") from e

        self.clock = pygame.time.Clock()
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}
        logger.info("Opened %dx%d window (%d px cells)", width, height, cell_size)

    def begin_frame(self):
        """Measures elapsed time and keeps the first key press of the frame."""
        self.frame_time_ms = float(self.clock.tick(self.fps))
        self.key = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quitting = True
            elif event.type == pygame.KEYDOWN and self.key is None:
                self.key = map_key(event.key)

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        surface = self._glyph_cache.get((glyph, fg))
        if surface is None:
            surface = self.font.render(glyph, True, fg)
            self._glyph_cache[(glyph, fg)] = surface
        return surface

    def present(self):
        size = self.cell_size
        self.screen.fill(BLACK)

        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                rect = pygame.Rect(x * size, y * size, size, size)
                if cell.bg != BLACK:
                    pygame.draw.rect(self.screen, cell.bg, rect)
                if cell.glyph != " ":
                    surface = self._glyph(cell.glyph, cell.fg)
                    self.screen.blit(surface, surface.get_rect(center=rect.center))

        pygame.display.flip()

    def close(self):
        pygame.quit()
        logger.info("Window closed")
