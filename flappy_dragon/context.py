"""
context.py: The per-frame drawing and input contract the game session talks to.

GridContext keeps the character grid in memory. Front-ends (see
pygame_context.py) subclass it to feed real input and put the grid on screen.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, BLACK, WHITE

Color = Tuple[int, int, int]


class ContextError(RuntimeError):
    """Raised when the presentation layer cannot be started."""


class Key(Enum):
    FLAP = "flap"
    PLAY = "play"
    QUIT = "quit"
    OTHER = "other"


@dataclass
class Cell:
    glyph: str = " "
    fg: Color = WHITE
    bg: Color = BLACK


class GridContext:
    """
    A fixed-size character grid plus the per-frame inputs.

    frame_time_ms: wall-clock milliseconds since the previous frame.
    key: at most one key event for the current frame, or None.
    quitting: set by the game to ask the frame driver to stop.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.frame_time_ms: float = 0.0
        self.key: Optional[Key] = None
        self.quitting = False
        self.cells: List[List[Cell]] = []
        self.cls()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        """Draws one glyph. Cells outside the grid are ignored."""
        if self.in_bounds(x, y):
            self.cells[y][x] = Cell(glyph, fg, bg)

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, bg: Color):
        self.cells = [[Cell(bg=bg) for _ in range(self.width)] for _ in range(self.height)]

    def print(self, x: int, y: int, text: str):
        """Writes white text, keeping each cell's background."""
        for i, ch in enumerate(text):
            if self.in_bounds(x + i, y):
                self.set(x + i, y, WHITE, self.cells[y][x + i].bg, ch)

    def print_centered(self, y: int, text: str):
        self.print((self.width - len(text)) // 2, y, text)

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def row_text(self, y: int) -> str:
        return "".join(c.glyph for c in self.cells[y])

    def begin_frame(self):
        """Hook for front-ends to sample time and input. No-op in memory."""

    def present(self):
        """Hook for front-ends to show the grid. No-op in memory."""

    def close(self):
        pass
