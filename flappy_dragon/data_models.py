"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass
from enum import Enum

from .constants import (
    SCREEN_HEIGHT, PLAYER_OFFSET, GAP_Y_RANGE,
    PLAYER_GLYPH, OBSTACLE_GLYPH, BLACK, YELLOW, RED
)
from .context import GridContext
from .physics_core import PHYSICS


class GameMode(Enum):
    MENU = "menu"
    PLAY = "play"
    END = "end"


@dataclass
class Player:
    """The player character. `x` is a world position, `y` a grid row."""
    x: int
    y: int
    velocity: float = 0.0

    def gravity_and_move(self):
        """One physics tick: fall, advance one column, stay below the top row."""
        self.y, self.velocity = PHYSICS.apply_gravity_and_movement(self.y, self.velocity)
        self.x += 1

    def flap(self):
        self.velocity = PHYSICS.flap()

    def render(self, ctx: GridContext):
        # The player never moves on screen; the world scrolls past it.
        ctx.set(PLAYER_OFFSET, self.y, YELLOW, BLACK, PLAYER_GLYPH)


@dataclass
class Obstacle:
    """A vertical bar at world column `x` with an open gap centred on `gap_y`."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def new(cls, x: int, score: int, rng: random.Random) -> "Obstacle":
        """Generates an obstacle whose gap narrows as the score grows."""
        return cls(
            x=x,
            gap_y=rng.randrange(*GAP_Y_RANGE),
            size=PHYSICS.gap_size(score),
        )

    def render(self, ctx: GridContext, player_x: int):
        screen_x = self.x - player_x
        gap_top, gap_bottom = PHYSICS.gap_bounds(self.gap_y, self.size)

        # Top half of the obstacle
        for y in range(0, gap_top):
            ctx.set(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

        # Bottom half of the obstacle
        for y in range(gap_bottom, SCREEN_HEIGHT):
            ctx.set(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

    def hit_obstacle(self, player: Player) -> bool:
        return PHYSICS.check_collision(player.x, player.y, self.x, self.gap_y, self.size)
