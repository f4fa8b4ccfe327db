"""
session.py: The game session. Owns the entities, the score and the current mode.
"""

import logging
import random
from typing import Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, PLAYER_OFFSET,
    PLAYER_START, MENU_PLAYER_START, NAVY,
    MENU_TITLE, MENU_SUBTITLE, END_TITLE
)
from .context import GridContext, Key
from .data_models import GameMode, Obstacle, Player

logger = logging.getLogger(__name__)


class State:
    """
    One game session per process. `tick` is called once per rendered frame
    and dispatches to the handler for the current mode.
    """

    def __init__(self, high_score: int = 0, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.player = Player(*MENU_PLAYER_START)
        self.frame_time = 0.0
        self.obstacle_one = Obstacle.new(SCREEN_WIDTH, 0, self.rng)
        self.obstacle_two = Obstacle.new(SCREEN_WIDTH, 1, self.rng)
        self.mode = GameMode.MENU
        self.score = 0
        self.high_score = high_score

    def tick(self, ctx: GridContext):
        if self.mode is GameMode.MENU:
            self.main_menu(ctx, MENU_TITLE, MENU_SUBTITLE)
        elif self.mode is GameMode.END:
            self.main_menu(
                ctx, END_TITLE,
                f"Your Score: {self.score}, High Score: {self.high_score}")
        else:
            self.play(ctx)

    def play(self, ctx: GridContext):
        ctx.cls_bg(NAVY)

        # Physics runs on accumulated frame time, not once per frame
        self.frame_time += ctx.frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.gravity_and_move()

        if ctx.key is Key.FLAP:
            self.player.flap()

        self.player.render(ctx)
        ctx.print(0, 0, "Press SPACE to flap.")
        ctx.print(0, 1, f"SCORE: {self.score}")
        ctx.print(50, 1, f"Obstacles X: {self.obstacle_one.x} , {self.obstacle_two.x}")

        self.obstacle_one.render(ctx, self.player.x)
        self.obstacle_two.render(ctx, self.player.x)

        # At most one obstacle is replaced per frame
        if self.player.x > self.obstacle_one.x:
            self.score += 1
            self.obstacle_one = Obstacle.new(self.player.x + SCREEN_WIDTH, self.score, self.rng)
            logger.debug("Score %d, obstacle one respawned at %d", self.score, self.obstacle_one.x)
        elif self.player.x > self.obstacle_two.x:
            self.score += 1
            self.obstacle_two = Obstacle.new(self.player.x + SCREEN_WIDTH, self.score, self.rng)
            logger.debug("Score %d, obstacle two respawned at %d", self.score, self.obstacle_two.x)

        if (self.player.y > SCREEN_HEIGHT
                or self.obstacle_one.hit_obstacle(self.player)
                or self.obstacle_two.hit_obstacle(self.player)):
            self.mode = GameMode.END
            logger.info("Player died with score %d", self.score)

    def restart(self):
        """Banks the high score and starts a fresh run."""
        self.high_score = max(self.high_score, self.score)
        self.player = Player(*PLAYER_START)
        self.frame_time = 0.0
        self.obstacle_one = Obstacle.new(SCREEN_WIDTH + PLAYER_OFFSET, 0, self.rng)
        self.obstacle_two = Obstacle.new(self.obstacle_one.x + SCREEN_WIDTH // 2, 1, self.rng)
        self.score = 0
        self.mode = GameMode.PLAY
        logger.info("New run started (high score %d)", self.high_score)

    def main_menu(self, ctx: GridContext, title: str, subtitle: str):
        """Shared by the start menu and the end screen."""
        ctx.cls()
        ctx.print_centered(5, title)
        ctx.print_centered(6, subtitle)
        ctx.print_centered(8, "[P] Play")
        ctx.print_centered(9, "[Q] Quit")

        if ctx.key is Key.PLAY:
            self.restart()
        elif ctx.key is Key.QUIT:
            ctx.quitting = True
            logger.info("Quit requested")
