"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Tuple

from .constants import (
    GRAVITY_STEP, TERMINAL_VELOCITY, FLAP_VELOCITY,
    MAX_GAP, MIN_GAP, PLAYER_OFFSET
)


class PhysicsCore:
    """
    Shared deterministic physics core used by the player and obstacles.
    All methods are pure; the entities own their state.
    """

    def apply_gravity_and_movement(self, y: int, velocity: float) -> Tuple[int, float]:
        """
        Calculates new row and velocity after one physics tick.
        """
        velocity = min(velocity + GRAVITY_STEP, TERMINAL_VELOCITY)
        y += int(velocity)

        # Cannot rise above the top row
        y = max(y, 0)

        return y, velocity

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return FLAP_VELOCITY

    def gap_size(self, score: int) -> int:
        """Gap narrows by one row per point, floored at MIN_GAP."""
        return max(MIN_GAP, MAX_GAP - score)

    def gap_bounds(self, gap_y: int, size: int) -> Tuple[int, int]:
        """Returns (top, bottom) rows of the gap band."""
        half_size = size // 2
        return gap_y - half_size, gap_y + half_size

    def check_collision(self, player_x: int, player_y: int,
                        obstacle_x: int, gap_y: int, size: int) -> bool:
        """Checks for a hit only on the tick the bar reaches the player's column."""
        if player_x + PLAYER_OFFSET != obstacle_x:
            return False

        gap_top, gap_bottom = self.gap_bounds(gap_y, size)
        return player_y < gap_top or player_y > gap_bottom


PHYSICS = PhysicsCore()
