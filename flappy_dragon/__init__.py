"""
Flappy Dragon: a side-scrolling arcade game on an 80x50 character grid.
"""

from .data_models import GameMode, Obstacle, Player
from .session import State

__all__ = ["GameMode", "Obstacle", "Player", "State"]
