"""Shared fixtures for the game tests."""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flappy_dragon.context import GridContext
from flappy_dragon.session import State


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def ctx():
    return GridContext()


@pytest.fixture
def state(rng):
    return State(high_score=0, rng=rng)


@pytest.fixture
def playing(state):
    """A session that has just left the menu."""
    state.restart()
    return state
