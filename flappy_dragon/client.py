"""
client.py: The frame driver. Runs the session until the context asks to quit.
"""

import logging
from typing import Optional

from .context import GridContext
from .session import State

logger = logging.getLogger(__name__)


def main_loop(ctx: GridContext, state: State, max_frames: Optional[int] = None) -> int:
    """
    Calls state.tick once per frame between the context's begin/present hooks.
    Returns the number of frames run. `max_frames` bounds headless runs.
    """
    frames = 0
    try:
        while not ctx.quitting:
            if max_frames is not None and frames >= max_frames:
                break
            ctx.begin_frame()
            if ctx.quitting:
                break
            state.tick(ctx)
            ctx.present()
            frames += 1
    finally:
        ctx.close()

    logger.info("Main loop stopped after %d frames (high score %d)",
                frames, max(state.high_score, state.score))
    return frames
