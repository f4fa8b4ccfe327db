#!/usr/bin/env python3
"""
Flappy Dragon launcher.

    python -m flappy_dragon [--fps N] [--cell-size PX] [--seed N]
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from .client import main_loop
from .constants import RENDER_FPS, CELL_SIZE, WINDOW_TITLE
from .context import ContextError
from .session import State

logger = logging.getLogger("flappy_dragon")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy-dragon", description="Flappy Dragon arcade game")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Target render frame rate")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Pixels per grid cell")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle generation")
    parser.add_argument("--title", default=WINDOW_TITLE, help="Window title")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Imported here so --help works without a display
    from .pygame_context import PygameContext

    try:
        ctx = PygameContext(title=args.title, fps=args.fps, cell_size=args.cell_size)
    except ContextError as e:
        logger.error("%s", e)
        return 1

    main_loop(ctx, State(high_score=0, rng=random.Random(args.seed)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
