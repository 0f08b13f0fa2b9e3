"""Entry point for the Swing Jump game."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import replace

from swing_game import ConfigError, GameConfig
from swing_game.game import SwingJumpGame
from swing_game.logging_config import setup_logging

logger = logging.getLogger("swing_game.main")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Swing Jump arcade game.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Optional random seed for a reproducible world.",
    )
    parser.add_argument("--width", type=int, help="Window width in pixels (default: config value).")
    parser.add_argument("--height", type=int, help="Window height in pixels (default: config value).")
    parser.add_argument("--fps", type=int, help="Override the target frame rate.")
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Open a fullscreen window instead of a resizable one.",
    )
    parser.add_argument(
        "--advancing-swing",
        action="store_true",
        help="Move the player along the rope by its velocity while holding a bar.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    parser.add_argument("--log-file", help="Also write logs to this file.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    rng = random.Random(args.seed)
    if args.seed is not None:
        logger.info("Using world seed %d", args.seed)

    config = GameConfig()
    overrides = {}
    if args.width is not None or args.height is not None:
        width, height = config.window_size
        overrides["window_size"] = (args.width or width, args.height or height)
    if args.fps is not None:
        overrides["target_fps"] = args.fps
    if args.advancing_swing:
        overrides["physics"] = replace(config.physics, advance_while_swinging=True)

    try:
        if overrides:
            config = replace(config, **overrides)
    except ConfigError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    game = SwingJumpGame(config=config, rng=rng, fullscreen=args.fullscreen)
    game.run()


if __name__ == "__main__":
    main()
