"""Main entry point for the Neon Raid game."""

import argparse
import logging
import random
import sys

from neonraid.config.config import FPS
from neonraid.game_loop import Game
from neonraid.logger import get_logger, setup_logger

# Get logger for this module
logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line args."""
    parser = argparse.ArgumentParser(description="Neon Raid")
    parser.add_argument("--fps", type=int, default=FPS, help="Target frame rate")
    parser.add_argument("--mute", action="store_true", help="Start with sound muted")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override the configured log level")
    parser.add_argument("--seed", type=int, help="Seed the random generator for repeatable runs")
    parser.add_argument(
        "--skip-start-screen", action="store_true", help="Begin playing immediately"
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Initializes and runs the game."""
    try:
        args = parse_args(argv)

        if args.log_level:
            setup_logger(getattr(logging, args.log_level))

        if args.seed is not None:
            random.seed(args.seed)
            logger.info("Random seed: %d", args.seed)

        logger.info("Starting Neon Raid")

        # Create the game instance
        game = Game(fps=args.fps, muted=args.mute)

        if args.skip_start_screen:
            logger.info("Skipping start screen")
            game.start_session()

        # Run the game
        game.run()

    except Exception as e:
        # Log the exception
        logger.exception("An error occurred: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
