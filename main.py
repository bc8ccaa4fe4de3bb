"""
Main script for the console TicTacToe game.

This script ties together:
- UI (console prompts and board rendering)
- Logic (board, players, win checking, game flow)

Run this script to play TicTacToe against a friend!
"""

import argparse
import logging
import sys
from typing import Optional

from logic.board import Board
from logic.config import GameConfig
from logic.game_controller import GameController, InputAttemptsExceeded

from ui import ConsoleIO, BoardRenderer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, config: Optional[GameConfig] = None):
    """
    Configure logging to stderr.

    Args:
        verbose: Log game events at DEBUG level instead of WARNING only.
        config: Game configuration (log format).
    """
    config = config or GameConfig()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=GameConfig.MAX_INPUT_ATTEMPTS,
        help="Invalid answers allowed in a row before the game gives up "
             f"(default: {GameConfig.MAX_INPUT_ATTEMPTS})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log game events to stderr"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.max_attempts < 1:
        print("--max-attempts must be at least 1", file=sys.stderr)
        return 2

    config = GameConfig(MAX_INPUT_ATTEMPTS=args.max_attempts)
    setup_logging(args.verbose, config)

    # Create the game
    io = ConsoleIO()
    board = Board(config)
    renderer = BoardRenderer(io)
    controller = GameController(io, renderer, board=board, config=config)

    try:
        results = controller.start()
        logger.info("Played %d game(s)", len(results))
    except InputAttemptsExceeded as e:
        logger.error("%s", e)
        print(f"\nToo many invalid answers ({e.error.value}). Exiting.")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
