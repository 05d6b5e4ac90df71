"""Entry point for the Grid Snake game."""

from __future__ import annotations

import argparse
import logging
import os
import random

from grid_snake.config import BoardConfig
from grid_snake.game import GridSnake


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grid-snake", description="Play Grid Snake.")
    parser.add_argument("--width", type=int, help="Board width in cells.")
    parser.add_argument("--height", type=int, help="Board height in cells.")
    parser.add_argument("--cell-size", type=int, help="Cell size in pixels.")
    parser.add_argument(
        "--tick-interval",
        type=float,
        help="Seconds between snake moves.",
    )
    parser.add_argument("--seed", type=int, help="Seed food placement for a repeatable game.")
    parser.add_argument(
        "--log-level",
        default=os.getenv("GRID_SNAKE_LOG_LEVEL", "WARNING"),
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
    )
    return parser


def load_board(args: argparse.Namespace) -> BoardConfig:
    """Environment first, then command-line overrides."""
    return BoardConfig.from_env().with_overrides(
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        tick_interval_seconds=args.tick_interval,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        board = load_board(args)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    game = GridSnake(board, rng)
    game.start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
