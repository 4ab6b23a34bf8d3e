"""Command-line tools for running the engine headless."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Headless grid snake simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser(
        "play", help="Run a scripted game and print the final state.",
    )
    play_p.add_argument(
        "--moves", type=str, default="",
        help="One direction per tick: U, D, L or R (e.g. RRUUL).",
    )
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (overrides other flags).",
    )
    play_p.add_argument("--width", type=int, default=None)
    play_p.add_argument("--height", type=int, default=None)
    play_p.add_argument("--seed", type=int, default=None)

    # --- apple-stats ---
    stats_p = sub.add_parser(
        "apple-stats",
        help="Measure how often placements honour the distance constraint.",
    )
    stats_p.add_argument("--trials", type=int, default=1000)
    stats_p.add_argument("--width", type=int, default=20)
    stats_p.add_argument("--height", type=int, default=20)
    stats_p.add_argument("--min-distance", type=int, default=5)
    stats_p.add_argument("--length", type=int, default=4)
    stats_p.add_argument("--seed", type=int, default=None)

    return parser


def _parse_moves(moves: str) -> list:
    from grid_snake.snake import Direction

    codes = {
        "U": Direction.UP,
        "D": Direction.DOWN,
        "L": Direction.LEFT,
        "R": Direction.RIGHT,
    }
    directions = []
    for ch in moves.upper():
        if ch in " ,":
            continue
        if ch not in codes:
            raise ValueError(f"Unknown move {ch!r}; expected U, D, L or R.")
        directions.append(codes[ch])
    return directions


def _run_play(args: argparse.Namespace) -> int:
    from grid_snake.config import EngineConfig
    from grid_snake.engine import SnakeEngine

    config = EngineConfig.load(args.config) if args.config else None
    if config is None:
        overrides: dict = {}
        if args.width is not None or args.height is not None:
            width = args.width if args.width is not None else 20
            height = args.height if args.height is not None else 20
            overrides["grid_width"] = width
            overrides["grid_height"] = height
            overrides["start_cell"] = (width // 2, height // 2)
            overrides["initial_length"] = min(5, width // 2 + 1)
            overrides["min_apple_distance"] = min(5, width + height - 2)
        if args.seed is not None:
            overrides["seed"] = args.seed
        config = EngineConfig(**overrides)

    engine = SnakeEngine(config)
    for direction in _parse_moves(args.moves):
        if engine.game_over:
            break
        engine.queue_direction(direction)
        engine.tick()

    print(json.dumps(engine.get_state(), indent=2))  # noqa: T201
    return 0


def _run_apple_stats(args: argparse.Namespace) -> int:
    import numpy as np

    from grid_snake.apple import place_apple
    from grid_snake.grid import GridModel
    from grid_snake.snake import Direction, initial_body

    grid = GridModel(args.width, args.height)
    rng = np.random.default_rng(args.seed)
    start = (args.width // 2, args.height // 2)
    body = initial_body(start, Direction.RIGHT, args.length)

    satisfied = 0
    for _ in range(args.trials):
        placement = place_apple(body, args.min_distance, grid, rng=rng)
        if body[0].manhattan(placement.cell) >= args.min_distance:
            satisfied += 1

    ratio = satisfied / args.trials if args.trials else 0.0
    print(  # noqa: T201
        f"{satisfied}/{args.trials} placements at distance >= "
        f"{args.min_distance} ({ratio:.1%})"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "apple-stats": _run_apple_stats,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
