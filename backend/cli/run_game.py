#!/usr/bin/env python3
"""
Headless snake runner.

Plays one or more runs with the random autopilot feeding direction
requests, driven by the tick scheduler, and reports the scores.

Usage:
    python cli/run_game.py
    python cli/run_game.py --width 10 --height 10 --runs 5 --seed 42
    python cli/run_game.py --pixel-width 1080 --pixel-height 1920 --cell-size 100
    python cli/run_game.py --tick-ms 20 --show-board
"""

import argparse
import logging
import os
import random
import sys
from typing import List, Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import LOG_FORMAT, get_settings  # noqa: E402
from domain.board import Board, BoardConfigurationError  # noqa: E402
from domain.events import TickCompleted  # noqa: E402
from domain.food import SpawnPolicy  # noqa: E402
from game_engine import GameEngine  # noqa: E402
from players.random_player import RandomPlayer  # noqa: E402
from services.high_score import HighScoreTracker  # noqa: E402
from services.tick_scheduler import TickScheduler  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="snake-engine",
        description="Run autopilot snake games on the tick engine.",
    )
    parser.add_argument("--width", type=int, default=settings.board_width,
                        help=f"Board width in cells (default: {settings.board_width}).")
    parser.add_argument("--height", type=int, default=settings.board_height,
                        help=f"Board height in cells (default: {settings.board_height}).")
    parser.add_argument("--pixel-width", type=int, default=None,
                        help="Size the board from a surface width in pixels instead.")
    parser.add_argument("--pixel-height", type=int, default=None,
                        help="Size the board from a surface height in pixels instead.")
    parser.add_argument("--cell-size", type=int, default=settings.cell_size,
                        help=f"Pixels per cell for --pixel-* sizing (default: {settings.cell_size}).")
    parser.add_argument("--tick-ms", type=int, default=settings.tick_ms,
                        help=f"Tick period in milliseconds (default: {settings.tick_ms}).")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for food placement and the autopilot.")
    parser.add_argument("--runs", type=int, default=1,
                        help="Number of runs to play (default: 1).")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop a run after this many ticks.")
    parser.add_argument("--food-policy", choices=[p.value for p in SpawnPolicy],
                        default=settings.food_policy.value,
                        help="uniform may drop food on the snake; avoid_snake never does.")
    parser.add_argument("--show-board", action="store_true",
                        help="Log the board after every tick.")
    parser.add_argument("--log-level", default=settings.log_level,
                        help=f"Logging level (default: {settings.log_level}).")
    return parser


def resolve_board(args: argparse.Namespace) -> Board:
    if args.pixel_width is not None or args.pixel_height is not None:
        if args.pixel_width is None or args.pixel_height is None:
            raise BoardConfigurationError("--pixel-width and --pixel-height must be given together.")
        return Board.from_pixels(args.pixel_width, args.pixel_height, args.cell_size)
    return Board(width=args.width, height=args.height)


def play(args: argparse.Namespace, board: Board) -> HighScoreTracker:
    rng = random.Random(args.seed)
    engine = GameEngine(board, rng=rng, food_policy=SpawnPolicy(args.food_policy))
    player = RandomPlayer(rng=random.Random(rng.random()))
    tracker = HighScoreTracker()
    tracker.attach(engine.events)

    def steer(event: TickCompleted) -> None:
        engine.set_direction(player.get_move(event.state))
        if args.show_board:
            logger.info("Tick %s, score %s\n%s", event.state.tick_number,
                        event.state.score, event.state.print_board())

    engine.subscribe(TickCompleted, steer)
    # Pick a first move before the first tick
    engine.set_direction(player.get_move(engine.get_current_state()))

    ticker = TickScheduler(engine, interval_ms=args.tick_ms)
    for run_index in range(1, args.runs + 1):
        if run_index > 1:
            ticker.restart()
            engine.set_direction(player.get_move(engine.get_current_state()))
        result = ticker.run(max_ticks=args.max_ticks)
        if result is None:
            continue
        if result.game_over:
            logger.info("Run %s/%s: score %s after %s ticks (%s)", run_index, args.runs,
                        result.score, result.tick_number, result.death_reason)
        else:
            logger.info("Run %s/%s: stopped at tick %s with score %s", run_index, args.runs,
                        result.tick_number, result.score)

    return tracker


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    if args.runs < 1:
        parser.error("--runs must be at least 1")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    try:
        board = resolve_board(args)
    except BoardConfigurationError as e:
        logger.error("Invalid board: %s", e)
        return 2

    logger.info("Playing %s run(s) on a %sx%s board, tick %sms, food policy %s",
                args.runs, board.width, board.height, args.tick_ms, args.food_policy)

    tracker = play(args, board)

    logger.info("Scores: %s | high score: %s", tracker.scores, tracker.best_score)
    print(f"High score: {tracker.best_score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
