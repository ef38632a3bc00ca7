#!/usr/bin/env python3
"""
CLI tool to record an autopilot game of snake as an MP4

Usage:
    python -m cli.generate_video --output snake.mp4

Examples:
    # Default board from the environment / .env
    python -m cli.generate_video --output snake.mp4

    # Reproducible run on a bigger board
    python -m cli.generate_video --output big.mp4 --width 40 --height 20 --seed 7

    # Custom video settings
    python -m cli.generate_video --output fast.mp4 --fps 10 --cell-size 12
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from domain.game_state import GameState
from domain.step import StepCounter, game_step
from players.random_player import RandomPlayer
from services.frame_renderer import FrameRenderer
from settings import load_settings

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 2000


def record_game(
    width: int,
    height: int,
    renderer: FrameRenderer,
    max_ticks: int = DEFAULT_MAX_TICKS,
    seed: Optional[int] = None
) -> GameState:
    """
    Play one game with the RandomPlayer autopilot, rendering every tick.

    Returns:
        The finished (or tick-limited) game.
    """
    game = GameState(width, height)
    counter = StepCounter()
    player = RandomPlayer(game, rng=random.Random(seed), counter=counter)

    renderer.initialize(game)
    while not game.game_over and game.tick < max_ticks:
        game_step(counter, game, renderer, player)
        if game.tick % 100 == 0:
            logger.info(f"Tick {game.tick}, length {game.score}")

    if game.game_over:
        logger.info(f"Game over ({game.death_reason}) on tick {game.death_tick} at length {game.score}")
    else:
        logger.info(f"Stopped at the {max_ticks} tick limit at length {game.score}")
    return game


def main(argv: Optional[List[str]] = None):
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(str(e))

    parser = argparse.ArgumentParser(
        description='Record an autopilot game of snake as an MP4',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        required=True,
        help='Path of the MP4 to write'
    )
    parser.add_argument(
        '--width',
        type=int,
        default=settings.width,
        help=f'Board width in cells (default: {settings.width})'
    )
    parser.add_argument(
        '--height',
        type=int,
        default=settings.height,
        help=f'Board height in cells (default: {settings.height})'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=settings.video_fps,
        help=f'Frames per second (default: {settings.video_fps})'
    )
    parser.add_argument(
        '--cell-size',
        type=int,
        default=settings.cell_size,
        help=f'Pixels per board cell (default: {settings.cell_size})'
    )
    parser.add_argument(
        '--max-ticks',
        type=int,
        default=DEFAULT_MAX_TICKS,
        help=f'Stop recording after this many ticks (default: {DEFAULT_MAX_TICKS})'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the autopilot, for reproducible videos'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        renderer = FrameRenderer(cell_size=args.cell_size, fps=args.fps)
        game = record_game(args.width, args.height, renderer, max_ticks=args.max_ticks, seed=args.seed)
        video_path = renderer.write_video(args.output)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    print(f"\n✓ Video saved to: {video_path}")
    print(f"  Final length: {game.score} after {game.tick} ticks")


if __name__ == "__main__":
    main()
