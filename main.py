import argparse
import curses
import logging
import time
from typing import Callable, List, Optional

from domain.game_state import GameState
from domain.interfaces import GameDisplay, GameInput
from domain.step import StepCounter, game_step
from players.input_registry import DEFAULT_INPUT, get_input_class
from services.console_display import ConsoleDisplay
from settings import load_settings

logger = logging.getLogger(__name__)


def run_game(
    game: GameState,
    display: GameDisplay,
    input_source: GameInput,
    tick_seconds: float,
    max_ticks: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
    counter: Optional[StepCounter] = None
) -> int:
    """
    Drive a game at a fixed tick rate until it ends.

    Args:
        game: The game to run; mutated in place.
        display: Receives initialize(), one update() per tick and game_over().
        input_source: Polled once per tick.
        tick_seconds: Delay before each tick.
        max_ticks: Optional upper limit on ticks (None runs until game over).
        sleep: Injected for tests.
        counter: Growth cadence counter; a fresh one if not given.

    Returns:
        The number of ticks run.
    """
    if counter is None:
        counter = StepCounter()
    display.initialize(game)

    ticks = 0
    while not game.game_over:
        if max_ticks is not None and ticks >= max_ticks:
            logger.info("Stopping after %d ticks (limit reached)", ticks)
            break
        sleep(tick_seconds)
        game_step(counter, game, display, input_source)
        ticks += 1

    return ticks


def _build_input(name: str, window, game: GameState, counter: StepCounter) -> GameInput:
    input_class = get_input_class(name)
    if name == "random":
        return input_class(game, counter=counter)
    if name == "keyboard":
        return input_class(window)
    return input_class()


def play(window, args: argparse.Namespace) -> GameState:
    """Run one game inside a curses window."""
    curses.curs_set(0)
    game = GameState(args.width, args.height)
    display = ConsoleDisplay(window)
    counter = StepCounter()
    input_source = _build_input(args.player, window, game, counter)

    run_game(
        game, display, input_source, args.tick_ms / 1000.0,
        max_ticks=args.max_ticks, counter=counter
    )

    if game.game_over and args.player == "keyboard":
        # Leave the final board up until a key is pressed
        window.nodelay(False)
        window.getch()
    return game


def main(argv: Optional[List[str]] = None):
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(str(e))

    parser = argparse.ArgumentParser(
        description="Play snake in the terminal. Left/Right arrows turn the snake."
    )
    parser.add_argument("--width", type=int, default=settings.width,
                        help=f"Board width in cells (default: {settings.width})")
    parser.add_argument("--height", type=int, default=settings.height,
                        help=f"Board height in cells (default: {settings.height})")
    parser.add_argument("--tick-ms", type=int, default=settings.tick_ms,
                        help=f"Milliseconds per tick (default: {settings.tick_ms})")
    parser.add_argument("--player", choices=["keyboard", "random"], default=DEFAULT_INPUT,
                        help="Who steers the snake")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file (the terminal is owned by the game)")

    args = parser.parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=settings.log_level,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

    try:
        game = curses.wrapper(play, args)
    except ValueError as e:
        raise SystemExit(str(e))

    if game.game_over:
        print(f"Game Over: hit {'a wall' if game.death_reason == 'wall' else 'itself'} "
              f"on tick {game.death_tick}.")
    print(f"Final length: {game.score}")


if __name__ == "__main__":
    main()
