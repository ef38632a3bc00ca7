"""
One external tick: input, periodic growth, advance, and display notification.
"""

from dataclasses import dataclass

from .constants import GROWTH_AMOUNT, GROWTH_COUNTER_LIMIT
from .game_state import GameState
from .interfaces import GameDisplay, GameInput


@dataclass
class StepCounter:
    """Cadence counter owned by whoever drives the tick loop."""

    value: int = 0


def game_step(
    counter: StepCounter,
    game: GameState,
    display: GameDisplay,
    input_source: GameInput
) -> None:
    """
    Run one tick of the game.

      1) Apply at most one turn from `input_source`
      2) Every time the counter passes the limit, reset it and grow by 3
      3) Advance the snake
      4) Send the change to `display`, plus game_over() on the fatal tick
    """
    turn = input_source.poll()
    if turn is not None:
        game.turn(turn)

    if counter.value > GROWTH_COUNTER_LIMIT:
        counter.value = 0
        game.grow(GROWTH_AMOUNT)
    else:
        counter.value += 1

    was_over = game.game_over
    change = game.advance()
    display.update(game, change)
    if game.game_over and not was_over:
        display.game_over(game)
