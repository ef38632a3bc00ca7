"""
Random player implementation - picks random safe turns.
"""

import random
from typing import List, Optional

from domain.constants import GROWTH_COUNTER_LIMIT, LEFT, RIGHT
from domain.coordinate import advance_coordinate, turn_direction
from domain.game_state import GameState
from domain.step import StepCounter


class RandomPlayer:
    """
    An autopilot that picks a random turn (or straight ahead) that avoids
    walls and self-collisions on the next advance.

    Pass the StepCounter driving the game so the player knows when the
    coming step will queue growth before advancing.
    """

    def __init__(
        self,
        game: GameState,
        rng: Optional[random.Random] = None,
        counter: Optional[StepCounter] = None
    ):
        self.game = game
        self.rng = rng or random.Random()
        self.counter = counter

    def safe_moves(self) -> List[Optional[str]]:
        game = self.game
        snake = game.snake
        # The tail moves out of the way unless growth is pending or this
        # step is about to queue some
        growth_due = self.counter is not None and self.counter.value > GROWTH_COUNTER_LIMIT
        tail_frees = game.growth == 0 and not growth_due

        valid_moves: List[Optional[str]] = []
        for turn in (None, LEFT, RIGHT):
            heading = game.direction if turn is None else turn_direction(game.direction, turn)
            cell = advance_coordinate(snake.head, heading)

            # Check wall collisions
            if cell.out_of_bounds(game.width, game.height):
                continue

            # Check self collisions
            if cell in snake and not (tail_frees and cell == snake.tail):
                continue

            valid_moves.append(turn)
        return valid_moves

    def poll(self) -> Optional[str]:
        if self.game.game_over:
            return None

        valid_moves = self.safe_moves()

        # If no valid moves, just keep going (we'll die anyway)
        if not valid_moves:
            return None

        return self.rng.choice(valid_moves)
