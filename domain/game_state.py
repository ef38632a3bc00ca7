"""
GameState entity - the authoritative simulation state of a single game.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .constants import (
    DEATH_SELF,
    DEATH_WALL,
    EAST,
    INITIAL_GROWTH,
    VALID_DIRECTIONS,
)
from .coordinate import Coordinate, advance_coordinate, turn_direction
from .snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnakeChange:
    """
    The cells changed by one call to GameState.advance().

    Both fields are independently optional: pending growth suppresses the
    removal and a fatal collision suppresses the addition.
    """

    removed: Optional[Coordinate] = None
    added: Optional[Coordinate] = None

    @property
    def is_empty(self) -> bool:
        return self.removed is None and self.added is None


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Board {name} must be an integer, got {value!r}.")
    if value <= 0:
        raise ValueError(f"Board {name} must be positive, got {value}.")
    return value


class GameState:
    """
    A single game of snake.

    Attributes:
        snake: the Snake, head first
        direction: current heading (NORTH, SOUTH, EAST or WEST)
        width, height: board dimensions
        growth: pending growth; each unit skips one tail removal
        game_over: set once the head hits a wall or the body, never reset
        tick: number of advances taken while the game was running
        death_reason: 'wall' or 'self' once the game is over
        death_tick: the tick on which the snake died
    """

    def __init__(
        self,
        width: int,
        height: int,
        growth: int = INITIAL_GROWTH,
        direction: str = EAST
    ):
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)
        if growth < 0:
            raise ValueError(f"Initial growth must be non-negative, got {growth}.")
        if direction not in VALID_DIRECTIONS:
            raise ValueError(f"Unknown direction '{direction}'.")

        self.snake = Snake([Coordinate(self.width // 2, self.height // 2)])
        self.direction = direction
        self.growth = growth
        self.game_over = False
        self.tick = 0
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Coordinate:
        return self.snake.head

    @property
    def score(self) -> int:
        """The score is the length of the snake."""
        return len(self.snake)

    def turn(self, turn: str) -> None:
        """Rotate the heading 90 degrees to the LEFT or RIGHT."""
        if self.game_over:
            return
        self.direction = turn_direction(self.direction, turn)

    def grow(self, amount: int) -> None:
        """Queue `amount` cells of growth for future advances."""
        if amount < 0:
            raise ValueError(f"Growth amount must be non-negative, got {amount}.")
        self.growth += amount
        logger.debug("Growth +%d, %d pending", amount, self.growth)

    def advance(self) -> SnakeChange:
        """
        Move the snake one cell in the current direction.

          1) If the game is over, return an empty change
          2) Compute the new head
          3) Consume one unit of growth, or drop the tail
          4) Check the new head against the walls and the remaining body
          5) Add the new head if it survived

        The tail is dropped before the collision check, so moving into the
        cell the tail just vacated is not a collision.
        """
        if self.game_over:
            return SnakeChange()

        self.tick += 1
        new_head = advance_coordinate(self.snake.head, self.direction)

        removed = None
        if self.growth > 0:
            self.growth -= 1
        else:
            removed = self.snake.pop_tail()

        if new_head.out_of_bounds(self.width, self.height):
            self._end_game(DEATH_WALL)
            return SnakeChange(removed=removed)
        if new_head in self.snake:
            self._end_game(DEATH_SELF)
            return SnakeChange(removed=removed)

        self.snake.push_head(new_head)
        return SnakeChange(removed=removed, added=new_head)

    def _end_game(self, reason: str) -> None:
        self.game_over = True
        self.death_reason = reason
        self.death_tick = self.tick
        logger.info(
            "Game over: %s collision on tick %d at length %d",
            reason, self.tick, len(self.snake)
        )

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        H = snake head
        o = snake body
        Row 0 is printed first, matching the downward y axis.
        """
        board: List[List[str]] = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState {self.width}x{self.height}, tick={self.tick}, "
            f"length={len(self.snake)}, direction={self.direction}, "
            f"game_over={self.game_over}>"
        )
