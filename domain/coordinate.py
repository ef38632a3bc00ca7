"""
Coordinate value type and the direction arithmetic built on it.
"""

from typing import NamedTuple

from .constants import DIRECTION_DELTAS, TURN_TABLE, VALID_DIRECTIONS, VALID_TURNS


class Coordinate(NamedTuple):
    """A grid cell. Compares and hashes like the plain (x, y) tuple."""

    x: int
    y: int

    def out_of_bounds(self, width: int, height: int) -> bool:
        """Return True if this cell lies outside [0, width) x [0, height)."""
        return self.x < 0 or self.x >= width or self.y < 0 or self.y >= height

    def __repr__(self):
        return f"Coordinate(x={self.x}, y={self.y})"


def advance_coordinate(coordinate: Coordinate, direction: str) -> Coordinate:
    """
    Return the cell one unit step from `coordinate` in `direction`.

    Raises:
        ValueError: If `direction` is not one of NORTH, SOUTH, EAST, WEST.
    """
    if direction not in VALID_DIRECTIONS:
        raise ValueError(f"Unknown direction '{direction}'.")
    dx, dy = DIRECTION_DELTAS[direction]
    return Coordinate(coordinate.x + dx, coordinate.y + dy)


def turn_direction(direction: str, turn: str) -> str:
    """
    Rotate `direction` 90 degrees according to a relative `turn`.

    Raises:
        ValueError: If either argument is not a known direction/turn.
    """
    if direction not in VALID_DIRECTIONS:
        raise ValueError(f"Unknown direction '{direction}'.")
    if turn not in VALID_TURNS:
        raise ValueError(f"Unknown turn '{turn}'. Expected one of: LEFT, RIGHT")
    return TURN_TABLE[(direction, turn)]
