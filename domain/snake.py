"""
Snake entity for the game engine.
"""

from collections import deque
from typing import FrozenSet, Iterable, Iterator, Set

from .coordinate import Coordinate


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Coordinate from head at index 0 to tail at the end
        occupied: the set of cells covered by `positions`

    The occupancy set mirrors the deque; both are only ever changed together
    through push_head() and pop_tail().
    """

    def __init__(self, positions: Iterable[Coordinate]):
        self.positions = deque(Coordinate(*p) for p in positions)
        self._occupied: Set[Coordinate] = set(self.positions)
        if len(self._occupied) != len(self.positions):
            raise ValueError(f"Snake positions must be distinct, got {list(self.positions)}.")

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Coordinate:
        """Return the tail position (last element)."""
        return self.positions[-1]

    @property
    def occupied(self) -> FrozenSet[Coordinate]:
        return frozenset(self._occupied)

    def push_head(self, cell: Coordinate) -> None:
        if cell in self._occupied:
            raise ValueError(f"Cell {cell} is already occupied by the snake.")
        self._occupied.add(cell)
        self.positions.appendleft(cell)

    def pop_tail(self) -> Coordinate:
        cell = self.positions.pop()
        self._occupied.discard(cell)
        return cell

    def __contains__(self, cell) -> bool:
        return cell in self._occupied

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self)}, head={self.head if self.positions else None}>"
