"""
The two capabilities the engine calls into: a display sink and an input source.

Any object with the right methods satisfies them; renderers and input
methods do not inherit from anything.
"""

from typing import Optional, Protocol

from .game_state import GameState, SnakeChange


class GameDisplay(Protocol):
    def initialize(self, game: GameState) -> None:
        """Called once before the first tick."""
        ...

    def update(self, game: GameState, change: SnakeChange) -> None:
        """Called once per tick. `change` is a hint; `game` is always authoritative."""
        ...

    def game_over(self, game: GameState) -> None:
        """Called once, on the tick the game ends."""
        ...


class GameInput(Protocol):
    def poll(self) -> Optional[str]:
        """Return at most one buffered turn (LEFT or RIGHT), or None. Never blocks."""
        ...
