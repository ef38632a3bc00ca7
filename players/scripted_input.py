"""
Scripted input - replays a fixed sequence of turns.
"""

from typing import Iterable, Optional

from domain.constants import VALID_TURNS


class ScriptedInput:
    """
    Returns the given turns one per poll, then None forever.

    Entries may be None to go straight for a tick.
    """

    def __init__(self, turns: Iterable[Optional[str]] = ()):
        self.turns = list(turns)
        for turn in self.turns:
            if turn is not None and turn not in VALID_TURNS:
                raise ValueError(f"Unknown turn '{turn}'. Expected one of: LEFT, RIGHT")
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.turns)

    def poll(self) -> Optional[str]:
        if self.exhausted:
            return None
        turn = self.turns[self.position]
        self.position += 1
        return turn
