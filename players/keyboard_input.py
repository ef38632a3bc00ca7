"""
Keyboard input for the terminal front-end.
"""

import curses
import logging
from typing import Optional

from domain.constants import LEFT, RIGHT

logger = logging.getLogger(__name__)

KEY_TURNS = {
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
}


class KeyboardInput:
    """
    Reads the arrow keys from a curses window without blocking.

    Each poll drains every key pressed since the last one and returns the
    first Left/Right among them; the rest are dropped.
    """

    def __init__(self, window):
        self.window = window
        self.window.nodelay(True)
        self.window.keypad(True)

    def poll(self) -> Optional[str]:
        turn = None
        while True:
            key = self.window.getch()
            if key == -1:
                return turn
            if turn is None:
                turn = KEY_TURNS.get(key)
            else:
                logger.debug("Dropping key %r, a turn is already queued", key)
