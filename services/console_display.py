"""
Terminal renderer for turnsnake.

Draws the board with box-drawing characters in a curses window and redraws
only the cells named in each SnakeChange:
- ':' marks the head, '/' marks the body
- the score (snake length) is printed under the board
- on game over the whole board is redrawn in red
"""

import curses
import logging
from typing import Optional

from domain.coordinate import Coordinate
from domain.game_state import GameState, SnakeChange

logger = logging.getLogger(__name__)

HEAD_CHAR = ":"
BODY_CHAR = "/"
EMPTY_CHAR = " "

# Colour pair ids
PAIR_BOARD = 1
PAIR_HEAD = 2
PAIR_BODY = 3
PAIR_DEAD_BOARD = 4
PAIR_DEAD_BODY = 5


class ConsoleDisplay:
    """Render a game into a curses window."""

    def __init__(self, window, use_color: Optional[bool] = None):
        self.window = window
        if use_color is None:
            use_color = curses.has_colors()
        self.use_color = use_color
        if self.use_color:
            curses.start_color()
            curses.init_pair(PAIR_BOARD, curses.COLOR_WHITE, curses.COLOR_BLACK)
            curses.init_pair(PAIR_HEAD, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(PAIR_BODY, curses.COLOR_YELLOW, curses.COLOR_GREEN)
            curses.init_pair(PAIR_DEAD_BOARD, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(PAIR_DEAD_BODY, curses.COLOR_BLACK, curses.COLOR_RED)

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self.use_color else 0

    def _check_fits(self, game: GameState) -> None:
        rows, cols = self.window.getmaxyx()
        # Board, two border rows and the score line
        needed_rows = game.height + 3
        needed_cols = game.width + 2
        if rows < needed_rows or cols < needed_cols:
            raise ValueError(
                f"Terminal is {cols}x{rows} but a {game.width}x{game.height} board "
                f"needs at least {needed_cols}x{needed_rows}."
            )

    def _draw_board(self, game: GameState, pair: int) -> None:
        attr = self._attr(pair)
        self.window.erase()
        self.window.addstr(0, 0, "┏" + "━" * game.width + "┓", attr)
        for row in range(game.height):
            self.window.addstr(row + 1, 0, "┃" + " " * game.width + "┃", attr)
        self.window.addstr(game.height + 1, 0, "┗" + "━" * game.width + "┛", attr)

    def _draw_cell(self, cell: Coordinate, char: str, pair: int) -> None:
        # +1 for the border
        self.window.addstr(cell.y + 1, cell.x + 1, char, self._attr(pair))

    def _draw_score(self, game: GameState, score: int, pair: int) -> None:
        self.window.move(game.height + 2, 0)
        self.window.clrtoeol()
        self.window.addstr(game.height + 2, 0, f"Score: {score}", self._attr(pair))

    def initialize(self, game: GameState) -> None:
        self._check_fits(game)
        self._draw_board(game, PAIR_BOARD)
        self.update(game, SnakeChange(added=game.snake.head))

    def update(self, game: GameState, change: SnakeChange) -> None:
        # Erase first: when chasing the tail the head lands on the removed cell
        if change.removed is not None:
            self._draw_cell(change.removed, EMPTY_CHAR, PAIR_BOARD)

        # The previous head is now body
        if len(game.snake) > 1:
            self._draw_cell(game.snake.positions[1], BODY_CHAR, PAIR_BODY)

        if change.added is not None:
            self._draw_cell(change.added, HEAD_CHAR, PAIR_HEAD)

        self._draw_score(game, game.score, PAIR_BOARD)
        self.window.refresh()

    def game_over(self, game: GameState) -> None:
        self._draw_board(game, PAIR_DEAD_BOARD)
        for cell in game.snake:
            self._draw_cell(cell, BODY_CHAR, PAIR_DEAD_BODY)
        # The head that hit something never made it onto the board
        self._draw_score(game, game.score + 1, PAIR_DEAD_BOARD)
        self.window.refresh()
        logger.info("Final length %d (%s)", game.score, game.death_reason)
