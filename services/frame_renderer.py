"""
Frame renderer for turnsnake

This display draws the board into raster frames by:
1. Rendering a full frame with PIL (Pillow) on initialize and game over
2. Patching only the changed cells on every update
3. Encoding the collected frames to video using MoviePy/FFmpeg

The drawing matches the browser canvas front-end:
- White board with grid, pink once the game is over
- Green snake with a lighter head, red once the game is over
- Score under the board
"""

import logging
from typing import List, Optional, Tuple

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image, ImageDraw, ImageFont

from domain.constants import DIRECTION_DELTAS
from domain.coordinate import Coordinate
from domain.game_state import GameState, SnakeChange

logger = logging.getLogger(__name__)

# Frame settings
DEFAULT_FPS = 5  # One frame per 200ms tick
CELL_SIZE = 20  # Size of each grid cell in pixels
MARGIN = 5
HUD_HEIGHT = 24


class ColorScheme:
    """Color configuration matching the canvas front-end"""

    FRAME = "#000000"
    BOARD = "#FFFFFF"
    BOARD_GAME_OVER = "#FFCCCC"
    GRID_LINE = "#E5E7EB"

    SNAKE = "#00FF00"
    SNAKE_HEAD = "#66FF66"
    SNAKE_GAME_OVER = "#FF0000"
    SNAKE_HEAD_GAME_OVER = "#FF6666"
    EYE = "#FFFFFF"

    SCORE_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def _even(value: int) -> int:
    # libx264 with yuv420p needs even frame dimensions
    return value + (value % 2)


class FrameRenderer:
    """Render a game into a list of PIL frames and optionally an MP4"""

    def __init__(
        self,
        cell_size: int = CELL_SIZE,
        margin: int = MARGIN,
        fps: int = DEFAULT_FPS
    ):
        if cell_size < 4:
            raise ValueError(f"cell_size must be at least 4 pixels, got {cell_size}.")
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}.")
        self.cell_size = cell_size
        self.margin = margin
        self.fps = fps
        self.frames: List[Image.Image] = []
        self.image: Optional[Image.Image] = None
        self.font = ImageFont.load_default()

    def frame_size(self, game: GameState) -> Tuple[int, int]:
        width = game.width * self.cell_size + 1 + 2 * self.margin
        height = game.height * self.cell_size + 1 + 2 * self.margin + HUD_HEIGHT
        return _even(width), _even(height)

    def render_full(self, game: GameState) -> Image.Image:
        """Render a complete frame from the game state alone"""
        board_color = ColorScheme.BOARD_GAME_OVER if game.game_over else ColorScheme.BOARD

        img = Image.new('RGB', self.frame_size(game), hex_to_rgb(ColorScheme.FRAME))
        draw = ImageDraw.Draw(img)

        board_x = self.margin
        board_y = self.margin
        board_pixel_width = game.width * self.cell_size
        board_pixel_height = game.height * self.cell_size

        # Draw game board background
        draw.rectangle(
            [board_x, board_y, board_x + board_pixel_width, board_y + board_pixel_height],
            fill=hex_to_rgb(board_color)
        )

        # Draw grid
        for i in range(game.width + 1):
            draw.line(
                [board_x + i * self.cell_size, board_y,
                 board_x + i * self.cell_size, board_y + board_pixel_height],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )

        for i in range(game.height + 1):
            draw.line(
                [board_x, board_y + i * self.cell_size,
                 board_x + board_pixel_width, board_y + i * self.cell_size],
                fill=hex_to_rgb(ColorScheme.GRID_LINE),
                width=1
            )

        # Draw body, then head with eyes
        for cell in list(game.snake)[1:]:
            self._draw_body(draw, cell, game.game_over)
        self._draw_head(draw, game.snake.head, game.direction, game.game_over)

        self._draw_score(draw, game, game.score)
        return img

    def _cell_box(self, cell: Coordinate, padding: int = 1) -> List[int]:
        x = self.margin + cell.x * self.cell_size
        y = self.margin + cell.y * self.cell_size
        return [x + padding, y + padding, x + self.cell_size - padding, y + self.cell_size - padding]

    def _draw_cell(self, draw: ImageDraw.ImageDraw, cell: Coordinate, color: str):
        """Fill a single cell inside its grid lines"""
        draw.rectangle(self._cell_box(cell), fill=hex_to_rgb(color))

    def _draw_body(self, draw: ImageDraw.ImageDraw, cell: Coordinate, game_over: bool):
        self._draw_cell(draw, cell, ColorScheme.SNAKE_GAME_OVER if game_over else ColorScheme.SNAKE)

    def _draw_head(self, draw: ImageDraw.ImageDraw, cell: Coordinate, direction: str, game_over: bool):
        self._draw_cell(
            draw, cell, ColorScheme.SNAKE_HEAD_GAME_OVER if game_over else ColorScheme.SNAKE_HEAD
        )

        # Eyes sit side by side, offset toward the heading
        x0, y0, _, _ = self._cell_box(cell, padding=0)
        eye_size = max(2, self.cell_size // 5)
        dx, dy = DIRECTION_DELTAS[direction]
        cx = x0 + self.cell_size // 2 + dx * self.cell_size // 8
        cy = y0 + self.cell_size // 2 + dy * self.cell_size // 8
        # Perpendicular to the heading
        px, py = -dy, dx
        spread = self.cell_size // 5
        for side in (-1, 1):
            ex = cx + side * px * spread
            ey = cy + side * py * spread
            draw.ellipse(
                [ex - eye_size // 2, ey - eye_size // 2,
                 ex - eye_size // 2 + eye_size, ey - eye_size // 2 + eye_size],
                fill=hex_to_rgb(ColorScheme.EYE)
            )

    def _draw_score(self, draw: ImageDraw.ImageDraw, game: GameState, score: int):
        width, height = self.frame_size(game)
        hud_y = height - HUD_HEIGHT
        draw.rectangle([0, hud_y, width, height], fill=hex_to_rgb(ColorScheme.FRAME))
        draw.text(
            (self.margin, hud_y + 4),
            f"Score: {score}",
            fill=hex_to_rgb(ColorScheme.SCORE_TEXT),
            font=self.font
        )

    def _push_frame(self) -> None:
        self.frames.append(self.image.copy())

    def initialize(self, game: GameState) -> None:
        self.frames = []
        self.image = self.render_full(game)
        self._push_frame()

    def update(self, game: GameState, change: SnakeChange) -> None:
        if self.image is None or self.image.size != self.frame_size(game):
            self.image = self.render_full(game)
            self._push_frame()
            return

        draw = ImageDraw.Draw(self.image)

        # Erase first: when chasing the tail the head lands on the removed cell
        if change.removed is not None:
            self._draw_cell(draw, change.removed, ColorScheme.BOARD)

        # The previous head is now body
        if len(game.snake) > 1:
            self._draw_body(draw, game.snake.positions[1], game.game_over)

        if change.added is not None:
            self._draw_head(draw, change.added, game.direction, game.game_over)

        self._draw_score(draw, game, game.score)
        self._push_frame()

    def game_over(self, game: GameState) -> None:
        self.image = self.render_full(game)
        self._push_frame()

    def write_video(self, output_path: str) -> str:
        """
        Encode the recorded frames to an MP4

        Args:
            output_path: Where to write the video

        Returns:
            Path to the generated video file
        """
        if not self.frames:
            raise ValueError("No frames have been rendered; nothing to write.")

        logger.info(f"Encoding {len(self.frames)} frames at {self.fps} fps...")

        clip = ImageSequenceClip([np.array(frame) for frame in self.frames], fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path
