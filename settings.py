"""
Runtime settings, read from the environment (and a .env file when present).

    SNAKE_WIDTH       board width in cells        (default 30)
    SNAKE_HEIGHT      board height in cells       (default 10)
    SNAKE_TICK_MS     milliseconds per tick       (default 200)
    SNAKE_VIDEO_FPS   frames per second for MP4   (default 5)
    SNAKE_CELL_SIZE   pixels per cell for frames  (default 20)
    SNAKE_LOG_LEVEL   logging level name          (default INFO)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_HEIGHT, DEFAULT_TICK_MS, DEFAULT_WIDTH


@dataclass(frozen=True)
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_ms: int = DEFAULT_TICK_MS
    video_fps: int = 5
    cell_size: int = 20
    log_level: str = "INFO"


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from `environ` (defaults to os.environ after loading .env).

    Raises:
        ValueError: If a numeric variable is not a positive integer.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        width=_positive_int(environ, "SNAKE_WIDTH", DEFAULT_WIDTH),
        height=_positive_int(environ, "SNAKE_HEIGHT", DEFAULT_HEIGHT),
        tick_ms=_positive_int(environ, "SNAKE_TICK_MS", DEFAULT_TICK_MS),
        video_fps=_positive_int(environ, "SNAKE_VIDEO_FPS", 5),
        cell_size=_positive_int(environ, "SNAKE_CELL_SIZE", 20),
        log_level=(environ.get("SNAKE_LOG_LEVEL") or "INFO").strip().upper(),
    )
