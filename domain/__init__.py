"""
Domain entities for the turnsnake game engine.

This module contains the pure simulation: coordinates, directions, the
snake, the game state and the per-tick step. It performs no I/O.
"""

from .constants import (
    NORTH, SOUTH, EAST, WEST, VALID_DIRECTIONS,
    LEFT, RIGHT, VALID_TURNS,
    INITIAL_GROWTH, GROWTH_AMOUNT, GROWTH_COUNTER_LIMIT,
)
from .coordinate import Coordinate, advance_coordinate, turn_direction
from .snake import Snake
from .game_state import GameState, SnakeChange
from .interfaces import GameDisplay, GameInput
from .step import StepCounter, game_step

__all__ = [
    'NORTH', 'SOUTH', 'EAST', 'WEST', 'VALID_DIRECTIONS',
    'LEFT', 'RIGHT', 'VALID_TURNS',
    'INITIAL_GROWTH', 'GROWTH_AMOUNT', 'GROWTH_COUNTER_LIMIT',
    'Coordinate', 'advance_coordinate', 'turn_direction',
    'Snake',
    'GameState', 'SnakeChange',
    'GameDisplay', 'GameInput',
    'StepCounter', 'game_step',
]
