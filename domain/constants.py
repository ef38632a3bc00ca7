"""
Game constants for turnsnake.
"""

# Headings
NORTH = "NORTH"
SOUTH = "SOUTH"
EAST = "EAST"
WEST = "WEST"
VALID_DIRECTIONS = {NORTH, SOUTH, EAST, WEST}

# Turns, relative to the current heading
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_TURNS = {LEFT, RIGHT}

TURN_TABLE = {
    (EAST, LEFT): NORTH,
    (EAST, RIGHT): SOUTH,
    (WEST, LEFT): SOUTH,
    (WEST, RIGHT): NORTH,
    (NORTH, LEFT): WEST,
    (NORTH, RIGHT): EAST,
    (SOUTH, LEFT): EAST,
    (SOUTH, RIGHT): WEST,
}

# y grows downward
DIRECTION_DELTAS = {
    NORTH: (0, -1),
    SOUTH: (0, 1),
    EAST: (1, 0),
    WEST: (-1, 0),
}

# Game settings
INITIAL_GROWTH = 3
GROWTH_COUNTER_LIMIT = 20
GROWTH_AMOUNT = 3

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 10
DEFAULT_TICK_MS = 200

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
