"""
Game constants for the snake tick engine.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Movement directions. Screen coordinates: y grows downwards."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> Tuple[int, int]:
        return OFFSETS[self]

    def opposite(self) -> "Direction":
        return OPPOSITES[self]


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OFFSETS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Spawn layout: a straight line hanging below the head
SPAWN_HEAD = (5, 5)
SPAWN_LENGTH = 5
SPAWN_DIRECTION = RIGHT

# Timing and sizing defaults (overridable through config)
DEFAULT_TICK_MS = 100
DEFAULT_CELL_SIZE = 100
DEFAULT_BOARD_WIDTH = 20
DEFAULT_BOARD_HEIGHT = 20

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
