"""
Position value type.
"""

from typing import NamedTuple

from .constants import Direction


class Position(NamedTuple):
    """An integer grid cell. Bounds are the board's business, not ours."""

    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)
