"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Optional, Tuple

from .constants import Direction, SPAWN_DIRECTION, SPAWN_HEAD, SPAWN_LENGTH
from .position import Position


def spawn_body(
    head: Tuple[int, int] = SPAWN_HEAD,
    length: int = SPAWN_LENGTH,
) -> List[Position]:
    """Straight vertical body with the head on top, e.g. (5,5)..(5,9)."""
    hx, hy = head
    return [Position(hx, hy + i) for i in range(length)]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        body: deque of Position from head at index 0 to tail at the end
        direction: the direction the next move will take
    """

    def __init__(
        self,
        body: Optional[Iterable[Tuple[int, int]]] = None,
        direction: Direction = SPAWN_DIRECTION,
    ):
        if body is None:
            body = spawn_body()
        self.body = deque(Position(x, y) for x, y in body)
        if not self.body:
            raise ValueError("Snake body must contain at least one segment.")
        self.direction = Direction(direction)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self) -> Position:
        return self.head.moved(self.direction)

    def move(self, food: Optional[Tuple[int, int]] = None) -> bool:
        """
        Advance one cell in the current direction.

        The new head is compared against the food first; when they match
        the tail is kept, so the body grows by one. Otherwise the tail is
        dropped and the length stays the same.

        Returns:
            True if the snake grew on this move.
        """
        new_head = self.next_head()
        grows = food is not None and new_head == food
        self.body.appendleft(new_head)
        if not grows:
            self.body.pop()
        return grows

    def is_colliding_with_wall(self, width: int, height: int) -> bool:
        x, y = self.head
        return x < 0 or x >= width or y < 0 or y >= height

    def is_colliding_with_self(self) -> bool:
        head = self.head
        return any(segment == head for segment in list(self.body)[1:])

    def set_direction(self, direction: Direction) -> bool:
        """
        Turn the snake. A 180 degree turn (back into the neck) is ignored.

        Returns:
            True if the direction was applied.
        """
        direction = Direction(direction)
        if direction == self.direction.opposite():
            return False
        self.direction = direction
        return True

    def __repr__(self):
        return f"<Snake head={tuple(self.head)} length={len(self.body)} direction={self.direction.value}>"
