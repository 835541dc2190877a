"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class GameStatus(str, Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TickResult:
    """Outcome of a single tick."""

    status: GameStatus
    score: int
    tick_number: int
    grew: bool = False
    death_reason: Optional[str] = None

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have run in this run
        snake_positions: list of (x, y) from head to tail
        direction: the snake's current direction
        food: (x, y) of the food
        score: food eaten this run
        status: RUNNING or GAME_OVER
        width, height: board dimensions
        death_reason: 'wall' or 'self' once the run is over
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        food: Tuple[int, int],
        score: int,
        status: GameStatus,
        width: int,
        height: int,
        death_reason: Optional[str] = None,
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.direction = direction
        self.food = food
        self.score = score
        self.status = status
        self.width = width
        self.height = height
        self.death_reason = death_reason

    @property
    def alive(self) -> bool:
        return self.status is GameStatus.RUNNING

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake body
        H = snake head
        (0,0) is the top left cell, matching the UP = y - 1 convention.
        Cells outside the board (a head that hit the wall) are not drawn.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        if 0 <= fx < self.width and 0 <= fy < self.height:
            board[fy][fx] = 'A'

        # Tail first so the head wins when it overlaps a segment
        for pos_idx in range(len(self.snake_positions) - 1, -1, -1):
            x, y = self.snake_positions[pos_idx]
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick_number": self.tick_number,
            "snake_positions": [list(p) for p in self.snake_positions],
            "direction": self.direction,
            "food": list(self.food),
            "score": self.score,
            "status": self.status.value,
            "width": self.width,
            "height": self.height,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}, status={self.status.value}>"
        )
