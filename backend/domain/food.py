"""
Food entity and its spawn policies.
"""

import logging
import random
from enum import Enum
from typing import Iterable, Optional, Tuple

from .board import Board
from .position import Position

logger = logging.getLogger(__name__)


class SpawnPolicy(str, Enum):
    # Any cell on the board, the snake's body included
    UNIFORM = "uniform"
    # Only cells the snake does not occupy
    AVOID_SNAKE = "avoid_snake"


class Food:
    """
    A single piece of food.

    Attributes:
        position: the cell the food occupies
        policy: how spawn() picks the next cell
    """

    def __init__(
        self,
        position: Tuple[int, int] = (0, 0),
        policy: SpawnPolicy = SpawnPolicy.UNIFORM,
    ):
        self.position = Position(*position)
        self.policy = SpawnPolicy(policy)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def spawn(
        self,
        board: Board,
        rng: Optional[random.Random] = None,
        occupied: Iterable[Tuple[int, int]] = (),
    ) -> Position:
        """
        Move the food to a random cell of the board.

        Under the UNIFORM policy `occupied` is ignored and the food may land
        on the snake. Under AVOID_SNAKE the food is placed on a free cell; if
        none is left it stays where it is.
        """
        rng = rng or random.Random()

        if self.policy is SpawnPolicy.UNIFORM:
            self.position = Position(rng.randrange(board.width), rng.randrange(board.height))
            return self.position

        taken = {Position(x, y) for x, y in occupied}
        free_cells = [cell for cell in board.cells() if cell not in taken]
        if not free_cells:
            logger.warning("No free cell left on a %sx%s board; food stays at %s",
                           board.width, board.height, tuple(self.position))
            return self.position

        self.position = rng.choice(free_cells)
        return self.position

    def __repr__(self):
        return f"<Food at={tuple(self.position)} policy={self.policy.value}>"
