"""
Board entity - the bounded grid a run is played on.
"""

from dataclasses import dataclass
from typing import Iterator

from .position import Position


class BoardConfigurationError(ValueError):
    """Raised when a board would have a non-positive size."""


@dataclass(frozen=True)
class Board:
    """
    Read-only grid dimensions in cells.

    Attributes:
        width: number of columns, x in [0, width)
        height: number of rows, y in [0, height)
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise BoardConfigurationError(
                    f"Board {name} must be an integer, got {value!r}."
                )
            if value <= 0:
                raise BoardConfigurationError(
                    f"Board {name} must be positive, got {value}."
                )

    @classmethod
    def from_pixels(cls, pixel_width: int, pixel_height: int, cell_size: int) -> "Board":
        """
        Derive the grid from a play surface size.

        Partial cells at the right and bottom edges are dropped, so a
        450x320 surface with 100px cells is a 4x3 board.
        """
        if cell_size <= 0:
            raise BoardConfigurationError(f"Cell size must be positive, got {cell_size}.")
        return cls(width=pixel_width // cell_size, height=pixel_height // cell_size)

    def contains(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    @property
    def area(self) -> int:
        return self.width * self.height
