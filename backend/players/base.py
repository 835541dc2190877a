"""
Base player interface for the game engine.
"""

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player looks at the current game state and returns the direction it
    wants the snake to take next. The engine decides whether to honour it.
    """

    def get_move(self, game_state: GameState) -> Direction:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: Direction.UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError
