"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls, its own body
    and 180 degree turns.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = [tuple(p) for p in game_state.snake_positions]
        head_x, head_y = snake_positions[0]
        current = Direction(game_state.direction)

        # The engine drops reversals
        candidates = sorted(
            (d for d in VALID_MOVES if d != current.opposite()),
            key=lambda d: d.value,
        )

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move)
        valid_moves: List[Direction] = []
        for move in candidates:
            dx, dy = move.offset
            new_x, new_y = head_x + dx, head_y + dy

            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue

            if (new_x, new_y) in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return current

        return self.rng.choice(valid_moves)
