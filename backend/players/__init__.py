"""
Player implementations for the snake tick engine.

Players are input sources: they turn a game state into direction requests
that are fed to GameEngine.set_direction().
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
