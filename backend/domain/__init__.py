"""
Domain entities for the snake tick engine.

This module contains the core game entities that are independent of
infrastructure concerns (scheduling, configuration, input, etc.).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction
from .position import Position
from .board import Board, BoardConfigurationError
from .snake import Snake, spawn_body
from .food import Food, SpawnPolicy
from .game_state import GameState, GameStatus, TickResult
from .events import EventChannel, GameOver, TickCompleted

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction',
    'Position',
    'Board', 'BoardConfigurationError',
    'Snake', 'spawn_body',
    'Food', 'SpawnPolicy',
    'GameState', 'GameStatus', 'TickResult',
    'EventChannel', 'GameOver', 'TickCompleted',
]
