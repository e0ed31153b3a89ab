"""
Domain entities for the level-based snake engine.

This module contains the core game entities that are independent of the
tick driver, input capture and rendering.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES, DIRECTION_DELTAS
from .errors import LevelNotFoundError, InvalidTransitionError
from .snake import Snake
from .game_state import GameState
from .food import Food, place_food, spawn_food
from .levels import LevelDefinition, LevelCatalog, default_catalog
from .obstacles import generate_obstacles, reachable_cells
from .policy import GamePolicy

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES', 'DIRECTION_DELTAS',
    'LevelNotFoundError', 'InvalidTransitionError',
    'Snake',
    'GameState',
    'Food', 'place_food', 'spawn_food',
    'LevelDefinition', 'LevelCatalog', 'default_catalog',
    'generate_obstacles', 'reachable_cells',
    'GamePolicy',
]
