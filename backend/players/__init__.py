"""
Player implementations for the snake engine.

Players turn a game snapshot into a direction request. The CLI driver uses
them as autopilots; a UI would feed swipe or key input through the same
interface.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
