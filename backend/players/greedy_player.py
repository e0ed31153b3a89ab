"""
Greedy player implementation - heads for the food along the wrapped board.
"""

import random
from typing import Optional, Tuple

from domain.game_state import GameState
from .base import Player
from .random_player import next_cells, safe_moves


def wrapped_distance(a: Tuple[int, int], b: Tuple[int, int], width: int, height: int) -> int:
    """Manhattan distance on a board whose edges wrap around."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return min(dx, width - dx) + min(dy, height - dy)


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to the food.

    Ties are broken at random; with no safe move it keeps its heading.
    """

    name = "greedy"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        moves = safe_moves(game_state)
        if not moves:
            return game_state.direction
        if game_state.food is None:
            return self.rng.choice(moves)

        targets = next_cells(game_state)
        distances = {
            move: wrapped_distance(targets[move], game_state.food, game_state.width, game_state.height)
            for move in moves
        }
        best = min(distances.values())
        return self.rng.choice([move for move in moves if distances[move] == best])
