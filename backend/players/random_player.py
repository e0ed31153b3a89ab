"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Dict, List, Optional, Tuple

from domain.constants import DIRECTION_DELTAS, OPPOSITES, VALID_MOVES
from domain.game_state import GameState
from .base import Player


def next_cells(game_state: GameState) -> Dict[str, Tuple[int, int]]:
    """Cell the head would land on for each direction, wrapping at the edges."""
    head_x, head_y = game_state.snake[0]
    return {
        move: ((head_x + dx) % game_state.width, (head_y + dy) % game_state.height)
        for move, (dx, dy) in DIRECTION_DELTAS.items()
    }


def safe_moves(game_state: GameState) -> List[str]:
    """
    Moves that neither reverse into the neck nor hit an obstacle or the body.

    The tail is vacated on a plain move, so it only blocks when the move
    lands on food.
    """
    reverse = OPPOSITES[game_state.direction]
    body = game_state.snake
    moves: List[str] = []
    for move, cell in next_cells(game_state).items():
        if move == reverse:
            continue
        if cell in game_state.obstacles:
            continue
        blocking = body if cell == game_state.food else body[:-1]
        if cell in blocking:
            continue
        moves.append(move)
    # Keep the output stable for seeded runs
    return sorted(moves)


class RandomPlayer(Player):
    """
    A random AI that picks a direction avoiding obstacles and self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        valid_moves = safe_moves(game_state)

        # If no valid moves, keep going (we'll crash anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)
