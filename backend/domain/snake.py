"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the current attempt is still going
        death_reason: 'self' or 'obstacle' after a collision
        death_tick: the tick number when the collision happened
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def collides_with_self(self, cell: Tuple[int, int], growing: bool) -> bool:
        """
        Check whether moving the head onto `cell` hits the body.

        The tail is vacated during a plain move, so it only counts when the
        snake is growing this tick.
        """
        body = list(self.positions)
        if not growing:
            body = body[:-1]
        return cell in body

    def advance(self, new_head: Tuple[int, int], grow: bool) -> None:
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def kill(self, reason: str, tick: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_tick = tick
