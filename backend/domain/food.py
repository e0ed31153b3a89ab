"""
Food entity and placement.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .constants import FOOD_COLORS, RED

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    """A single food item. The color is cosmetic and never affects scoring."""

    position: Tuple[int, int]
    color: str = RED


def fallback_cell(width: int, height: int) -> Tuple[int, int]:
    """Cell returned when the board has no free space left: the grid center."""
    return (width // 2, height // 2)


def place_food(
    obstacles: Iterable[Tuple[int, int]],
    snake_body: Iterable[Tuple[int, int]],
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Tuple[int, int]:
    """
    Pick a free cell uniformly at random.

    Every cell on the grid is a candidate unless it is an obstacle or part of
    the snake. When nothing is free the grid center is returned instead of
    raising; callers should read that as "this level has no room left".
    """
    rng = rng or random
    blocked = set(obstacles)
    blocked.update(snake_body)

    free = [
        (x, y)
        for x in range(width)
        for y in range(height)
        if (x, y) not in blocked
    ]
    logger.debug("Found %d available positions for food", len(free))

    if free:
        return rng.choice(free)

    cell = fallback_cell(width, height)
    logger.warning("No free cell for food on %dx%d grid, falling back to %s", width, height, cell)
    return cell


def random_food_color(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(FOOD_COLORS)


def spawn_food(obstacles, snake_body, width: int, height: int, rng: Optional[random.Random] = None) -> Food:
    """Place a new food item with a random color."""
    position = place_food(obstacles, snake_body, width, height, rng)
    return Food(position=position, color=random_food_color(rng))
