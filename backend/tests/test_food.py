"""
Tests for food placement.
"""

import logging
import os
import random
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import FOOD_COLORS
from domain.food import Food, fallback_cell, place_food, spawn_food


def test_single_free_cell_is_always_chosen():
    """With obstacles everywhere except (5,5), placement returns (5,5) every call."""
    obstacles = {(x, y) for x in range(10) for y in range(10)} - {(5, 5)}
    snake = [(0, 0), (1, 0), (2, 0)]
    rng = random.Random(3)

    for _ in range(20):
        assert place_food(obstacles, snake, 10, 10, rng) == (5, 5)


def test_food_never_lands_on_snake_or_obstacles():
    obstacles = {(4, 3), (5, 3), (4, 4), (5, 4)}
    snake = [(2, 1), (1, 1), (0, 1)]
    rng = random.Random(11)

    for _ in range(300):
        cell = place_food(obstacles, snake, 8, 6, rng)
        assert cell not in obstacles
        assert cell not in snake
        assert 0 <= cell[0] < 8 and 0 <= cell[1] < 6


def test_every_free_cell_can_be_picked():
    snake = [(0, 0)]
    rng = random.Random(5)
    seen = {place_food(set(), snake, 2, 2, rng) for _ in range(200)}
    assert seen == {(1, 0), (0, 1), (1, 1)}


def test_full_grid_falls_back_to_center(caplog):
    """A fully occupied grid returns the center cell and logs a warning."""
    obstacles = {(x, y) for x in range(6) for y in range(4)}

    with caplog.at_level(logging.WARNING, logger="domain.food"):
        cell = place_food(obstacles, [], 6, 4, random.Random(0))

    assert cell == (3, 2)
    assert cell == fallback_cell(6, 4)
    assert "No free cell" in caplog.text


def test_full_grid_from_snake_alone_does_not_raise():
    snake = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert place_food(set(), snake, 2, 2, random.Random(0)) == (1, 1)


def test_spawn_food_picks_cosmetic_color():
    rng = random.Random(2)
    for _ in range(20):
        food = spawn_food(set(), [(0, 0)], 5, 5, rng)
        assert isinstance(food, Food)
        assert food.color in FOOD_COLORS
        assert food.position != (0, 0)


def test_food_is_immutable_value():
    assert Food((1, 2), "#FF0000") == Food((1, 2), "#FF0000")
    assert hash(Food((1, 2))) == hash(Food((1, 2)))
