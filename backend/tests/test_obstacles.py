"""
Tests for the per-level obstacle patterns.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.errors import LevelNotFoundError
from domain.obstacles import (
    PATTERNS,
    add_block_at_position,
    add_cell,
    generate_obstacles,
    reachable_cells,
)


class TestBlockPrimitive:
    """Tests for the 2x2 block placement."""

    def test_block_adds_four_cells(self):
        obstacles = set()
        add_block_at_position(obstacles, 3, 4, 20, 16)
        assert obstacles == {(3, 4), (4, 4), (3, 5), (4, 5)}

    def test_block_at_last_valid_anchor(self):
        obstacles = set()
        add_block_at_position(obstacles, 18, 14, 20, 16)
        assert obstacles == {(18, 14), (19, 14), (18, 15), (19, 15)}

    @pytest.mark.parametrize("anchor", [(19, 0), (0, 15), (-1, 3), (3, -1), (25, 25)])
    def test_out_of_bounds_anchor_is_dropped(self, anchor):
        """Anchors that would push the block off the grid add nothing."""
        obstacles = set()
        add_block_at_position(obstacles, anchor[0], anchor[1], 20, 16)
        assert obstacles == set()

    def test_single_cell_is_clipped(self):
        obstacles = set()
        add_cell(obstacles, 20, 3, 20, 16)
        add_cell(obstacles, 5, -1, 20, 16)
        add_cell(obstacles, 5, 5, 20, 16)
        assert obstacles == {(5, 5)}


class TestPatterns:
    """Tests for the authored level layouts."""

    def test_level_one_is_open(self):
        assert generate_obstacles(1, 20, 16) == frozenset()

    def test_level_two_places_two_blocks(self):
        obstacles = generate_obstacles(2, 20, 16)
        assert obstacles == {
            (4, 3), (5, 3), (4, 4), (5, 4),
            (14, 11), (15, 11), (14, 12), (15, 12),
        }

    def test_level_three_has_four_corner_blocks(self):
        assert len(generate_obstacles(3, 20, 16)) == 16

    def test_level_four_adds_center_block(self):
        corners = generate_obstacles(3, 20, 16)
        plus = generate_obstacles(4, 20, 16)
        assert corners < plus
        assert plus - corners == {(9, 7), (10, 7), (9, 8), (10, 8)}

    @pytest.mark.parametrize("level_id", sorted(PATTERNS))
    def test_generation_is_deterministic(self, level_id):
        assert generate_obstacles(level_id, 20, 16) == generate_obstacles(level_id, 20, 16)

    @pytest.mark.parametrize("level_id", sorted(PATTERNS))
    @pytest.mark.parametrize("size", [(20, 16), (3, 2), (5, 5), (40, 30), (13, 27)])
    def test_patterns_stay_inside_grid(self, level_id, size):
        width, height = size
        for x, y in generate_obstacles(level_id, width, height):
            assert 0 <= x < width
            assert 0 <= y < height

    @pytest.mark.parametrize("level_id", sorted(PATTERNS))
    def test_patterns_leave_spawn_row_clear(self, level_id):
        """The starting snake and the cell ahead of it are never blocked on the default grid."""
        obstacles = generate_obstacles(level_id, 20, 16)
        for cell in [(0, 1), (1, 1), (2, 1), (3, 1)]:
            assert cell not in obstacles

    def test_patterns_scale_with_grid(self):
        small = generate_obstacles(2, 20, 16)
        large = generate_obstacles(2, 40, 32)
        assert small != large
        assert len(small) == len(large) == 8

    def test_later_levels_are_not_empty(self):
        for level_id in range(2, 11):
            assert generate_obstacles(level_id, 20, 16), f"level {level_id} has no obstacles"

    def test_unknown_level_raises_level_not_found(self):
        with pytest.raises(LevelNotFoundError) as excinfo:
            generate_obstacles(99, 20, 16)
        assert excinfo.value.level_id == 99
        assert excinfo.value.level_count == len(PATTERNS)


class TestReachableCells:
    """Tests for the wrapping flood fill."""

    def test_open_board_is_fully_reachable(self):
        assert len(reachable_cells((0, 0), frozenset(), 6, 4)) == 24

    def test_walls_split_the_torus(self):
        """Two full columns of wall cut a wrapping board into two strips."""
        walls = {(2, y) for y in range(5)} | {(4, y) for y in range(5)}
        reachable = reachable_cells((0, 0), walls, 5, 5)
        assert reachable == {(x, y) for x in (0, 1) for y in range(5)}

    def test_wrap_connects_opposite_edges(self):
        """A single wall column does not split a wrapping board."""
        walls = {(2, y) for y in range(5)}
        reachable = reachable_cells((0, 0), walls, 5, 5)
        assert len(reachable) == 20
        assert (3, 0) in reachable

    def test_blocked_start_reaches_nothing(self):
        assert reachable_cells((1, 1), {(1, 1)}, 4, 4) == set()
