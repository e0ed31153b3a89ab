"""
Obstacle patterns for each level.

Every pattern is authored by hand and expressed as fractions of the grid
size so the same level scales with the board. Builders are pure: the same
(level, width, height) always yields the same frozenset of cells.
"""

from collections import deque
from typing import Callable, Dict, FrozenSet, Iterable, List, Set, Tuple

from .errors import LevelNotFoundError

Cell = Tuple[int, int]
ObstacleSet = FrozenSet[Cell]
PatternBuilder = Callable[[int, int], ObstacleSet]


def _frac(size: int, fraction: float) -> int:
    return int(size * fraction)


def add_block_at_position(obstacles: Set[Cell], start_x: int, start_y: int, width: int, height: int) -> None:
    """
    Add a 2x2 block anchored at (start_x, start_y).

    Anchors outside [0, width - 1) x [0, height - 1) are dropped silently, so
    a block never sticks out of the grid.
    """
    if start_x < 0 or start_x >= width - 1 or start_y < 0 or start_y >= height - 1:
        return

    for dx in range(2):
        for dy in range(2):
            obstacles.add((start_x + dx, start_y + dy))


def add_cell(obstacles: Set[Cell], x: int, y: int, width: int, height: int) -> None:
    """Add a single wall cell, ignoring anything off the grid."""
    if 0 <= x < width and 0 <= y < height:
        obstacles.add((x, y))


# -------------------------------
# Pattern builders (one per level)
# -------------------------------

def open_field(width: int, height: int) -> ObstacleSet:
    return frozenset()


def first_blocks(width: int, height: int) -> ObstacleSet:
    obstacles: Set[Cell] = set()
    add_block_at_position(obstacles, _frac(width, 0.25) - 1, _frac(height, 0.25) - 1, width, height)
    add_block_at_position(obstacles, _frac(width, 0.75) - 1, _frac(height, 0.75) - 1, width, height)
    return frozenset(obstacles)


def _corner_blocks(obstacles: Set[Cell], width: int, height: int) -> None:
    for fx in (0.25, 0.75):
        for fy in (0.25, 0.75):
            add_block_at_position(obstacles, _frac(width, fx) - 1, _frac(height, fy) - 1, width, height)


def four_corners(width: int, height: int) -> ObstacleSet:
    obstacles: Set[Cell] = set()
    _corner_blocks(obstacles, width, height)
    return frozenset(obstacles)


def four_corners_plus(width: int, height: int) -> ObstacleSet:
    obstacles: Set[Cell] = set()
    _corner_blocks(obstacles, width, height)
    add_block_at_position(obstacles, _frac(width, 0.5) - 1, _frac(height, 0.5) - 1, width, height)
    return frozenset(obstacles)


def zigzag_corridor(width: int, height: int) -> ObstacleSet:
    obstacles: Set[Cell] = set()

    # Left barrier
    for y in range(2, _frac(height, 0.4), 2):
        add_block_at_position(obstacles, _frac(width, 0.33) - 1, y, width, height)

    # Middle barrier
    for y in range(_frac(height, 0.4), _frac(height, 0.6), 2):
        add_block_at_position(obstacles, _frac(width, 0.5) - 1, y, width, height)

    # Right barrier
    right_x = _frac(width, 0.66) - 1
    for y in range(_frac(height, 0.6), height - 2, 2):
        add_block_at_position(obstacles, right_x, y, width, height)

    add_block_at_position(obstacles, _frac(width, 0.2) - 1, _frac(height, 0.3) - 1, width, height)
    # Spur hanging off the right barrier
    add_block_at_position(obstacles, right_x + 2, _frac(height, 0.7), width, height)
    return frozenset(obstacles)


def spiral_path(width: int, height: int) -> ObstacleSet:
    top_y = _frac(height, 0.2)
    bottom_y = _frac(height, 0.8)
    left_x = _frac(width, 0.2)
    right_x = _frac(width, 0.8)

    path: List[Cell] = []
    path.extend((_frac(width, 0.1) + i, top_y) for i in range(_frac(width, 0.8)))
    path.extend((right_x, top_y + i) for i in range(_frac(height, 0.6)))
    path.extend((right_x - i, bottom_y) for i in range(_frac(width, 0.6)))
    path.extend((left_x, bottom_y - i) for i in range(_frac(height, 0.3)))

    # Every other cell of the walk is left open
    obstacles: Set[Cell] = set()
    for index, (x, y) in enumerate(path):
        if index % 2 == 0:
            add_cell(obstacles, x, y, width, height)
    return frozenset(obstacles)


def maze_chambers(width: int, height: int) -> ObstacleSet:
    obstacles: Set[Cell] = set()
    third = _frac(width, 0.33)
    two_thirds = _frac(width, 0.66)

    # Vertical dividers with two passages each
    if third > 0:
        for x in range(third, two_thirds + 1, third):
            for y in range(2, height - 2):
                if _frac(height, 0.3) < y < _frac(height, 0.4):
                    continue
                if _frac(height, 0.6) < y < _frac(height, 0.7):
                    continue
                add_cell(obstacles, x, y, width, height)

    # Left chamber shelf
    for x in range(2, third - 2):
        add_cell(obstacles, x, _frac(height, 0.5), width, height)

    # Middle chamber shelves, gapped on multiples of three
    for x in range(third + 2, two_thirds - 2):
        if x % 3 == 0:
            continue
        add_cell(obstacles, x, _frac(height, 0.3), width, height)
        add_cell(obstacles, x, _frac(height, 0.7), width, height)

    # Right chamber shelf
    for x in range(two_thirds + 2, width - 2):
        add_cell(obstacles, x, _frac(height, 0.5), width, height)

    return frozenset(obstacles)


def h_pattern(width: int, height: int) -> ObstacleSet:
    obstacles: Set[Cell] = set()
    left_x = _frac(width, 0.25) - 1
    right_x = _frac(width, 0.75) - 1

    for y in range(_frac(height, 0.25), _frac(height, 0.75) + 1, 3):
        add_block_at_position(obstacles, left_x, y, width, height)
        add_block_at_position(obstacles, right_x, y, width, height)

    # Two-cell-thick crossbar starting flush against the left column
    mid_y = _frac(height, 0.5) - 1
    for x in range(left_x + 2, _frac(width, 0.65) + 1):
        add_cell(obstacles, x, mid_y, width, height)
        add_cell(obstacles, x, mid_y + 1, width, height)

    return frozenset(obstacles)


def mini_maze(width: int, height: int) -> ObstacleSet:
    obstacles: Set[Cell] = set()

    for y in range(2, height - 2, 2):
        if y % 4 == 0:
            continue
        add_block_at_position(obstacles, width // 3 - 1, y, width, height)
        add_block_at_position(obstacles, int(width * 2 / 3) - 1, y, width, height)

    for x in range(2, width - 2, 2):
        if x % 4 == 0:
            continue
        add_block_at_position(obstacles, x, height // 3 - 1, width, height)
        add_block_at_position(obstacles, x, int(height * 2 / 3) - 1, width, height)

    return frozenset(obstacles)


def maze_master(width: int, height: int) -> ObstacleSet:
    obstacles: Set[Cell] = set()

    outer = 4
    for x in range(outer, width - outer):
        if x == width // 2:
            continue
        add_cell(obstacles, x, outer, width, height)
        add_cell(obstacles, x, height - outer - 1, width, height)
    for y in range(outer, height - outer):
        add_cell(obstacles, outer, y, width, height)
        add_cell(obstacles, width - outer - 1, y, width, height)

    inner = 8
    for x in range(inner, width - inner):
        if x in (width // 2 - 3, width // 2 + 3):
            continue
        add_cell(obstacles, x, inner, width, height)
        add_cell(obstacles, x, height - inner - 1, width, height)
    for y in range(inner, height - inner):
        if y == height // 2:
            continue
        add_cell(obstacles, inner, y, width, height)
        add_cell(obstacles, width - inner - 1, y, width, height)

    add_block_at_position(obstacles, _frac(width, 0.3) - 1, _frac(height, 0.3) - 1, width, height)
    add_block_at_position(obstacles, _frac(width, 0.7) - 1, _frac(height, 0.7) - 1, width, height)
    add_block_at_position(obstacles, _frac(width, 0.7) - 1, _frac(height, 0.3) - 1, width, height)

    return frozenset(obstacles)


PATTERNS: Dict[int, PatternBuilder] = {
    1: open_field,
    2: first_blocks,
    3: four_corners,
    4: four_corners_plus,
    5: zigzag_corridor,
    6: spiral_path,
    7: maze_chambers,
    8: h_pattern,
    9: mini_maze,
    10: maze_master,
}


def generate_obstacles(level_id: int, width: int, height: int) -> ObstacleSet:
    """
    Build the obstacle set for a level on a width x height grid.

    Raises:
        LevelNotFoundError: if no pattern is authored for level_id.
    """
    builder = PATTERNS.get(level_id)
    if builder is None:
        raise LevelNotFoundError(level_id, len(PATTERNS))
    return builder(width, height)


def reachable_cells(start: Cell, obstacles: Iterable[Cell], width: int, height: int) -> Set[Cell]:
    """
    Flood fill from `start` on the wrapping board, walking around obstacles.

    Used to spot layouts that wall off part of the grid; the engine only
    warns about those, it does not reject them.
    """
    blocked = set(obstacles)
    if start in blocked:
        return set()

    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nxt = ((x + dx) % width, (y + dy) % height)
            if nxt in blocked or nxt in seen:
                continue
            seen.add(nxt)
            queue.append(nxt)
    return seen
