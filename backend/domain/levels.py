"""
Level catalog: ordered, 1-indexed level definitions.

Each level pairs a hand-authored obstacle pattern with a food requirement
and a tick interval. The catalog is read-only shared data; engines look
levels up by id and never mutate them.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .constants import BASE_SPEED_MS
from .errors import LevelNotFoundError
from .obstacles import PATTERNS, PatternBuilder


@dataclass(frozen=True)
class LevelDefinition:
    id: int
    name: str
    required_food: int
    obstacle_generator: PatternBuilder = field(compare=False)
    tick_interval_ms: int
    description: str = ""

    def obstacles(self, width: int, height: int) -> FrozenSet[Tuple[int, int]]:
        return self.obstacle_generator(width, height)


class LevelCatalog:
    """
    Ordered collection of level definitions.

    Ids must run 1..N with no gaps, in order.
    """

    def __init__(self, levels: Sequence[LevelDefinition]):
        if not levels:
            raise ValueError("A level catalog needs at least one level.")
        for index, level in enumerate(levels, start=1):
            if level.id != index:
                raise ValueError(
                    f"Level ids must be contiguous from 1; position {index} holds level {level.id}"
                )
            if level.required_food < 1:
                raise ValueError(f"Level {level.id} must require at least one food item.")
            if level.tick_interval_ms <= 0:
                raise ValueError(f"Level {level.id} needs a positive tick interval.")
        self._levels: List[LevelDefinition] = list(levels)

    @property
    def level_count(self) -> int:
        return len(self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self):
        return iter(self._levels)

    def has_level(self, level_id: int) -> bool:
        return isinstance(level_id, int) and 1 <= level_id <= len(self._levels)

    def get_level(self, level_id: int) -> LevelDefinition:
        """
        Look up a level by id.

        Raises:
            LevelNotFoundError: if the id is outside 1..level_count.
        """
        if not self.has_level(level_id):
            raise LevelNotFoundError(level_id, len(self._levels))
        return self._levels[level_id - 1]

    def required_food(self, level_id: int) -> int:
        return self.get_level(level_id).required_food

    def is_last_level(self, level_id: int) -> bool:
        return self.get_level(level_id).id == len(self._levels)

    def baseline_for(self, level_id: int) -> int:
        """Score earned by clearing every level before `level_id`."""
        self.get_level(level_id)
        return sum(level.required_food for level in self._levels[: level_id - 1])

    def max_score_through(self, level_id: int) -> int:
        """Highest score reachable by the end of `level_id`."""
        return self.baseline_for(level_id) + self.required_food(level_id)

    def obstacles_for(self, level_id: int, width: int, height: int) -> FrozenSet[Tuple[int, int]]:
        return self.get_level(level_id).obstacles(width, height)

    def truncated(self, level_count: int) -> "LevelCatalog":
        """Return a catalog holding only the first `level_count` levels."""
        if level_count < 1 or level_count > len(self._levels):
            raise ValueError(
                f"Cannot truncate a {len(self._levels)}-level catalog to {level_count} levels."
            )
        return LevelCatalog(self._levels[:level_count])


_LEVEL_TEXT = [
    ("Training Grounds", "Get used to the controls."),
    ("First Blocks", "Watch out for blocks!"),
    ("Four Corners", "Navigate the corners."),
    ("Four Corners Plus", "Blocks in corners and center."),
    ("Zigzag Corridor", "Navigate a zigzag path."),
    ("Spiral Path", "Navigate a spiral path."),
    ("Maze Chambers", "Navigate through maze chambers."),
    ("H Pattern", "Navigate the H-shaped obstacles."),
    ("Mini Maze", "Navigate a mini maze."),
    ("Maze Master", "Navigate the ultimate box maze."),
]


def _build_default_levels() -> List[LevelDefinition]:
    levels = []
    for level_id, (name, blurb) in enumerate(_LEVEL_TEXT, start=1):
        required = level_id + 2
        levels.append(
            LevelDefinition(
                id=level_id,
                name=name,
                required_food=required,
                obstacle_generator=PATTERNS[level_id],
                # Each level shaves 10ms off the base speed
                tick_interval_ms=BASE_SPEED_MS - 10 * level_id,
                description=f"{blurb} Collect {required} fruit to advance.",
            )
        )
    return levels


DEFAULT_LEVELS: List[LevelDefinition] = _build_default_levels()

_default_catalog: Optional[LevelCatalog] = None


def default_catalog(level_count: Optional[int] = None) -> LevelCatalog:
    """Return the built-in catalog, optionally cut down to `level_count` levels."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = LevelCatalog(DEFAULT_LEVELS)
    if level_count is None:
        return _default_catalog
    return _default_catalog.truncated(level_count)
