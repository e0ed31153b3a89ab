"""
Score and progress bookkeeping across levels.

The score is always the baseline (food required by every fully cleared
level) plus the food eaten in the attempt in progress. Life loss rolls the
score back to the baseline; advancing a level moves the baseline forward.
"""

import logging

from domain.constants import POINTS_PER_FOOD
from domain.levels import LevelCatalog

logger = logging.getLogger(__name__)


class ScoreTracker:
    """
    Tracks level progress and the cumulative score for one play session.

    Attributes:
        current_level: active level id
        food_eaten_this_level: food eaten in the current attempt
        remaining_food: food still needed to clear the level
        score: cumulative score
        level_baseline: score guaranteed by the levels cleared before this one
        recorded_high_score: best score that has stood (seeded by the caller)
    """

    def __init__(self, catalog: LevelCatalog, high_score: int = 0):
        self.catalog = catalog
        self.recorded_high_score = max(0, high_score)
        self.starting_high_score = self.recorded_high_score
        self.current_level = 1
        self.food_eaten_this_level = 0
        self.remaining_food = catalog.required_food(1)
        self.score = 0
        self.level_baseline = 0

    def start_level(self, level_id: int) -> None:
        """Reset per-level counters and set the baseline from the levels before `level_id`."""
        required = self.catalog.required_food(level_id)
        self.current_level = level_id
        self.remaining_food = required
        self.food_eaten_this_level = 0
        self.level_baseline = self.catalog.baseline_for(level_id)
        self.score = self.level_baseline

    def reset_to_level(self, level_id: int) -> None:
        """
        Full reset for a fresh run starting at `level_id`.

        Starting at level 1 zeroes the score. Starting later keeps the credit
        for the levels before it, so the score begins at that level's baseline.
        """
        self.start_level(level_id)
        logger.debug("Score tracker reset to level %d with score %d", level_id, self.score)

    def consume_food(self) -> bool:
        """
        Count one eaten food item.

        Returns:
            True when this clears the level and another level follows.
        """
        self.food_eaten_this_level += 1
        self.remaining_food = max(0, self.remaining_food - 1)
        self.score += POINTS_PER_FOOD
        return self.remaining_food == 0 and self.current_level < self.catalog.level_count

    @property
    def level_cleared(self) -> bool:
        return self.remaining_food == 0

    @property
    def is_final_level(self) -> bool:
        return self.current_level >= self.catalog.level_count

    def advance_level(self) -> bool:
        """
        Move to the next level, carrying the score forward as the new baseline.

        Returns:
            False if already on the last level (nothing changes).
        """
        if self.is_final_level:
            return False
        self.current_level += 1
        self.level_baseline = self.score
        self.remaining_food = self.catalog.required_food(self.current_level)
        self.food_eaten_this_level = 0
        return True

    def lose_life(self, revert: bool = True) -> None:
        """
        Handle a collision that still leaves lives.

        With `revert`, the attempt's fruit is discarded and the level's full
        requirement is restored. Without it, both score and progress carry
        over to the next attempt.
        """
        if revert:
            self._discard_attempt()

    def end_attempt(self, keep_attempt: bool = False) -> None:
        """Settle the score when the last life is lost."""
        if not keep_attempt:
            self._discard_attempt()

    def _discard_attempt(self) -> None:
        if self.food_eaten_this_level:
            logger.debug(
                "Discarding %d food from failed attempt on level %d",
                self.food_eaten_this_level,
                self.current_level,
            )
        self.score = self.level_baseline
        self.food_eaten_this_level = 0
        self.remaining_food = self.catalog.required_food(self.current_level)

    @property
    def high_score(self) -> int:
        """
        Best score so far.

        Fruit from the attempt in progress counts while it is held, but only
        scores settled by record_high_score() survive a life-loss revert.
        """
        return max(self.recorded_high_score, self.score)

    @property
    def is_new_high_score(self) -> bool:
        return self.high_score > self.starting_high_score

    def record_high_score(self) -> bool:
        """
        Settle the current score into the high score.

        Call only once the score stands: on level clear, after a life loss
        has been settled, or at game over. Returns True on change.
        """
        if self.score > self.recorded_high_score:
            self.recorded_high_score = self.score
            return True
        return False
