"""
Tests for services/score_tracker.py - level progress and scoring.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.errors import LevelNotFoundError
from domain.levels import default_catalog
from services.score_tracker import ScoreTracker


@pytest.fixture
def tracker():
    return ScoreTracker(default_catalog())


def eat(tracker, count):
    results = [tracker.consume_food() for _ in range(count)]
    return results


class TestConsumeFood:

    def test_initial_state(self, tracker):
        assert tracker.current_level == 1
        assert tracker.score == 0
        assert tracker.remaining_food == 3
        assert tracker.food_eaten_this_level == 0

    def test_each_food_scores_one_point(self, tracker):
        eat(tracker, 2)
        assert tracker.score == 2
        assert tracker.remaining_food == 1
        assert tracker.food_eaten_this_level == 2

    def test_level_complete_signal_on_last_required_food(self, tracker):
        assert eat(tracker, 3) == [False, False, True]
        assert tracker.level_cleared

    def test_final_level_does_not_signal_level_complete(self):
        tracker = ScoreTracker(default_catalog(1))
        assert eat(tracker, 3) == [False, False, False]
        assert tracker.level_cleared
        assert tracker.is_final_level

    def test_remaining_food_never_negative(self):
        tracker = ScoreTracker(default_catalog(1))
        eat(tracker, 5)
        assert tracker.remaining_food == 0


class TestAdvanceLevel:

    def test_advance_moves_baseline(self, tracker):
        eat(tracker, 3)
        assert tracker.advance_level() is True
        assert tracker.current_level == 2
        assert tracker.level_baseline == 3
        assert tracker.remaining_food == 4
        assert tracker.food_eaten_this_level == 0
        assert tracker.score == 3

    def test_advance_on_last_level_is_noop(self):
        tracker = ScoreTracker(default_catalog(2))
        tracker.start_level(2)
        assert tracker.advance_level() is False
        assert tracker.current_level == 2

    @pytest.mark.parametrize("levels_cleared", [1, 2, 3, 5, 9])
    def test_score_after_clearing_levels_is_sum_of_requirements(self, tracker, levels_cleared):
        catalog = default_catalog()
        for level_id in range(1, levels_cleared + 1):
            eat(tracker, catalog.required_food(level_id))
            assert tracker.score == sum(catalog.required_food(i) for i in range(1, level_id + 1))
            tracker.advance_level()


class TestLifeLoss:

    def test_life_loss_reverts_to_baseline(self, tracker):
        eat(tracker, 3)
        tracker.advance_level()
        eat(tracker, 2)
        assert tracker.score == 5

        tracker.lose_life()

        assert tracker.score == 3
        assert tracker.remaining_food == 4
        assert tracker.food_eaten_this_level == 0

    def test_life_loss_without_revert_keeps_progress(self, tracker):
        eat(tracker, 2)
        tracker.lose_life(revert=False)
        assert tracker.score == 2
        assert tracker.remaining_food == 1

    def test_end_attempt_discards_by_default(self, tracker):
        eat(tracker, 2)
        tracker.end_attempt()
        assert tracker.score == 0

    def test_end_attempt_can_keep_fruit(self, tracker):
        eat(tracker, 2)
        tracker.end_attempt(keep_attempt=True)
        assert tracker.score == 2

    def test_score_never_negative(self, tracker):
        tracker.lose_life()
        tracker.end_attempt()
        assert tracker.score == 0


class TestReset:

    def test_reset_to_level_one_zeroes_score(self, tracker):
        eat(tracker, 3)
        tracker.advance_level()
        eat(tracker, 1)
        tracker.reset_to_level(1)
        assert tracker.score == 0
        assert tracker.current_level == 1
        assert tracker.remaining_food == 3

    def test_reset_to_later_level_keeps_prior_levels(self, tracker):
        tracker.reset_to_level(3)
        assert tracker.score == 3 + 4
        assert tracker.level_baseline == 7
        assert tracker.remaining_food == 5

    def test_reset_to_unknown_level_raises(self, tracker):
        with pytest.raises(LevelNotFoundError):
            tracker.reset_to_level(11)
        assert tracker.current_level == 1


class TestHighScore:

    def test_new_high_score_after_passing_previous_best(self):
        tracker = ScoreTracker(default_catalog(), high_score=2)
        eat(tracker, 2)
        assert tracker.is_new_high_score is False
        assert tracker.record_high_score() is False

        tracker.consume_food()
        assert tracker.is_new_high_score is True
        assert tracker.record_high_score() is True
        assert tracker.high_score == 3

    def test_life_loss_revert_drops_unsettled_fruit_from_high_score(self):
        tracker = ScoreTracker(default_catalog())
        eat(tracker, 2)
        assert tracker.high_score == 2

        tracker.lose_life()
        tracker.record_high_score()

        assert tracker.score == 0
        assert tracker.high_score == tracker.score
        assert tracker.is_new_high_score is False

    def test_settled_score_survives_later_revert(self):
        tracker = ScoreTracker(default_catalog())
        eat(tracker, 3)
        tracker.record_high_score()
        tracker.advance_level()
        eat(tracker, 2)
        assert tracker.high_score == 5

        tracker.lose_life()

        assert tracker.score == 3
        assert tracker.high_score == 3
        assert tracker.is_new_high_score is True

    def test_settled_score_survives_reset(self):
        tracker = ScoreTracker(default_catalog())
        eat(tracker, 3)
        tracker.record_high_score()
        tracker.reset_to_level(1)
        assert tracker.score == 0
        assert tracker.high_score == 3
