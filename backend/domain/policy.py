"""
Session policy: the rules that differ between game modes.

One engine covers the lives-based game, the attempts-style game (progress
kept across retries) and practice mode; the caller picks a policy when the
session starts.
"""

from dataclasses import dataclass

from .constants import DEFAULT_LIVES


@dataclass(frozen=True)
class GamePolicy:
    """
    Attributes:
        lives_per_level: lives granted on start and on every level advance
        score_revert_on_life_loss: drop the failed attempt's fruit (and the
            level progress that came with it) when a life is lost
        practice_mode: collisions never consume lives and the score never
            counts as a new high score
        keep_attempt_on_game_over: keep the final attempt's fruit in the
            score when the last life is lost
    """

    lives_per_level: int = DEFAULT_LIVES
    score_revert_on_life_loss: bool = True
    practice_mode: bool = False
    keep_attempt_on_game_over: bool = False

    def __post_init__(self):
        if self.lives_per_level < 1:
            raise ValueError("lives_per_level must be at least 1")


CLASSIC = GamePolicy()
ATTEMPTS = GamePolicy(score_revert_on_life_loss=False, keep_attempt_on_game_over=True)
PRACTICE = GamePolicy(practice_mode=True)
