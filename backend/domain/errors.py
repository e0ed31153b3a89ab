"""
Exceptions raised by the game engine.

Collisions are not errors; they are ordinary tick outcomes. These classes
only cover invalid input and calls made from the wrong phase.
"""


class LevelNotFoundError(ValueError):
    """Raised when a level id is not present in the catalog."""

    def __init__(self, level_id, level_count: int = 0):
        self.level_id = level_id
        self.level_count = level_count
        super().__init__(f"Level {level_id} not found (catalog has {level_count} levels)")


class InvalidTransitionError(RuntimeError):
    """Raised when an operation is requested from a phase that does not allow it."""
