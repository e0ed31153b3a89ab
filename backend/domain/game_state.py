"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from typing import Any, Dict, FrozenSet, List, Optional, Tuple


class GameState:
    """
    A snapshot of one play session, taken after a tick or a transition.

    Attributes:
        phase: one of the run phases in domain.constants
        level: active level id
        level_name: display name of the active level
        snake: list of (x, y) from head to tail
        direction: committed direction of travel
        snake_color: color inherited from the last food eaten
        food: (x, y) of the current food, or None before the game starts
        food_color: color tag of the current food
        obstacles: blocked cells of the active level
        score: cumulative score
        high_score: best score known to the session
        is_new_high_score: whether score beats the high score the session started with
        remaining_food: food still needed to clear the level
        lives: lives left in the current level
        tick_count: ticks processed since the level was (re)started
        width, height: board dimensions
        tick_interval_ms: cadence the driver should tick at
    """

    def __init__(
        self,
        phase: str,
        level: int,
        level_name: str,
        snake: List[Tuple[int, int]],
        direction: str,
        snake_color: str,
        food: Optional[Tuple[int, int]],
        food_color: Optional[str],
        obstacles: FrozenSet[Tuple[int, int]],
        score: int,
        high_score: int,
        is_new_high_score: bool,
        remaining_food: int,
        lives: int,
        tick_count: int,
        width: int,
        height: int,
        tick_interval_ms: int,
    ):
        self.phase = phase
        self.level = level
        self.level_name = level_name
        self.snake = snake
        self.direction = direction
        self.snake_color = snake_color
        self.food = food
        self.food_color = food_color
        self.obstacles = obstacles
        self.score = score
        self.high_score = high_score
        self.is_new_high_score = is_new_high_score
        self.remaining_food = remaining_food
        self.lives = lives
        self.tick_count = tick_count
        self.width = width
        self.height = height
        self.tick_interval_ms = tick_interval_ms

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        # = obstacle
        F = food
        H = snake head
        o = snake body
        Rows run top to bottom with (0,0) at the top left, matching movement.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for ox, oy in self.obstacles:
            board[oy][ox] = '#'

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists, obstacles are sorted)."""
        return {
            "phase": self.phase,
            "level": self.level,
            "level_name": self.level_name,
            "snake": [list(cell) for cell in self.snake],
            "direction": self.direction,
            "snake_color": self.snake_color,
            "food": list(self.food) if self.food is not None else None,
            "food_color": self.food_color,
            "obstacles": [list(cell) for cell in sorted(self.obstacles)],
            "score": self.score,
            "high_score": self.high_score,
            "is_new_high_score": self.is_new_high_score,
            "remaining_food": self.remaining_food,
            "lives": self.lives,
            "tick_count": self.tick_count,
            "width": self.width,
            "height": self.height,
            "tick_interval_ms": self.tick_interval_ms,
        }

    def __repr__(self):
        return (
            f"<GameState phase={self.phase} level={self.level} tick={self.tick_count} "
            f"score={self.score} lives={self.lives} remaining={self.remaining_food}>"
        )
