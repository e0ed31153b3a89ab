"""
Runtime settings for the snake engine.

Values come from the environment (a local .env file is loaded first) and
can be overridden by CLI flags.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH, DEFAULT_LIVES


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass
class GameSettings:
    grid_width: int = DEFAULT_GRID_WIDTH
    grid_height: int = DEFAULT_GRID_HEIGHT
    lives: int = DEFAULT_LIVES
    level_count: Optional[int] = None
    seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "GameSettings":
        load_dotenv()
        return cls(
            grid_width=_int_env("SNAKE_GRID_WIDTH", DEFAULT_GRID_WIDTH),
            grid_height=_int_env("SNAKE_GRID_HEIGHT", DEFAULT_GRID_HEIGHT),
            lives=_int_env("SNAKE_LIVES", DEFAULT_LIVES),
            level_count=_int_env("SNAKE_LEVEL_COUNT", None),
            seed=_int_env("SNAKE_SEED", None),
            log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
