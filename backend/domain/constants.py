"""
Game constants for the level-based snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: (0, 0) is the top-left cell, so UP decreases y.
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Run phases
IDLE = "idle"
RUNNING = "running"
LIFE_LOST = "life_lost"
LEVEL_COMPLETE = "level_complete"
GAME_OVER = "game_over"
VICTORY = "victory"
PHASES = {IDLE, RUNNING, LIFE_LOST, LEVEL_COMPLETE, GAME_OVER, VICTORY}

# Tick outcomes
EVENT_MOVED = "moved"
EVENT_ATE = "ate"
EVENT_LEVEL_COMPLETE = "level_complete"
EVENT_VICTORY = "victory"
EVENT_LIFE_LOST = "life_lost"
EVENT_GAME_OVER = "game_over"

# Food colors (cosmetic only)
RED = "#FF0000"
ORANGE = "#FFA500"
YELLOW = "#FFFF00"
GREEN = "#00FF00"
BLUE = "#0000FF"
FOOD_COLORS = (RED, ORANGE, YELLOW, GREEN, BLUE)

# Game settings
DEFAULT_GRID_WIDTH = 20
DEFAULT_GRID_HEIGHT = 16
DEFAULT_LIVES = 3
POINTS_PER_FOOD = 1
BASE_SPEED_MS = 200

# Spawn layout: head first, facing right along the second row.
START_SNAKE = [(2, 1), (1, 1), (0, 1)]
START_DIRECTION = RIGHT
