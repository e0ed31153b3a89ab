import argparse
import json
import logging
import os
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from config import GameSettings
from domain.constants import (
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DIRECTION_DELTAS,
    EVENT_ATE,
    EVENT_GAME_OVER,
    EVENT_LEVEL_COMPLETE,
    EVENT_LIFE_LOST,
    EVENT_MOVED,
    EVENT_VICTORY,
    GAME_OVER,
    IDLE,
    LEVEL_COMPLETE,
    LIFE_LOST,
    OPPOSITES,
    RED,
    RUNNING,
    START_DIRECTION,
    START_SNAKE,
    VALID_MOVES,
    VICTORY,
)
from domain.errors import InvalidTransitionError, LevelNotFoundError
from domain.food import Food, spawn_food
from domain.game_state import GameState
from domain.levels import LevelCatalog, default_catalog
from domain.obstacles import reachable_cells
from domain.policy import GamePolicy
from domain.snake import Snake
from players.base import Player
from players.registry import AVAILABLE_PLAYERS, get_player_class
from services.score_tracker import ScoreTracker

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    One play session of the level-based snake game.

    Manages:
      - Board (width, height) and the active level's obstacles
      - The snake, its committed and pending direction
      - The current food item
      - Lives and the run phase
      - Score and level progress (through ScoreTracker)
      - Optional history for replay

    The engine never schedules itself. A driver calls tick() at the
    level's tick_interval_ms, submit_direction() whenever input arrives,
    and get_current_state() to render.
    """

    def __init__(
        self,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
        catalog: Optional[LevelCatalog] = None,
        policy: Optional[GamePolicy] = None,
        rng: Optional[random.Random] = None,
        high_score: int = 0,
        game_id: Optional[str] = None,
        keep_history: bool = False,
    ):
        min_width = max(x for x, _ in START_SNAKE) + 1
        min_height = max(y for _, y in START_SNAKE) + 1
        if width < min_width or height < min_height:
            raise ValueError(
                f"Grid {width}x{height} is too small for the starting snake "
                f"(needs at least {min_width}x{min_height})."
            )

        self.width = width
        self.height = height
        self.catalog = catalog or default_catalog()
        self.policy = policy or GamePolicy()
        self.rng = rng or random.Random()
        self.game_id = game_id or str(uuid.uuid4())
        self.start_time = time.time()

        self.tracker = ScoreTracker(self.catalog, high_score=high_score)
        self.phase = IDLE
        self.lives = self.policy.lives_per_level
        self.obstacles = frozenset()
        self.tick_interval_ms = self.catalog.get_level(1).tick_interval_ms

        self.snake = Snake(START_SNAKE)
        self.direction = START_DIRECTION
        self.pending_direction: Optional[str] = None
        self.snake_color = RED
        self.food: Optional[Food] = None
        self.tick_count = 0
        self.last_death: Optional[Tuple[str, int]] = None

        self.keep_history = keep_history
        self.history: List[GameState] = []
        self.events: List[Dict[str, Any]] = []
        self._in_tick = False

    # -------------------------------
    # Read-only views
    # -------------------------------

    @property
    def level(self) -> int:
        return self.tracker.current_level

    @property
    def score(self) -> int:
        return self.tracker.score

    @property
    def high_score(self) -> int:
        if self.policy.practice_mode:
            return self.tracker.recorded_high_score
        return self.tracker.high_score

    @property
    def remaining_food(self) -> int:
        return self.tracker.remaining_food

    @property
    def is_new_high_score(self) -> bool:
        if self.policy.practice_mode:
            return False
        return self.tracker.is_new_high_score

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        level = self.catalog.get_level(self.level)
        return GameState(
            phase=self.phase,
            level=self.level,
            level_name=level.name,
            snake=list(self.snake.positions),
            direction=self.direction,
            snake_color=self.snake_color,
            food=self.food.position if self.food else None,
            food_color=self.food.color if self.food else None,
            obstacles=self.obstacles,
            score=self.score,
            high_score=self.high_score,
            is_new_high_score=self.is_new_high_score,
            remaining_food=self.remaining_food,
            lives=self.lives,
            tick_count=self.tick_count,
            width=self.width,
            height=self.height,
            tick_interval_ms=self.tick_interval_ms,
        )

    # -------------------------------
    # Session lifecycle
    # -------------------------------

    def start(self, level_id: int = 1) -> GameState:
        """Leave the menu and start playing at `level_id`."""
        return self.restart(level_id)

    def restart(self, level_id: int = 1) -> GameState:
        """
        Full reset: score back to the level's baseline, full lives, fresh level.

        Raises:
            LevelNotFoundError: if level_id is not in the catalog.
        """
        self.catalog.get_level(level_id)
        self.tracker.reset_to_level(level_id)
        self.lives = self.policy.lives_per_level
        self._load_level(level_id)
        logger.info("Starting level %d with score %d", level_id, self.score)
        return self._enter(RUNNING, "restart")

    def retry_level(self) -> GameState:
        """Resume the same level after losing a life. Obstacles and score baseline are kept."""
        self._require_phase(LIFE_LOST, "retry_level")
        self._spawn()
        logger.info("Retrying level %d with %d lives left", self.level, self.lives)
        return self._enter(RUNNING, "retry")

    def advance_level(self) -> GameState:
        """Load the next level after a level-complete. Lives are refilled."""
        self._require_phase(LEVEL_COMPLETE, "advance_level")
        if not self.tracker.advance_level():
            raise InvalidTransitionError(f"Level {self.level} is the last level")
        self.lives = self.policy.lives_per_level
        self._load_level(self.level)
        logger.info(
            "Advancing to level %d at %dms per tick (score %d)",
            self.level,
            self.tick_interval_ms,
            self.score,
        )
        return self._enter(RUNNING, "advance")

    def _require_phase(self, phase: str, operation: str) -> None:
        if self.phase != phase:
            raise InvalidTransitionError(
                f"{operation}() is only allowed in phase '{phase}', current phase is '{self.phase}'"
            )

    def _enter(self, phase: str, reason: str) -> GameState:
        self.phase = phase
        self.events.append({"tick": self.tick_count, "level": self.level, "event": reason, "phase": phase})
        self.record_history()
        return self.get_current_state()

    def _load_level(self, level_id: int) -> None:
        level = self.catalog.get_level(level_id)
        self.obstacles = level.obstacles(self.width, self.height)
        self.tick_interval_ms = level.tick_interval_ms
        self._spawn()
        self._check_reachability()

    def _spawn(self) -> None:
        """Put the snake back at the start and drop a new food item."""
        self.snake = Snake(START_SNAKE)
        self.direction = START_DIRECTION
        self.pending_direction = None
        self.tick_count = 0
        self.food = spawn_food(self.obstacles, self.snake.positions, self.width, self.height, self.rng)

    def _check_reachability(self) -> None:
        free_cells = self.width * self.height - len(self.obstacles)
        reachable = reachable_cells(self.snake.head, self.obstacles, self.width, self.height)
        if len(reachable) < free_cells:
            logger.warning(
                "Level %d on %dx%d leaves %d free cells unreachable from the spawn point",
                self.level,
                self.width,
                self.height,
                free_cells - len(reachable),
            )

    # -------------------------------
    # Input
    # -------------------------------

    def submit_direction(self, direction: str) -> bool:
        """
        Buffer a direction change for the next tick.

        A request for the exact opposite of the committed direction is
        rejected. Later accepted requests replace earlier ones.

        Returns:
            True if the request was buffered. Requests made outside the
            running phase are dropped and return False.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}; expected one of {sorted(VALID_MOVES)}")

        if self.phase != RUNNING:
            logger.debug("Dropped direction %s in phase %s", direction, self.phase)
            return False

        if direction == OPPOSITES[self.direction]:
            logger.debug("Rejected reversal %s while moving %s", direction, self.direction)
            return False

        self.pending_direction = direction
        return True

    # -------------------------------
    # Simulation
    # -------------------------------

    def tick(self) -> Optional[str]:
        """
        Advance the simulation by one cell.

        Returns the tick outcome (moved, ate, level_complete, victory,
        life_lost, game_over), or None when the game is not running.
        """
        if self._in_tick:
            raise InvalidTransitionError("tick() called while another tick is in progress")
        if self.phase != RUNNING:
            logger.debug("Ignoring tick in phase %s", self.phase)
            return None

        self._in_tick = True
        try:
            event = self._step()
        finally:
            self._in_tick = False

        if event not in (EVENT_MOVED, EVENT_ATE):
            self.events.append({"tick": self.tick_count, "level": self.level, "event": event, "phase": self.phase})
        self.record_history()
        return event

    def _step(self) -> str:
        if self.pending_direction is not None:
            self.direction = self.pending_direction
            self.pending_direction = None
        self.tick_count += 1

        dx, dy = DIRECTION_DELTAS[self.direction]
        head_x, head_y = self.snake.head
        new_head = ((head_x + dx) % self.width, (head_y + dy) % self.height)

        eating = self.food is not None and new_head == self.food.position

        if self.snake.collides_with_self(new_head, growing=eating):
            return self._handle_collision("self")
        if new_head in self.obstacles:
            return self._handle_collision("obstacle")

        self.snake.advance(new_head, grow=eating)
        if not eating:
            return EVENT_MOVED
        return self._eat()

    def _eat(self) -> str:
        self.snake_color = self.food.color
        level_complete = self.tracker.consume_food()
        if self.tracker.level_cleared:
            self._record_high_score()

        if level_complete:
            self.food = None
            self.phase = LEVEL_COMPLETE
            logger.info("Level %d complete with score %d", self.level, self.score)
            return EVENT_LEVEL_COMPLETE

        if self.tracker.level_cleared:
            self.food = None
            self.phase = VICTORY
            logger.info("Final level cleared with score %d", self.score)
            return EVENT_VICTORY

        self.food = spawn_food(self.obstacles, self.snake.positions, self.width, self.height, self.rng)
        return EVENT_ATE

    def _handle_collision(self, reason: str) -> str:
        self.snake.kill(reason, self.tick_count)
        self.last_death = (reason, self.tick_count)
        if not self.policy.practice_mode:
            self.lives -= 1

        if self.lives <= 0:
            self.lives = 0
            self.tracker.end_attempt(keep_attempt=self.policy.keep_attempt_on_game_over)
            self._record_high_score()
            self.phase = GAME_OVER
            logger.info("Game over on level %d (%s collision), final score %d", self.level, reason, self.score)
            return EVENT_GAME_OVER

        self.tracker.lose_life(revert=self.policy.score_revert_on_life_loss)
        self._record_high_score()
        self._spawn()
        self.phase = LIFE_LOST
        logger.info("Life lost on level %d (%s collision), %d lives left", self.level, reason, self.lives)
        return EVENT_LIFE_LOST

    def _record_high_score(self) -> None:
        if not self.policy.practice_mode:
            self.tracker.record_high_score()

    # -------------------------------
    # History / replay
    # -------------------------------

    def record_history(self):
        if self.keep_history:
            self.history.append(self.get_current_state())

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the recorded GameState objects to a JSON-serializable list of dicts.
        """
        return [state.to_dict() for state in self.history]

    def save_history_to_json(self, filename: Optional[str] = None) -> str:
        if filename is None:
            filename = f"snake_game_{self.game_id}.json"

        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(tz=timezone.utc).isoformat(),
            "width": self.width,
            "height": self.height,
            "final_phase": self.phase,
            "final_level": self.level,
            "final_score": self.score,
            "high_score": self.high_score,
            "policy": {
                "lives_per_level": self.policy.lives_per_level,
                "score_revert_on_life_loss": self.policy.score_revert_on_life_loss,
                "practice_mode": self.policy.practice_mode,
                "keep_attempt_on_game_over": self.policy.keep_attempt_on_game_over,
            },
            "events": self.events,
        }

        data = {
            "metadata": metadata,
            "frames": self.serialize_history(),
        }

        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filename, "w") as f:
            json.dump(data, f, indent=2)
        logger.info("Saved %d frames to %s", len(data["frames"]), filename)
        return filename

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")


# -------------------------------
# Tick driver
# -------------------------------

def run_session(
    game: SnakeGame,
    player: Player,
    max_ticks: int = 1000,
    realtime: bool = False,
    auto_continue: bool = True,
    on_tick: Optional[Callable[[GameState, Optional[str]], None]] = None,
) -> Dict[str, Any]:
    """
    Drive a game with a player until it ends or `max_ticks` ticks have run.

    The driver starts the game if it is still in the menu, feeds the player's
    move in before every tick and, with `auto_continue`, retries after a lost
    life and advances after a cleared level.

    Returns:
        A dictionary summarizing the session.
    """
    if game.phase == IDLE:
        game.start()

    ticks = 0
    while ticks < max_ticks:
        if game.phase == RUNNING:
            state = game.get_current_state()
            game.submit_direction(player.get_move(state))
            event = game.tick()
            ticks += 1
            if on_tick is not None:
                on_tick(game.get_current_state(), event)
            if realtime:
                time.sleep(game.tick_interval_ms / 1000.0)
        elif game.phase == LIFE_LOST and auto_continue:
            game.retry_level()
        elif game.phase == LEVEL_COMPLETE and auto_continue:
            game.advance_level()
        else:
            break

    return {
        "game_id": game.game_id,
        "phase": game.phase,
        "level": game.level,
        "score": game.score,
        "high_score": game.high_score,
        "is_new_high_score": game.is_new_high_score,
        "lives": game.lives,
        "ticks": ticks,
    }


# -------------------------------
# Main Entry Point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the level-based snake engine with an autopilot player."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Grid width in cells (default: SNAKE_GRID_WIDTH or 20)")
    parser.add_argument("--height", type=int, default=None,
                        help="Grid height in cells (default: SNAKE_GRID_HEIGHT or 16)")
    parser.add_argument("--level", type=int, default=1,
                        help="Level to start from")
    parser.add_argument("--levels", type=int, default=None,
                        help="Number of levels in the catalog (default: SNAKE_LEVEL_COUNT or all)")
    parser.add_argument("--lives", type=int, default=None,
                        help="Lives per level (default: SNAKE_LIVES or 3)")
    parser.add_argument("--player", type=str, default="greedy", choices=AVAILABLE_PLAYERS,
                        help="Autopilot that steers the snake")
    parser.add_argument("--max-ticks", type=int, default=2000,
                        help="Stop after this many ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the player")
    parser.add_argument("--high-score", type=int, default=0,
                        help="High score to beat")
    parser.add_argument("--practice", action="store_true",
                        help="Practice mode: collisions never cost lives")
    parser.add_argument("--keep-progress", action="store_true",
                        help="Keep fruit and level progress after losing a life")
    parser.add_argument("--realtime", action="store_true",
                        help="Sleep for the level's tick interval between ticks")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--replay", type=str, default=None,
                        help="Write the session's frames to this JSON file")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: SNAKE_LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    settings = GameSettings.from_env()

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(message)s",
    )

    seed = args.seed if args.seed is not None else settings.seed
    rng = random.Random(seed)
    level_count = args.levels if args.levels is not None else settings.level_count

    try:
        catalog = default_catalog(level_count)
        policy = GamePolicy(
            lives_per_level=args.lives if args.lives is not None else settings.lives,
            score_revert_on_life_loss=not args.keep_progress,
            practice_mode=args.practice,
            keep_attempt_on_game_over=args.keep_progress,
        )
        game = SnakeGame(
            width=args.width or settings.grid_width,
            height=args.height or settings.grid_height,
            catalog=catalog,
            policy=policy,
            rng=rng,
            high_score=args.high_score,
            keep_history=args.replay is not None,
        )
        game.start(args.level)
    except (LevelNotFoundError, ValueError) as e:
        raise SystemExit(str(e))

    player = get_player_class(args.player)(rng=random.Random(seed))

    def show(state: GameState, event: Optional[str]):
        print(f"\n[{event}] level={state.level} score={state.score} "
              f"remaining={state.remaining_food} lives={state.lives}")
        print(state.print_board())

    result = run_session(
        game,
        player,
        max_ticks=args.max_ticks,
        realtime=args.realtime,
        on_tick=show if args.show_board else None,
    )

    if args.replay:
        game.save_history_to_json(args.replay)

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
