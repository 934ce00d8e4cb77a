# engine.py
from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np  # type: ignore

from .config import CFG, GRID_SIZE, Cell, Config, Direction

logger = logging.getLogger(__name__)

# Values used by Snapshot.to_grid()
EMPTY, SNAKE, FOOD = 0, 1, 2


# ---------- Helpers ----------
def in_bounds(x: int, y: int) -> bool:
    """Check if a cell is inside the grid."""
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def free_cells(snake: Sequence[Cell]) -> List[Cell]:
    occupied = set(snake)
    return [
        (x, y)
        for y in range(GRID_SIZE)
        for x in range(GRID_SIZE)
        if (x, y) not in occupied
    ]


def spawn_food(snake: Sequence[Cell], rng: random.Random) -> Optional[Cell]:
    """Pick a uniformly random cell not covered by the snake (None if the board is full)."""
    spots = free_cells(snake)
    if not spots:
        return None
    return rng.choice(spots)


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    food: Cell
    direction: Direction
    running: bool
    over: bool
    score: int
    high_score: int
    speed_ms: int                  # current tick interval
    level: int


def new_game_state(cfg: Config = CFG, high_score: int = 0) -> GameState:
    return GameState(
        snake=list(cfg.initial_snake),
        food=cfg.initial_food,
        direction=Direction.RIGHT,
        running=False,
        over=False,
        score=0,
        high_score=high_score,
        speed_ms=cfg.initial_speed_ms,
        level=1,
    )


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of a GameState handed to presenters."""

    snake: Tuple[Cell, ...]
    food: Cell
    direction: Direction
    running: bool
    over: bool
    score: int
    high_score: int
    speed_ms: int
    level: int

    @property
    def length(self) -> int:
        return len(self.snake)

    def to_grid(self) -> np.ndarray:
        """
        Rasterise the board into a GRID_SIZE x GRID_SIZE int8 array indexed [y, x]:
        EMPTY (0), SNAKE (1) or FOOD (2).
        """
        grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
        fx, fy = self.food
        grid[fy, fx] = FOOD
        for x, y in self.snake:
            grid[y, x] = SNAKE
        return grid

    @classmethod
    def of(cls, state: GameState) -> "Snapshot":
        return cls(
            snake=tuple(state.snake),
            food=state.food,
            direction=state.direction,
            running=state.running,
            over=state.over,
            score=state.score,
            high_score=state.high_score,
            speed_ms=state.speed_ms,
            level=state.level,
        )


# ---------- Engine ----------
@dataclass
class GameEngine:
    """
    Authoritative snake game state plus the commands that mutate it.

    The engine knows nothing about timers, keyboards or drawing: a driver calls
    tick() every `speed_ms` milliseconds and forwards player commands, and a
    presenter reads snapshot() to draw. Out-of-sequence commands (steering while
    paused, ticking a finished game, reversing into the neck) are silent no-ops.
    """

    cfg: Config = CFG
    rng: Optional[random.Random] = None
    state: GameState = field(init=False)

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random(self.cfg.seed)
        self._lock = threading.RLock()
        self.state = new_game_state(self.cfg)

    # Read-only views a driver needs for scheduling
    @property
    def speed_ms(self) -> int:
        return self.state.speed_ms

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def over(self) -> bool:
        return self.state.over

    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot.of(self.state)

    # Commands ---------------------------------------------------------------
    def set_direction(self, direction: Direction) -> None:
        """Steer the snake; ignored while not running or when it would reverse."""
        if not isinstance(direction, Direction):
            raise TypeError(f"expected a Direction, got {direction!r}")
        with self._lock:
            if not self.state.running:
                logger.debug("Ignoring %s: game not running", direction.name)
                return
            if direction.is_opposite(self.state.direction):
                logger.debug("Ignoring %s: reverses %s", direction.name, self.state.direction.name)
                return
            self.state.direction = direction

    def start(self) -> None:
        with self._lock:
            if self.state.over:
                self._reset()
            if not self.state.running:
                logger.info("Game started")
            self.state.running = True

    def pause(self) -> None:
        with self._lock:
            if not self.state.running:
                return
            self.state.running = False
            logger.info("Game paused (score=%d)", self.state.score)

    def reset(self) -> None:
        with self._lock:
            self._reset()

    def _reset(self) -> None:
        self.state = new_game_state(self.cfg, high_score=self.state.high_score)
        logger.info("Game reset (high score=%d)", self.state.high_score)

    # Tick -------------------------------------------------------------------
    def tick(self) -> None:
        """Advance the game by one cell. No-op unless the game is running."""
        with self._lock:
            state = self.state
            if not state.running or state.over:
                return

            hx, hy = state.snake[0]
            nx, ny = hx + state.direction.dx, hy + state.direction.dy

            # Wall collision
            if not in_bounds(nx, ny):
                self._game_over("wall")
                return

            new_head = (nx, ny)

            # Self collision (the tail counts: it has not moved yet)
            if new_head in state.snake:
                self._game_over("self")
                return

            state.snake.insert(0, new_head)

            if new_head != state.food:
                state.snake.pop()
                return

            # Eat & grow
            state.score += self.cfg.food_points
            if state.score % self.cfg.level_every == 0:
                state.level += 1
                state.speed_ms = max(state.speed_ms - self.cfg.speed_step_ms, self.cfg.min_speed_ms)
                logger.info("Level %d reached, tick every %d ms", state.level, state.speed_ms)

            food = spawn_food(state.snake, self.rng)
            if food is None:
                self._game_over("board full")
                return
            state.food = food

    def _game_over(self, reason: str) -> None:
        state = self.state
        state.running = False
        state.over = True
        if state.score > state.high_score:
            state.high_score = state.score
        logger.info("Game over (%s): score=%d high=%d", reason, state.score, state.high_score)
