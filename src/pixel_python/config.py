from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

Cell = Tuple[int, int]

# ----- Grid -----
GRID_SIZE = 20
CELL_SIZE = 24
PANEL_WIDTH = 200

# ----- Colors -----
BG         = (20, 20, 24)
EMPTY_CELL = (236, 238, 242)
GRID_LINE  = (200, 202, 210)
HEAD       = (16, 185, 129)
BODY       = (52, 211, 153)
RED        = (239, 68, 68)
TEXT       = (220, 220, 230)
ACCENT     = (250, 204, 21)


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_opposite(self, other: "Direction") -> bool:
        return self.dx == -other.dx and self.dy == -other.dy


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    seed: Optional[int] = None
    initial_speed_ms: int = 150
    min_speed_ms: int = 80
    speed_step_ms: int = 10
    food_points: int = 10
    level_every: int = 50      # score milestone that bumps the level
    initial_snake: Tuple[Cell, ...] = ((10, 10),)
    initial_food: Cell = (15, 15)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config, taking the food RNG seed from PIXEL_PYTHON_SEED if set."""
        cfg = cls()
        raw = os.getenv("PIXEL_PYTHON_SEED")
        if raw:
            cfg = replace(cfg, seed=int(raw))
        return cfg


CFG = Config()
