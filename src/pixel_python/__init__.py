"""PixelPython: a grid snake game engine with a pygame front-end."""

from pixel_python.config import CFG, GRID_SIZE, Config, Direction
from pixel_python.driver import Driver
from pixel_python.engine import GameEngine, GameState, Snapshot

__all__ = ["CFG", "GRID_SIZE", "Config", "Direction", "Driver", "GameEngine", "GameState", "Snapshot"]
