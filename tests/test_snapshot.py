import random

from pixel_python.config import GRID_SIZE, Config
from pixel_python.engine import EMPTY, FOOD, SNAKE, GameEngine


def test_snapshot_is_a_copy():
    engine = GameEngine()
    engine.start()
    snap = engine.snapshot()
    engine.tick()
    assert snap.snake == ((10, 10),)
    assert engine.snapshot().snake == ((11, 10),)


def test_to_grid_marks_snake_and_food():
    engine = GameEngine(rng=random.Random(1))
    engine.state.snake = [(10, 10), (9, 10), (8, 10)]
    grid = engine.snapshot().to_grid()
    assert grid.shape == (GRID_SIZE, GRID_SIZE)
    assert grid[10, 10] == SNAKE
    assert grid[10, 8] == SNAKE
    assert grid[15, 15] == FOOD
    assert (grid == SNAKE).sum() == 3
    assert (grid == FOOD).sum() == 1
    assert (grid == EMPTY).sum() == GRID_SIZE * GRID_SIZE - 4


def test_length():
    engine = GameEngine()
    engine.state.snake = [(1, 1), (1, 2)]
    assert engine.snapshot().length == 2


def test_config_seed_from_env(monkeypatch):
    monkeypatch.setenv("PIXEL_PYTHON_SEED", "42")
    assert Config.from_env().seed == 42
    monkeypatch.delenv("PIXEL_PYTHON_SEED")
    assert Config.from_env().seed is None


def test_custom_config_drives_initial_state():
    cfg = Config(initial_speed_ms=200, initial_snake=((2, 2), (1, 2)), initial_food=(5, 5))
    snap = GameEngine(cfg=cfg).snapshot()
    assert snap.speed_ms == 200
    assert snap.snake == ((2, 2), (1, 2))
    assert snap.food == (5, 5)
