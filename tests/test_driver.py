from pixel_python.config import Direction
from pixel_python.driver import Driver
from pixel_python.engine import GameEngine


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def make_driver(now=0):
    clock = FakeClock(now)
    return Driver(GameEngine(), clock=clock), clock


def test_poll_does_nothing_until_started():
    driver, clock = make_driver()
    clock.now = 1000
    assert not driver.poll()
    assert driver.time_until_next_tick() is None
    assert driver.snapshot().snake == ((10, 10),)


def test_ticks_once_per_period():
    driver, clock = make_driver()
    driver.dispatch("START")
    assert not driver.poll(100)
    assert driver.time_until_next_tick(100) == 50
    assert driver.poll(150)
    assert driver.snapshot().snake == ((11, 10),)
    assert not driver.poll(200)
    assert driver.poll(300)
    assert driver.snapshot().snake == ((12, 10),)


def test_period_follows_engine_speed():
    driver, clock = make_driver()
    driver.dispatch("START")
    assert driver.poll(150)
    driver.engine.state.speed_ms = 80
    assert not driver.poll(229)
    assert driver.poll(230)


def test_start_rearms_timer():
    driver, clock = make_driver()
    clock.now = 5000
    driver.dispatch("START")
    assert not driver.poll(5100)
    assert driver.poll(5150)


def test_toggle_pauses_and_resumes():
    driver, clock = make_driver()
    driver.dispatch("TOGGLE")
    assert driver.engine.running
    driver.dispatch("TOGGLE")
    assert not driver.engine.running
    assert not driver.poll(10_000)


def test_direction_and_reset_commands():
    driver, clock = make_driver()
    driver.dispatch("START")
    driver.dispatch("up")
    assert driver.snapshot().direction is Direction.UP
    driver.dispatch("RESET")
    snap = driver.snapshot()
    assert snap.direction is Direction.RIGHT
    assert not snap.running


def test_unknown_command_is_ignored():
    driver, clock = make_driver()
    before = driver.snapshot()
    driver.dispatch("JUMP")
    assert driver.snapshot() == before
