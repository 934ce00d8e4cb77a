# driver.py
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .config import Direction
from .engine import GameEngine, Snapshot

logger = logging.getLogger(__name__)


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class Driver:
    """
    Feeds ticks and player commands into a GameEngine.

    The tick period is re-read from the engine on every poll, so a level-up
    shortens the very next interval. Call poll() as often as you like (every
    frame, say); it only ticks once `speed_ms` has elapsed since the last tick.
    """

    def __init__(self, engine: GameEngine, clock: Optional[Callable[[], int]] = None):
        self.engine = engine
        self.clock = clock or _monotonic_ms
        self.last_tick = self.clock()

    def dispatch(self, command: str) -> None:
        """Apply a named command: UP/DOWN/LEFT/RIGHT, START, PAUSE, TOGGLE or RESET."""
        name = command.upper()
        if name in Direction.__members__:
            self.engine.set_direction(Direction[name])
        elif name == "START":
            self._start()
        elif name == "PAUSE":
            self.engine.pause()
        elif name == "TOGGLE":
            if self.engine.running:
                self.engine.pause()
            else:
                self._start()
        elif name == "RESET":
            self.engine.reset()
        else:
            logger.debug("Unknown command %r ignored", command)

    def _start(self) -> None:
        if not self.engine.running:
            # first move comes one full period after (re)starting
            self.last_tick = self.clock()
        self.engine.start()

    def time_until_next_tick(self, now_ms: Optional[int] = None) -> Optional[int]:
        if not self.engine.running:
            return None
        now = self.clock() if now_ms is None else now_ms
        return max(0, self.last_tick + self.engine.speed_ms - now)

    def poll(self, now_ms: Optional[int] = None) -> bool:
        """Tick the engine if a period has elapsed. Returns True if it ticked."""
        now = self.clock() if now_ms is None else now_ms
        if not self.engine.running:
            return False
        if now - self.last_tick < self.engine.speed_ms:
            return False
        self.engine.tick()
        self.last_tick = now
        return True

    def snapshot(self) -> Snapshot:
        return self.engine.snapshot()
