from __future__ import annotations
import logging
from typing import Callable, Optional

from engine.sched.timers import TimerHandle, TimerQueue

from .settings import ROUND_SECONDS

logger = logging.getLogger(__name__)

TICK_MS = 1000


class RoundClock:
    """One-second countdown. Fires on_expire once when it runs out, then stops."""

    def __init__(self, timers: TimerQueue, on_expire: Callable[[], None],
                 round_seconds: int = ROUND_SECONDS):
        self.timers = timers
        self.on_expire = on_expire
        self.round_seconds = round_seconds
        self.time_left: int = round_seconds
        self.running: bool = False
        self._tick: Optional[TimerHandle] = None

    def start(self) -> None:
        self.stop()
        self.time_left = self.round_seconds
        self.running = True
        self._tick = self.timers.call_every(TICK_MS, self._on_tick)

    def stop(self) -> None:
        self.timers.cancel(self._tick)
        self._tick = None
        self.running = False

    def reset(self) -> None:
        self.stop()
        self.time_left = self.round_seconds

    def _on_tick(self) -> None:
        if not self.running:
            return
        if self.time_left <= 1:
            self.time_left = 0
            self.stop()
            logger.debug("round clock ran out")
            self.on_expire()
            return
        self.time_left -= 1
