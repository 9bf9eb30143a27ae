from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from engine.sched.timers import TimerHandle, TimerQueue

from .difficulty import reaction_ms_for_round
from .settings import RESPAWN_DELAY_MS, TARGET_SIZE

logger = logging.getLogger(__name__)


@dataclass
class Target:
    x: float
    y: float
    size: float
    expires_at_ms: float
    visible: bool = True

    def contains(self, px: float, py: float, slop: float = 0.0) -> bool:
        return (self.x - slop <= px <= self.x + self.size + slop
                and self.y - slop <= py <= self.y + self.size + slop)


class SpawnScheduler:
    """
    Owns the single live target: where it is and when it expires.

    A target that is not hit before its reaction window ends is hidden, and a
    fresh one appears RESPAWN_DELAY_MS later, for as long as the scheduler runs.
    Every timer callback checks `running` first; stop() cancels both timers.
    """

    def __init__(
        self,
        timers: TimerQueue,
        target_size: float = TARGET_SIZE,
        respawn_delay_ms: float = RESPAWN_DELAY_MS,
        rng: Optional[random.Random] = None,
    ):
        self.timers = timers
        self.target_size = target_size
        self.respawn_delay_ms = respawn_delay_ms
        self.rng = rng or random.Random()

        self.area: Tuple[float, float] = (0.0, 0.0)
        self.running: bool = False
        self.target: Optional[Target] = None
        self._expiry: Optional[TimerHandle] = None
        self._respawn: Optional[TimerHandle] = None

    # ------------- lifecycle -------------
    def set_area(self, width: float, height: float) -> None:
        self.area = (max(0.0, float(width)), max(0.0, float(height)))

    def start(self) -> None:
        self._cancel_timers()
        self.running = True

    def stop(self) -> None:
        self._cancel_timers()
        self.running = False
        if self.target is not None:
            self.target.visible = False

    def _cancel_timers(self) -> None:
        self.timers.cancel(self._expiry)
        self.timers.cancel(self._respawn)
        self._expiry = None
        self._respawn = None

    # ------------- spawning -------------
    def _random_position(self) -> Tuple[float, float]:
        w, h = self.area
        max_x = max(0.0, w - self.target_size)
        max_y = max(0.0, h - self.target_size)
        return self.rng.uniform(0.0, max_x), self.rng.uniform(0.0, max_y)

    def spawn(self, round_num: int) -> Optional[Target]:
        if not self.running:
            return None
        self._cancel_timers()

        x, y = self._random_position()
        lifetime = reaction_ms_for_round(round_num)
        self.target = Target(x=x, y=y, size=self.target_size,
                             expires_at_ms=self.timers.now_ms + lifetime)
        self._expiry = self.timers.call_later(
            lifetime, lambda: self._on_expire(round_num))
        logger.debug("spawned target at (%.0f, %.0f) for %d ms", x, y, lifetime)
        return self.target

    def _on_expire(self, round_num: int) -> None:
        self._expiry = None
        if not self.running:
            return
        if self.target is not None:
            self.target.visible = False
        logger.debug("target expired; respawning in %d ms", self.respawn_delay_ms)
        self._respawn = self.timers.call_later(
            self.respawn_delay_ms, lambda: self._on_respawn(round_num))

    def _on_respawn(self, round_num: int) -> None:
        self._respawn = None
        if not self.running:
            return
        self.spawn(round_num)

    @property
    def target_visible(self) -> bool:
        return self.running and self.target is not None and self.target.visible
