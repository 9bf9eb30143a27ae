from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from engine.sched.timers import TimerHandle, TimerQueue

from .difficulty import (
    TOTAL_ROUNDS,
    clamp_round,
    pass_taps_for_round,
    reaction_ms_for_round,
)
from .progress import ProgressStore
from .round_clock import RoundClock
from .settings import RushSettings
from .spawner import SpawnScheduler

logger = logging.getLogger(__name__)


class Phase(Enum):
    Idle = "idle"
    Round = "round"
    Result = "result"


class RushEvent(Enum):
    RoundEnded = "round_ended"
    Finished = "finished"        # last round passed and confirmed; leave the game
    ExitToMenu = "exit_to_menu"


@dataclass(frozen=True)
class TargetView:
    x: float
    y: float
    size: float
    visible: bool


@dataclass(frozen=True)
class RushSnapshot:
    phase: Phase
    round: int
    total_rounds: int
    time_left: int
    round_seconds: int
    score: int
    target: Optional[TargetView]
    pass_threshold: int
    reaction_window_ms: int
    total_hits: int

    @property
    def passed(self) -> bool:
        # only meaningful in the result phase
        return self.score >= self.pass_threshold


class RoundMachine:
    """
    idle -> round -> result state machine for one player.

    Presentation code calls the intent methods (start, tap, retry, next, menu,
    back) and reads snapshot() every frame. Only this class mutates score,
    round and total hits; progress is written through on every hit and every
    round change.
    """

    def __init__(
        self,
        store: ProgressStore,
        timers: TimerQueue,
        settings: Optional[RushSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.timers = timers
        self.settings = settings or RushSettings()

        self.spawner = SpawnScheduler(
            timers,
            target_size=self.settings.target_size,
            respawn_delay_ms=self.settings.respawn_delay_ms,
            rng=rng,
        )
        self.clock = RoundClock(timers, on_expire=self._on_clock_expired,
                                round_seconds=self.settings.round_seconds)

        self.phase: Phase = Phase.Idle
        self.round: int = 1
        self.total_hits: int = 0
        self.score: int = 0
        self._events: List[RushEvent] = []
        self._first_spawn: Optional[TimerHandle] = None

    # ------------- helpers -------------
    def _stop_all(self) -> None:
        self.timers.cancel(self._first_spawn)
        self._first_spawn = None
        self.clock.stop()
        self.spawner.stop()

    def _reset_session(self) -> None:
        self.score = 0
        self.clock.reset()
        self.spawner.target = None

    def _emit(self, event: RushEvent) -> None:
        self._events.append(event)

    def pop_events(self) -> List[RushEvent]:
        events, self._events = self._events, []
        return events

    def set_play_area(self, width: float, height: float) -> None:
        self.spawner.set_area(width, height)

    # ------------- view lifecycle -------------
    def resume(self) -> None:
        """Entering the view: reload progress and wait in idle. Never resumes a round."""
        self._stop_all()
        progress = self.store.load()
        self.round = progress.round
        self.total_hits = progress.total_hits
        self.phase = Phase.Idle
        self._reset_session()
        self._events.clear()
        logger.info("resumed at round %d (total hits %d)",
                    self.round, self.total_hits)

    def suspend(self) -> None:
        """Leaving the view: nothing may keep running in the background."""
        self._stop_all()

    # ------------- intents -------------
    def start(self) -> None:
        if self.phase != Phase.Idle:
            return
        self._stop_all()
        self.round = clamp_round(self.round)
        self.score = 0
        self.phase = Phase.Round

        self.clock.start()
        self.spawner.start()
        round_num = self.round
        # bounds come from the layout, which settles one frame later
        self._first_spawn = self.timers.call_next_frame(
            lambda: self._on_first_spawn(round_num))
        logger.info("round %d started: need %d taps, window %d ms",
                    self.round, pass_taps_for_round(self.round),
                    reaction_ms_for_round(self.round))

    def _on_first_spawn(self, round_num: int) -> None:
        self._first_spawn = None
        self.spawner.spawn(round_num)

    def tap(self) -> bool:
        """Register a tap on the live target. Returns True if it counted."""
        if self.phase != Phase.Round or not self.spawner.target_visible:
            return False
        self.score += 1
        self.total_hits += 1
        self.store.save(self.round, self.total_hits)
        self.spawner.spawn(self.round)
        logger.debug("hit: score=%d total_hits=%d", self.score, self.total_hits)
        return True

    def timeout(self) -> None:
        if self.phase != Phase.Round:
            return
        self._stop_all()
        self.phase = Phase.Result
        logger.info("round %d ended: score %d / %d (%s)", self.round, self.score,
                    pass_taps_for_round(self.round),
                    "passed" if self.passed else "failed")
        self._emit(RushEvent.RoundEnded)

    def _on_clock_expired(self) -> None:
        self.timeout()

    def retry(self) -> None:
        if self.phase != Phase.Result:
            return
        self._stop_all()
        self.phase = Phase.Idle
        self._reset_session()

    def next(self) -> None:
        if self.phase != Phase.Result or not self.passed:
            return
        self._stop_all()
        if self.round >= TOTAL_ROUNDS:
            # the round counter wraps for a replay; total hits is a lifetime count
            self.store.save(1, self.total_hits)
            self.round = 1
            self.phase = Phase.Idle
            self._reset_session()
            logger.info("all %d rounds finished (total hits %d)",
                        TOTAL_ROUNDS, self.total_hits)
            self._emit(RushEvent.Finished)
            return

        self.round = clamp_round(self.round + 1)
        self.store.save(self.round, self.total_hits)
        self.phase = Phase.Idle
        self._reset_session()
        logger.info("advanced to round %d", self.round)

    def menu(self) -> None:
        self._stop_all()
        self.phase = Phase.Idle
        self._reset_session()
        logger.info("leaving to menu at round %d", self.round)
        self._emit(RushEvent.ExitToMenu)

    def back(self) -> None:
        self.menu()

    # ------------- state -------------
    @property
    def passed(self) -> bool:
        return self.score >= pass_taps_for_round(self.round)

    def snapshot(self) -> RushSnapshot:
        t = self.spawner.target
        target = None
        if t is not None:
            target = TargetView(x=t.x, y=t.y, size=t.size,
                                visible=self.spawner.target_visible)
        return RushSnapshot(
            phase=self.phase,
            round=self.round,
            total_rounds=TOTAL_ROUNDS,
            time_left=self.clock.time_left,
            round_seconds=self.settings.round_seconds,
            score=self.score,
            target=target,
            pass_threshold=pass_taps_for_round(self.round),
            reaction_window_ms=reaction_ms_for_round(self.round),
            total_hits=self.total_hits,
        )
