from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Any, Tuple
from engine.api.config import EngineConfig
from engine.sched.timers import TimerQueue


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    timers: TimerQueue
    # engine internals exposed read-only for games if needed:
    resources: dict[str, Any]
    screen_size: Tuple[int, int]
    quit_requested: bool = False

    def request_quit(self) -> None:
        """Ask the frame loop to stop after the current frame."""
        self.quit_requested = True
