from __future__ import annotations
import pygame
from typing import List, Tuple

from engine.api.config import EngineConfig
from engine.api.frame_data import Point

_BTN_NAME = {1: "left", 2: "middle", 3: "right"}


class PointerInput:
    """
    Edge-triggered tap collector:
    - A tap is recorded on left-button press or finger down, never on hold or release.
    - Touch coordinates arrive normalized (0..1) and are scaled to the screen.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self._taps: List[Point] = []

    def _to_logical(self, x: float, y: float, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            if _BTN_NAME.get(event.button) != "left":
                return
            # pygame also synthesizes mouse events for touches; keep the finger one
            if getattr(event, "touch", False):
                return
            lx, ly = self._to_logical(*event.pos, w, h)
            self._taps.append(Point(lx, ly, "mouse"))

        elif event.type == pygame.FINGERDOWN:
            lx, ly = self._to_logical(event.x * w, event.y * h, w, h)
            self._taps.append(Point(lx, ly, "touch"))

        # taps queued before focus loss are stale
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._taps.clear()

    def emit_taps(self) -> List[Point]:
        """
        Return the taps collected since the previous call and forget them.
        """
        taps, self._taps = self._taps, []
        return taps
