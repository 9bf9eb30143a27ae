from __future__ import annotations
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass(order=True)
class TimerHandle:
    due_ms: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    interval_ms: Optional[float] = field(default=None, compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class TimerQueue:
    """
    Cooperative timer queue driven by the frame loop.

    The engine calls advance(dt_ms) once per frame; tests call it directly to
    step a virtual clock. Nothing here sleeps or spawns threads: every callback
    runs inside advance(), in due-time order.
    """

    def __init__(self, start_ms: float = 0.0):
        self.now_ms: float = float(start_ms)
        self._heap: List[TimerHandle] = []
        self._next_frame: List[TimerHandle] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self.now_ms + max(0.0, float(delay_ms)),
                             next(self._seq), callback)
        heapq.heappush(self._heap, handle)
        return handle

    def call_every(self, interval_ms: float, callback: Callable[[], None]) -> TimerHandle:
        interval = max(1.0, float(interval_ms))
        handle = TimerHandle(self.now_ms + interval, next(self._seq),
                             callback, interval_ms=interval)
        heapq.heappush(self._heap, handle)
        return handle

    def call_next_frame(self, callback: Callable[[], None]) -> TimerHandle:
        """Run callback at the start of the next advance(), before time moves."""
        handle = TimerHandle(self.now_ms, next(self._seq), callback)
        self._next_frame.append(handle)
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is not None:
            handle.cancel()

    def cancel_all(self) -> None:
        for h in self._heap:
            h.cancel()
        for h in self._next_frame:
            h.cancel()
        self._heap.clear()
        self._next_frame.clear()

    @property
    def pending(self) -> int:
        live = [h for h in self._heap if not h.cancelled]
        live += [h for h in self._next_frame if not h.cancelled]
        return len(live)

    def advance(self, dt_ms: float) -> None:
        # next-frame work scheduled during this advance waits for the next one
        frame_jobs, self._next_frame = self._next_frame, []
        for h in frame_jobs:
            if not h.cancelled:
                h.callback()

        target = self.now_ms + max(0.0, float(dt_ms))
        while self._heap and self._heap[0].due_ms <= target:
            h = heapq.heappop(self._heap)
            if h.cancelled:
                continue
            self.now_ms = max(self.now_ms, h.due_ms)
            if h.interval_ms is not None:
                # re-arm before the callback so it can cancel itself
                h.due_ms += h.interval_ms
                h.seq = next(self._seq)
                heapq.heappush(self._heap, h)
            h.callback()
        self.now_ms = target
