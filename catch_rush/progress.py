from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Optional

from engine.storage.kv_store import KeyValueStore
from engine.storage.writer import BackgroundWriter

from .difficulty import clamp_round

logger = logging.getLogger(__name__)

ROUND_KEY = "round"
TOTAL_HITS_KEY = "totalHits"


@dataclass(frozen=True)
class Progress:
    round: int = 1
    total_hits: int = 0


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(raw: Optional[str], default: int) -> int:
    # keep the leading integer of a damaged value ("4.0", "12abc")
    if raw is None:
        return default
    m = _LEADING_INT.match(str(raw))
    if m is None:
        return default
    return int(m.group(1))


class ProgressStore:
    """
    Durable {round, totalHits} record on top of a key/value backend.

    load() never raises and save() never blocks: writes go through a
    BackgroundWriter and failures are logged and dropped. The next write that
    succeeds brings the stored record back in line.
    """

    def __init__(self, backend: KeyValueStore, writer: Optional[BackgroundWriter] = None):
        self.backend = backend
        self.writer = writer or BackgroundWriter(name="progress-writer")

    def load(self) -> Progress:
        # reads only happen on session start, so waiting for queued writes is fine
        self.writer.flush()
        try:
            r_raw = self.backend.get(ROUND_KEY)
            h_raw = self.backend.get(TOTAL_HITS_KEY)
        except Exception as e:
            logger.warning("could not read progress, using defaults: %s", e)
            return Progress()

        r = clamp_round(_parse_int(r_raw, 1))
        h = max(0, _parse_int(h_raw, 0))
        logger.debug("loaded progress round=%d total_hits=%d", r, h)
        return Progress(round=r, total_hits=h)

    def save(self, round_num: int, total_hits: Optional[int] = None) -> None:
        """Queue a write of round (always) and total_hits (only when given)."""
        r = clamp_round(round_num)
        h = None if total_hits is None else max(0, int(total_hits))

        def _write():
            self.backend.set(ROUND_KEY, str(r))
            if h is not None:
                self.backend.set(TOTAL_HITS_KEY, str(h))
            logger.debug("saved progress round=%d total_hits=%s", r, h)

        self.writer.submit(_write)

    def flush(self, timeout: Optional[float] = 2.0) -> bool:
        return self.writer.flush(timeout)

    def close(self) -> None:
        self.writer.close()
