from __future__ import annotations
import logging
from dataclasses import dataclass, fields
from collections.abc import Mapping
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


ROUND_SECONDS = 20                 # length of one round
TARGET_SIZE = 74                   # px, square target footprint
RESPAWN_DELAY_MS = 120             # gap between a missed target hiding and the next spawn
TAP_SLOP = 14                      # px of extra hit area around the target
PLAY_AREA_MARGIN = 18              # px between window edge and play area
TOUCH_PAD = 8                      # px added to the slop for finger taps


@dataclass(frozen=True)
class RushSettings:
    round_seconds: int = ROUND_SECONDS
    target_size: int = TARGET_SIZE
    respawn_delay_ms: int = RESPAWN_DELAY_MS
    tap_slop: int = TAP_SLOP
    play_area_margin: int = PLAY_AREA_MARGIN
    touch_pad: int = TOUCH_PAD

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]]) -> "RushSettings":
        """
        Build settings from the `options:` mapping of manifest.yaml.
        Unknown keys are ignored; bad values fall back to the default.
        """
        if options is not None and not isinstance(options, Mapping):
            logger.warning("manifest options should be a mapping, got %s; using defaults",
                           type(options).__name__)
            options = None
        options = options or {}
        values = {}
        for f in fields(cls):
            if f.name not in options:
                continue
            raw = options[f.name]
            try:
                v = int(raw)
            except (TypeError, ValueError):
                logger.warning("option %s=%r is not a number; using %s",
                               f.name, raw, f.default)
                continue
            # slop, margin and pad may be zero, everything else must be positive
            lowest = 0 if f.name in ("tap_slop", "play_area_margin", "touch_pad") else 1
            if v < lowest:
                logger.warning("option %s=%r out of range; using %s",
                               f.name, raw, f.default)
                continue
            values[f.name] = v
        return cls(**values)

    def slop_for(self, source: str) -> int:
        """Hit-area slop for a tap; fingers are less precise than a mouse."""
        if source == "touch":
            return self.tap_slop + self.touch_pad
        return self.tap_slop
