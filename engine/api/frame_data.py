from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float
    source: str = "mouse"   # "mouse" or "touch"


@dataclass
class FrameData:
    timestamp: float
    # taps that landed this frame, already in logical screen coords
    taps: List[Point] = field(default_factory=list)
