from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float


@dataclass
class FrameData:
    timestamp: float
    # pointer presses since the previous frame, in logical (unmirrored) screen coords
    pointer_downs: List[Point] = field(default_factory=list)
