from __future__ import annotations

import math
from typing import Sequence

from pygame.math import Vector2

from .rng import RandomSource


def distance_squared(a: Sequence[float], b: Sequence[float]) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def circle_contains(center: Sequence[float], radius: float, point: Sequence[float]) -> bool:
    """True when `point` lies inside or on the circle."""
    return distance_squared(center, point) <= radius * radius


def clamp(value: float, lo: float, hi: float) -> float:
    """
    Clamp `value` into [lo, hi]. An empty range (lo > hi) collapses to its midpoint,
    which for a ball wider than its viewport is the viewport center.
    """
    if lo > hi:
        return (lo + hi) / 2
    return max(lo, min(hi, value))


def random_unit_vector(rng: RandomSource) -> Vector2:
    angle = rng.next() * 2 * math.pi
    return Vector2(math.cos(angle), math.sin(angle))
