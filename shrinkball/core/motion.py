from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pygame.math import Vector2

from .geometry import clamp


@dataclass
class Viewport:
    width: float
    height: float

    @property
    def center(self) -> Vector2:
        return Vector2(self.width / 2, self.height / 2)


@dataclass
class BallState:
    position: Vector2
    velocity: Vector2
    radius: float
    color: Tuple[int, int, int]

    @property
    def speed(self) -> float:
        return self.velocity.length()

    def copy(self) -> "BallState":
        return BallState(
            position=Vector2(self.position),
            velocity=Vector2(self.velocity),
            radius=self.radius,
            color=self.color,
        )


class MotionEngine:
    """
    Moves the ball inside the viewport. Velocity is in px/s, ticks in ms.
    Walls are perfectly elastic: the normal component flips, speed is kept.
    """

    def __init__(self, viewport: Viewport):
        self.viewport = viewport

    def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport

    def integrate(self, ball: BallState, dt_ms: float) -> None:
        if dt_ms <= 0:
            return
        ball.position += ball.velocity * (dt_ms / 1000.0)

    def reflect(self, ball: BallState) -> None:
        r = ball.radius
        w, h = self.viewport.width, self.viewport.height

        x, vx = self._reflect_axis(ball.position.x, ball.velocity.x, r, w - r)
        y, vy = self._reflect_axis(ball.position.y, ball.velocity.y, r, h - r)
        ball.position.update(x, y)
        ball.velocity.update(vx, vy)

    @staticmethod
    def _reflect_axis(pos: float, vel: float, lo: float, hi: float) -> tuple[float, float]:
        if lo > hi:
            # viewport narrower than the ball: pin to center
            return clamp(pos, lo, hi), vel
        if pos < lo:
            return lo, abs(vel)
        if pos > hi:
            return hi, -abs(vel)
        return pos, vel

    @staticmethod
    def enforce_speed_cap(ball: BallState, cap: float) -> None:
        speed = ball.speed
        if speed == 0 or speed <= cap:
            return
        ball.velocity *= cap / speed

    def step(self, ball: BallState, dt_ms: float, cap: float) -> None:
        """One simulation tick: integrate, bounce off walls, then apply the speed cap."""
        self.integrate(ball, dt_ms)
        self.reflect(ball)
        self.enforce_speed_cap(ball, cap)
