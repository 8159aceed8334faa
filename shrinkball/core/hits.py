from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from pygame.math import Vector2

from .difficulty import DifficultyModel
from .geometry import circle_contains, random_unit_vector
from .motion import BallState
from .rng import RandomSource


@dataclass(frozen=True)
class Hit:
    velocity: Vector2


@dataclass(frozen=True)
class Miss:
    pass


class HitResolver:
    def __init__(self, difficulty: DifficultyModel, rng: RandomSource):
        self.difficulty = difficulty
        self.rng = rng

    def resolve(self, point: Sequence[float], ball: BallState, score: int) -> Union[Hit, Miss]:
        """
        Decide whether a pointer press at `point` hits the ball.

        The first hit of a session launches the ball at the score-0 speed cap; later
        hits boost the current speed. The new velocity is not clamped here, the next
        motion tick does that.
        """
        if not circle_contains(ball.position, ball.radius, point):
            return Miss()

        direction = random_unit_vector(self.rng)
        if score == 0:
            speed = self.difficulty.speed_cap(0)
        else:
            speed = ball.speed * self.difficulty.config.speed_boost
        return Hit(velocity=direction * speed)
