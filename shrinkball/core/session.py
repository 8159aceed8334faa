"""
Session state machine.

A session runs indefinitely: hits raise the score and the difficulty, a miss drops
everything back to a fresh ball in the middle of the viewport. Toggling the menu
pauses the simulation; events that arrive while paused are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from pygame.math import Vector2

from .difficulty import DifficultyConfig, DifficultyModel
from .hits import Hit, HitResolver
from .motion import BallState, MotionEngine, Viewport
from .rng import RandomSource, SeededRandom

logger = logging.getLogger(__name__)

PauseListener = Callable[[bool], None]


class Phase(Enum):
    Running = 1
    Paused = 2


class Outcome(Enum):
    Hit = "hit"
    Miss = "miss"
    Ignored = "ignored"


@dataclass
class SessionState:
    score: int
    menu_open: bool
    ball: BallState

    @property
    def phase(self) -> Phase:
        return Phase.Paused if self.menu_open else Phase.Running


@dataclass(frozen=True)
class PointerResult:
    outcome: Outcome
    score_delta: int
    ball: BallState


@dataclass(frozen=True)
class MenuState:
    menu_open: bool


class GameSession:
    """Owns the session state; all mutation goes through the on_* entry points."""

    def __init__(
        self,
        viewport: Viewport,
        config: Optional[DifficultyConfig] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.rng = rng or SeededRandom()
        self.difficulty = DifficultyModel(config, self.rng)
        self.motion = MotionEngine(viewport)
        self.resolver = HitResolver(self.difficulty, self.rng)
        self.state = SessionState(score=0, menu_open=False, ball=self._fresh_ball())
        self._pause_listeners: List[PauseListener] = []

    # ------------- accessors -------------
    @property
    def score(self) -> int:
        return self.state.score

    @property
    def menu_open(self) -> bool:
        return self.state.menu_open

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def ball(self) -> BallState:
        """A snapshot; mutating it does not affect the session."""
        return self.state.ball.copy()

    @property
    def viewport(self) -> Viewport:
        return self.motion.viewport

    @property
    def speed_cap(self) -> float:
        return self.difficulty.speed_cap(self.state.score)

    def add_pause_listener(self, listener: PauseListener) -> None:
        """`listener(paused)` is called on every menu toggle."""
        self._pause_listeners.append(listener)

    # ------------- helpers -------------
    def _fresh_ball(self) -> BallState:
        return BallState(
            position=self.motion.viewport.center,
            velocity=Vector2(0, 0),
            radius=self.difficulty.initial_radius,
            color=self.difficulty.initial_color,
        )

    def restart(self) -> None:
        """Back to score 0 with a fresh, motionless ball. The menu flag is left alone."""
        if self.state.score:
            logger.info("Session reset at score %d", self.state.score)
        self.state.score = 0
        self.state.ball = self._fresh_ball()

    # ------------- entry points -------------
    def on_pointer_down(self, x: float, y: float) -> PointerResult:
        st = self.state
        if st.menu_open:
            return PointerResult(Outcome.Ignored, 0, st.ball.copy())

        result = self.resolver.resolve((x, y), st.ball, st.score)
        if isinstance(result, Hit):
            st.ball.velocity = Vector2(result.velocity)
            st.ball.radius = self.difficulty.next_radius(st.ball.radius)
            st.ball.color = self.difficulty.next_color()
            st.score += 1
            logger.debug("Hit at (%.1f, %.1f): score=%d speed=%.1f radius=%.2f",
                         x, y, st.score, st.ball.speed, st.ball.radius)
            return PointerResult(Outcome.Hit, 1, st.ball.copy())

        previous = st.score
        logger.debug("Miss at (%.1f, %.1f)", x, y)
        self.restart()
        return PointerResult(Outcome.Miss, -previous, st.ball.copy())

    def on_tick(self, dt_ms: float) -> BallState:
        st = self.state
        if not st.menu_open:
            self.motion.step(st.ball, dt_ms, self.difficulty.speed_cap(st.score))
        return st.ball.copy()

    def on_viewport_resize(self, width: float, height: float) -> None:
        viewport = Viewport(width, height)
        self.motion.set_viewport(viewport)
        self.state.ball.position = viewport.center
        logger.debug("Viewport resized to %sx%s", width, height)

    def on_toggle_menu(self) -> MenuState:
        st = self.state
        st.menu_open = not st.menu_open
        logger.debug("Menu %s", "opened" if st.menu_open else "closed")
        for listener in self._pause_listeners:
            listener(st.menu_open)
        return MenuState(menu_open=st.menu_open)
