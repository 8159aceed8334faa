import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest

from shrinkball.core import GameSession, Viewport


class SequenceRandom:
    """Replays the given values in a loop."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next(self) -> float:
        v = self.values[self.calls % len(self.values)]
        self.calls += 1
        return v


@pytest.fixture
def seq_rng():
    return SequenceRandom


@pytest.fixture
def viewport():
    return Viewport(800, 600)


@pytest.fixture
def session(viewport):
    # direction angle 0 -> (1, 0); colors come out as (0, 0, 0)
    return GameSession(viewport, rng=SequenceRandom([0.0]))
