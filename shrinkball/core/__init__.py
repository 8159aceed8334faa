"""Pure game rules: difficulty, motion, hit resolution and the session state machine."""

from .difficulty import ConfigError, DifficultyConfig, DifficultyModel
from .geometry import circle_contains, clamp, distance_squared, random_unit_vector
from .hits import Hit, HitResolver, Miss
from .motion import BallState, MotionEngine, Viewport
from .rng import RandomSource, SeededRandom
from .session import GameSession, MenuState, Outcome, Phase, PointerResult, SessionState

__all__ = [
    "BallState",
    "ConfigError",
    "DifficultyConfig",
    "DifficultyModel",
    "GameSession",
    "Hit",
    "HitResolver",
    "MenuState",
    "Miss",
    "MotionEngine",
    "Outcome",
    "Phase",
    "PointerResult",
    "RandomSource",
    "SeededRandom",
    "SessionState",
    "Viewport",
    "circle_contains",
    "clamp",
    "distance_squared",
    "random_unit_vector",
]
