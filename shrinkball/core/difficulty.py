"""Score-driven difficulty: speed cap, ball shrink and ball color."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple

from shrinkball import const

from .rng import RandomSource, SeededRandom

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


class ConfigError(ValueError):
    """Raised for configuration values the game cannot run with."""


@dataclass(frozen=True)
class DifficultyConfig:
    """Tunable difficulty curve. Defaults reproduce the classic game."""

    base_speed: float = const.BASE_SPEED
    speed_step: float = const.SPEED_STEP
    shrink_factor: float = const.SHRINK_FACTOR
    speed_boost: float = const.SPEED_BOOST
    initial_radius: float = const.INITIAL_RADIUS
    initial_color: RGB = const.INITIAL_COLOR
    min_radius: float = const.MIN_RADIUS  # 0 disables the floor

    def __post_init__(self) -> None:
        if self.base_speed < 0 or self.speed_step < 0:
            raise ConfigError("base_speed and speed_step must be >= 0")
        if self.shrink_factor <= 0:
            raise ConfigError("shrink_factor must be > 0")
        if self.speed_boost <= 0:
            raise ConfigError("speed_boost must be > 0")
        if self.initial_radius <= 0:
            raise ConfigError("initial_radius must be > 0")
        if self.min_radius < 0:
            raise ConfigError("min_radius must be >= 0")
        if len(self.initial_color) != 3 or not all(0 <= c <= 255 for c in self.initial_color):
            raise ConfigError(f"initial_color must be an RGB triple, got {self.initial_color!r}")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "DifficultyConfig":
        """Build from the manifest's `options.difficulty` mapping."""
        if not options:
            return cls()
        if not isinstance(options, Mapping):
            raise ConfigError("difficulty options must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigError(f"Unknown difficulty option(s): {', '.join(unknown)}")

        values: dict[str, Any] = {}
        try:
            for key, value in options.items():
                if key == "initial_color":
                    values[key] = tuple(int(c) for c in value)
                else:
                    values[key] = float(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid difficulty option: {exc}") from exc
        return cls(**values)


class DifficultyModel:
    def __init__(self, config: Optional[DifficultyConfig] = None, rng: Optional[RandomSource] = None):
        self.config = config or DifficultyConfig()
        self.rng = rng or SeededRandom()

    @property
    def initial_radius(self) -> float:
        return self.config.initial_radius

    @property
    def initial_color(self) -> RGB:
        return self.config.initial_color

    def speed_cap(self, score: int) -> float:
        return self.config.base_speed + score * self.config.speed_step

    def next_radius(self, radius: float) -> float:
        r = radius * self.config.shrink_factor
        if self.config.min_radius > 0:
            r = max(self.config.min_radius, r)
        return r

    def next_color(self) -> RGB:
        r, g, b = (min(255, int(self.rng.next() * 256)) for _ in range(3))
        return r, g, b
