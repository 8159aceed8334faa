from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from shrinkball import const
from shrinkball.core.difficulty import ConfigError, DifficultyConfig


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int] = (const.SCREEN_W, const.SCREEN_H)
    fps: int = const.FPS
    mirror: bool = False
    resizable: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        w, h = self.screen_size
        if w <= 0 or h <= 0:
            raise ConfigError(f"screen_size must be positive, got {w}x{h}")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")


__all__ = ["EngineConfig", "DifficultyConfig", "ConfigError"]
