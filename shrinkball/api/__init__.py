from .game_base import Game
from .frame_data import FrameData, Point
from .config import ConfigError, DifficultyConfig, EngineConfig

__all__ = ["Game", "FrameData", "Point", "EngineConfig", "DifficultyConfig", "ConfigError"]
