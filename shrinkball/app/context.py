from __future__ import annotations
from dataclasses import dataclass, field
import pygame
from typing import Any, Optional, Tuple
from shrinkball.api.config import EngineConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: Optional[pygame.time.Clock]
    cfg: EngineConfig
    screen_size: Tuple[int, int]
    # engine internals exposed read-only for games if needed:
    resources: dict[str, Any] = field(default_factory=dict)
