from __future__ import annotations

from typing import Tuple

import pygame

from shrinkball.app.context import Context

from .frame_data import FrameData


class Game:
    """
    Base interface for games under games/<id>/. The loop calls the hooks in this
    order every frame: on_event (per pygame event), on_update, on_draw.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Called once with the parsed manifest.yaml before the first frame."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """Advance the game; frame carries the pointer presses since the last call."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Raw pygame events (keyboard, window)."""
        ...

    def on_resize(self, screen_size: Tuple[int, int]) -> None:
        """The window was resized; ctx.screen_size already holds the new size."""
        ...

    def on_unload(self) -> None:
        ...
