from __future__ import annotations
import pygame
from typing import List, Tuple

from shrinkball.api.frame_data import Point

LEFT_BUTTON = 1


class PointerInput:
    """
    Collects left-button presses between frames:
    - Each MOUSEBUTTONDOWN queues one logical point; drain() hands them to the frame.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, mirror: bool = False):
        self.mirror = mirror
        self._pending: List[Point] = []

    def _to_logical(self, x: int, y: int, w: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            lx, ly = self._to_logical(*event.pos, screen_size[0])
            self._pending.append(Point(lx, ly))

        # presses queued before the window lost focus are stale
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._pending.clear()

    def drain(self) -> List[Point]:
        out, self._pending = self._pending, []
        return out
