from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

import pygame

from shrinkball.api import DifficultyConfig, FrameData, Game
from shrinkball.app.context import Context
from shrinkball.core import GameSession, Outcome, SeededRandom, Viewport
from shrinkball.render.shapes import draw_disc, draw_text


# -----------------------------
# Tuning constants
# -----------------------------
FLASH_MS = 250
SHADOW_OFFSET = 10
MENU_SLIDE_MS = 1000
MENU_HEIGHT_RATIO = 0.3            # panel height relative to screen height
MENU_ENTRIES = ("High Scores", "Chaos", "Settings")

BUTTON_SIZE = 50
BUTTON_MARGIN = 10                 # px from the bottom-right corner

SCORE_COLOR = (255, 255, 255)
HUD_COLOR = (255, 255, 255)
SHADOW_COLOR = (255, 255, 255)
FLASH_COLOR = (255, 255, 255)
BUTTON_COLOR = (255, 0, 0)
BUTTON_TINT = (255, 0, 0)
MENU_BG_COLOR = (255, 255, 255)
MENU_TEXT_COLOR = (20, 20, 20)


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def tint(color: Tuple[int, int, int], by: Tuple[int, int, int]) -> Tuple[int, int, int]:
    return tuple(c * t // 255 for c, t in zip(color, by))


@dataclass
class Slide:
    """Vertical camera offset tween for the menu."""
    duration_ms: float
    value: float = 0.0
    start: float = 0.0
    target: float = 0.0
    elapsed: float = 0.0

    def retarget(self, target: float) -> None:
        self.start = self.value
        self.target = target
        self.elapsed = 0.0

    def update(self, dt_ms: float) -> None:
        if self.value == self.target:
            return
        self.elapsed += dt_ms
        t = min(1.0, self.elapsed / self.duration_ms) if self.duration_ms > 0 else 1.0
        if t >= 1.0:
            self.value = self.target
        else:
            self.value = self.start + (self.target - self.start) * ease_out_cubic(t)


class ShrinkingBall(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        options = manifest.get("options", {}) or {}

        self.flash_ms = float(options.get("flash_ms", FLASH_MS))
        self.shadow_offset = int(options.get("shadow_offset", SHADOW_OFFSET))
        difficulty = DifficultyConfig.from_options(options.get("difficulty"))

        w, h = ctx.screen_size
        self.session = GameSession(Viewport(w, h), difficulty, SeededRandom(ctx.cfg.seed))
        self.session.add_pause_listener(self._on_pause)

        self._flash_left = 0.0
        self._slide = Slide(duration_ms=float(options.get("menu_slide_ms", MENU_SLIDE_MS)))
        self.button = self._button_rect()

    # ------------- helpers -------------
    def _button_rect(self) -> pygame.Rect:
        w, h = self.ctx.screen_size
        off = BUTTON_SIZE + BUTTON_MARGIN
        return pygame.Rect(w - off, h - off, BUTTON_SIZE, BUTTON_SIZE)

    def _menu_offset(self) -> float:
        return -self.ctx.screen_size[1] * MENU_HEIGHT_RATIO

    def _on_pause(self, paused: bool) -> None:
        self._slide.retarget(self._menu_offset() if paused else 0.0)

    @property
    def paused(self) -> bool:
        return self.session.menu_open

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        self._slide.update(dt_ms)

        for p in frame.pointer_downs:
            # screen -> playfield coords (the playfield slides up while the menu is open)
            x, y = p.x, p.y - self._slide.value
            if self.button.collidepoint(int(x), int(y)):
                self.session.on_toggle_menu()
                continue
            result = self.session.on_pointer_down(x, y)
            if result.outcome is Outcome.Hit:
                self._flash_left = self.flash_ms
            elif result.outcome is Outcome.Miss:
                self._flash_left = 0.0

        if not self.paused:
            self._flash_left = max(0.0, self._flash_left - dt_ms)
        self.session.on_tick(dt_ms)

    def on_draw(self, surface: pygame.Surface) -> None:
        w, h = self.ctx.screen_size
        cam_y = self._slide.value
        ball = self.session.ball
        bx, by = ball.position.x, ball.position.y + cam_y

        draw_text(surface, str(self.session.score), (w // 2, int(h // 2 + cam_y)), SCORE_COLOR,
                  size=max(24, int(h * 0.7)), anchor="center")

        draw_disc(surface, SHADOW_COLOR, (bx + self.shadow_offset, by + self.shadow_offset), ball.radius)
        color = ball.color
        if self._flash_left > 0:
            color = FLASH_COLOR
        elif self.button.collidepoint(int(ball.position.x), int(ball.position.y)):
            color = tint(color, BUTTON_TINT)
        draw_disc(surface, color, (bx, by), ball.radius)

        pygame.draw.rect(surface, BUTTON_COLOR, self.button.move(0, int(cam_y)))
        draw_text(surface, f"Speed: {round(ball.speed)}", (w - 10, int(10 + cam_y)), HUD_COLOR,
                  size=50, anchor="topright")

        if cam_y < 0:
            self._draw_menu(surface, int(h + cam_y))

    def _draw_menu(self, surface: pygame.Surface, top: int) -> None:
        w, h = self.ctx.screen_size
        panel_h = int(h * MENU_HEIGHT_RATIO)
        pygame.draw.rect(surface, MENU_BG_COLOR, (0, top, w, panel_h))
        slot = w / len(MENU_ENTRIES)
        for i, label in enumerate(MENU_ENTRIES):
            center = (int(slot * i + slot / 2), top + panel_h // 2)
            draw_text(surface, label, center, MENU_TEXT_COLOR, size=40, anchor="center")

    def on_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_m:
            self.session.on_toggle_menu()

    def on_resize(self, screen_size) -> None:
        self.session.on_viewport_resize(*screen_size)
        self.button = self._button_rect()
        if self.paused:
            self._slide.retarget(self._menu_offset())

    def on_unload(self) -> None:
        pass


def get_game():
    return ShrinkingBall()
