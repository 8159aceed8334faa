import pygame
from typing import Dict, Tuple

_FONTS: Dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    font = _FONTS.get(size)
    if font is None:
        if not pygame.font.get_init():
            pygame.font.init()
        font = _FONTS[size] = pygame.font.Font(None, size)
    return font


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24,
              anchor: str = "topleft") -> pygame.Rect:
    img = _font(size).render(text, True, color)
    rect = img.get_rect(**{anchor: pos})
    surface.blit(img, rect)
    return rect


def draw_disc(surface: pygame.Surface, color, center: Tuple[float, float], radius: float) -> None:
    # radii below a pixel still draw as a single dot
    pygame.draw.circle(surface, color, (int(center[0]), int(center[1])), max(1, int(round(radius))))
