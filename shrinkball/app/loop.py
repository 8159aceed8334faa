from __future__ import annotations
import logging
import time
import pygame

from shrinkball import const
from shrinkball.api.config import EngineConfig
from shrinkball.api.frame_data import FrameData
from shrinkball.app.context import Context
from shrinkball.app.loader import game_root_for, load_game_manifest, load_game_module
from shrinkball.input.pointer import PointerInput

logger = logging.getLogger(__name__)


def _make_render_surface(screen: pygame.Surface, mirror: bool) -> pygame.Surface:
    # draw off-screen if mirroring, otherwise straight to the window
    if not mirror:
        return screen
    return pygame.Surface(screen.get_size()).convert()


def run_game(game_id: str, cfg: EngineConfig) -> None:
    game_root = game_root_for(game_id)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(manifest.get("name", game_id))
    flags = pygame.RESIZABLE if cfg.resizable else 0
    screen = pygame.display.set_mode(cfg.screen_size, flags)
    clock = pygame.time.Clock()

    pointer = PointerInput(mirror=cfg.mirror)
    render_surface = _make_render_surface(screen, cfg.mirror)

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        screen_size=screen.get_size(),
    )

    logger.info("Loading game '%s' at %dx%d", game_id, *ctx.screen_size)
    game.on_load(ctx, manifest)

    running = True
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.get_surface()
                    render_surface = _make_render_surface(screen, cfg.mirror)
                    ctx.screen = render_surface
                    ctx.screen_size = screen.get_size()
                    game.on_resize(ctx.screen_size)
                pointer.handle_pygame_event(event, ctx.screen_size)
                game.on_event(event)

            frame_data = FrameData(timestamp=time.time(),
                                   pointer_downs=pointer.drain())

            # ---- draw to render_surface ----
            render_surface.fill(const.BACKGROUND_COLOR)
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)

            # ---- present to window ----
            if cfg.mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        pygame.quit()
        logger.info("Game '%s' closed", game_id)
