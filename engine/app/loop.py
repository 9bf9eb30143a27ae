from __future__ import annotations
import logging
import time
from pathlib import Path
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import load_game_manifest, load_game_module
from engine.input.pointer_input import PointerInput
from engine.sched.timers import TimerQueue

logger = logging.getLogger(__name__)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    profile: str = "default",
    mirror: bool = False,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        profile=profile,
        mirror=mirror,
    )

    # load game before opening a window so a bad id fails fast
    games_dir = Path(__file__).resolve().parents[2] / "games"
    game_root = games_dir / game_id
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    title = manifest.get("name", game_id)
    pygame.display.set_caption(f"Tap Platform - {title}")
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()
    timers = TimerQueue(start_ms=pygame.time.get_ticks())

    input_layer = PointerInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        timers=timers,
        resources={},
        screen_size=screen_size,
    )

    logger.info("starting %s at %dx%d", game_id, *screen_size)
    game.on_load(ctx, manifest)

    running = True
    try:
        while running and not ctx.quit_requested:
            dt = clock.tick(fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                input_layer.handle_pygame_event(event, screen_size)
                game.on_event(event)

            # timers first so taps this frame see the current target
            timers.advance(dt)
            frame_data = FrameData(timestamp=time.time(),
                                   taps=input_layer.emit_taps())

            # ---- draw to render_surface ----
            render_surface.fill((12, 14, 18))
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)
            pygame.draw.rect(render_surface, (220, 220, 220),
                             (8, 8, screen_size[0] - 16, screen_size[1] - 16), 1)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        timers.cancel_all()
        pygame.quit()
        logger.info("stopped %s", game_id)
