from __future__ import annotations
import math
import pygame
from typing import Optional

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.render.shapes import draw_button, draw_text, draw_text_centered
from engine.storage.kv_store import JsonFileStore

from catch_rush import summary
from catch_rush.machine import Phase, RoundMachine, RushEvent
from catch_rush.progress import ProgressStore
from catch_rush.settings import RushSettings


# Layout
HUD_HEIGHT = 84                    # px reserved above the play area
FOOTER_HEIGHT = 132                # px below it for the start button and hints
BUTTON_W = 320
BUTTON_H = 54
POP_MS = 160                       # target grow-in time

HUD_COLOR = (240, 240, 240)
HINT_COLOR = (200, 200, 200)
FIELD_COLOR = (34, 24, 20)
FIELD_BORDER = (120, 80, 50)
TARGET_COLOR = (255, 120, 40)
TARGET_CORE = (255, 210, 90)
CARD_COLOR = (28, 30, 36)
PASS_COLOR = (90, 220, 120)
FAIL_COLOR = (235, 90, 80)
BADGE_COLORS = [
    (205, 127, 50),
    (192, 192, 192),
    (255, 200, 60),
    (90, 200, 255),
    (200, 110, 255),
]


class CatchRush(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        self.settings = RushSettings.from_options(manifest.get("options", {}))
        self.w, self.h = ctx.screen_size

        m = self.settings.play_area_margin
        self.field = pygame.Rect(m, HUD_HEIGHT, self.w - 2 * m,
                                 max(0, self.h - HUD_HEIGHT - FOOTER_HEIGHT))

        self.start_rect = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)
        self.start_rect.center = (self.w // 2, self.field.bottom + 40)

        card_w = min(self.field.width, 460)
        self.card = pygame.Rect(0, 0, card_w, 380)
        self.card.center = (self.w // 2, self.h // 2)
        self.primary_rect = pygame.Rect(0, 0, card_w - 60, BUTTON_H)
        self.primary_rect.midtop = (self.card.centerx, self.card.top + 220)
        self.menu_rect = self.primary_rect.move(0, BUTTON_H + 14)

        self.store = ProgressStore(JsonFileStore(profile_name=ctx.cfg.profile))
        self.machine = RoundMachine(self.store, ctx.timers, self.settings)
        self.machine.set_play_area(self.field.width, self.field.height)
        self.machine.resume()

        self.result_shown_ms: Optional[float] = None

    # ------------- input -------------
    def _primary_action(self):
        if self.machine.passed:
            self.machine.next()
        else:
            self.machine.retry()

    def _handle_tap(self, x: float, y: float, source: str = "mouse") -> None:
        phase = self.machine.phase

        if phase == Phase.Idle:
            if self.start_rect.collidepoint(x, y):
                self.machine.start()
            return

        if phase == Phase.Round:
            t = self.machine.spawner.target
            if t is None:
                return
            fx, fy = x - self.field.x, y - self.field.y
            if t.contains(fx, fy, slop=self.settings.slop_for(source)):
                self.machine.tap()
            return

        if phase == Phase.Result:
            if self.primary_rect.collidepoint(x, y):
                self._primary_action()
            elif self.menu_rect.collidepoint(x, y):
                self.machine.menu()
            elif not self.card.collidepoint(x, y):
                # tapping the dimmed backdrop dismisses the card
                self.machine.retry()

    def on_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key in (pygame.K_SPACE, pygame.K_RETURN):
            if self.machine.phase == Phase.Idle:
                self.machine.start()
            elif self.machine.phase == Phase.Result:
                self._primary_action()
        elif event.key == pygame.K_BACKSPACE:
            self.machine.back()
        elif event.key == pygame.K_m:
            self.machine.menu()

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        for p in frame.taps:
            self._handle_tap(p.x, p.y, p.source)

        for ev in self.machine.pop_events():
            if ev == RushEvent.RoundEnded:
                self.result_shown_ms = self.ctx.timers.now_ms
            elif ev in (RushEvent.Finished, RushEvent.ExitToMenu):
                # no home screen on this platform: leaving the game quits
                self.ctx.request_quit()

    def on_draw(self, surface: pygame.Surface) -> None:
        snap = self.machine.snapshot()

        draw_text_centered(surface, "CATCH RUSH", (self.w // 2, 26), HUD_COLOR, size=30)
        self._draw_hud(surface, snap)

        pygame.draw.rect(surface, FIELD_COLOR, self.field, border_radius=22)
        pygame.draw.rect(surface, FIELD_BORDER, self.field, width=2, border_radius=22)

        if snap.phase == Phase.Idle:
            draw_text_centered(surface, "Press START to begin",
                               self.field.center, HINT_COLOR, size=26)
            draw_button(surface, self.start_rect, "START", HUD_COLOR, fill=(200, 80, 30))

        if snap.phase == Phase.Round and snap.target and snap.target.visible:
            self._draw_target(surface, snap)

        hy = self.field.bottom + 80
        draw_text_centered(surface, summary.reaction_hint(snap),
                           (self.w // 2, hy), HINT_COLOR, size=22)
        draw_text_centered(surface, summary.pass_hint(snap),
                           (self.w // 2, hy + 22), HINT_COLOR, size=22)

        if snap.phase == Phase.Result:
            self._draw_result(surface, snap)

    def _draw_hud(self, surface, snap):
        labels = [
            ("ROUND", summary.hud_round(snap)),
            ("TIME", summary.hud_time(snap)),
            ("SCORE", str(summary.hud_score(snap))),
        ]
        pill_w = 150
        gap = 12
        x0 = self.w // 2 - (3 * pill_w + 2 * gap) // 2
        for i, (label, value) in enumerate(labels):
            rect = pygame.Rect(x0 + i * (pill_w + gap), 42, pill_w, 36)
            pygame.draw.rect(surface, (40, 44, 52), rect, border_radius=16)
            draw_text(surface, label, (rect.x + 12, rect.y + 11), HINT_COLOR, size=18)
            draw_text(surface, value, (rect.x + 76, rect.y + 9), HUD_COLOR, size=24)

    def _draw_target(self, surface, snap):
        t = snap.target
        now = self.ctx.timers.now_ms
        born = self.machine.spawner.target.expires_at_ms - snap.reaction_window_ms
        pct = max(0.0, min(1.0, (now - born) / POP_MS))
        scale = 0.62 + 0.38 * pct

        size = t.size * scale
        cx = self.field.x + t.x + t.size / 2
        cy = self.field.y + t.y + t.size / 2
        pygame.draw.circle(surface, TARGET_COLOR, (int(cx), int(cy)), int(size / 2))
        pygame.draw.circle(surface, TARGET_CORE, (int(cx), int(cy)), int(size / 4))

        # remaining lifetime ring
        remaining = max(0.0, self.machine.spawner.target.expires_at_ms - now)
        frac = remaining / snap.reaction_window_ms if snap.reaction_window_ms else 0.0
        rr = int(t.size / 2 + 8)
        rect = pygame.Rect(int(cx) - rr, int(cy) - rr, rr * 2, rr * 2)
        start_angle = 0.5 * math.pi
        pygame.draw.arc(surface, (235, 235, 235), rect, start_angle,
                        start_angle + 2 * math.pi * frac, 2)

    def _draw_result(self, surface, snap):
        dim = pygame.Surface((self.w, self.h), pygame.SRCALPHA)
        dim.fill((0, 0, 0, 150))
        surface.blit(dim, (0, 0))

        # short grow-in for the card
        grow = 1.0
        if self.result_shown_ms is not None:
            grow = max(0.9, min(1.0, 0.9 + (self.ctx.timers.now_ms - self.result_shown_ms) / 2000))
        card = self.card.inflate(int(-(1 - grow) * self.card.width),
                                int(-(1 - grow) * self.card.height))
        pygame.draw.rect(surface, CARD_COLOR, card, border_radius=26)

        color = PASS_COLOR if snap.passed else FAIL_COLOR
        draw_text_centered(surface, summary.result_title(snap),
                           (card.centerx, card.top + 40), color, size=36)

        badge = summary.result_badge(snap)
        if badge is not None:
            pygame.draw.circle(surface, BADGE_COLORS[badge],
                               (card.centerx, card.top + 100), 32)
            draw_text_centered(surface, str(badge + 1),
                               (card.centerx, card.top + 100), CARD_COLOR, size=32)

        draw_text_centered(surface, summary.taps_line(snap),
                           (card.centerx, card.top + 152), HUD_COLOR, size=26)
        draw_text_centered(surface, summary.result_hint(snap),
                           (card.centerx, card.top + 184), HINT_COLOR, size=22)

        draw_button(surface, self.primary_rect, summary.primary_action_label(snap),
                    HUD_COLOR, fill=(200, 80, 30))
        draw_button(surface, self.menu_rect, "MENU", HUD_COLOR)
        draw_text_centered(surface, summary.progress_line(snap),
                           (card.centerx, self.menu_rect.bottom + 22), HINT_COLOR, size=20)

    def on_unload(self) -> None:
        self.machine.suspend()
        self.store.close()


def get_game():
    return CatchRush()
