import pygame

from engine.api.config import EngineConfig
from engine.input.pointer_input import PointerInput

SIZE = (800, 600)


def press(button=1, pos=(10, 20), **extra):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos, **extra)


def test_left_press_becomes_one_tap():
    pi = PointerInput(EngineConfig(screen_size=SIZE))
    pi.handle_pygame_event(press(), SIZE)
    pi.handle_pygame_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(10, 20)), SIZE)
    taps = pi.emit_taps()
    assert [(p.x, p.y, p.source) for p in taps] == [(10.0, 20.0, "mouse")]
    assert pi.emit_taps() == []


def test_other_buttons_and_synthesized_touch_clicks_ignored():
    pi = PointerInput(EngineConfig(screen_size=SIZE))
    pi.handle_pygame_event(press(button=3), SIZE)
    pi.handle_pygame_event(press(touch=True), SIZE)
    assert pi.emit_taps() == []


def test_finger_down_is_scaled_to_screen():
    pi = PointerInput(EngineConfig(screen_size=SIZE))
    ev = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.25, touch_id=0, finger_id=0)
    pi.handle_pygame_event(ev, SIZE)
    (p,) = pi.emit_taps()
    assert (p.x, p.y, p.source) == (400.0, 150.0, "touch")


def test_mirror_flips_x():
    pi = PointerInput(EngineConfig(screen_size=SIZE, mirror=True))
    pi.handle_pygame_event(press(pos=(0, 5)), SIZE)
    (p,) = pi.emit_taps()
    assert (p.x, p.y) == (799.0, 5.0)


def test_focus_loss_drops_pending_taps():
    pi = PointerInput(EngineConfig(screen_size=SIZE))
    pi.handle_pygame_event(press(), SIZE)
    pi.handle_pygame_event(pygame.event.Event(pygame.WINDOWFOCUSLOST), SIZE)
    assert pi.emit_taps() == []
