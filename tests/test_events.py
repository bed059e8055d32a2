import pygame
import pytest

from raylight.events import (
    PointerDown, PointerMove, PointerUp, Quit, ToggleFps, poll_events, translate_event, translate_events
)


def test_quit_and_escape_map_to_quit():
    assert translate_event(pygame.event.Event(pygame.QUIT)) == Quit()
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)) == Quit()


def test_left_button_maps_to_pointer_events():
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(12, 34), button=1)
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(12, 34), button=1)
    assert translate_event(down) == PointerDown(12, 34)
    assert translate_event(up) == PointerUp()


def test_motion_maps_to_pointer_move():
    motion = pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 6), rel=(1, 1), buttons=(0, 0, 0))
    assert translate_event(motion) == PointerMove(5, 6)


def test_ignored_events():
    assert translate_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=3)) is None
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) is None


def test_translate_events_drops_ignored():
    raw = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 2), rel=(0, 0), buttons=(0, 0, 0)),
        pygame.event.Event(pygame.QUIT),
    ]
    assert translate_events(raw) == [PointerMove(1, 2), Quit()]


def test_f_key_maps_to_fps_toggle():
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_f)) == ToggleFps()


@pytest.fixture
def event_queue():
    pygame.display.init()
    pygame.event.clear()
    yield
    pygame.display.quit()


def test_poll_events_drains_queue(event_queue):
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(400, 300), button=1))
    pygame.event.post(pygame.event.Event(pygame.MOUSEMOTION, pos=(250, 120), rel=(0, 0), buttons=(1, 0, 0)))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    assert poll_events() == [PointerDown(400, 300), PointerMove(250, 120), Quit()]
    assert poll_events() == []
