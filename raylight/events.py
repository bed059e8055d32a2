"""Input events consumed by the scene, and their translation from pygame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

import pygame

LEFT_BUTTON = 1


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


@dataclass(frozen=True)
class ToggleFps:
    """Display toggle; passes through the scene without changing it."""


InputEvent = Union[Quit, PointerDown, PointerUp, PointerMove, ToggleFps]


def translate_event(event: pygame.event.Event) -> InputEvent | None:
    """
    Map a raw pygame event onto a scene input event.

    Parameters
    ----------
    event : pygame.event.Event
        Event as returned by ``pygame.event.get()``.

    Returns
    -------
    InputEvent | None
        The matching scene event, or None for events the scene ignores
        (other mouse buttons, other keys, window events).
    """
    if event.type == pygame.QUIT:
        return Quit()
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return Quit()
    if event.type == pygame.KEYDOWN and event.key == pygame.K_f:
        return ToggleFps()
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
        return PointerDown(*event.pos)
    if event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_BUTTON:
        return PointerUp()
    if event.type == pygame.MOUSEMOTION:
        return PointerMove(*event.pos)
    return None


def translate_events(raw_events: Iterable[pygame.event.Event]) -> list[InputEvent]:
    """Translate a batch of pygame events, dropping the ones the scene ignores."""
    events = []
    for raw in raw_events:
        event = translate_event(raw)
        if event is not None:
            events.append(event)
    return events


def poll_events() -> list[InputEvent]:
    """Drain the pygame queue without blocking and translate what the scene uses."""
    return translate_events(pygame.event.get())
