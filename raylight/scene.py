"""
Scene state for the draggable light and the input reduction that drives it.

States:
- IDLE:         the light sits still; a press within the pick radius grabs it.
- DRAGGING:     every pointer move puts the light at the pointer.
A pointer release always returns to IDLE, wherever the pointer is.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from .constants import LIGHT_START, PICK_RADIUS
from .events import InputEvent, PointerDown, PointerMove, PointerUp, Quit
from .vector import Vec2


@dataclass(frozen=True)
class LightSource:
    """
    The light's position and whether the user is currently dragging it.

    Attributes
    ----------
    position : Vec2
        Origin of every ray in the fan.
    dragging : bool
        True between a press that grabbed the light and the next release.
    """
    position: Vec2
    dragging: bool = False

    @classmethod
    def initial(cls) -> LightSource:
        return cls(Vec2.from_tuple(LIGHT_START))

    def is_picked(self, x: float, y: float) -> bool:
        return (Vec2(x, y) - self.position).length() < PICK_RADIUS


def apply_event(light: LightSource, event: InputEvent) -> LightSource:
    """
    Return the light state after one input event.

    Presses outside the pick radius and moves while idle leave the state
    unchanged. Quit and ToggleFps are not scene transitions; the frame loop handles them.
    """
    if isinstance(event, PointerDown):
        if light.is_picked(event.x, event.y):
            return replace(light, dragging=True)
        return light
    if isinstance(event, PointerUp):
        return replace(light, dragging=False)
    if isinstance(event, PointerMove) and light.dragging:
        return replace(light, position=Vec2(float(event.x), float(event.y)))
    return light


def drain_events(light: LightSource, events: Iterable[InputEvent]) -> tuple[LightSource, bool]:
    """
    Apply a frame's worth of events in order.

    Returns
    -------
    tuple[LightSource, bool]
        The updated light and whether the loop should keep running
        (False once a Quit event was seen).
    """
    running = True
    for event in events:
        if isinstance(event, Quit):
            running = False
            continue
        light = apply_event(light, event)
    return light, running
