"""
Per-frame ray fan casting and draw command emission.

A frame is composed as: occluder outline -> one line per ray -> light marker.
Nothing here touches pygame, so a whole frame can be built and inspected
without a display.
"""

from __future__ import annotations

import math

from .constants import (
    CIRCLE_SEGMENTS, LIGHT_COLOR, LIGHT_RADIUS, OCCLUDER_COLOR, OPAQUE,
    RAY_COLOR, RAY_COUNT, RAY_HIT_ALPHA, RAY_LENGTH, RAY_MISS_ALPHA, UNIT_TOLERANCE
)
from .geometry import tessellate_circle
from .intersection import intersect
from .models import Color, DrawLine, Occluder, Ray, RayCast
from .scene import LightSource
from .vector import Vec2


def cast_ray_fan(origin: Vec2, occluder: Occluder, ray_count: int = RAY_COUNT,
                 ray_length: float = RAY_LENGTH) -> list[RayCast]:
    """
    Cast ``ray_count`` evenly spaced rays over the full circle from ``origin``.

    Parameters
    ----------
    origin : Vec2
        Light position all rays start from.
    occluder : Occluder
        Circle the rays are tested against.
    ray_count : int
        Number of rays; ray ``i`` points at angle ``2*pi*i/ray_count``.
    ray_length : float
        Drawn length of rays that hit nothing.

    Returns
    -------
    list[RayCast]
        One entry per ray, in angle order.
    """
    casts = []
    for i in range(ray_count):
        direction = Vec2.from_angle(2 * math.pi * i / ray_count)
        assert abs(direction.length() - 1.0) < UNIT_TOLERANCE, "ray direction must be unit length"

        result = intersect(origin, direction, occluder)
        ray = Ray(origin, direction)
        end = ray.point_at(result.distance if result.hit else ray_length)
        casts.append(RayCast(ray, result, end))
    return casts


def outline(center: Vec2, radius: float, color: Color, segments: int = CIRCLE_SEGMENTS) -> list[DrawLine]:
    return [
        DrawLine(seg.start, seg.end, color, OPAQUE)
        for seg in tessellate_circle(center, radius, segments)
    ]


def ray_lines(casts: list[RayCast]) -> list[DrawLine]:
    """Bright lines up to the hit point for occluded rays, faint long lines otherwise."""
    return [
        DrawLine(cast.ray.origin, cast.end, RAY_COLOR,
                 RAY_HIT_ALPHA if cast.result.hit else RAY_MISS_ALPHA)
        for cast in casts
    ]


def build_frame(light: LightSource, occluder: Occluder, casts: list[RayCast] | None = None,
                segments: int = CIRCLE_SEGMENTS) -> list[DrawLine]:
    """
    Emit every draw command of one frame, in drawing order.

    ``casts`` may be passed in when the caller already cast the fan this
    frame (the HUD needs the hit count too); otherwise the fan is cast here.
    Passed-in casts must start at the light, or the rays would not meet
    the light marker; a ``ValueError`` is raised when they do not.
    """
    if casts is None:
        casts = cast_ray_fan(light.position, occluder)
    elif any(cast.ray.origin != light.position for cast in casts):
        raise ValueError(f"Rays were not cast from the light at {light.position}")

    commands = outline(occluder.center, occluder.radius, OCCLUDER_COLOR, segments)
    commands += ray_lines(casts)
    commands += outline(light.position, LIGHT_RADIUS, LIGHT_COLOR, segments)
    return commands


def count_hits(casts: list[RayCast]) -> int:
    return sum(1 for cast in casts if cast.result.hit)
