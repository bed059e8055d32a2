"""Circle tessellation, kept apart from any drawing call."""

from __future__ import annotations

import math

from .constants import CIRCLE_SEGMENTS
from .models import LineSegment
from .vector import Vec2


def tessellate_circle(center: Vec2, radius: float, segments: int = CIRCLE_SEGMENTS) -> list[LineSegment]:
    """
    Approximate a circle outline by ``segments`` straight chords.

    Segment ``i`` joins the points at angles ``2*pi*i/n`` and ``2*pi*(i+1)/n``,
    so the last segment closes the loop back at angle 0.
    """
    if segments < 3:
        raise ValueError(f"A circle needs at least 3 segments, got {segments}")

    points = [
        center + Vec2.from_angle(2 * math.pi * i / segments) * radius
        for i in range(segments)
    ]
    return [LineSegment(points[i], points[(i + 1) % segments]) for i in range(segments)]
