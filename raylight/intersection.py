"""
Ray vs. circle intersection.

Solves ``|o + t*d - c|^2 = r^2`` for ``t`` with the quadratic formula and
keeps only the near root. The near root is the first boundary crossing
along the ray, so a ray whose origin lies inside the occluder reports no
hit even though it leaves the circle through the far root.
"""

from __future__ import annotations

import math

from .constants import EPSILON
from .models import NO_HIT, IntersectionResult, Occluder, Ray
from .vector import Vec2


def intersect(origin: Vec2, direction: Vec2, occluder: Occluder) -> IntersectionResult:
    """
    Find the nearest forward intersection of a ray with the occluder.

    Parameters
    ----------
    origin : Vec2
        Ray start point.
    direction : Vec2
        Ray direction. Expected to be unit length; callers normalize first.
    occluder : Occluder
        The circle to test against.

    Returns
    -------
    IntersectionResult
        A hit with the distance to the near root when that root lies more
        than ``EPSILON`` in front of the origin, otherwise ``NO_HIT``.
    """
    oc = origin - occluder.center
    a = direction.dot(direction)
    b = 2.0 * oc.dot(direction)
    c = oc.dot(oc) - occluder.radius * occluder.radius
    discriminant = b * b - 4 * a * c

    if discriminant < 0:
        return NO_HIT

    t = (-b - math.sqrt(discriminant)) / (2.0 * a)
    if t > EPSILON:
        return IntersectionResult(True, t)
    return NO_HIT


def cast(ray: Ray, occluder: Occluder) -> IntersectionResult:
    return intersect(ray.origin, ray.direction, occluder)
