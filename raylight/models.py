"""Lightweight data models shared by the intersection engine and the frame."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vec2

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Occluder:
    """
    The static circle rays may hit.

    Attributes
    ----------
    center : Vec2
        Center of the circle on the playfield.
    radius : float
        Circle radius; must be positive.
    """
    center: Vec2
    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"Occluder radius must be positive, got {self.radius}")


@dataclass(frozen=True)
class Ray:
    """A half-line from ``origin`` along the unit vector ``direction``."""
    origin: Vec2
    direction: Vec2

    def point_at(self, distance: float) -> Vec2:
        return self.origin + self.direction * distance


@dataclass(frozen=True)
class IntersectionResult:
    """
    Outcome of one ray test.

    Attributes
    ----------
    hit : bool
        Whether the ray meets the occluder in front of its origin.
    distance : float
        Distance along the ray to the hit point; only meaningful when ``hit``.
    """
    hit: bool
    distance: float = 0.0


NO_HIT = IntersectionResult(False)


@dataclass(frozen=True)
class LineSegment:
    start: Vec2
    end: Vec2


@dataclass(frozen=True)
class DrawLine:
    """One line primitive for the output surface, with its color and opacity."""
    start: Vec2
    end: Vec2
    color: Color
    alpha: int


@dataclass(frozen=True)
class RayCast:
    """A ray of the fan together with its intersection result and drawn end point."""
    ray: Ray
    result: IntersectionResult
    end: Vec2
