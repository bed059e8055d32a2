"""2D vector value type used by all scene geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """
    Immutable 2D vector in screen units.

    Every operation returns a new vector; nothing mutates in place.

    Attributes
    ----------
    x : float
        Horizontal component (grows to the right).
    y : float
        Vertical component (grows downward, as on screen).
    """
    x: float
    y: float

    @classmethod
    def from_angle(cls, angle: float) -> Vec2:
        """Unit vector pointing at ``angle`` radians from the +x axis."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def from_tuple(cls, xy: tuple[float, float]) -> Vec2:
        return cls(float(xy[0]), float(xy[1]))

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vec2:
        """
        Return this vector scaled to unit length.

        A zero-length vector has no direction and is returned unchanged
        instead of raising.
        """
        length = self.length()
        if length > 0:
            return Vec2(self.x / length, self.y / length)
        return self

    def to_pixel(self) -> tuple[int, int]:
        """Integer pixel coordinates (truncated toward zero)."""
        return (int(self.x), int(self.y))
