"""Two- and four-component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .matrix import Mat4

_EPSILON = 0.00001


@dataclass(frozen=True)
class Vec2:
    """A 2D vector or point."""

    x: float
    y: float

    def dot(self, other: "Vec2") -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> "Vec2":
        """Return the vector scaled to unit length.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.magnitude()
        return Vec2(self.x / length, self.y / length)


@dataclass(frozen=True)
class Vec4:
    """A homogeneous 3D vector (x, y, z, w)."""

    x: float
    y: float
    z: float
    w: float

    def dot(self, other: "Vec4") -> float:
        """Return the dot product over all four components."""
        return (
            self.x * other.x
            + self.y * other.y
            + self.z * other.z
            + self.w * other.w
        )

    def magnitude(self) -> float:
        """Return the length over all four components."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vec4":
        """Divide x, y and z by the four-component length; w is kept.

        Raises ZeroDivisionError for the zero vector.
        """
        length = self.magnitude()
        return Vec4(self.x / length, self.y / length, self.z / length, self.w)

    def cross(self, other: "Vec4") -> "Vec4":
        """Return the engine's cross product of x, y, z with w set to 1.

        The subtracted term of each component multiplies two of ``self``'s
        own components, so it cancels against the matching term of
        ``self.cross(self)``.
        """
        x = self.y * other.z - self.z * self.y
        y = self.z * other.x - self.x * self.z
        z = self.x * other.y - self.y * self.x
        return Vec4(x, y, z, 1.0)

    def transformed(self, matrix: Mat4) -> "Vec4":
        """Multiply by ``matrix`` and apply the perspective divide.

        x, y and z are divided by the resulting w unless w is (within
        1e-5) 0 or 1. The returned vector always has w = 1.
        """
        v = (self.x, self.y, self.z, self.w)
        x, y, z, w = (sum(a * b for a, b in zip(row, v)) for row in matrix.rows)
        near_zero = -_EPSILON < w < _EPSILON
        near_one = 1.0 - _EPSILON < w < 1.0 + _EPSILON
        if not near_zero and not near_one:
            x, y, z = x / w, y / w, z / w
        return Vec4(x, y, z, 1.0)