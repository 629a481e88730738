"""4x4 transformation matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

_PI = 3.141592

Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix stored row by row."""

    rows: tuple[Row, Row, Row, Row]

    def __init__(self, rows: Iterable[Iterable[float]]):
        converted = tuple(tuple(float(v) for v in row) for row in rows)
        if len(converted) != 4 or any(len(row) != 4 for row in converted):
            raise ValueError("a Mat4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", converted)

    def __matmul__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Mat4(
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self.rows
        )

    def __getitem__(self, index):
        """Return a row for an int index, or one entry for a (row, col) pair."""
        if isinstance(index, tuple):
            row, col = index
            return self.rows[row][col]
        return self.rows[index]


def _from_entries(entries: dict[tuple[int, int], float]) -> Mat4:
    return Mat4(
        [entries.get((i, j), 0.0) for j in range(4)] for i in range(4)
    )


def radians(degree: float) -> float:
    """Convert degrees to radians using pi rounded to 3.141592."""
    return degree / 180.0 * _PI


def identity() -> Mat4:
    """Return the identity matrix."""
    return _from_entries({(i, i): 1.0 for i in range(4)})


def multiply(m1: Mat4, m2: Mat4) -> Mat4:
    """Return the product ``m1 @ m2``."""
    return m1 @ m2


def translate(x: float, y: float, z: float) -> Mat4:
    """Return a translation by (x, y, z)."""
    entries = {(i, i): 1.0 for i in range(4)}
    entries.update({(0, 3): x, (1, 3): y, (2, 3): z})
    return _from_entries(entries)


def rotate_x(degree: float) -> Mat4:
    """Return a rotation about the x axis."""
    rad = radians(degree)
    c, s = math.cos(rad), math.sin(rad)
    return _from_entries(
        {(0, 0): 1.0, (1, 1): c, (1, 2): -s, (2, 1): s, (2, 2): c, (3, 3): 1.0}
    )


def rotate_y(degree: float) -> Mat4:
    """Return a rotation about the y axis."""
    rad = radians(degree)
    c, s = math.cos(rad), math.sin(rad)
    return _from_entries(
        {(0, 0): c, (0, 2): -s, (1, 1): 1.0, (2, 0): s, (2, 2): c, (3, 3): 1.0}
    )


def rotate_z(degree: float) -> Mat4:
    """Return a rotation about the z axis."""
    rad = radians(degree)
    c, s = math.cos(rad), math.sin(rad)
    return _from_entries(
        {(0, 0): c, (0, 1): -s, (1, 0): s, (1, 1): c, (2, 2): 1.0, (3, 3): 1.0}
    )


def _shear(position: tuple[int, int], degree: float) -> Mat4:
    entries = {(i, i): 1.0 for i in range(4)}
    entries[position] = math.tan(radians(degree))
    return _from_entries(entries)


def shear_x(degree: float) -> Mat4:
    """Return a shear in the x direction."""
    return _shear((0, 1), degree)


def shear_y(degree: float) -> Mat4:
    """Return a shear in the y direction."""
    return _shear((1, 0), degree)


def shear_z(degree: float) -> Mat4:
    """Return a shear in the z direction."""
    return _shear((2, 1), degree)


def scale_from_origin(scale_rate: float) -> Mat4:
    """Return a uniform scale about the origin."""
    return _from_entries(
        {(0, 0): scale_rate, (1, 1): scale_rate, (2, 2): scale_rate, (3, 3): 1.0}
    )


def scale_from_point(x: float, y: float, z: float, scale_rate: float) -> Mat4:
    """Return a uniform scale about the point (x, y, z)."""
    return translate(x, y, z) @ (scale_from_origin(scale_rate) @ translate(-x, -y, -z))


def parallel() -> Mat4:
    """Return the parallel projection, which leaves points unchanged."""
    return identity()


def isometric() -> Mat4:
    """Return the isometric view: 30 degrees about x, then y, then z."""
    return rotate_z(30.0) @ (rotate_y(30.0) @ rotate_x(30.0))