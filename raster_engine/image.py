"""An in-memory raster image of packed ARGB pixels."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vec2

_WORD = 0xFFFFFFFF


@dataclass
class Image:
    """A width x height grid of 32-bit ARGB pixels, initially all zero."""

    width: int
    height: int
    _pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        self._pixels = [0] * (self.width * self.height)

    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) is drawable.

        Row 0 and column 0 are treated as outside the image.
        """
        return 0 < x < self.width and 0 < y < self.height

    def pixel(self, x: int, y: int) -> int:
        """Return the colour stored at (x, y); raise IndexError outside the grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self._pixels[y * self.width + x]

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set (x, y) to ``color`` if it is drawable; otherwise do nothing."""
        if self.contains(x, y):
            self._pixels[y * self.width + x] = color & _WORD

    def fill(self, color: int) -> None:
        """Paint every drawable pixel with ``color``."""
        for y in range(self.height):
            for x in range(self.width):
                self.draw_pixel(x, y, color)

    def draw_line(self, p1: Vec2, p2: Vec2, color: int) -> None:
        """Draw a line from ``p1`` towards ``p2``.

        One dot is plotted per whole unit of the line's length, starting at
        ``p1``; the end point itself is not plotted.
        """
        ndots = int(Vec2(p2.x - p1.x, p2.y - p1.y).magnitude())
        for t in range(ndots):
            offset = t / ndots
            x = (1 - offset) * p1.x + offset * p2.x
            y = (1 - offset) * p1.y + offset * p2.y
            self.draw_pixel(int(x), int(y), color)