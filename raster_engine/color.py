"""ARGB colours packed into 32-bit integers.

A colour is stored as ``0xAARRGGBB``: blue in the lowest byte, then green,
red and alpha in the highest byte. Every function returns the packed value
as an unsigned 32-bit integer.
"""

from __future__ import annotations

BLACK = 0x00111111
WHITE = 0x00FFFFFF
RED = 0x00EE3333
ORANGE = 0x00FF9900
YELLOW = 0x00FFEE00
LIME = 0x00AACC11
GREEN = 0x0044AA77
CYAN = 0x000099EE
BLUE = 0x000066BB
VIOLETT = 0x00443388
PURPLE = 0x00992288
MAGENTA = 0x00EE0077
GRAY = 0x00949494

_BYTE = 0xFF
_WORD = 0xFFFFFFFF


def argb(alpha: int, r: int, g: int, b: int) -> int:
    """Pack four channels into one colour; each channel is taken modulo 256."""
    return (
        (alpha & _BYTE) << 24
        | (r & _BYTE) << 16
        | (g & _BYTE) << 8
        | (b & _BYTE)
    )


def get_alpha(color: int) -> int:
    """Return the alpha channel of a packed colour."""
    return (color >> 24) & _BYTE


def get_red(color: int) -> int:
    """Return the red channel of a packed colour."""
    return (color >> 16) & _BYTE


def get_green(color: int) -> int:
    """Return the green channel of a packed colour."""
    return (color >> 8) & _BYTE


def get_blue(color: int) -> int:
    """Return the blue channel of a packed colour."""
    return color & _BYTE


def _scaled(channel: int, factor: float) -> int:
    return max(0, int(channel * factor))


def shade(shade_factor: float, color: int) -> int:
    """Darken the colour's RGB channels by ``shade_factor``.

    0 (or less) leaves the colour as it is, 1 makes it black; alpha is kept.
    Channels are truncated toward zero.
    """
    if shade_factor <= 0:
        return color & _WORD
    keep = 1 - shade_factor
    return argb(
        get_alpha(color),
        _scaled(get_red(color), keep),
        _scaled(get_green(color), keep),
        _scaled(get_blue(color), keep),
    )


def reverse(color: int) -> int:
    """Invert every channel, alpha included."""
    return argb(
        _BYTE - get_alpha(color),
        _BYTE - get_red(color),
        _BYTE - get_green(color),
        _BYTE - get_blue(color),
    )