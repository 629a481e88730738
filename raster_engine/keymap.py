"""Platform key and mouse-button codes for the window event system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Mapping, Optional


class Key(Enum):
    """Keyboard keys known to the engine."""

    ESC = auto()
    A = auto()
    S = auto()
    D = auto()
    Q = auto()
    W = auto()
    E = auto()
    R = auto()
    INC = auto()
    DEC = auto()
    P = auto()
    O = auto()  # noqa: E741
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ONE = auto()
    TWO = auto()
    THREE = auto()


class MouseButton(Enum):
    """Mouse buttons and scroll directions known to the engine."""

    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()


class Event(IntEnum):
    """Window event numbers, shared by both platforms."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    MOUSE_PRESS = 4
    MOUSE_RELEASE = 5
    MOUSE_MOTION = 6
    MOUSE_ENTER_WINDOW = 7
    MOUSE_LEAVE_WINDOW = 8
    EXPOSE = 12
    DESTROY = 17


@dataclass(frozen=True)
class KeyMap:
    """The raw codes one platform reports for keys and mouse buttons."""

    name: str
    keys: Mapping[Key, int]
    buttons: Mapping[MouseButton, int]

    def key_for(self, code: int) -> Optional[Key]:
        """Return the key reported with ``code``, or None if it is unknown."""
        return next((key for key, c in self.keys.items() if c == code), None)

    def button_for(self, code: int) -> Optional[MouseButton]:
        """Return the mouse button reported with ``code``, or None."""
        return next(
            (button for button, c in self.buttons.items() if c == code), None
        )


LINUX_KEYMAP = KeyMap(
    name="linux",
    keys={
        Key.ESC: 65307,
        Key.A: 97,
        Key.S: 115,
        Key.D: 100,
        Key.Q: 113,
        Key.W: 119,
        Key.E: 101,
        Key.R: 114,
        Key.INC: 93,
        Key.DEC: 91,
        Key.P: 112,
        Key.O: 111,
        Key.UP: 65362,
        Key.DOWN: 65364,
        Key.LEFT: 65361,
        Key.RIGHT: 65363,
        Key.ONE: 49,
        Key.TWO: 50,
        Key.THREE: 51,
    },
    buttons={
        MouseButton.LEFT: 1,
        MouseButton.MIDDLE: 2,
        MouseButton.RIGHT: 3,
        MouseButton.SCROLL_UP: 4,
        MouseButton.SCROLL_DOWN: 5,
    },
)

MACOS_KEYMAP = KeyMap(
    name="macos",
    keys={
        Key.ESC: 53,
        Key.A: 0,
        Key.S: 1,
        Key.D: 2,
        Key.Q: 12,
        Key.W: 13,
        Key.E: 14,
        Key.R: 15,
        Key.INC: 30,
        Key.DEC: 33,
        Key.P: 35,
        Key.O: 31,
        Key.UP: 126,
        Key.DOWN: 125,
        Key.LEFT: 123,
        Key.RIGHT: 124,
        Key.ONE: 18,
        Key.TWO: 19,
        Key.THREE: 20,
    },
    buttons={
        MouseButton.LEFT: 1,
        MouseButton.RIGHT: 2,
        MouseButton.MIDDLE: 3,
        MouseButton.SCROLL_UP: 4,
        MouseButton.SCROLL_DOWN: 5,
    },
)

_BY_PLATFORM = {
    "linux": LINUX_KEYMAP,
    "darwin": MACOS_KEYMAP,
    "macos": MACOS_KEYMAP,
}


def keymap_for(platform_name: str) -> KeyMap:
    """Return the keymap for a platform name such as ``sys.platform``.

    Raises ValueError for a platform without a keymap.
    """
    normalized = platform_name.lower()
    if normalized.startswith("linux"):
        normalized = "linux"
    try:
        return _BY_PLATFORM[normalized]
    except KeyError:
        raise ValueError(f"no keymap for platform {platform_name!r}") from None