"""Keyboard and mouse button state tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .keymap import LINUX_KEYMAP, Key, KeyMap, MouseButton

TRACKED_KEYS = (Key.A, Key.S, Key.D, Key.Q, Key.W, Key.E, Key.R)
TRACKED_BUTTONS = (
    MouseButton.LEFT,
    MouseButton.MIDDLE,
    MouseButton.RIGHT,
    MouseButton.SCROLL_UP,
    MouseButton.SCROLL_DOWN,
)


class InputState(IntEnum):
    """State of one key or button."""

    NO_STATE = 0
    IS_PRESSED = 1
    UN_PRESSED = 2


@dataclass
class Input:
    """Press and release state of the tracked keys and mouse buttons.

    A release leaves the state UN_PRESSED until it is read once with
    ``is_key_unpressed`` or ``is_mouse_unpressed``.
    """

    keymap: KeyMap = field(default_factory=lambda: LINUX_KEYMAP)
    key_state: list[InputState] = field(init=False)
    mouse_state: list[InputState] = field(init=False)

    def __post_init__(self) -> None:
        self.reset()

    def key_index(self, key_code: int) -> Optional[int]:
        """Return the slot of a tracked key code, or None if it is not tracked."""
        key = self.keymap.key_for(key_code)
        return TRACKED_KEYS.index(key) if key in TRACKED_KEYS else None

    def mouse_index(self, key_code: int) -> Optional[int]:
        """Return the slot of a tracked button code, or None if not tracked."""
        button = self.keymap.button_for(key_code)
        return TRACKED_BUTTONS.index(button) if button in TRACKED_BUTTONS else None

    def reset(self) -> None:
        """Clear every key and button to NO_STATE."""
        self.key_state = [InputState.NO_STATE] * len(TRACKED_KEYS)
        self.mouse_state = [InputState.NO_STATE] * len(TRACKED_BUTTONS)

    def press_key(self, key_code: int) -> None:
        """Record a key press; untracked codes are ignored."""
        index = self.key_index(key_code)
        if index is not None:
            self.key_state[index] = InputState.IS_PRESSED

    def release_key(self, key_code: int) -> None:
        """Record a key release; untracked codes are ignored."""
        index = self.key_index(key_code)
        if index is not None:
            self.key_state[index] = InputState.UN_PRESSED

    def press_mouse(self, key_code: int) -> None:
        """Record a button press; untracked codes are ignored."""
        index = self.mouse_index(key_code)
        if index is not None:
            self.mouse_state[index] = InputState.IS_PRESSED

    def release_mouse(self, key_code: int) -> None:
        """Record a button release; untracked codes are ignored."""
        index = self.mouse_index(key_code)
        if index is not None:
            self.mouse_state[index] = InputState.UN_PRESSED

    def _require_key(self, key_code: int) -> int:
        index = self.key_index(key_code)
        if index is None:
            raise KeyError(f"key code {key_code} is not tracked")
        return index

    def _require_mouse(self, key_code: int) -> int:
        index = self.mouse_index(key_code)
        if index is None:
            raise KeyError(f"mouse code {key_code} is not tracked")
        return index

    def is_key_down(self, key_code: int) -> bool:
        """Return True while the key is held down."""
        return self.key_state[self._require_key(key_code)] is InputState.IS_PRESSED

    def is_key_unpressed(self, key_code: int) -> bool:
        """Return True once after the key was released, then clear it."""
        index = self._require_key(key_code)
        if self.key_state[index] is InputState.UN_PRESSED:
            self.key_state[index] = InputState.NO_STATE
            return True
        return False

    def is_mouse_down(self, key_code: int) -> bool:
        """Return True while the button is held down."""
        index = self._require_mouse(key_code)
        return self.mouse_state[index] is InputState.IS_PRESSED

    def is_mouse_unpressed(self, key_code: int) -> bool:
        """Return True once after the button was released, then clear it."""
        index = self._require_mouse(key_code)
        if self.mouse_state[index] is InputState.UN_PRESSED:
            self.mouse_state[index] = InputState.NO_STATE
            return True
        return False