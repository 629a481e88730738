"""A drawing device: viewport and control-panel images plus input state."""

from __future__ import annotations

from typing import Optional

from .image import Image
from .input import Input
from .keymap import LINUX_KEYMAP, Key, KeyMap


class EngineExit(SystemExit):
    """Raised when the device shuts down; ``code`` is 1 on error, else 0."""


def _new_image(width: int, height: int) -> Optional[Image]:
    if width <= 0 or height <= 0:
        return None
    image = Image(width, height)
    print(f"New image created. --> [{width}px/{height}px]")
    return image


class Device:
    """A window of ``viewport_width + panel_width`` by ``height`` pixels.

    The viewport and panel images are created only for positive sizes.
    Images pushed to the window are recorded in ``placements``.
    """

    def __init__(
        self,
        viewport_width: int,
        panel_width: int,
        height: int,
        title: str = "",
        keymap: KeyMap = LINUX_KEYMAP,
    ):
        self.title = title
        self.keymap = keymap
        self.win_width = viewport_width + panel_width
        self.win_height = height
        self.viewport = _new_image(viewport_width, height)
        self.panel = _new_image(panel_width, height)
        self.input = Input(keymap)
        self.placements: list[tuple[Image, int, int]] = []
        self.render_time = 0
        self.closed = False

    def handle_key_press(self, key_code: int) -> None:
        """Record a key press; the escape key closes the device."""
        print(f"(key pressed): keycode = {key_code}")
        if key_code == self.keymap.keys[Key.ESC]:
            print("ESC pressed")
            self.close(False)
        self.input.press_key(key_code)

    def handle_key_release(self, key_code: int) -> None:
        """Record a key release."""
        print("key released")
        self.input.release_key(key_code)

    def handle_mouse_press(self, key_code: int, x: int, y: int) -> None:
        """Record a mouse button press; the position is not used."""
        self.input.press_mouse(key_code)

    def handle_mouse_release(self, key_code: int, x: int, y: int) -> None:
        """Record a mouse button release; the position is not used."""
        self.input.release_mouse(key_code)

    def push_image(self, image: Optional[Image], x: int, y: int) -> bool:
        """Place ``image`` at (x, y) in the window.

        Nothing happens, and False is returned, when there is no image or
        the position lies outside 0..win_width by 0..win_height.
        """
        if not (0 <= x <= self.win_width and 0 <= y <= self.win_height):
            return False
        if image is None:
            return False
        self.placements.append((image, x, y))
        return True

    def close(self, is_error: bool) -> None:
        """Release the images and raise EngineExit with status 1 or 0."""
        self.viewport = None
        self.panel = None
        self.placements.clear()
        self.closed = True
        raise EngineExit(1 if is_error else 0)