"""Software raster engine: colours, matrices, vectors, in-memory images, keymaps and input state."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "matrix",
    "vector",
    "timing",
    "image",
    "keymap",
    "input",
    "device",
]