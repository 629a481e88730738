# raster_engine

A small, dependency-free software raster engine. Everything is pure Python
and works in memory.

## Modules

- `raster_engine.color`: pack and unpack 32-bit ARGB colours stored as
  `0xAARRGGBB`. `argb(alpha, r, g, b)` packs four channels (each taken modulo
  256); `get_alpha`, `get_red`, `get_green` and `get_blue` unpack them;
  `shade(shade_factor, color)` darkens the RGB channels (0 or less leaves the
  colour unchanged, 1 makes it black, alpha is kept); `reverse(color)` inverts
  every channel, alpha included. Palette constants such as `BLACK`, `WHITE`,
  `RED` and `GRAY` are provided.
- `raster_engine.matrix`: the immutable `Mat4` (rows accessible with `m[i]`,
  entries with `m[i, j]`, products with `@`), and builders `identity`,
  `multiply`, `translate`, `rotate_x`, `rotate_y`, `rotate_z`, `shear_x`,
  `shear_y`, `shear_z`, `scale_from_origin`, `scale_from_point`, `parallel`
  and `isometric`. Angles are in degrees; `radians` converts them using pi
  rounded to 3.141592.
- `raster_engine.vector`: frozen `Vec2` and `Vec4` with `dot`, `magnitude` and
  `normalized`; `Vec4` also has `cross` and `transformed(matrix)`, which
  applies a perspective divide unless the resulting w is 0 or 1 (within
  1e-5) and always returns w = 1.
- `raster_engine.image`: `Image(width, height)`, a grid of ARGB pixels that
  starts all zero. `draw_pixel`, `fill` and `draw_line` only write drawable
  pixels: row 0 and column 0 count as outside (see `contains`). `pixel(x, y)`
  reads a stored value and raises `IndexError` outside the grid. A
  non-positive size raises `ValueError`.
- `raster_engine.keymap`: the `Key` and `MouseButton` enums, the `Event`
  window-event numbers, and the `LINUX_KEYMAP` and `MACOS_KEYMAP` code
  tables. `keymap_for(platform_name)` accepts names such as `sys.platform`
  (`"linux"`, `"darwin"`, `"macos"`) and raises `ValueError` for others.
  `KeyMap.key_for(code)` and `KeyMap.button_for(code)` return `None` for an
  unknown code.
- `raster_engine.input`: `Input` tracks the keys A, S, D, Q, W, E, R and the
  left, middle and right buttons plus scroll up and down, each with an
  `InputState` of `NO_STATE`, `IS_PRESSED` or `UN_PRESSED`. Presses and
  releases of untracked codes are ignored; querying an untracked code with
  `is_key_down`, `is_key_unpressed`, `is_mouse_down` or `is_mouse_unpressed`
  raises `KeyError`. The "unpressed" state is read once: querying it clears
  it back to `NO_STATE`. The keymap defaults to the Linux layout.
- `raster_engine.device`: `Device(viewport_width, panel_width, height, title,
  keymap)` holds a viewport and a panel `Image` (each created only for a
  positive size), an `Input`, and routes key and mouse events into it.
  Pressing the escape key closes the device. `push_image(image, x, y)`
  records the image in `placements` when the position lies within the
  window and returns whether it did. `close(is_error)` drops the images and
  raises `EngineExit` (a `SystemExit`) with code 1 on error, otherwise 0.
- `raster_engine.timing`: `time_ms()` returns wall-clock time since the epoch
  in whole milliseconds.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from raster_engine import color, matrix
from raster_engine.device import Device, EngineExit
from raster_engine.image import Image
from raster_engine.keymap import LINUX_KEYMAP, Key
from raster_engine.vector import Vec2, Vec4

red = color.argb(0, 0xEE, 0x33, 0x33)
darker = color.shade(0.5, red)

image = Image(200, 100)
image.fill(color.BLACK)
image.draw_line(Vec2(10, 10), Vec2(150, 80), darker)

m = matrix.translate(1, 2, 3) @ matrix.rotate_z(90)
point = Vec4(1, 0, 0, 1).transformed(m)

device = Device(800, 200, 600, "demo")
device.handle_key_press(LINUX_KEYMAP.keys[Key.W])
assert device.input.is_key_down(LINUX_KEYMAP.keys[Key.W])
device.push_image(image, 0, 0)

try:
    device.handle_key_press(LINUX_KEYMAP.keys[Key.ESC])
except EngineExit as exit_:
    print(exit_.code)  # 0
```

## What it does not do

The package opens no window and shows nothing on screen. There is no event
loop and nothing reads events from the operating system: events reach a
`Device` only when its `handle_*` methods are called. `push_image` records
where an image was placed; it does not composite pixels into a window
buffer, and there is no call to read the mouse position. There is no command
to run.