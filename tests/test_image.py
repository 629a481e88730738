import pytest

from raster_engine.color import RED, WHITE
from raster_engine.image import Image
from raster_engine.vector import Vec2


def _painted(image, color):
    return {
        (x, y)
        for y in range(image.height)
        for x in range(image.width)
        if image.pixel(x, y) == color
    }


def test_new_image_is_blank():
    image = Image(4, 3)
    assert _painted(image, 0) == {(x, y) for x in range(4) for y in range(3)}


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_size_rejected(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_draw_pixel_inside():
    image = Image(5, 5)
    image.draw_pixel(2, 3, RED)
    assert image.pixel(2, 3) == RED
    assert _painted(image, RED) == {(2, 3)}


@pytest.mark.parametrize("x, y", [(0, 2), (2, 0), (5, 2), (2, 5), (-1, -1)])
def test_draw_pixel_outside_drawable_area_is_ignored(x, y):
    image = Image(5, 5)
    image.draw_pixel(x, y, RED)
    assert _painted(image, RED) == set()


def test_contains_excludes_first_row_and_column():
    image = Image(4, 4)
    assert image.contains(1, 1)
    assert image.contains(3, 3)
    assert not image.contains(0, 1)
    assert not image.contains(1, 0)
    assert not image.contains(4, 1)


def test_pixel_outside_grid_raises():
    image = Image(3, 3)
    with pytest.raises(IndexError):
        image.pixel(3, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_negative_color_stored_as_unsigned():
    image = Image(3, 3)
    image.draw_pixel(1, 1, -1)
    assert image.pixel(1, 1) == 0xFFFFFFFF


def test_fill_paints_drawable_area_only():
    image = Image(4, 3)
    image.fill(WHITE)
    assert _painted(image, WHITE) == {(x, y) for x in range(1, 4) for y in range(1, 3)}
    assert all(image.pixel(x, 0) == 0 for x in range(4))
    assert all(image.pixel(0, y) == 0 for y in range(3))


def test_vertical_line_reversed_direction():
    image = Image(10, 10)
    image.draw_line(Vec2(3.0, 8.0), Vec2(3.0, 4.0), RED)
    assert _painted(image, RED) == {(3, y) for y in range(5, 9)}


def test_line_shorter_than_one_unit_draws_nothing():
    image = Image(5, 5)
    image.draw_line(Vec2(2.0, 2.0), Vec2(2.5, 2.5), RED)
    assert _painted(image, RED) == set()


def test_diagonal_line_pixels_lie_between_end_points():
    image = Image(20, 20)
    image.draw_line(Vec2(2.0, 3.0), Vec2(15.0, 12.0), RED)
    painted = _painted(image, RED)
    assert (2, 3) in painted
    assert all(2 <= x <= 15 and 3 <= y <= 12 for x, y in painted)
    assert len(painted) <= int(Vec2(13.0, 9.0).magnitude())