import pytest

from raster_engine import matrix
from raster_engine.matrix import Mat4


def _flat(m: Mat4) -> list:
    return [m[i, j] for i in range(4) for j in range(4)]


def _transpose(m: Mat4) -> Mat4:
    return Mat4(zip(*m.rows))


IDENTITY_FLAT = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]


def test_radians_uses_source_pi():
    assert matrix.radians(180) == pytest.approx(3.141592)
    assert matrix.radians(0) == 0


def test_identity_diagonal():
    ident = matrix.identity()
    for i in range(4):
        for j in range(4):
            assert ident[i, j] == (1.0 if i == j else 0.0)


def test_identity_is_neutral():
    m = matrix.translate(1, 2, 3) @ matrix.rotate_z(15)
    assert matrix.multiply(matrix.identity(), m) == m
    assert matrix.multiply(m, matrix.identity()) == m


def test_multiply_matches_operator():
    a = matrix.rotate_x(20)
    b = matrix.translate(4, 5, 6)
    assert matrix.multiply(a, b) == a @ b


def test_translate_entries():
    t = matrix.translate(4, 5, 6)
    assert t[0, 3] == 4
    assert t[1, 3] == 5
    assert t[2, 3] == 6
    assert t[3] == (0.0, 0.0, 0.0, 1.0)


def test_translations_compose():
    combined = matrix.translate(1, 2, 3) @ matrix.translate(4, 5, 6)
    assert combined == matrix.translate(5, 7, 9)


@pytest.mark.parametrize("rotation", [matrix.rotate_x, matrix.rotate_y, matrix.rotate_z])
def test_rotation_inverse(rotation):
    result = rotation(37) @ rotation(-37)
    assert _flat(result) == pytest.approx(IDENTITY_FLAT, abs=1e-9)


@pytest.mark.parametrize("rotation", [matrix.rotate_x, matrix.rotate_y, matrix.rotate_z])
def test_rotation_zero_is_identity(rotation):
    result = rotation(0)
    assert _flat(result) == pytest.approx(IDENTITY_FLAT, abs=1e-9)


@pytest.mark.parametrize(
    "make", [lambda: matrix.rotate_x(12), lambda: matrix.rotate_y(50), matrix.isometric]
)
def test_rotations_are_orthonormal(make):
    m = make()
    result = m @ _transpose(m)
    assert _flat(result) == pytest.approx(IDENTITY_FLAT, abs=1e-9)


@pytest.mark.parametrize(
    "shear, position",
    [(matrix.shear_x, (0, 1)), (matrix.shear_y, (1, 0)), (matrix.shear_z, (2, 1))],
)
def test_shear_touches_one_entry(shear, position):
    sheared = shear(45)
    ident = matrix.identity()
    for i in range(4):
        for j in range(4):
            if (i, j) != position:
                assert sheared[i, j] == ident[i, j]
    assert sheared[position] == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("shear", [matrix.shear_x, matrix.shear_y, matrix.shear_z])
def test_shear_zero_is_identity(shear):
    assert shear(0) == matrix.identity()


def test_scale_from_origin_composes():
    combined = matrix.scale_from_origin(2) @ matrix.scale_from_origin(3)
    assert _flat(combined) == pytest.approx(_flat(matrix.scale_from_origin(6)), abs=1e-9)
    assert matrix.scale_from_origin(1) == matrix.identity()


def test_scale_from_point_at_origin():
    assert matrix.scale_from_point(0, 0, 0, 2.5) == matrix.scale_from_origin(2.5)


def test_scale_from_point_keeps_point_fixed():
    m = matrix.scale_from_point(1, 2, 3, 2)
    left = m @ matrix.translate(1, 2, 3)
    right = matrix.translate(1, 2, 3) @ matrix.scale_from_origin(2)
    assert _flat(left) == pytest.approx(_flat(right), abs=1e-9)


def test_scale_from_point_entries():
    m = matrix.scale_from_point(1, 2, 3, 2)
    assert m[0, 0] == pytest.approx(2.0)
    assert m[0, 3] == pytest.approx(-1.0)
    assert m[1, 3] == pytest.approx(-2.0)
    assert m[2, 3] == pytest.approx(-3.0)


def test_parallel_is_identity():
    assert matrix.parallel() == matrix.identity()


def test_isometric_bottom_row():
    assert matrix.isometric()[3] == (0.0, 0.0, 0.0, 1.0)


def test_row_indexing_and_errors():
    t = matrix.translate(7, 8, 9)
    assert t[1] == (0.0, 1.0, 0.0, 8.0)
    with pytest.raises(IndexError):
        t[4]


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Mat4([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    with pytest.raises(ValueError):
        Mat4([[1, 0, 0, 0]] * 5)


def test_matmul_with_non_matrix():
    with pytest.raises(TypeError):
        matrix.identity() @ 3