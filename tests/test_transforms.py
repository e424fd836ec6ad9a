import math

import pytest

from gameframe.matrix import Matrix4x4
from gameframe.transforms import (
    inverse_4x4,
    make_affine_matrix,
    make_identity_4x4,
    make_orthographic_matrix,
    make_perspective_fov_matrix,
    make_rotate_matrix,
    make_rotate_x_matrix,
    make_rotate_y_matrix,
    make_rotate_z_matrix,
    make_scale_matrix,
    make_translate_matrix,
    make_viewport_matrix,
    transform_normal,
    transpose_matrix,
)
from gameframe.vector import Vector3


def assert_matrix_close(a, b, tol=1e-9):
    for row_a, row_b in zip(a.m, b.m):
        for x, y in zip(row_a, row_b):
            assert x == pytest.approx(y, abs=tol)


def row_times(vec, m):
    return [sum(vec[r] * m.m[r][c] for r in range(4)) for c in range(4)]


def test_identity_diagonal():
    ident = make_identity_4x4()
    assert [ident.m[i][i] for i in range(4)] == [1.0, 1.0, 1.0, 1.0]
    assert sum(sum(row) for row in ident.m) == 4.0


def test_translate_bottom_row():
    m = make_translate_matrix(Vector3(1.5, -2.0, 3.0))
    assert m.m[3] == [1.5, -2.0, 3.0, 1.0]
    assert m.m[0] == [1.0, 0.0, 0.0, 0.0]


def test_scale_diagonal():
    m = make_scale_matrix(Vector3(2.0, 3.0, 4.0))
    assert [m.m[i][i] for i in range(4)] == [2.0, 3.0, 4.0, 1.0]


@pytest.mark.parametrize(
    "maker", [make_rotate_x_matrix, make_rotate_y_matrix, make_rotate_z_matrix]
)
def test_rotation_is_orthonormal(maker):
    r = maker(0.7)
    assert_matrix_close(r * transpose_matrix(r), make_identity_4x4())


def test_rotate_x_layout():
    r = make_rotate_x_matrix(0.3)
    assert r.m[1][2] == pytest.approx(math.sin(0.3))
    assert r.m[2][1] == pytest.approx(-math.sin(0.3))


def test_rotate_matrix_composition_order():
    rot = Vector3(0.1, 0.2, 0.3)
    expected = make_rotate_x_matrix(0.1) * (
        make_rotate_y_matrix(0.2) * make_rotate_z_matrix(0.3)
    )
    assert_matrix_close(make_rotate_matrix(rot), expected)


def test_affine_is_scale_rotate_translate():
    s, r, t = Vector3(2, 2, 2), Vector3(0.4, 0.5, 0.6), Vector3(1, 2, 3)
    expected = (make_scale_matrix(s) * make_rotate_matrix(r)) * make_translate_matrix(t)
    result = make_affine_matrix(s, r, t)
    assert_matrix_close(result, expected)
    assert result.m[3][:3] == pytest.approx([1.0, 2.0, 3.0])


def test_transpose_twice_is_identity_operation():
    m = Matrix4x4([[float(r * 4 + c) for c in range(4)] for r in range(4)])
    assert transpose_matrix(transpose_matrix(m)) == m
    assert transpose_matrix(m).m[0][1] == m.m[1][0]


def test_inverse_round_trip():
    m = make_affine_matrix(Vector3(2, 3, 4), Vector3(0.3, -0.2, 1.1), Vector3(5, -6, 7))
    assert_matrix_close(m * inverse_4x4(m), make_identity_4x4())
    assert_matrix_close(inverse_4x4(m) * m, make_identity_4x4())


def test_inverse_of_singular_is_zero_matrix():
    singular = Matrix4x4([[1.0, 2.0, 3.0, 4.0]] * 4)
    assert inverse_4x4(singular) == Matrix4x4()


def test_transform_normal_ignores_translation():
    v = Vector3(1.0, 2.0, 3.0)
    result = transform_normal(v, make_translate_matrix(Vector3(10, 20, 30)))
    assert result == Vector3(1.0, 2.0, 3.0)


def test_transform_normal_scales():
    result = transform_normal(Vector3(1.0, 1.0, 1.0), make_scale_matrix(Vector3(2, 3, 4)))
    assert result == Vector3(2.0, 3.0, 4.0)


def test_viewport_maps_corners():
    vp = make_viewport_matrix(10.0, 20.0, 1280.0, 720.0, 0.0, 1.0)
    top_left = row_times([-1.0, 1.0, 0.0, 1.0], vp)
    bottom_right = row_times([1.0, -1.0, 1.0, 1.0], vp)
    assert top_left[:2] == pytest.approx([10.0, 20.0])
    assert bottom_right[:3] == pytest.approx([1290.0, 740.0, 1.0])


def test_perspective_structure():
    p = make_perspective_fov_matrix(0.45, 16 / 9, 0.1, 100.0)
    assert p.m[2][3] == 1.0
    assert p.m[3][3] == 0.0
    near = row_times([0.0, 0.0, 0.1, 1.0], p)
    far = row_times([0.0, 0.0, 100.0, 1.0], p)
    assert near[2] / near[3] == pytest.approx(0.0, abs=1e-9)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_orthographic_maps_box_to_unit_range():
    o = make_orthographic_matrix(-4.0, 3.0, 4.0, -3.0, 0.0, 10.0)
    corner = row_times([4.0, 3.0, 0.0, 1.0], o)
    other = row_times([-4.0, -3.0, 0.0, 1.0], o)
    assert corner[:2] == pytest.approx([1.0, 1.0])
    assert other[:2] == pytest.approx([-1.0, -1.0])
    assert o.m[3][3] == 1.0