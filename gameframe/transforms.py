"""Builders for common 4x4 transformation matrices (row-vector convention)."""

from __future__ import annotations

import math
from typing import List, Sequence

from gameframe.matrix import Matrix4x4
from gameframe.vector import Vector3

_SINGULAR_EPSILON = 1e-6


def make_identity_4x4() -> Matrix4x4:
    """The 4x4 identity matrix."""
    return Matrix4x4([[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)])


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """Translation matrix; the offset sits in the bottom row."""
    result = make_identity_4x4()
    result.m[3][:3] = [translate.x, translate.y, translate.z]
    return result


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Scaling matrix with the factors on the diagonal."""
    result = make_identity_4x4()
    result.m[0][0] = scale.x
    result.m[1][1] = scale.y
    result.m[2][2] = scale.z
    return result


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    """Rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    result = make_identity_4x4()
    result.m[1][1] = c
    result.m[1][2] = s
    result.m[2][1] = -s
    result.m[2][2] = c
    return result


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    result = make_identity_4x4()
    result.m[0][0] = c
    result.m[0][2] = -s
    result.m[2][0] = s
    result.m[2][2] = c
    return result


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    """Rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    result = make_identity_4x4()
    result.m[0][0] = c
    result.m[0][1] = s
    result.m[1][0] = -s
    result.m[1][1] = c
    return result


def make_rotate_matrix(rotate: Vector3) -> Matrix4x4:
    """Combined rotation ``X * (Y * Z)`` from Euler angles."""
    return make_rotate_x_matrix(rotate.x) * (
        make_rotate_y_matrix(rotate.y) * make_rotate_z_matrix(rotate.z)
    )


def make_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Scale, then rotate, then translate."""
    return (make_scale_matrix(scale) * make_rotate_matrix(rotate)) * make_translate_matrix(
        translate
    )


def transpose_matrix(m: Matrix4x4) -> Matrix4x4:
    """The transpose of ``m``."""
    return Matrix4x4([list(column) for column in zip(*m.m)])


def make_viewport_matrix(
    left: float,
    top: float,
    width: float,
    height: float,
    min_depth: float,
    max_depth: float,
) -> Matrix4x4:
    """Viewport matrix mapping normalised device coordinates to the screen (Y flipped)."""
    scale_x = width / 2.0
    scale_y = height / 2.0
    return Matrix4x4(
        [
            [scale_x, 0.0, 0.0, 0.0],
            [0.0, -scale_y, 0.0, 0.0],
            [0.0, 0.0, max_depth - min_depth, 0.0],
            [left + scale_x, top + scale_y, min_depth, 1.0],
        ]
    )


def make_perspective_fov_matrix(
    fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Left-handed perspective projection from a vertical field of view."""
    tan_half = math.tan(fov_y * 0.5)
    depth = far_clip - near_clip
    return Matrix4x4(
        [
            [1.0 / (aspect_ratio * tan_half), 0.0, 0.0, 0.0],
            [0.0, 1.0 / tan_half, 0.0, 0.0],
            [0.0, 0.0, far_clip / depth, 1.0],
            [0.0, 0.0, (-far_clip * near_clip) / depth, 0.0],
        ]
    )


def make_orthographic_matrix(
    left: float,
    top: float,
    right: float,
    bottom: float,
    near_clip: float,
    far_clip: float,
) -> Matrix4x4:
    """Orthographic projection of the given box."""
    result = make_identity_4x4()
    result.m[0][0] = 2.0 / (right - left)
    result.m[1][1] = 2.0 / (top - bottom)
    result.m[2][2] = -2.0 / (far_clip - near_clip)
    result.m[3][0] = -(right + left) / (right - left)
    result.m[3][1] = -(top + bottom) / (top - bottom)
    result.m[3][2] = -(far_clip + near_clip) / (far_clip - near_clip)
    return result


def _minor(rows: Sequence[Sequence[float]], skip_row: int, skip_col: int) -> List[List[float]]:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]


def _det3(a: Sequence[Sequence[float]]) -> float:
    return (
        a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
        - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
        + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0])
    )


def inverse_4x4(m: Matrix4x4) -> Matrix4x4:
    """Inverse of ``m``; a near-singular matrix yields the all-zero matrix."""
    rows = m.m
    det = sum(
        (-1) ** c * rows[0][c] * _det3(_minor(rows, 0, c)) for c in range(4)
    )
    if abs(det) < _SINGULAR_EPSILON:
        return Matrix4x4()
    inv_det = 1.0 / det
    return Matrix4x4(
        [
            [(-1) ** (i + j) * inv_det * _det3(_minor(rows, j, i)) for j in range(4)]
            for i in range(4)
        ]
    )


def transform_normal(v: Vector3, m: Matrix4x4) -> Vector3:
    """Transform a direction by the upper 3x3 part of ``m`` (no translation)."""
    return Vector3(
        *(v.x * m.m[0][c] + v.y * m.m[1][c] + v.z * m.m[2][c] for c in range(3))
    )