"""Interpolation helpers and simple clamping."""

from __future__ import annotations

import math
from typing import TypeVar, Union

from gameframe.vector import Vector3, _VectorOps, dot

_T = TypeVar("_T", bound=Union[float, _VectorOps])


def lerp(start: _T, end: _T, t: float) -> _T:
    """Linear interpolation between two numbers or two vectors of one type."""
    if isinstance(start, _VectorOps):
        if type(start) is not type(end):
            raise TypeError(
                f"cannot interpolate {type(start).__name__} and {type(end).__name__}"
            )
        return type(start)(
            *((1.0 - t) * a + t * b for a, b in zip(start, end))  # type: ignore[arg-type]
        )
    if isinstance(end, _VectorOps):
        raise TypeError("cannot interpolate a number and a vector")
    return (1.0 - t) * start + t * end  # type: ignore[operator,return-value]


def slerp(v1: Vector3, v2: Vector3, t: float) -> Vector3:
    """Spherical-style interpolation using ``cos(dot(v1, v2))`` as the angle."""
    angle = math.cos(dot(v1, v2))
    sin_angle = math.sin(angle)
    scale1 = math.sin((1.0 - t) * angle) / sin_angle
    scale2 = math.sin(t * angle) / sin_angle
    return Vector3(*(scale1 * a + scale2 * b for a, b in zip(v1, v2)))


def clamp_min_zero(num: float) -> float:
    """Clamp ``num`` so that it is never below zero."""
    return 0.0 if num <= 0.0 else num