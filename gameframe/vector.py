"""Small 2D, 3D and 4D vector types with element-wise arithmetic."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field, fields
from typing import Callable, Iterator, TypeVar, Union

_V = TypeVar("_V", bound="_VectorOps")
Operand = Union["_VectorOps", float, int]


class _VectorOps:
    """Component helpers shared by the vector types.

    Operands are either a vector of the same type (applied component by
    component) or a plain number (applied to each component).
    """

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]

    def _operands(self, other: Operand) -> Iterator[float]:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return (float(other) for _ in fields(self))  # type: ignore[arg-type]
        if type(other) is type(self):
            return iter(other)  # type: ignore[arg-type]
        raise TypeError(
            f"unsupported operand for {type(self).__name__}: {type(other).__name__}"
        )

    def _combine(self: _V, other: Operand, op: Callable[[float, float], float]) -> _V:
        return type(self)(*(op(a, b) for a, b in zip(self, self._operands(other))))

    def _assign(self: _V, other: Operand, op: Callable[[float, float], float]) -> _V:
        values = [op(a, b) for a, b in zip(self, self._operands(other))]
        for f, value in zip(fields(self), values):  # type: ignore[arg-type]
            setattr(self, f.name, value)
        return self


@dataclass
class Vector2(_VectorOps):
    """Two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Operand) -> "Vector2":
        return self._combine(other, operator.add)

    def __iadd__(self, other: Operand) -> "Vector2":
        return self._assign(other, operator.add)

    def __sub__(self, other: Operand) -> "Vector2":
        return self._combine(other, operator.sub)

    def __isub__(self, other: Operand) -> "Vector2":
        return self._assign(other, operator.sub)

    def __mul__(self, other: Operand) -> "Vector2":
        return self._combine(other, operator.mul)

    def __imul__(self, other: Operand) -> "Vector2":
        return self._assign(other, operator.mul)

    def __truediv__(self, other: Operand) -> "Vector2":
        return self._combine(other, operator.truediv)

    def __itruediv__(self, other: Operand) -> "Vector2":
        return self._assign(other, operator.truediv)


@dataclass
class Vector3(_VectorOps):
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Operand) -> "Vector3":
        return self._combine(other, operator.add)

    def __iadd__(self, other: Operand) -> "Vector3":
        return self._assign(other, operator.add)

    def __sub__(self, other: Operand) -> "Vector3":
        return self._combine(other, operator.sub)

    def __isub__(self, other: Operand) -> "Vector3":
        return self._assign(other, operator.sub)

    def __mul__(self, other: Operand) -> "Vector3":
        return self._combine(other, operator.mul)

    def __imul__(self, other: Operand) -> "Vector3":
        return self._assign(other, operator.mul)

    def __truediv__(self, other: Operand) -> "Vector3":
        return self._combine(other, operator.truediv)

    def __itruediv__(self, other: Operand) -> "Vector3":
        return self._assign(other, operator.truediv)


@dataclass
class Vector4(_VectorOps):
    """Four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __add__(self, other: Operand) -> "Vector4":
        return self._combine(other, operator.add)

    def __iadd__(self, other: Operand) -> "Vector4":
        return self._assign(other, operator.add)

    def __sub__(self, other: Operand) -> "Vector4":
        return self._combine(other, operator.sub)

    def __isub__(self, other: Operand) -> "Vector4":
        return self._assign(other, operator.sub)

    def __mul__(self, other: Operand) -> "Vector4":
        return self._combine(other, operator.mul)

    def __imul__(self, other: Operand) -> "Vector4":
        return self._assign(other, operator.mul)

    def __truediv__(self, other: Operand) -> "Vector4":
        return self._combine(other, operator.truediv)

    def __itruediv__(self, other: Operand) -> "Vector4":
        return self._assign(other, operator.truediv)


@dataclass
class AABB:
    """Axis-aligned bounding box given by its minimum and maximum corners."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


def dot(v1: _VectorOps, v2: _VectorOps | None = None) -> float:
    """Dot product of two vectors, or of a vector with itself."""
    if v2 is None:
        v2 = v1
    if type(v1) is not type(v2):
        raise TypeError(
            f"cannot take dot product of {type(v1).__name__} and {type(v2).__name__}"
        )
    return sum(a * b for a, b in zip(v1, v2))


def length(v1: _VectorOps, v2: _VectorOps | None = None) -> float:
    """Square root of ``dot(v1, v2)``; NaN when the dot product is negative."""
    product = dot(v1, v2)
    if product < 0.0:
        return math.nan
    return math.sqrt(product)


def normalize(v: _V) -> _V:
    """Unit vector in the direction of ``v``; a zero vector is returned as a copy."""
    magnitude = length(v)
    if magnitude != 0.0:
        return v / magnitude
    return type(v)(*v)