"""Row-major 4x4 matrix."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

_SIZE = 4


def _zeros() -> List[List[float]]:
    return [[0.0] * _SIZE for _ in range(_SIZE)]


@dataclass
class Matrix4x4:
    """A 4x4 matrix stored as a list of four rows; defaults to all zeros."""

    m: List[List[float]] = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        rows = [list(row) for row in self.m]
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("Matrix4x4 needs exactly 4 rows of 4 values")
        self.m = [[float(value) for value in row] for row in rows]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix4x4":
        """Build a matrix from four rows of four numbers."""
        return cls([list(row) for row in rows])

    def _check(self, other: object) -> "Matrix4x4":
        if not isinstance(other, Matrix4x4):
            raise TypeError(
                f"unsupported operand for Matrix4x4: {type(other).__name__}"
            )
        return other

    def _elementwise(
        self, other: "Matrix4x4", op: Callable[[float, float], float]
    ) -> List[List[float]]:
        other = self._check(other)
        return [
            [op(a, b) for a, b in zip(row, other_row)]
            for row, other_row in zip(self.m, other.m)
        ]

    def _product(self, other: "Matrix4x4") -> List[List[float]]:
        other = self._check(other)
        columns = list(zip(*other.m))
        return [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self.m
        ]

    def __add__(self, other: "Matrix4x4") -> "Matrix4x4":
        return Matrix4x4(self._elementwise(other, operator.add))

    def __iadd__(self, other: "Matrix4x4") -> "Matrix4x4":
        self.m = self._elementwise(other, operator.add)
        return self

    def __sub__(self, other: "Matrix4x4") -> "Matrix4x4":
        return Matrix4x4(self._elementwise(other, operator.sub))

    def __isub__(self, other: "Matrix4x4") -> "Matrix4x4":
        self.m = self._elementwise(other, operator.sub)
        return self

    def __mul__(self, other: "Matrix4x4") -> "Matrix4x4":
        """Matrix product ``self * other``."""
        return Matrix4x4(self._product(other))

    def __imul__(self, other: "Matrix4x4") -> "Matrix4x4":
        self.m = self._product(other)
        return self

    __matmul__ = __mul__
    __imatmul__ = __imul__