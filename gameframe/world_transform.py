"""Position, rotation and scale of an object, with optional parenting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from gameframe.matrix import Matrix4x4
from gameframe.transforms import (
    make_identity_4x4,
    make_rotate_matrix,
    make_scale_matrix,
    make_translate_matrix,
)
from gameframe.vector import Vector3


def _unit_scale() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


@dataclass(eq=False)
class WorldTransform:
    """Transform whose world matrix is ``scale * rotate * translate``.

    With a parent, each of the three partial matrices is multiplied by the
    parent's matching matrix before they are combined.
    """

    translate: Vector3 = field(default_factory=Vector3)
    rotate: Vector3 = field(default_factory=Vector3)
    scale: Vector3 = field(default_factory=_unit_scale)
    offset: Vector3 = field(default_factory=Vector3)
    parent: Optional["WorldTransform"] = None
    world_matrix: Matrix4x4 = field(default_factory=make_identity_4x4, init=False)

    def __post_init__(self) -> None:
        self.update_matrix()

    def reset(self) -> None:
        """Restore the default position, rotation, scale, offset and parent."""
        self.translate = Vector3()
        self.rotate = Vector3()
        self.scale = _unit_scale()
        self.offset = Vector3()
        self.parent = None
        self.update_matrix()

    def update_matrix(self) -> None:
        """Recompute :attr:`world_matrix` from the current parameters."""
        translate = self.translate_matrix()
        rotate = self.rotate_matrix()
        scale = self.scale_matrix()
        if self.parent is not None:
            translate *= self.parent.translate_matrix()
            rotate *= self.parent.rotate_matrix()
            scale *= self.parent.scale_matrix()
        self.world_matrix = (scale * rotate) * translate

    def _row(self, index: int) -> Vector3:
        return Vector3(*self.world_matrix.m[index][:3])

    def forward(self) -> Vector3:
        """Third row of the world matrix."""
        return self._row(2)

    def up(self) -> Vector3:
        """Second row of the world matrix."""
        return self._row(1)

    def right(self) -> Vector3:
        """First row of the world matrix."""
        return self._row(0)

    def translate_matrix(self) -> Matrix4x4:
        """Translation matrix of ``translate + offset``."""
        return make_translate_matrix(self.translate + self.offset)

    def rotate_matrix(self) -> Matrix4x4:
        """Rotation matrix of the Euler angles in ``rotate``."""
        return make_rotate_matrix(self.rotate)

    def scale_matrix(self) -> Matrix4x4:
        """Scaling matrix of ``scale``."""
        return make_scale_matrix(self.scale)

    def world_translate(self) -> Vector3:
        """World position, taken from the bottom row of the world matrix."""
        return self._row(3)