"""Descriptor heaps with bump allocation, and the views written into them."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

FORMAT_R8G8B8A8_UNORM_SRGB = "R8G8B8A8_UNORM_SRGB"
FORMAT_D24_UNORM_S8_UINT = "D24_UNORM_S8_UINT"
FORMAT_UNKNOWN = "UNKNOWN"

DIMENSION_TEXTURE2D = "TEXTURE2D"
DIMENSION_BUFFER = "BUFFER"


@dataclass(frozen=True)
class ViewDesc:
    """A view written into one slot of a descriptor heap."""

    kind: str
    resource: Any
    format: str
    dimension: str
    mip_levels: int = 0
    first_element: int = 0
    num_elements: int = 0
    structure_byte_stride: int = 0


class DescriptorAllocator:
    """A fixed-size descriptor heap handing out slots in order.

    Slots are never freed; once ``capacity`` slots are taken, further
    allocations fail.
    """

    def __init__(
        self,
        capacity: int,
        descriptor_size: int = 32,
        cpu_start: int = 0,
        gpu_start: int = 0,
        shader_visible: bool = False,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if descriptor_size <= 0:
            raise ValueError("descriptor_size must be positive")
        self.capacity = capacity
        self.descriptor_size = descriptor_size
        self.cpu_start = cpu_start
        self.gpu_start = gpu_start
        self.shader_visible = shader_visible
        self._next_index = 0
        self._views: Dict[int, ViewDesc] = {}

    @property
    def used(self) -> int:
        """Number of slots handed out so far."""
        return self._next_index

    @property
    def views(self) -> Mapping[int, ViewDesc]:
        """Read-only map of slot index to the view written there."""
        return MappingProxyType(self._views)

    def allocate(self) -> int:
        """Take the next free slot and return its index."""
        if not self.can_allocate():
            raise RuntimeError(
                f"descriptor heap is full ({self.capacity} slots in use)"
            )
        index = self._next_index
        self._next_index += 1
        return index

    def can_allocate(self) -> bool:
        """Whether another slot is free."""
        return self._next_index < self.capacity

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.capacity:
            raise IndexError(
                f"descriptor index {index} outside heap of {self.capacity}"
            )

    def cpu_handle(self, index: int) -> int:
        """CPU address of slot ``index``."""
        self._check_index(index)
        return self.cpu_start + self.descriptor_size * index

    def gpu_handle(self, index: int) -> int:
        """GPU address of slot ``index``."""
        self._check_index(index)
        return self.gpu_start + self.descriptor_size * index

    def _write(self, index: int, view: ViewDesc) -> ViewDesc:
        self._check_index(index)
        self._views[index] = view
        return view


class RtvManager(DescriptorAllocator):
    """Heap of render target views (three slots, not shader visible)."""

    MAX_COUNT = 3

    def __init__(
        self, descriptor_size: int = 32, cpu_start: int = 0, gpu_start: int = 0
    ) -> None:
        super().__init__(self.MAX_COUNT, descriptor_size, cpu_start, gpu_start, False)

    def create_render_target_view(self, index: int, resource: Any) -> ViewDesc:
        """Write an sRGB 2D render target view of ``resource`` at ``index``."""
        return self._write(
            index,
            ViewDesc(
                kind="rtv",
                resource=resource,
                format=FORMAT_R8G8B8A8_UNORM_SRGB,
                dimension=DIMENSION_TEXTURE2D,
            ),
        )


class DsvManager(DescriptorAllocator):
    """Heap of depth stencil views (two slots, not shader visible)."""

    MAX_COUNT = 2

    def __init__(
        self, descriptor_size: int = 32, cpu_start: int = 0, gpu_start: int = 0
    ) -> None:
        super().__init__(self.MAX_COUNT, descriptor_size, cpu_start, gpu_start, False)

    def create_depth_stencil_view(self, index: int, resource: Any) -> ViewDesc:
        """Write a 24-bit depth / 8-bit stencil 2D view of ``resource`` at ``index``."""
        return self._write(
            index,
            ViewDesc(
                kind="dsv",
                resource=resource,
                format=FORMAT_D24_UNORM_S8_UINT,
                dimension=DIMENSION_TEXTURE2D,
            ),
        )


class SrvManager(DescriptorAllocator):
    """Shader-visible heap of shader resource views (512 slots)."""

    MAX_COUNT = 512

    def __init__(
        self,
        descriptor_size: int = 32,
        cpu_start: int = 0,
        gpu_start: int = 0,
        capacity: Optional[int] = None,
    ) -> None:
        super().__init__(
            self.MAX_COUNT if capacity is None else capacity,
            descriptor_size,
            cpu_start,
            gpu_start,
            True,
        )

    def create_srv_for_texture2d(
        self, index: int, resource: Any, fmt: str, mip_levels: int
    ) -> ViewDesc:
        """Write a 2D texture view with the given format and mip count."""
        return self._write(
            index,
            ViewDesc(
                kind="srv",
                resource=resource,
                format=fmt,
                dimension=DIMENSION_TEXTURE2D,
                mip_levels=int(mip_levels),
            ),
        )

    def create_srv_for_structured_buffer(
        self, index: int, resource: Any, num_elements: int, structure_byte_stride: int
    ) -> ViewDesc:
        """Write a structured buffer view starting at element zero."""
        return self._write(
            index,
            ViewDesc(
                kind="srv",
                resource=resource,
                format=FORMAT_UNKNOWN,
                dimension=DIMENSION_BUFFER,
                first_element=0,
                num_elements=int(num_elements),
                structure_byte_stride=int(structure_byte_stride),
            ),
        )

    def create_render_target_srv(self, index: int, resource: Any) -> ViewDesc:
        """Write a single-mip sRGB 2D view so a render target can be sampled."""
        return self._write(
            index,
            ViewDesc(
                kind="srv",
                resource=resource,
                format=FORMAT_R8G8B8A8_UNORM_SRGB,
                dimension=DIMENSION_TEXTURE2D,
                mip_levels=1,
            ),
        )