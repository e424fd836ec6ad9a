"""Layered queues of draw commands."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Dict, List, Optional

DrawCommand = Callable[[], None]


class LayerType(IntEnum):
    """Draw layers, drawn in ascending order."""

    FIRST = 0
    BACK_GROUND = 1
    OBJECT = 2
    DEBUG = 3
    UI = 4
    LAST = 5


class Renderer:
    """Collects draw commands per layer and runs them lowest layer first.

    After each layer the matching depth-clear callback runs, if one was
    given, so layers never occlude one another. Queues are emptied after
    every draw, but a layer that was used once keeps getting its depth clear.
    """

    def __init__(
        self,
        clear_depth: Optional[Callable[[], None]] = None,
        clear_off_screen_depth: Optional[Callable[[], None]] = None,
    ) -> None:
        self._draw_queue: Dict[LayerType, List[DrawCommand]] = {}
        self._off_screen_queue: Dict[LayerType, List[DrawCommand]] = {}
        self._clear_depth = clear_depth
        self._clear_off_screen_depth = clear_off_screen_depth

    def add_draw(self, layer: LayerType, is_off_screen: bool, func: DrawCommand) -> None:
        """Queue ``func`` on ``layer`` of the on-screen or off-screen queue."""
        queue = self._off_screen_queue if is_off_screen else self._draw_queue
        queue.setdefault(LayerType(layer), []).append(func)

    def draw(self) -> None:
        """Run the on-screen queue, then empty it."""
        self._run(self._draw_queue, self._clear_depth)

    def off_screen_draw(self) -> None:
        """Run the off-screen queue, then empty it."""
        self._run(self._off_screen_queue, self._clear_off_screen_depth)

    @staticmethod
    def _run(
        queue: Dict[LayerType, List[DrawCommand]],
        clear: Optional[Callable[[], None]],
    ) -> None:
        for layer in sorted(queue):
            for command in list(queue[layer]):
                command()
            if clear is not None:
                clear()
        for commands in queue.values():
            commands.clear()