"""Keyboard and mouse state tracked across frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from gameframe.vector import Vector2, Vector3

KEY_COUNT = 256
MOUSE_BUTTON_COUNT = 4


@dataclass(frozen=True)
class MouseState:
    """One poll of the mouse.

    ``dx``, ``dy`` and ``dz`` are the relative movement (``dz`` is the wheel),
    ``buttons`` holds one value per button (non-zero means pressed) and
    ``x`` / ``y`` is the cursor position in client coordinates.
    """

    dx: int = 0
    dy: int = 0
    dz: int = 0
    buttons: Tuple[int, ...] = (0, 0, 0, 0)
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        buttons = tuple(int(b) for b in self.buttons)
        if len(buttons) > MOUSE_BUTTON_COUNT:
            raise ValueError(f"a mouse has at most {MOUSE_BUTTON_COUNT} buttons")
        buttons += (0,) * (MOUSE_BUTTON_COUNT - len(buttons))
        object.__setattr__(self, "buttons", buttons)


class InputState:
    """Current and previous keyboard and mouse state.

    Call :meth:`update` once per frame with the freshly read device state;
    the "trigger" queries compare it with the state of the frame before.
    """

    def __init__(self) -> None:
        self._keys = bytes(KEY_COUNT)
        self._pre_keys = bytes(KEY_COUNT)
        self._mouse = MouseState()
        self._pre_mouse = MouseState()

    def update(self, keys: Iterable[int], mouse: Optional[MouseState] = None) -> None:
        """Store a new frame of input, keeping the current one as previous.

        ``keys`` holds one value per key code (256 of them); non-zero means
        the key is down.
        """
        new_keys = bytes(keys)
        if len(new_keys) != KEY_COUNT:
            raise ValueError(f"expected {KEY_COUNT} key states, got {len(new_keys)}")
        self._pre_keys = self._keys
        self._pre_mouse = self._mouse
        self._keys = new_keys
        self._mouse = mouse if mouse is not None else MouseState()

    @staticmethod
    def _check_key(key: int) -> int:
        if not 0 <= key < KEY_COUNT:
            raise IndexError(f"key code {key} outside 0..{KEY_COUNT - 1}")
        return key

    def is_push_key(self, key: int) -> bool:
        """Whether ``key`` is down this frame."""
        return bool(self._keys[self._check_key(key)])

    def is_release_key(self, key: int) -> bool:
        """Whether ``key`` is up this frame."""
        return not self._keys[self._check_key(key)]

    def is_trigger_push_key(self, key: int) -> bool:
        """Whether ``key`` went down this frame."""
        key = self._check_key(key)
        return bool(self._keys[key]) and not self._pre_keys[key]

    def is_trigger_release_key(self, key: int) -> bool:
        """Whether ``key`` went up this frame."""
        key = self._check_key(key)
        return not self._keys[key] and bool(self._pre_keys[key])

    @staticmethod
    def _valid_button(button: int) -> bool:
        return 0 <= button < MOUSE_BUTTON_COUNT

    def is_push_mouse_button(self, button: int) -> bool:
        """Whether ``button`` is down; False for an unknown button."""
        return self._valid_button(button) and bool(self._mouse.buttons[button])

    def is_release_mouse_button(self, button: int) -> bool:
        """Whether ``button`` is up; False for an unknown button."""
        return self._valid_button(button) and not self._mouse.buttons[button]

    def is_trigger_push_mouse_button(self, button: int) -> bool:
        """Whether ``button`` went down this frame; False for an unknown button."""
        return (
            self._valid_button(button)
            and bool(self._mouse.buttons[button])
            and not self._pre_mouse.buttons[button]
        )

    def is_trigger_release_mouse_button(self, button: int) -> bool:
        """Whether ``button`` went up this frame; False for an unknown button."""
        return (
            self._valid_button(button)
            and not self._mouse.buttons[button]
            and bool(self._pre_mouse.buttons[button])
        )

    def mouse_position(self) -> Vector2:
        """Cursor position in client coordinates."""
        return Vector2(float(self._mouse.x), float(self._mouse.y))

    def mouse_velocity(self) -> Vector3:
        """Mouse movement this frame; ``z`` is the wheel."""
        return Vector3(float(self._mouse.dx), float(self._mouse.dy), float(self._mouse.dz))