"""Keyboard and mouse state with per-frame press and release detection."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional, Tuple

from e2d.events import MouseCode
from e2d.geometry import Point


class KeyCode(IntEnum):
    """Keys, numbered by their virtual-key codes."""

    Unknown = 0x00
    Up = 0x26
    Left = 0x25
    Right = 0x27
    Down = 0x28
    Enter = 0x0D
    Space = 0x20
    Esc = 0x1B
    Ctrl = 0x11
    Shift = 0x10
    Alt = 0x12
    Tab = 0x09
    Delete = 0x2E
    Back = 0x08

    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A

    Num0 = 0x30
    Num1 = 0x31
    Num2 = 0x32
    Num3 = 0x33
    Num4 = 0x34
    Num5 = 0x35
    Num6 = 0x36
    Num7 = 0x37
    Num8 = 0x38
    Num9 = 0x39

    Numpad0 = 0x60
    Numpad1 = 0x61
    Numpad2 = 0x62
    Numpad3 = 0x63
    Numpad4 = 0x64
    Numpad5 = 0x65
    Numpad6 = 0x66
    Numpad7 = 0x67
    Numpad8 = 0x68
    Numpad9 = 0x69

    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B


class Input:
    """Holds this frame's and the previous frame's keyboard and mouse state.

    Whatever reads the devices feeds a snapshot in through ``update`` once per frame.
    """

    def __init__(self) -> None:
        self._keys: frozenset = frozenset()
        self._prev_keys: frozenset = frozenset()
        self._buttons: frozenset = frozenset()
        self._prev_buttons: frozenset = frozenset()
        self._position = Point()
        self._delta: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    def update(
        self,
        keys: Iterable[KeyCode] = (),
        buttons: Iterable[MouseCode] = (),
        position: Optional[Point] = None,
        delta: Tuple[float, float, float] = (0.0, 0.0, 0.0),
    ) -> None:
        """Record a new snapshot; the current one becomes the previous one.

        ``keys`` and ``buttons`` are those held down; ``delta`` is the mouse
        movement on x, y and the wheel. A missing position keeps the last one.
        """
        self._prev_keys = self._keys
        self._keys = frozenset(KeyCode(key) for key in keys) - {KeyCode.Unknown}
        self._prev_buttons = self._buttons
        self._buttons = frozenset(MouseCode(button) for button in buttons)
        if position is not None:
            self._position = position
        dx, dy, dz = delta
        self._delta = (float(dx), float(dy), float(dz))

    def is_key_down(self, key: KeyCode) -> bool:
        return key in self._keys

    def is_key_press(self, key: KeyCode) -> bool:
        """True only on the frame the key went down."""
        return key in self._keys and key not in self._prev_keys

    def is_key_release(self, key: KeyCode) -> bool:
        """True only on the frame the key went up."""
        return key not in self._keys and key in self._prev_keys

    def is_mouse_down(self, button: MouseCode) -> bool:
        return button in self._buttons

    def is_mouse_press(self, button: MouseCode) -> bool:
        return button in self._buttons and button not in self._prev_buttons

    def is_mouse_release(self, button: MouseCode) -> bool:
        return button not in self._buttons and button in self._prev_buttons

    def mouse_x(self) -> float:
        return float(self._position.x)

    def mouse_y(self) -> float:
        return float(self._position.y)

    def mouse_pos(self) -> Point:
        return Point(float(self._position.x), float(self._position.y))

    def mouse_delta_x(self) -> float:
        return self._delta[0]

    def mouse_delta_y(self) -> float:
        return self._delta[1]

    def mouse_delta_z(self) -> float:
        return self._delta[2]