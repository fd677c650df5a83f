"""Input events and event listeners."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable, Optional


class EventType(Enum):
    MouseMove = "mouse_move"
    MouseDown = "mouse_down"
    MouseUp = "mouse_up"
    MouseWheel = "mouse_wheel"
    KeyDown = "key_down"
    KeyUp = "key_up"


class MouseCode(IntEnum):
    Left = 0
    Right = 1
    Middle = 2


@dataclass
class Event:
    """Base event; ``target`` is set by whoever dispatches it."""

    type: EventType
    target: Any = field(default=None, kw_only=True)


@dataclass
class MouseMoveEvent(Event):
    type: EventType = field(default=EventType.MouseMove, init=False)
    x: float
    y: float


@dataclass
class MouseDownEvent(Event):
    type: EventType = field(default=EventType.MouseDown, init=False)
    x: float
    y: float
    button: MouseCode


@dataclass
class MouseUpEvent(Event):
    type: EventType = field(default=EventType.MouseUp, init=False)
    x: float
    y: float
    button: MouseCode


@dataclass
class MouseWheelEvent(Event):
    type: EventType = field(default=EventType.MouseWheel, init=False)
    x: float
    y: float
    delta: float


@dataclass
class KeyDownEvent(Event):
    type: EventType = field(default=EventType.KeyDown, init=False)
    key: int
    count: int


@dataclass
class KeyUpEvent(Event):
    type: EventType = field(default=EventType.KeyUp, init=False)
    key: int
    count: int


Callback = Callable[[Event], Any]


class Listener:
    """Calls a callback for each event it handles while running."""

    def __init__(self, callback: Optional[Callback] = None, name: str = "", paused: bool = False):
        self.callback = callback
        self.name = name
        self._running = not paused
        self._done = False

    def handle(self, event: Event) -> None:
        if self.callback is not None and self._running:
            self.callback(event)

    def is_running(self) -> bool:
        return self._running

    def done(self) -> None:
        """Mark the listener as finished so its owner can drop it."""
        self._done = True

    def is_done(self) -> bool:
        return self._done

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False