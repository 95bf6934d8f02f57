"""Event vocabulary shared between terminal backends and the widget tree.

Events are a closed set of frozen dataclasses. Each class carries a fixed
``kind`` tag, so an event can never pair one kind with another kind's
payload. The core broadcasts every kind unchanged; only KEY events are
interpreted (by the keyboard focus controller).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import ClassVar, Optional, Union

from boxtui.core.geometry import Point


class EventKind(Enum):
    """Discriminant of an event."""
    KEY = auto()
    RESIZE = auto()
    MOUSE = auto()
    ERROR = auto()
    INTERRUPT = auto()
    RAW = auto()
    NONE = auto()


class Key(Enum):
    """Named key codes."""
    UNKNOWN = auto()
    ENTER = auto()
    SPACE = auto()
    TAB = auto()
    BACKTAB = auto()
    ESC = auto()
    BACKSPACE = auto()
    BACKSPACE2 = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()


class Modifier(Flag):
    """Keyboard modifier bits; combine with ``|``."""
    NONE = 0
    SHIFT = auto()
    CTRL = auto()
    ALT = auto()
    META = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A keyboard input event."""
    kind: ClassVar[EventKind] = EventKind.KEY

    key: Key = Key.UNKNOWN
    char: Optional[str] = None  # Literal character, if any
    modifiers: Modifier = Modifier.NONE

    @property
    def is_char(self) -> bool:
        """Check if this is a plain printable character."""
        return self.char is not None and self.key is Key.UNKNOWN

    def has(self, modifier: Modifier) -> bool:
        """Check whether all bits of modifier are set."""
        return (self.modifiers & modifier) == modifier


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""
    kind: ClassVar[EventKind] = EventKind.RESIZE

    width: int = 0
    height: int = 0

    @property
    def size(self) -> Point:
        return Point(self.width, self.height)


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at a cell position."""
    kind: ClassVar[EventKind] = EventKind.MOUSE

    pos: Point = Point()


@dataclass(frozen=True)
class ErrorEvent:
    """The backend hit an abnormal condition."""
    kind: ClassVar[EventKind] = EventKind.ERROR

    message: str = ""


@dataclass(frozen=True)
class InterruptEvent:
    """The backend was asked to wake up or stop."""
    kind: ClassVar[EventKind] = EventKind.INTERRUPT


@dataclass(frozen=True)
class RawEvent:
    """Undecoded input passed through by the backend."""
    kind: ClassVar[EventKind] = EventKind.RAW

    data: bytes = b""


@dataclass(frozen=True)
class NoneEvent:
    """Placeholder event carrying nothing."""
    kind: ClassVar[EventKind] = EventKind.NONE


Event = Union[
    KeyEvent,
    ResizeEvent,
    MouseEvent,
    ErrorEvent,
    InterruptEvent,
    RawEvent,
    NoneEvent,
]
