"""Core data types - geometry, size policies, events, and cell surfaces."""

from boxtui.core.geometry import ORIGIN, Alignment, Point, Rect
from boxtui.core.policy import SizePolicy
from boxtui.core.event import (
    ErrorEvent,
    Event,
    EventKind,
    InterruptEvent,
    Key,
    KeyEvent,
    Modifier,
    MouseEvent,
    NoneEvent,
    RawEvent,
    ResizeEvent,
)
from boxtui.core.cell import Cell
from boxtui.core.canvas import Canvas

__all__ = [
    "ORIGIN",
    "Alignment",
    "Point",
    "Rect",
    "SizePolicy",
    "Event",
    "EventKind",
    "Key",
    "Modifier",
    "KeyEvent",
    "ResizeEvent",
    "MouseEvent",
    "ErrorEvent",
    "InterruptEvent",
    "RawEvent",
    "NoneEvent",
    "Cell",
    "Canvas",
]
