"""
boxtui: layout, drawing and events for terminal widget trees

Compose text-mode dashboards from nested boxes of widgets.

Quick Start:
    >>> from boxtui import Label, SimpleFocusChain, UI, hbox, vbox
    >>> left, right = Label("left"), Label("right")
    >>> root = vbox(Label("title"), hbox(left, right))
    >>> ui = UI(root, SimpleFocusChain(left, right))
    >>> print("\\n".join(ui.render(20, 3).lines()))

Features:
    - Box containers that lay children out in rows or columns
    - Per-axis size policies with a fair, deterministic space allocator
    - Borders and titles, drawn through a translate/clip painter stack
    - Event broadcast to every widget in the tree
    - Focus chains driven by Tab and Shift-Tab
"""

__version__ = "0.1.0"

# Core types
from boxtui.core.geometry import Alignment, Point, Rect
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
from boxtui.core.canvas import Canvas
from boxtui.errors import BoxTuiError, PainterStackError

# Drawing
from boxtui.render.painter import Painter

# Widgets and layout
from boxtui.widgets.base import BaseWidget, Widget
from boxtui.widgets.label import Label
from boxtui.layout.allocator import Allocation, SizeRequest, allocate
from boxtui.layout.box import Box, hbox, vbox

# Focus
from boxtui.focus.chain import FocusChain, SimpleFocusChain
from boxtui.focus.controller import KeyboardFocusController

# Root wiring
from boxtui.ui import UI

__all__ = [
    # Version
    "__version__",
    # Core types
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
    "Canvas",
    "BoxTuiError",
    "PainterStackError",
    # Drawing
    "Painter",
    # Widgets and layout
    "Widget",
    "BaseWidget",
    "Label",
    "Allocation",
    "SizeRequest",
    "allocate",
    "Box",
    "hbox",
    "vbox",
    # Focus
    "FocusChain",
    "SimpleFocusChain",
    "KeyboardFocusController",
    # Root wiring
    "UI",
]
