"""Painter - stack-based drawing onto a cell surface.

A Painter keeps a stack of origin offsets. ``translate`` pushes a new
origin and ``restore`` pops it; every push made while drawing a widget
must be popped before that widget's ``draw`` returns. ``translated`` wraps
the pair in a context manager so the pop happens even when drawing fails.

``with_mask`` returns a view onto the same surface and the same offset
stack whose clip is narrowed to a rectangle. Mask rectangles are given
relative to the current origin and are inclusive of their far edge.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Protocol, runtime_checkable

from boxtui.core.geometry import ORIGIN, Point, Rect
from boxtui.errors import PainterStackError

logger = logging.getLogger(__name__)

# Single-line box drawing characters
HLINE = '─'
VLINE = '│'
TOP_LEFT = '┌'
TOP_RIGHT = '┐'
BOTTOM_LEFT = '└'
BOTTOM_RIGHT = '┘'


@runtime_checkable
class Surface(Protocol):
    """Anything a Painter can write cells into."""

    width: int
    height: int

    def in_bounds(self, x: int, y: int) -> bool:
        ...

    def put_char(self, x: int, y: int, char: str, bold: bool = False, reverse: bool = False) -> None:
        ...


class Painter:
    """Draws text and borders onto a Surface through a translate/clip stack."""

    def __init__(
        self,
        surface: Surface,
        clip: Optional[Rect] = None,
        _stack: Optional[list[Point]] = None,
    ) -> None:
        self._surface = surface
        self._stack = _stack if _stack is not None else [ORIGIN]
        self._clip = clip if clip is not None else Rect(0, 0, surface.width, surface.height)

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def offset(self) -> Point:
        """Absolute position of the current origin."""
        return self._stack[-1]

    @property
    def clip(self) -> Rect:
        """Absolute clip rectangle of this view."""
        return self._clip

    @property
    def depth(self) -> int:
        """Number of translations currently pushed."""
        return len(self._stack) - 1

    def translate(self, dx: int, dy: int) -> None:
        """Push a new origin offset by (dx, dy) from the current one."""
        self._stack.append(self.offset.add(Point(dx, dy)))

    def restore(self) -> None:
        """Pop the most recent translation."""
        if len(self._stack) <= 1:
            raise PainterStackError("restore() called with no translation pushed")
        self._stack.pop()

    @contextmanager
    def translated(self, dx: int, dy: int) -> Iterator[Painter]:
        """Translate for the duration of a with-block, restoring on exit."""
        self.translate(dx, dy)
        try:
            yield self
        finally:
            self.restore()

    def with_mask(self, rect: Rect) -> Painter:
        """Return a view clipped to rect (relative to the current origin)."""
        clip = self._clip.intersect(rect.translated(self.offset))
        return Painter(self._surface, clip=clip, _stack=self._stack)

    def set_cell(self, x: int, y: int, char: str, bold: bool = False, reverse: bool = False) -> None:
        """Write one cell if it falls inside the clip and the surface."""
        ax = x + self.offset.x
        ay = y + self.offset.y
        if not self._clip.contains(ax, ay) or not self._surface.in_bounds(ax, ay):
            return
        self._surface.put_char(ax, ay, char, bold=bold, reverse=reverse)

    def draw_text(self, x: int, y: int, text: str, *, bold: bool = False, reverse: bool = False) -> None:
        """Draw a single line of text starting at (x, y)."""
        for i, char in enumerate(text):
            self.set_cell(x + i, y, char, bold=bold, reverse=reverse)

    def draw_hline(self, x: int, y: int, length: int) -> None:
        for i in range(length):
            self.set_cell(x + i, y, HLINE)

    def draw_vline(self, x: int, y: int, length: int) -> None:
        for i in range(length):
            self.set_cell(x, y + i, VLINE)

    def draw_rect(self, x: int, y: int, w: int, h: int) -> None:
        """
        Draw a border around the w x h cells starting at (x, y).

        Degenerate rectangles collapse to a line; empty ones draw nothing.
        """
        if w <= 0 or h <= 0:
            return
        if h == 1:
            self.draw_hline(x, y, w)
            return
        if w == 1:
            self.draw_vline(x, y, h)
            return

        right = x + w - 1
        bottom = y + h - 1
        self.draw_hline(x + 1, y, w - 2)
        self.draw_hline(x + 1, bottom, w - 2)
        self.draw_vline(x, y + 1, h - 2)
        self.draw_vline(right, y + 1, h - 2)
        self.set_cell(x, y, TOP_LEFT)
        self.set_cell(right, y, TOP_RIGHT)
        self.set_cell(x, bottom, BOTTOM_LEFT)
        self.set_cell(right, bottom, BOTTOM_RIGHT)

    def check_balanced(self, expected_depth: int = 0) -> None:
        """Raise PainterStackError unless exactly expected_depth translations remain."""
        if self.depth != expected_depth:
            logger.warning("Painter stack unbalanced: depth %d, expected %d", self.depth, expected_depth)
            raise PainterStackError(
                f"Painter stack unbalanced: depth {self.depth}, expected {expected_depth}"
            )
