"""Box - a container that lays out its children along one axis."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from boxtui.core.event import Event
from boxtui.core.geometry import ORIGIN, Alignment, Point, Rect
from boxtui.layout.allocator import Allocation, allocate_widgets
from boxtui.widgets.base import BaseWidget, Widget

if TYPE_CHECKING:
    from boxtui.render.painter import Painter

logger = logging.getLogger(__name__)

BORDER = Point(2, 2)  # One cell on each side
ONE = Point(1, 1)


class Box(BaseWidget):
    """
    Layout container for placing widgets in a row or a column.

    Children are placed, drawn and sent events in the order they were
    added. Along the main axis each child gets the space the allocator
    hands it; across the main axis every child gets the full interior
    extent of the box. A border, if enabled, takes one cell on each side
    and may carry a title in its top edge.
    """

    def __init__(self, *children: Widget, alignment: Alignment = Alignment.VERTICAL) -> None:
        super().__init__()
        self._children: list[Widget] = []
        self._alignment = alignment
        self._border = False
        self._title = ""
        self._last_allocation: Optional[Allocation] = None
        for child in children:
            self.append(child)

    @property
    def alignment(self) -> Alignment:
        """Axis along which children are laid out."""
        return self._alignment

    @property
    def children(self) -> tuple[Widget, ...]:
        return tuple(self._children)

    @property
    def border(self) -> bool:
        return self._border

    @property
    def title(self) -> str:
        return self._title

    @property
    def last_allocation(self) -> Optional[Allocation]:
        """Allocation computed by the most recent resize(), if any."""
        return self._last_allocation

    def append(self, widget: Widget) -> None:
        """Add a widget after the existing children."""
        if widget is self:
            raise ValueError("A box cannot contain itself")
        if any(child is widget for child in self._children):
            raise ValueError("Widget is already a child of this box")
        self._children.append(widget)

    def clear(self) -> None:
        """Remove all children."""
        self._children = []

    def set_border(self, enabled: bool) -> None:
        """Set whether the border is visible or not."""
        self._border = enabled

    def set_title(self, title: str) -> None:
        """Set the title drawn in the top border."""
        self._title = title

    def _aggregate(self, hint: Callable[[Widget], Point]) -> Point:
        main = 0
        cross = 0
        for child in self._children:
            size = hint(child)
            main += self._alignment.main(size)
            cross = max(cross, self._alignment.cross(size))
        total = self._alignment.compose(main, cross)
        if self._border:
            total = total.add(BORDER)
        return total

    def natural_min_size(self) -> Point:
        """Sum of child minimums along the axis, largest child minimum across it."""
        return self._aggregate(lambda w: w.min_size_hint())

    def natural_size(self) -> Point:
        """Sum of child size hints along the axis, largest child hint across it."""
        return self._aggregate(lambda w: w.size_hint())

    def interior(self) -> Point:
        """Size available to children, inside the border if there is one."""
        if self._border:
            return self.size.sub(BORDER).clamp_min(0)
        return self.size.clamp_min(0)

    def resize(self, size: Point) -> None:
        """Store the new size and lay the children out inside it."""
        super().resize(size)
        self._layout_children(self.interior())

    def _layout_children(self, inner: Point) -> None:
        allocation = allocate_widgets(self._children, self._alignment.main(inner), self._alignment)
        self._last_allocation = allocation
        if allocation.degraded:
            logger.debug("Box %r squeezed to %s; children %s below minimum", self._title, inner, allocation.starved)

        cross = self._alignment.cross(inner)
        for child, main in zip(self._children, allocation.sizes):
            child.resize(self._alignment.compose(main, cross))

    def draw(self, painter: Painter) -> None:
        """Draw the border and title, then each child in its own slot."""
        size = self.size

        if not self._border:
            self._draw_children(painter)
            return

        painter.draw_rect(0, 0, size.x, size.y)
        title_band = Rect.from_corners(Point(2, 0), Point(size.x - 3, 0))
        painter.with_mask(title_band).draw_text(2, 0, self._title)

        with painter.translated(1, 1):
            self._draw_children(painter)

    def _draw_children(self, painter: Painter) -> None:
        offset = 0
        for child in self._children:
            shift = self._alignment.compose(offset, 0)
            with painter.translated(shift.x, shift.y):
                child.draw(painter.with_mask(Rect.from_corners(ORIGIN, child.size.sub(ONE))))
            offset += self._alignment.main(child.size)

    def handle_event(self, event: Event) -> None:
        """Pass the event, unchanged, to every child in order."""
        for child in self._children:
            child.handle_event(event)


def vbox(*children: Widget) -> Box:
    """Return a new vertical Box."""
    return Box(*children, alignment=Alignment.VERTICAL)


def hbox(*children: Widget) -> Box:
    """Return a new horizontal Box."""
    return Box(*children, alignment=Alignment.HORIZONTAL)
