"""Label widget - a single line of static text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from boxtui.core.geometry import Point
from boxtui.widgets.base import BaseWidget

if TYPE_CHECKING:
    from boxtui.render.painter import Painter


class Label(BaseWidget):
    """A line of text, drawn reversed while focused."""

    def __init__(self, text: str = "", bold: bool = False) -> None:
        super().__init__()
        self._text = text
        self.bold = bold

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def natural_min_size(self) -> Point:
        return Point(len(self._text), 1)

    def draw(self, painter: Painter) -> None:
        painter.draw_text(0, 0, self._text, bold=self.bold, reverse=self.is_focused())
