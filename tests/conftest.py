"""Shared fixtures: recording widgets and blank canvases."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import pytest

from boxtui.core.canvas import Canvas
from boxtui.core.event import Event
from boxtui.core.geometry import Point
from boxtui.core.policy import SizePolicy
from boxtui.render.painter import Painter
from boxtui.widgets.base import BaseWidget


class FakeWidget(BaseWidget):
    """
    Leaf widget with fixed hints that records what happens to it.

    When drawn it fills `fill_width` cells of its first row with `fill`,
    ignoring its own size, so tests can observe clipping.
    """

    def __init__(
        self,
        name: str = "",
        min_size: tuple[int, int] = (0, 0),
        size: Optional[tuple[int, int]] = None,
        policy: tuple[SizePolicy, SizePolicy] = (SizePolicy.PREFERRED, SizePolicy.PREFERRED),
        fill: str = "",
        fill_width: int = 0,
        journal: Optional[list] = None,
    ) -> None:
        super().__init__()
        self.name = name
        self.set_min_size_hint(Point(*min_size))
        self.set_size_hint(Point(*(size if size is not None else min_size)))
        self.set_size_policy(*policy)
        self.fill = fill
        self.fill_width = fill_width
        self.journal = journal
        self.events: list[Event] = []
        self.resizes: list[Point] = []
        self.draw_offsets: list[Point] = []

    def resize(self, size: Point) -> None:
        super().resize(size)
        self.resizes.append(size)

    def draw(self, painter: Painter) -> None:
        self.draw_offsets.append(painter.offset)
        if self.fill:
            painter.draw_text(0, 0, self.fill * self.fill_width)

    def handle_event(self, event: Event) -> None:
        self.events.append(event)
        if self.journal is not None:
            self.journal.append((self.name, event))


@pytest.fixture
def make_widget() -> Callable[..., FakeWidget]:
    """Factory fixture for FakeWidget."""
    return FakeWidget


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(width=20, height=6)


@pytest.fixture
def painter(canvas: Canvas) -> Painter:
    return Painter(canvas)


@pytest.fixture(autouse=True)
def restore_boxtui_logger():
    """Undo handlers and levels the CLI installs on the package logger."""
    logger = logging.getLogger("boxtui")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
