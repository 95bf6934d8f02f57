"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from boxtui.core.event import Event
from boxtui.core.geometry import ORIGIN, Point
from boxtui.core.policy import SizePolicy

if TYPE_CHECKING:
    from boxtui.render.painter import Painter


@runtime_checkable
class Widget(Protocol):
    """Protocol every widget in a layout tree satisfies."""

    @property
    def size(self) -> Point:
        """Size assigned by the most recent resize()."""
        ...

    def min_size_hint(self) -> Point:
        """Smallest size the widget can be drawn at."""
        ...

    def size_hint(self) -> Point:
        """Size the widget would like to have."""
        ...

    def size_policy(self) -> tuple[SizePolicy, SizePolicy]:
        """Growth policy as (horizontal, vertical)."""
        ...

    def resize(self, size: Point) -> None:
        ...

    def draw(self, painter: Painter) -> None:
        ...

    def handle_event(self, event: Event) -> None:
        ...

    def is_focused(self) -> bool:
        ...

    def set_focused(self, focused: bool) -> None:
        ...


class BaseWidget(ABC):
    """Base class with common widget functionality."""

    def __init__(self) -> None:
        self._size = ORIGIN
        self._focused = False
        self._size_policy = (SizePolicy.PREFERRED, SizePolicy.PREFERRED)
        self._min_size_hint: Optional[Point] = None
        self._size_hint: Optional[Point] = None

    @property
    def size(self) -> Point:
        return self._size

    def resize(self, size: Point) -> None:
        self._size = size

    def is_focused(self) -> bool:
        return self._focused

    def set_focused(self, focused: bool) -> None:
        self._focused = focused

    def size_policy(self) -> tuple[SizePolicy, SizePolicy]:
        return self._size_policy

    def set_size_policy(self, horizontal: SizePolicy, vertical: SizePolicy) -> None:
        self._size_policy = (horizontal, vertical)

    def set_min_size_hint(self, hint: Optional[Point]) -> None:
        """Override the computed minimum size hint; None restores it."""
        self._min_size_hint = hint

    def set_size_hint(self, hint: Optional[Point]) -> None:
        """Override the computed preferred size hint; None restores it."""
        self._size_hint = hint

    def min_size_hint(self) -> Point:
        if self._min_size_hint is not None:
            return self._min_size_hint
        return self.natural_min_size()

    def size_hint(self) -> Point:
        if self._size_hint is not None:
            return self._size_hint
        return self.natural_size()

    def natural_min_size(self) -> Point:
        """Minimum size derived from content. Subclasses override."""
        return ORIGIN

    def natural_size(self) -> Point:
        """Preferred size derived from content. Defaults to the minimum."""
        return self.natural_min_size()

    @abstractmethod
    def draw(self, painter: Painter) -> None:
        """Subclasses must implement drawing."""
        pass

    def handle_event(self, event: Event) -> None:
        """Default: ignore events."""
        return None
