"""Focus chains - which widget receives keyboard input, and what comes next."""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from boxtui.widgets.base import Widget

logger = logging.getLogger(__name__)


@runtime_checkable
class FocusChain(Protocol):
    """Traversal order for keyboard focus."""

    def focus_next(self) -> Optional[Widget]:
        """Move focus forward; return the newly focused widget."""
        ...

    def focus_prev(self) -> Optional[Widget]:
        """Move focus backward; return the newly focused widget."""
        ...

    def focus_default(self) -> Optional[Widget]:
        """Widget that should get focus when nothing has it yet."""
        ...

    def focused(self) -> Optional[Widget]:
        """The widget in the chain that currently has focus, if any."""
        ...


class SimpleFocusChain:
    """
    Focus chain over an ordered list of widgets.

    Moving focus unfocuses the first focused widget in the list and
    focuses its neighbour, wrapping at either end. If no widget is
    focused, moving does nothing and returns None. The chain only keeps
    a single widget focused while focus is moved through it; it does not
    police widgets whose focus is set directly.
    """

    def __init__(self, *widgets: Widget) -> None:
        self._widgets: list[Widget] = list(widgets)

    @property
    def widgets(self) -> tuple[Widget, ...]:
        return tuple(self._widgets)

    def set(self, *widgets: Widget) -> None:
        """Replace the registered widgets. Focus flags are left untouched."""
        self._widgets = list(widgets)

    def _focused_index(self) -> Optional[int]:
        for i, widget in enumerate(self._widgets):
            if widget.is_focused():
                return i
        return None

    def focused(self) -> Optional[Widget]:
        index = self._focused_index()
        return None if index is None else self._widgets[index]

    def _move(self, step: int) -> Optional[Widget]:
        index = self._focused_index()
        if index is None:
            return None
        self._widgets[index].set_focused(False)
        target = self._widgets[(index + step) % len(self._widgets)]
        target.set_focused(True)
        logger.debug("Focus moved from index %d to %d", index, (index + step) % len(self._widgets))
        return target

    def focus_next(self) -> Optional[Widget]:
        return self._move(1)

    def focus_prev(self) -> Optional[Widget]:
        return self._move(-1)

    def focus_default(self) -> Optional[Widget]:
        """Return the first widget without changing any focus."""
        if not self._widgets:
            return None
        return self._widgets[0]
