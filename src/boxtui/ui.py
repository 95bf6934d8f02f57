"""UI - root wiring of a widget tree, its focus chain, and keybindings.

The UI is backend-agnostic: it never reads the terminal. Callers hand it
events (from any source that yields Event objects) and read frames back
as Canvas objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from boxtui.core.canvas import Canvas
from boxtui.core.event import Event, InterruptEvent, Key, KeyEvent, ResizeEvent
from boxtui.core.geometry import Point
from boxtui.focus.chain import FocusChain
from boxtui.focus.controller import KeyboardFocusController
from boxtui.render.painter import Painter, Surface
from boxtui.widgets.base import Widget

logger = logging.getLogger(__name__)


@dataclass
class Keybinding:
    """A callback bound to a named key or a literal character."""
    trigger: Union[Key, str]
    handler: Callable[[], None]

    def matches(self, event: Event) -> bool:
        """Check if an event triggers this binding."""
        if not isinstance(event, KeyEvent):
            return False
        if isinstance(self.trigger, Key):
            return event.key is self.trigger
        return event.char == self.trigger


class UI:
    """
    Drives a widget tree from a stream of events.

    Each dispatched event goes through, in order: root resize (for
    ResizeEvent), matching keybindings, the keyboard focus controller,
    and finally a broadcast to the whole tree.
    """

    def __init__(self, root: Widget, focus_chain: Optional[FocusChain] = None) -> None:
        self.root = root
        self.running = False
        self._bindings: list[Keybinding] = []
        self._focus_chain: Optional[FocusChain] = None
        self._controller = KeyboardFocusController(None)
        self.set_focus_chain(focus_chain)

    @property
    def focus_chain(self) -> Optional[FocusChain]:
        return self._focus_chain

    def set_focus_chain(self, chain: Optional[FocusChain]) -> None:
        self._focus_chain = chain
        self._controller = KeyboardFocusController(chain)

    def set_keybinding(self, trigger: Union[Key, str], handler: Callable[[], None]) -> None:
        """Call handler whenever a key event matches trigger."""
        if isinstance(trigger, str) and len(trigger) != 1:
            raise ValueError(f"Character keybindings must be a single character, got {trigger!r}")
        self._bindings.append(Keybinding(trigger, handler))

    def clear_keybindings(self) -> None:
        self._bindings = []

    def dispatch(self, event: Event) -> None:
        """Route one event through the UI."""
        if isinstance(event, ResizeEvent):
            self.root.resize(event.size)
        for binding in self._bindings:
            if binding.matches(event):
                binding.handler()
        self._controller.handle_event(event)
        self.root.handle_event(event)

    def paint(self, surface: Surface) -> None:
        """Draw the root widget into surface, anchored at the origin."""
        painter = Painter(surface)
        self.root.draw(painter)
        painter.check_balanced()

    def render(self, width: int, height: int) -> Canvas:
        """Lay the tree out for width x height and paint it into a new canvas."""
        self.root.resize(Point(width, height))
        canvas = Canvas(width=width, height=height)
        self.paint(canvas)
        return canvas

    def focus_default(self) -> Optional[Widget]:
        """Focus the chain's default widget if nothing in the chain has focus."""
        chain = self._focus_chain
        if chain is None:
            return None
        if chain.focused() is not None:
            return None
        widget = chain.focus_default()
        if widget is not None:
            widget.set_focused(True)
        return widget

    def run(self, events: Iterable[Event], on_frame: Optional[Callable[[UI], None]] = None) -> None:
        """
        Dispatch events until they run out, an interrupt arrives, or quit() is called.

        on_frame, if given, is called after every dispatched event so the
        caller can repaint.
        """
        self.running = True
        self.focus_default()
        try:
            for event in events:
                if isinstance(event, InterruptEvent):
                    logger.debug("Interrupt received, stopping")
                    self.root.handle_event(event)
                    break
                self.dispatch(event)
                if on_frame is not None:
                    on_frame(self)
                if not self.running:
                    break
        finally:
            self.running = False

    def quit(self) -> None:
        """Stop run() after the current event."""
        self.running = False
