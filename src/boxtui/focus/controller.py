"""Keyboard focus controller - Tab and Backtab drive a focus chain."""

from __future__ import annotations

from typing import Optional

from boxtui.core.event import Event, Key, KeyEvent
from boxtui.focus.chain import FocusChain


class KeyboardFocusController:
    """Moves focus forward on Tab and backward on Backtab."""

    def __init__(self, chain: Optional[FocusChain] = None) -> None:
        self._chain = chain

    @property
    def chain(self) -> Optional[FocusChain]:
        return self._chain

    def handle_event(self, event: Event) -> None:
        if self._chain is None or not isinstance(event, KeyEvent):
            return
        if event.key is Key.TAB:
            self._chain.focus_next()
        elif event.key is Key.BACKTAB:
            self._chain.focus_prev()
