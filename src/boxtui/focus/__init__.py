"""Keyboard focus - focus chains and the Tab/Backtab controller."""

from boxtui.focus.chain import FocusChain, SimpleFocusChain
from boxtui.focus.controller import KeyboardFocusController

__all__ = ["FocusChain", "SimpleFocusChain", "KeyboardFocusController"]
