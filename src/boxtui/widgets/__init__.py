"""Widget contract and the minimal built-in widgets."""

from boxtui.widgets.base import BaseWidget, Widget
from boxtui.widgets.label import Label

__all__ = [
    "Widget",
    "BaseWidget",
    "Label",
]
