"""Layout - space allocation and the Box container."""

from boxtui.layout.allocator import (
    Allocation,
    SizeRequest,
    allocate,
    allocate_widgets,
    request_for,
)
from boxtui.layout.box import Box, hbox, vbox

__all__ = [
    "Allocation",
    "SizeRequest",
    "allocate",
    "allocate_widgets",
    "request_for",
    "Box",
    "hbox",
    "vbox",
]
