"""Painting and output of cell surfaces."""

from boxtui.render.painter import Painter, Surface
from boxtui.render.console import ConsoleRenderer

__all__ = ["Painter", "Surface", "ConsoleRenderer"]
