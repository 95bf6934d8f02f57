"""Geometry primitives - points, rectangles, and layout axes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    """A 2D integer point, also used for sizes (x = width, y = height)."""
    x: int = 0
    y: int = 0

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def clamp_min(self, value: int = 0) -> Point:
        """Return a point with both components raised to at least value."""
        return Point(max(self.x, value), max(self.y, value))


ORIGIN = Point(0, 0)


@dataclass(frozen=True)
class Rect:
    """
    Rectangle bounds in cell coordinates.

    Width and height count cells; a rectangle with a non-positive width
    or height is empty and contains nothing.
    """
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_corners(cls, min_pt: Point, max_pt: Point) -> Rect:
        """Build a rect from two inclusive corners."""
        return cls(min_pt.x, min_pt.y, max_pt.x - min_pt.x + 1, max_pt.y - min_pt.y + 1)

    @property
    def max_x(self) -> int:
        """Inclusive right edge."""
        return self.x + self.width - 1

    @property
    def max_y(self) -> int:
        """Inclusive bottom edge."""
        return self.y + self.height - 1

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x <= self.max_x and self.y <= y <= self.max_y

    def translated(self, offset: Point) -> Rect:
        return Rect(self.x + offset.x, self.y + offset.y, self.width, self.height)

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap of two rects (possibly empty)."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        max_x = min(self.max_x, other.max_x)
        max_y = min(self.max_y, other.max_y)
        return Rect(x, y, max(0, max_x - x + 1), max(0, max_y - y + 1))


class Alignment(Enum):
    """Direction in which a container lays out its children."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def main(self, pt: Point) -> int:
        """Component of pt along this axis."""
        return pt.x if self is Alignment.HORIZONTAL else pt.y

    def cross(self, pt: Point) -> int:
        """Component of pt across this axis."""
        return pt.y if self is Alignment.HORIZONTAL else pt.x

    def compose(self, main: int, cross: int) -> Point:
        """Build a point from main-axis and cross-axis components."""
        if self is Alignment.HORIZONTAL:
            return Point(main, cross)
        return Point(cross, main)
