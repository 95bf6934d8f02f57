"""Tests for the Box layout container."""

import pytest

from boxtui.core.canvas import Canvas
from boxtui.core.event import KeyEvent, Key, MouseEvent, ResizeEvent
from boxtui.core.geometry import Alignment, Point
from boxtui.core.policy import SizePolicy
from boxtui.layout.box import Box, hbox, vbox
from boxtui.render.painter import Painter
from boxtui.widgets.base import BaseWidget, Widget
from boxtui.widgets.label import Label

MIN = SizePolicy.MINIMUM
PREF = SizePolicy.PREFERRED
MAX = SizePolicy.MAXIMUM
EXP = SizePolicy.EXPANDING


def trio(make_widget, vertical: bool = False):
    """Children with minimum 2, preferred 5 and policies MIN/PREF/EXP on the main axis."""
    widgets = []
    for policy in (MIN, PREF, EXP):
        if vertical:
            widgets.append(make_widget(min_size=(1, 2), size=(1, 5), policy=(PREF, policy)))
        else:
            widgets.append(make_widget(min_size=(2, 1), size=(5, 1), policy=(policy, PREF)))
    return widgets


class TestConstruction:

    def test_hbox_and_vbox(self, make_widget) -> None:
        a, b = make_widget(), make_widget()
        assert hbox(a, b).alignment is Alignment.HORIZONTAL
        assert vbox(a).alignment is Alignment.VERTICAL
        assert hbox(a, b).children == (a, b)

    def test_append_and_clear(self, make_widget) -> None:
        box = vbox()
        a = make_widget()
        box.append(a)
        assert box.children == (a,)
        box.clear()
        assert box.children == ()

    def test_cannot_contain_itself(self) -> None:
        box = vbox()
        with pytest.raises(ValueError):
            box.append(box)

    def test_cannot_append_twice(self, make_widget) -> None:
        a = make_widget()
        box = hbox(a)
        with pytest.raises(ValueError):
            box.append(a)

    def test_border_and_title(self) -> None:
        box = vbox()
        assert box.border is False
        box.set_border(True)
        box.set_title("Stats")
        assert box.border is True
        assert box.title == "Stats"

    def test_satisfies_widget_protocol(self) -> None:
        assert isinstance(vbox(), Widget)
        assert isinstance(vbox(), BaseWidget)


class TestSizeHints:

    def test_horizontal_hints(self, make_widget) -> None:
        box = hbox(
            make_widget(min_size=(2, 1), size=(5, 2)),
            make_widget(min_size=(3, 4), size=(1, 1)),
        )
        assert box.min_size_hint() == Point(5, 4)
        assert box.size_hint() == Point(6, 2)

    def test_vertical_hints(self, make_widget) -> None:
        box = vbox(
            make_widget(min_size=(2, 1), size=(5, 2)),
            make_widget(min_size=(3, 4), size=(1, 1)),
        )
        assert box.min_size_hint() == Point(3, 5)
        assert box.size_hint() == Point(5, 3)

    def test_border_adds_two_cells(self, make_widget) -> None:
        box = hbox(
            make_widget(min_size=(2, 1), size=(5, 2)),
            make_widget(min_size=(3, 4), size=(1, 1)),
        )
        box.set_border(True)
        assert box.min_size_hint() == Point(7, 6)
        assert box.size_hint() == Point(8, 4)

    def test_empty_box(self) -> None:
        box = vbox()
        assert box.min_size_hint() == Point(0, 0)
        box.set_border(True)
        assert box.size_hint() == Point(2, 2)

    def test_nested_hints(self, make_widget) -> None:
        inner = vbox(make_widget(min_size=(4, 1)), make_widget(min_size=(2, 1)))
        inner.set_border(True)
        outer = hbox(inner, make_widget(min_size=(3, 5)))
        assert outer.min_size_hint() == Point(9, 5)


class TestResize:

    def test_horizontal_allocation(self, make_widget) -> None:
        children = trio(make_widget)
        box = hbox(*children)
        box.resize(Point(20, 5))
        assert [c.size for c in children] == [Point(2, 5), Point(5, 5), Point(13, 5)]
        assert box.size == Point(20, 5)

    def test_vertical_allocation(self, make_widget) -> None:
        children = trio(make_widget, vertical=True)
        box = vbox(*children)
        box.resize(Point(4, 20))
        assert [c.size for c in children] == [Point(4, 2), Point(4, 5), Point(4, 13)]

    def test_border_shrinks_interior(self, make_widget) -> None:
        children = trio(make_widget)
        box = hbox(*children)
        box.set_border(True)
        box.resize(Point(22, 7))
        assert [c.size for c in children] == [Point(2, 5), Point(5, 5), Point(13, 5)]

    def test_insufficient_space(self, make_widget) -> None:
        children = trio(make_widget)
        box = hbox(*children)
        box.resize(Point(4, 1))
        assert [c.size.x for c in children] == [2, 2, 0]
        assert box.last_allocation is not None
        assert box.last_allocation.starved == [2]

    def test_tiny_bordered_box(self, make_widget) -> None:
        child = make_widget(min_size=(1, 1))
        box = vbox(child)
        box.set_border(True)
        box.resize(Point(1, 1))
        assert box.interior() == Point(0, 0)
        assert child.size == Point(0, 0)

    def test_cross_axis_is_full_interior(self, make_widget) -> None:
        children = [make_widget(min_size=(1, 1)), make_widget(min_size=(1, 9))]
        box = hbox(*children)
        box.resize(Point(10, 3))
        assert all(c.size.y == 3 for c in children)

    def test_resize_is_idempotent(self, make_widget) -> None:
        children = trio(make_widget)
        box = hbox(*children)
        box.resize(Point(17, 2))
        first = [c.size for c in children]
        box.resize(Point(17, 2))
        assert [c.size for c in children] == first
        assert children[0].resizes[0] == children[0].resizes[1]

    def test_resize_recurses(self, make_widget) -> None:
        leaf = make_widget(min_size=(1, 1), policy=(EXP, EXP))
        inner = hbox(leaf)
        inner.set_border(True)
        inner.set_size_policy(EXP, EXP)
        outer = vbox(inner)
        outer.resize(Point(10, 6))
        assert inner.size == Point(10, 6)
        assert leaf.size == Point(8, 4)


class TestDraw:

    def _render(self, box: Box, width: int, height: int) -> list[str]:
        box.resize(Point(width, height))
        canvas = Canvas(width=width, height=height)
        painter = Painter(canvas)
        box.draw(painter)
        assert painter.depth == 0
        return canvas.lines()

    def test_bordered_row(self) -> None:
        box = hbox(Label("ab"), Label("cd"))
        box.set_border(True)
        box.set_title("T")
        assert self._render(box, 10, 3) == [
            "┌─T──────┐",
            "│ab  cd  │",
            "└────────┘",
        ]

    def test_title_is_clipped(self) -> None:
        box = vbox()
        box.set_border(True)
        box.set_title("LONGTITLE")
        assert self._render(box, 8, 2)[0] == "┌─LONG─┐"

    def test_unbordered_column(self) -> None:
        assert self._render(vbox(Label("a"), Label("b")), 3, 2) == ["a  ", "b  "]

    def test_children_clipped_to_their_slot(self, make_widget) -> None:
        box = hbox(
            make_widget(size=(3, 1), policy=(MAX, PREF), fill="x", fill_width=10),
            make_widget(size=(3, 1), policy=(MAX, PREF), fill="y", fill_width=10),
        )
        assert self._render(box, 8, 1) == ["xxxyyy  "]

    def test_children_get_running_offsets(self, make_widget) -> None:
        children = trio(make_widget, vertical=True)
        box = vbox(*children)
        box.set_border(True)
        self._render(box, 5, 22)
        assert [c.draw_offsets[-1] for c in children] == [Point(1, 1), Point(1, 3), Point(1, 8)]

    def test_nested_boxes(self) -> None:
        right = vbox(Label("r1"), Label("r2"))
        right.set_border(True)
        right.set_size_policy(EXP, EXP)
        root = hbox(Label("L"), right)
        assert self._render(root, 7, 4) == [
            "L┌────┐",
            " │r1  │",
            " │r2  │",
            " └────┘",
        ]

    def test_painter_restored_when_child_fails(self, make_widget) -> None:
        class Exploding(BaseWidget):
            def draw(self, painter: Painter) -> None:
                raise RuntimeError("boom")

        box = hbox(make_widget(min_size=(1, 1)), Exploding())
        box.set_border(True)
        box.resize(Point(6, 3))
        painter = Painter(Canvas(width=6, height=3))
        with pytest.raises(RuntimeError):
            box.draw(painter)
        assert painter.depth == 0


class TestEvents:

    def test_broadcast_to_every_child(self, make_widget) -> None:
        children = [make_widget(), make_widget()]
        box = hbox(*children)
        event = KeyEvent(Key.ENTER)
        box.handle_event(event)
        assert all(c.events == [event] for c in children)

    def test_broadcast_pre_order(self, make_widget) -> None:
        journal: list = []

        class JournalBox(Box):
            def __init__(self, name: str, *children) -> None:
                super().__init__(*children)
                self.name = name

            def handle_event(self, event) -> None:
                journal.append((self.name, event))
                super().handle_event(event)

        a = make_widget("a", journal=journal)
        b = make_widget("b", journal=journal)
        c = make_widget("c", journal=journal)
        root = JournalBox("root", JournalBox("inner", a, b), c)

        events = [MouseEvent(Point(1, 2)), ResizeEvent(10, 4)]
        for event in events:
            root.handle_event(event)

        expected = []
        for event in events:
            expected += [(name, event) for name in ("root", "inner", "a", "b", "c")]
        assert journal == expected

    def test_empty_box_ignores_events(self) -> None:
        vbox().handle_event(KeyEvent(Key.TAB))
