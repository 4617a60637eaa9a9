from __future__ import annotations

import pytest

from cellui.api.geometry import Orientation, Rect, Vec2
from cellui.api.input_events import KeyEvent, MouseEvent
from cellui.rendering.grid_backend import GridBackend
from cellui.rendering.printer import Printer
from cellui.ui_runtime.linear import LinearView
from tests.cellui.conftest import FixedView


def _render(view, size: Vec2) -> GridBackend:
    grid = GridBackend(size)
    view.layout(size)
    view.render(Printer(grid))
    return grid


def test_vertical_desired_size_stacks_heights() -> None:
    view = LinearView.vertical().child(FixedView("a", (3, 1))).child(FixedView("b", (5, 2)))
    assert view.desired_size() == Vec2(5, 3)


def test_layout_never_exceeds_remaining_budget() -> None:
    a = FixedView("a", (3, 2))
    b = FixedView("b", (4, 3))
    view = LinearView.vertical().child(a).child(b)
    view.layout(Vec2(4, 3))
    assert a.laid_out == [Vec2(3, 2)]
    assert b.laid_out == [Vec2(4, 1)]


def test_horizontal_children_render_side_by_side() -> None:
    view = LinearView.horizontal().child(FixedView("a", (2, 1), "a")).child(FixedView("b", (3, 1), "b"))
    grid = _render(view, Vec2(6, 1))
    assert grid.lines() == ["aabbb "]
    assert view.child_bound(1) == Rect.new((2, 0), (3, 1))


def test_pointer_events_route_by_rendered_bound() -> None:
    a = FixedView("a", (2, 1))
    b = FixedView("b", (2, 1))
    view = LinearView.vertical().child(a).child(b)
    _render(view, Vec2(4, 4))
    assert view.on_event(None, MouseEvent.left_down(1, 1)) == "b"
    assert view.on_event(None, MouseEvent.left_down(3, 3)) is None


def test_keys_go_to_focused_child_only() -> None:
    view = LinearView.vertical().child(FixedView("a", (1, 1))).child(FixedView("b", (1, 1)))
    assert view.on_event(None, KeyEvent.of_char("x")) is None
    view.set_focus(1)
    assert view.on_event(None, KeyEvent.of_char("x")) == "b"
    with pytest.raises(IndexError):
        view.set_focus(2)


def test_both_orientation_is_rejected() -> None:
    with pytest.raises(ValueError):
        LinearView(Orientation.BOTH)
