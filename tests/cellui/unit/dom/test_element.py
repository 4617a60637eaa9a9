from __future__ import annotations

from cellui.api.geometry import Vec2
from cellui.api.input_events import KeyEvent
from cellui.api.style import Color
from cellui.css.property import ResolvedProperty
from cellui.css.stylesheet import StyleSheet
from cellui.dom.arena import NodeArena, NodeState
from cellui.dom.builder import attr, body, div, text
from cellui.dom.element import ElementView, render_root
from cellui.rendering.grid_backend import GridBackend
from cellui.rendering.printer import Printer
from cellui.ui_runtime.event_filter import EventFilter


def _menu(arena: NodeArena[str]):
    first = text(arena, "one", attr().event(EventFilter.char("1", "first")).build())
    second = text(arena, "two", state=NodeState.FOCUS)
    menu = div(arena).attr(attr().class_("menu").build()).children([first, second]).build()
    root = (
        body(arena)
        .attr(attr().event(EventFilter.ctrl_char("c", "quit")).build())
        .child(text(arena, "title", attr().class_("title").build()))
        .child(menu)
        .build()
    )
    return root


def test_navigation_and_selector_protocol() -> None:
    arena: NodeArena[str] = NodeArena()
    root = ElementView(arena, _menu(arena))
    menu = root.child(1)
    assert menu is not None
    second = menu.child(1)
    assert second is not None
    assert root.tag_name() == "body"
    assert menu.has_class("menu")
    assert second.has_pseudo_class("focus")
    assert not second.has_pseudo_class("hover")
    assert second.parent_element() is menu
    sibling = second.prev_sibling_element()
    assert sibling is not None and sibling.node.text == "one"
    assert menu.child(5) is None
    assert root.prev_sibling_element() is None


def test_desired_size_stacks_children() -> None:
    arena: NodeArena[str] = NodeArena()
    root = ElementView(arena, _menu(arena))
    assert root.desired_size() == Vec2(5, 3)


def test_measure_adds_box_edges_and_respects_width_limit() -> None:
    arena: NodeArena[str] = NodeArena()
    root = ElementView(arena, _menu(arena))
    parent = ResolvedProperty.root(Vec2(40, 10))
    sheet = StyleSheet.parse(".menu { border: 1; padding: 0 1 } .menu > div { border: none; padding: 0 }")
    assert root.measure(sheet, parent) == Vec2(7, 5)
    narrow = StyleSheet.parse("body { width: 4 }")
    assert root.measure(narrow, parent) == Vec2(4, 3)


def test_render_draws_text_borders_and_pseudo_class_styles() -> None:
    arena: NodeArena[str] = NodeArena()
    root = _menu(arena)
    sheet = StyleSheet.parse(".menu { border: 1 } .menu > div { border: none } div:focus { color: red }")
    grid = GridBackend(Vec2(8, 6))
    render_root(arena, root, sheet, Printer(grid))
    assert grid.lines() == [
        "title   ",
        "┌───┐   ",
        "│one│   ",
        "│two│   ",
        "└───┘   ",
        "        ",
    ]
    assert grid.cell_style(1, 3).fg == Color.index(9)
    assert grid.cell_style(1, 2).fg is None


def test_background_fills_border_box_and_margin_offsets_it() -> None:
    arena: NodeArena[str] = NodeArena()
    leaf = text(arena, "x")
    sheet = StyleSheet.parse("div { background: blue; margin: 1; padding: 0 1 }")
    grid = GridBackend(Vec2(6, 4))
    render_root(arena, leaf, sheet, Printer(grid))
    assert grid.lines()[1] == "  x   "
    assert grid.cell_style(1, 1).bg == Color.index(12)
    assert grid.cell_style(0, 0).bg is None


def test_rendering_stops_when_children_overflow_bound() -> None:
    arena: NodeArena[str] = NodeArena()
    root = _menu(arena)
    grid = GridBackend(Vec2(6, 2))
    render_root(arena, root, StyleSheet(), Printer(grid))
    assert grid.lines() == ["title ", "one   "]


def test_on_event_checks_own_filters_before_children() -> None:
    arena: NodeArena[str] = NodeArena()
    root = ElementView(arena, _menu(arena))
    assert root.on_event(KeyEvent.ctrl_char("c")) == "quit"
    assert root.on_event(KeyEvent.of_char("1")) == "first"
    assert root.on_event(KeyEvent.of_char("2")) is None


def test_unset_padding_is_inherited_by_descendants() -> None:
    arena: NodeArena[str] = NodeArena()
    inner = text(arena, "x")
    root = body(arena).child(div(arena).child(inner).build()).build()
    sheet = StyleSheet.parse("body { padding: 1 }")
    assert ElementView(arena, root).measure(sheet, ResolvedProperty.root(Vec2(8, 8))) == Vec2(7, 7)
    grid = GridBackend(Vec2(8, 8))
    render_root(arena, root, sheet, Printer(grid))
    assert grid.lines()[3] == "   x    "
