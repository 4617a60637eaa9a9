from __future__ import annotations

import pytest

from cellui.dom.arena import Node, NodeArena, NodeHandle, NodeState, Tag
from cellui.dom.builder import attr, body, button, div, text
from cellui.runtime.errors import StaleHandleError
from cellui.ui_runtime.event_filter import EventFilter


def test_alloc_returns_handles_for_current_generation() -> None:
    arena: NodeArena[str] = NodeArena()
    first = text(arena, "a")
    second = text(arena, "b")
    assert first == NodeHandle(0, 0)
    assert second == NodeHandle(1, 0)
    assert arena.get(second).text == "b"
    assert len(arena) == 2


def test_reset_invalidates_previous_handles() -> None:
    arena: NodeArena[str] = NodeArena()
    stale = text(arena, "old")
    arena.reset()
    assert arena.generation == 1
    assert len(arena) == 0
    fresh = text(arena, "new")
    assert fresh == NodeHandle(0, 1)
    with pytest.raises(StaleHandleError):
        arena.get(stale)


def test_alloc_rejects_stale_or_unknown_children() -> None:
    arena: NodeArena[str] = NodeArena()
    stale = text(arena, "old")
    arena.reset()
    with pytest.raises(StaleHandleError):
        div(arena).child(stale).build()
    with pytest.raises(IndexError):
        arena.alloc(Node(Tag.DIV, children=(NodeHandle(5, 1),)))


def test_builders_record_tag_attributes_state_and_children() -> None:
    arena: NodeArena[str] = NodeArena()
    label = text(arena, "ok", tag=Tag.BUTTON, state=NodeState.FOCUS)
    quit_filter = EventFilter.char("q", "quit")
    menu = (
        div(arena)
        .attr(attr().class_("menu", "wide").event(quit_filter).build())
        .state(NodeState.HOVER)
        .children([label, button(arena).build()])
        .build()
    )
    root = body(arena).child(menu).build()
    node = arena.get(menu)
    assert node.tag is Tag.DIV
    assert node.attr.classes == ("menu", "wide")
    assert node.attr.events == (quit_filter,)
    assert node.state == NodeState.HOVER
    assert len(node.children) == 2
    assert not node.is_text
    assert arena.get(label).is_text
    assert arena.get(root).tag is Tag.BODY
