from __future__ import annotations

import pytest

from cellui.api.geometry import Vec2
from cellui.api.input_events import Key, KeyEvent, ResizeEvent
from cellui.api.style import Color, Effect
from cellui.css.stylesheet import StyleSheet
from cellui.dom.arena import NodeArena
from cellui.rendering.grid_backend import GridBackend
from cellui.runtime.errors import StaleHandleError
from cellui.runtime.executor import run_model
from cellui_demos.simple import STYLESHEET, SimpleModel


def _run(events, size: Vec2 = Vec2(50, 12)) -> tuple[GridBackend, SimpleModel, NodeArena]:
    backend = GridBackend(size)
    model = SimpleModel()
    arena = run_model(backend, StyleSheet.parse(STYLESHEET), model, events)
    return backend, model, arena


def test_first_frame_layout() -> None:
    backend, _, _ = _run([])
    lines = backend.lines()
    assert lines[0].strip() == ""
    assert lines[1].startswith("  Hello")
    assert lines[2].startswith("  World! count = 0")
    assert lines[3].startswith("  ┌")
    assert lines[4].startswith("  │ Increment │")
    assert lines[7].startswith("  └")
    assert "q quits" in lines[8]


def test_focused_entry_uses_focus_rule() -> None:
    backend, _, _ = _run([])
    focused = backend.cell_style(4, 4)
    plain = backend.cell_style(4, 5)
    assert Effect.REVERSE in focused.effects
    assert focused.fg == Color.index(14)
    assert plain.fg == Color.named(7)
    assert Effect.BOLD in backend.cell_style(2, 1).effects


def test_updates_rebuild_tree_in_a_fresh_generation() -> None:
    events = [KeyEvent.press(Key.DOWN), KeyEvent.press(Key.ENTER), KeyEvent.of_char("q"), KeyEvent.of_char("x")]
    backend, model, arena = _run(events)
    assert model.count == -1
    assert model.focus == 1
    assert arena.generation == 2
    assert backend.lines()[2].startswith("  World! count = -1")


def test_handles_from_previous_frame_are_rejected() -> None:
    backend = GridBackend(Vec2(50, 12))
    model = SimpleModel()
    arena: NodeArena = NodeArena()
    old_root = model.view(arena)
    run_model(backend, StyleSheet.parse(STYLESHEET), model, [KeyEvent.press(Key.DOWN)], arena=arena)
    with pytest.raises(StaleHandleError):
        arena.get(old_root)


def test_resize_redraws_without_rebuilding() -> None:
    backend, _, arena = _run([ResizeEvent(60, 14)])
    assert backend.size() == Vec2(60, 14)
    assert arena.generation == 0
    assert len(backend.lines()) == 14
