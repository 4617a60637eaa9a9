from __future__ import annotations

from cellui.api.geometry import Vec2
from cellui.api.input_events import KeyEvent, ResizeEvent
from cellui.api.results import UpdateResult
from cellui.api.state import RedrawFlag
from cellui.rendering.null_backend import NullBackend
from cellui.runtime.executor import Executor, bench, default_is_exit
from tests.cellui.conftest import FixedView, RecordingBackend


def _keys(*chars: str) -> list[KeyEvent]:
    return [KeyEvent.of_char(ch) for ch in chars]


def test_default_exit_messages() -> None:
    assert default_is_exit(True)
    assert default_is_exit(UpdateResult.EXIT)
    assert not default_is_exit(False)
    assert not default_is_exit(1)
    assert not default_is_exit(UpdateResult.REDRAW)


def test_run_draws_once_when_nothing_requests_redraw() -> None:
    backend = RecordingBackend(Vec2(4, 2))
    view = FixedView("noop", (2, 1))
    executor = Executor(RedrawFlag(), view, backend)
    executor.run(_keys("a", "b", "c"))
    assert executor.redraw_count == 1
    assert backend.flush_count == 1
    assert backend.clear_count == 1
    assert len(view.events) == 3
    assert view.laid_out == [Vec2(4, 2)]


def test_redraw_message_triggers_redraw_before_next_event() -> None:
    backend = RecordingBackend()
    view = FixedView("x", (1, 1)).map(lambda v, s, m: UpdateResult.REDRAW)
    executor = Executor(RedrawFlag(), view, backend)
    executor.run(_keys("a", "b"))
    assert executor.redraw_count == 3
    assert not executor.state.is_need_redraw()


def test_exit_message_stops_pulling_events() -> None:
    inner = FixedView("inner", (1, 1))
    view = inner.or_else_first(lambda v, s, e: True if e.try_ctrl_char() == "c" else None)
    events = iter([KeyEvent.ctrl_char("c"), KeyEvent.of_char("a")])
    executor = Executor(RedrawFlag(), view, RecordingBackend())
    executor.run(events)
    assert next(events) == KeyEvent.of_char("a")
    assert inner.events == []


def test_custom_exit_predicate() -> None:
    view = FixedView("stop", (1, 1))
    executor = Executor(RedrawFlag(), view, RecordingBackend(), is_exit=lambda msg: msg == "stop")
    assert not executor.dispatch(KeyEvent.of_char("a"))


def test_resize_bypasses_view_and_redraws_at_new_size() -> None:
    backend = RecordingBackend(Vec2(10, 3))
    view = FixedView("v", (1, 1))
    executor = Executor(RedrawFlag(), view, backend)
    executor.run([ResizeEvent(30, 7)])
    assert backend.size() == Vec2(30, 7)
    assert view.events == []
    assert view.laid_out == [Vec2(10, 3), Vec2(30, 7)]
    assert executor.redraw_count == 2


def test_view_can_request_redraw_through_state() -> None:
    def poke(v, state, event):
        state.set_need_redraw(True)
        return None

    view = FixedView("v", (1, 1), consume=False).or_else(poke)
    executor = Executor(RedrawFlag(), view, RecordingBackend())
    executor.run(_keys("a"))
    assert executor.redraw_count == 2


def test_bench_counts_redraws_and_never_exits() -> None:
    backend = NullBackend(Vec2(20, 5))
    view = FixedView("x", (1, 1)).map(lambda v, s, m: True if m == "never" else UpdateResult.REDRAW)
    assert bench(backend, view, _keys(*"abcde")) == 5
    assert backend.flush_count == 5
    quitter = FixedView("x", (1, 1)).map(lambda v, s, m: True)
    assert bench(NullBackend(), quitter, _keys("a", "b")) == 1
