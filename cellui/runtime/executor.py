"""Top-level loops gluing an event source, a view tree and a backend together."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from cellui.api.backend import Backend, ResizableBackend
from cellui.api.geometry import Vec2
from cellui.api.input_events import EventLike
from cellui.api.results import UpdateResult
from cellui.api.state import RedrawFlag, RedrawState
from cellui.api.style import Theme
from cellui.api.view import View
from cellui.css.stylesheet import StyleSheet
from cellui.dom.arena import NodeArena
from cellui.dom.element import ElementView, render_root
from cellui.dom.model import Model
from cellui.rendering.grid_backend import GridBackend
from cellui.rendering.printer import Printer

logger = logging.getLogger(__name__)


def default_is_exit(msg: object) -> bool:
    """`True` and `UpdateResult.EXIT` request exit; every other message continues."""
    return msg is True or msg is UpdateResult.EXIT


def _resize(backend: Backend, size: Vec2) -> None:
    if isinstance(backend, ResizableBackend):
        backend.resize(size)
    logger.debug("executor_resize width=%d height=%d", size.x, size.y)


class Executor[S: RedrawState, E: EventLike, M]:
    """Owns the state, root view, theme and backend for one application run.

    The dirty flag on the state is the only redraw trigger: before each event
    is taken from the source, a set flag causes one full layout, render and
    flush. Resize events resize the backend and set the flag without reaching
    the view tree.
    """

    def __init__(
        self,
        state: S,
        view: View[S, E, M],
        backend: Backend,
        theme: Theme | None = None,
        *,
        is_exit: Callable[[M], bool] = default_is_exit,
    ) -> None:
        self._state = state
        self._view = view
        self._backend = backend
        self._theme = theme if theme is not None else Theme.default()
        self._is_exit = is_exit
        self._redraw_count = 0

    @property
    def state(self) -> S:
        return self._state

    @property
    def view(self) -> View[S, E, M]:
        return self._view

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def redraw_count(self) -> int:
        return self._redraw_count

    def redraw(self) -> None:
        """Lay out against the backend size, render from scratch, flush, clear the flag."""
        size = self._backend.size()
        self._view.layout(size)
        self._backend.clear()
        self._view.render(Printer(self._backend, self._theme))
        self._backend.flush()
        self._state.set_need_redraw(False)
        self._redraw_count += 1
        logger.debug("executor_redraw count=%d width=%d height=%d", self._redraw_count, size.x, size.y)

    def redraw_if_needed(self) -> bool:
        if not self._state.is_need_redraw():
            return False
        self.redraw()
        return True

    def dispatch(self, event: E) -> bool:
        """Route one event; returns False when the view asked to exit."""
        resize = event.try_resize()
        if resize is not None:
            _resize(self._backend, resize)
            self._state.set_need_redraw(True)
            return True
        msg = self._view.on_event(self._state, event)
        if msg is None:
            return True
        if self._is_exit(msg):
            logger.debug("executor_exit msg=%r", msg)
            return False
        if msg is UpdateResult.REDRAW:
            self._state.set_need_redraw(True)
        return True

    def run(self, events: Iterable[E]) -> None:
        """Draw, then alternate redraw-if-dirty and dispatch until exit or the source ends."""
        self._state.set_need_redraw(True)
        for event in _pull(events, self.redraw_if_needed):
            if not self.dispatch(event):
                return
        self.redraw_if_needed()


def _pull[E](events: Iterable[E], before_each: Callable[[], object]) -> Iterable[E]:
    iterator = iter(events)
    while True:
        before_each()
        try:
            event = next(iterator)
        except StopIteration:
            return
        yield event


def render_events[S, E: EventLike, M](
    view: View[S, E, M],
    events: Iterable[E],
    size: Vec2 | tuple[int, int],
    *,
    state: S | None = None,
    theme: Theme | None = None,
) -> list[str]:
    """Replay events headlessly and return the final screen lines.

    The view is laid out and drawn once, then each event is handled with a
    fresh dirty flag; a flagged event triggers a full re-render.
    """
    backend = GridBackend(Vec2.of(size))
    theme = theme if theme is not None else Theme.default()

    def draw() -> None:
        view.layout(backend.size())
        backend.clear()
        view.render(Printer(backend, theme))

    draw()
    for event in events:
        resize = event.try_resize()
        if resize is not None:
            _resize(backend, resize)
            draw()
            continue
        target = state if state is not None else RedrawFlag()
        if isinstance(target, RedrawState):
            target.set_need_redraw(False)
        view.on_event(target, event)  # type: ignore[arg-type]
        if isinstance(target, RedrawState) and target.is_need_redraw():
            draw()
    return backend.lines()


def bench[S: RedrawState, E: EventLike, M](
    backend: Backend,
    view: View[S, E, M],
    events: Iterable[E],
    *,
    state: S | None = None,
    theme: Theme | None = None,
) -> int:
    """Drive a pre-recorded event sequence through the redraw loop; returns the redraw count."""
    executor = Executor(
        state if state is not None else RedrawFlag(),  # type: ignore[arg-type]
        view,
        backend,
        theme,
        is_exit=lambda _msg: False,
    )
    executor.state.set_need_redraw(True)
    for event in events:
        executor.redraw_if_needed()
        executor.dispatch(event)
    return executor.redraw_count


def run_model[E: EventLike, M](
    backend: Backend,
    stylesheet: StyleSheet,
    model: Model[M],
    events: Iterable[E],
    *,
    theme: Theme | None = None,
    arena: NodeArena[M] | None = None,
) -> NodeArena[M]:
    """Run a declarative model until it returns EXIT or the events run out.

    After a REDRAW update the arena is reset and the tree rebuilt, so handles
    from the previous frame are never reused.
    """
    arena = arena if arena is not None else NodeArena()
    theme = theme if theme is not None else Theme.default()
    root = model.view(arena)
    need_redraw = True
    iterator = iter(events)
    while True:
        if need_redraw:
            backend.clear()
            render_root(arena, root, stylesheet, Printer(backend, theme))
            backend.flush()
            need_redraw = False
        try:
            event = next(iterator)
        except StopIteration:
            return arena
        resize = event.try_resize()
        if resize is not None:
            _resize(backend, resize)
            need_redraw = True
            continue
        msg = ElementView(arena, root).on_event(event)
        if msg is None:
            continue
        result = model.update(msg)
        if result is UpdateResult.EXIT:
            logger.debug("model_exit msg=%r", msg)
            return arena
        if result is UpdateResult.REDRAW:
            arena.reset()
            root = model.view(arena)
            need_redraw = True


__all__ = ["Executor", "bench", "default_is_exit", "render_events", "run_model"]
