"""Composition combinators that adapt a view's event or message type.

Every combinator is a proxy: render, layout and desired_size go straight to
the wrapped view, and only the event/message path is changed.
"""

from __future__ import annotations

from collections.abc import Callable

from cellui.api.geometry import Vec2
from cellui.api.view import View
from cellui.rendering.printer import Printer


class ViewProxy[S, E, M](View[S, E, M]):
    """Base for wrappers that forward the geometry contract unchanged."""

    def __init__(self, inner: View) -> None:
        self._inner = inner

    @property
    def inner(self) -> View:
        return self._inner

    def render(self, printer: Printer) -> None:
        self._inner.render(printer)

    def layout(self, size: Vec2) -> None:
        self._inner.layout(size)

    def desired_size(self) -> Vec2:
        return self._inner.desired_size()

    def on_event(self, state: S, event: E) -> M | None:
        return self._inner.on_event(state, event)


class Map[S, E, M, U](ViewProxy[S, E, U]):
    """Transform the inner message with `f(inner, state, msg)`."""

    def __init__(self, inner: View[S, E, M], f: Callable[[View[S, E, M], S, M], U]) -> None:
        super().__init__(inner)
        self._f = f

    def on_event(self, state: S, event: E) -> U | None:
        msg = self._inner.on_event(state, event)
        if msg is None:
            return None
        return self._f(self._inner, state, msg)


class MapE[S, O, E, M](ViewProxy[S, O, M]):
    """Translate an outer event into the inner event type before delegating."""

    def __init__(self, inner: View[S, E, M], f: Callable[[View[S, E, M], S, O], E]) -> None:
        super().__init__(inner)
        self._f = f

    def on_event(self, state: S, event: O) -> M | None:
        return self._inner.on_event(state, self._f(self._inner, state, event))


class MapOptE[S, O, E, M](ViewProxy[S, O, M]):
    """Like MapE, but `f` may return None to drop the event."""

    def __init__(self, inner: View[S, E, M], f: Callable[[View[S, E, M], S, O], E | None]) -> None:
        super().__init__(inner)
        self._f = f

    def on_event(self, state: S, event: O) -> M | None:
        inner_event = self._f(self._inner, state, event)
        if inner_event is None:
            return None
        return self._inner.on_event(state, inner_event)


class OrElseFirst[S, E, M](ViewProxy[S, E, M]):
    """Try `f` first; the inner view only sees events `f` declines."""

    def __init__(self, inner: View[S, E, M], f: Callable[[View[S, E, M], S, E], M | None]) -> None:
        super().__init__(inner)
        self._f = f

    def on_event(self, state: S, event: E) -> M | None:
        msg = self._f(self._inner, state, event)
        if msg is not None:
            return msg
        return self._inner.on_event(state, event)


class OrElse[S, E, M](ViewProxy[S, E, M]):
    """Let the inner view handle first; run `f` only when it declines."""

    def __init__(self, inner: View[S, E, M], f: Callable[[View[S, E, M], S, E], M | None]) -> None:
        super().__init__(inner)
        self._f = f

    def on_event(self, state: S, event: E) -> M | None:
        msg = self._inner.on_event(state, event)
        if msg is not None:
            return msg
        return self._f(self._inner, state, event)


class ConsumeEvent[S, E, M](ViewProxy[S, E, M]):
    """Report `message` for every event the inner view leaves unconsumed."""

    def __init__(self, inner: View[S, E, M], message: M) -> None:
        super().__init__(inner)
        self._message = message

    def on_event(self, state: S, event: E) -> M:
        msg = self._inner.on_event(state, event)
        return self._message if msg is None else msg


__all__ = ["ConsumeEvent", "Map", "MapE", "MapOptE", "OrElse", "OrElseFirst", "ViewProxy"]
