"""Scrollable viewport over a view larger than its allotted size."""

from __future__ import annotations

from dataclasses import dataclass

from cellui.api.geometry import ZERO, Orientation, Rect, Vec2
from cellui.api.input_events import EventLike
from cellui.api.results import EventResult
from cellui.api.state import request_redraw
from cellui.api.view import View
from cellui.rendering.printer import Printer
from cellui.runtime.config import get_runtime_config


@dataclass(frozen=True, slots=True)
class ScrollOutcome:
    """Result of attempting to move a scroll offset along one axis."""

    handled: bool
    next_scroll: int


def apply_scroll_step(delta: int, current_scroll: int, max_scroll: int) -> ScrollOutcome:
    """Move an offset by `delta`, clamped to `0..max_scroll`."""
    target = max(0, min(max_scroll, current_scroll + delta))
    return ScrollOutcome(handled=target != current_scroll, next_scroll=target)


def thumb_span(track: int, content: int, offset: int) -> tuple[int, int]:
    """Return the (start, length) of the scrollbar thumb along a track."""
    max_offset = content - track
    if track <= 0:
        return 0, 0
    if max_offset <= 0:
        return 0, track
    length = max(1, track * track // content)
    return offset * (track - length) // max_offset, length


def _offset_for_track_pos(pos: int, track: int, content: int) -> int:
    max_offset = max(0, content - track)
    if track <= 1:
        return 0
    return min(max_offset, pos * max_offset // (track - 1))


class ScrollView[S, E: EventLike, M](View[S, E, M]):
    """Viewport showing part of an inner view, with optional scrollbars.

    The inner view is laid out at its desired size and drawn through a
    clipping printer shifted by the scroll offset. A scrollbar is drawn along
    the bottom (horizontal) or right (vertical) edge when a spare row or
    column is available. The inner view sees events first; unhandled arrow
    keys, the wheel, and clicks or drags on a scrollbar move the offset.
    """

    def __init__(
        self,
        inner: View[S, E, M],
        orientation: Orientation = Orientation.VERTICAL,
        *,
        step: int | None = None,
    ) -> None:
        self._inner = inner
        self._orientation = orientation
        self._step = max(1, step if step is not None else get_runtime_config().scroll_step)
        self._offset = ZERO
        self._content = ZERO
        self._viewport = ZERO
        self._hbar = False
        self._vbar = False
        self._bound = Rect()

    @property
    def inner(self) -> View[S, E, M]:
        return self._inner

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def offset(self) -> Vec2:
        return self._offset

    @property
    def viewport(self) -> Vec2:
        return self._viewport

    def set_offset(self, offset: Vec2 | tuple[int, int]) -> None:
        """Set the scroll offset; it is clamped at the next layout."""
        self._offset = Vec2.of(offset)

    def max_offset(self) -> Vec2:
        return self._content.saturating_sub(self._viewport)

    def scroll_by(self, state: S, dx: int, dy: int) -> EventResult:
        """Move the offset by whole cells and request a redraw if it changed."""
        limit = self.max_offset()
        x = apply_scroll_step(dx, self._offset.x, limit.x) if self._scrolls_x() else None
        y = apply_scroll_step(dy, self._offset.y, limit.y) if self._scrolls_y() else None
        handled = (x is not None and x.handled) or (y is not None and y.handled)
        if not handled:
            return EventResult.NODRAW
        self._offset = Vec2(
            x.next_scroll if x is not None else self._offset.x,
            y.next_scroll if y is not None else self._offset.y,
        )
        request_redraw(state)
        return EventResult.REDRAW

    def layout(self, size: Vec2) -> None:
        content = self._inner.desired_size()
        hbar = self._scrolls_x() and content.x > size.x and size.y >= 2
        vbar = self._scrolls_y() and content.y > size.y - int(hbar) and size.x >= 2
        if vbar and not hbar:
            hbar = self._scrolls_x() and content.x > size.x - 1 and size.y >= 2
        self._hbar, self._vbar = hbar, vbar
        self._content = content
        self._viewport = Vec2(size.x - int(vbar), size.y - int(hbar))
        self._inner.layout(content)
        limit = self.max_offset()
        self._offset = Vec2(
            min(self._offset.x, limit.x) if self._scrolls_x() else 0,
            min(self._offset.y, limit.y) if self._scrolls_y() else 0,
        )

    def desired_size(self) -> Vec2:
        content = self._inner.desired_size()
        extra = Vec2(int(self._scrolls_y()), int(self._scrolls_x()))
        return content.saturating_add(extra)

    def render(self, printer: Printer) -> None:
        if self._orientation is Orientation.HORIZONTAL:
            self.render_horizontal(printer)
        elif self._orientation is Orientation.VERTICAL:
            self.render_vertical(printer)
        else:
            self.render_both(printer)

    def render_horizontal(self, printer: Printer) -> None:
        self._render_content(printer, Vec2(self._offset.x, 0))
        self._render_hbar(printer)

    def render_vertical(self, printer: Printer) -> None:
        self._render_content(printer, Vec2(0, self._offset.y))
        self._render_vbar(printer)

    def render_both(self, printer: Printer) -> None:
        self._render_content(printer, self._offset)
        self._render_hbar(printer)
        self._render_vbar(printer)

    def on_event(self, state: S, event: E) -> M | None:
        pos = event.try_mouse()
        if pos is not None:
            return self._on_pointer(state, event, pos)
        msg = self._inner.on_event(state, event)
        if msg is not None:
            return msg
        step = self._step
        if event.is_left():
            self.scroll_by(state, -step, 0)
        elif event.is_right():
            self.scroll_by(state, step, 0)
        elif event.is_up():
            self.scroll_by(state, 0, -step)
        elif event.is_down():
            self.scroll_by(state, 0, step)
        return None

    def _on_pointer(self, state: S, event: E, pos: Vec2) -> M | None:
        bound = self._bound
        viewport = Rect(bound.start, self._viewport.min(bound.size))
        press = event.try_left_click() or event.try_drag()

        if self._hbar and pos.y == viewport.y + viewport.h and viewport.x <= pos.x < viewport.x + viewport.w:
            if press is not None:
                target = _offset_for_track_pos(pos.x - viewport.x, viewport.w, self._content.x)
                self.scroll_by(state, target - self._offset.x, 0)
            return None
        if self._vbar and pos.x == viewport.x + viewport.w and viewport.y <= pos.y < viewport.y + viewport.h:
            if press is not None:
                target = _offset_for_track_pos(pos.y - viewport.y, viewport.h, self._content.y)
                self.scroll_by(state, 0, target - self._offset.y)
            return None
        if not viewport.contains(pos):
            return None

        wheel = -self._step if event.try_scroll_up() is not None else 0
        wheel = self._step if event.try_scroll_down() is not None else wheel
        local = pos.saturating_sub(viewport.start).saturating_add(self._offset)
        msg = self._inner.on_event(state, event.with_pos(local))
        if msg is not None or wheel == 0:
            return msg
        if self._scrolls_y():
            self.scroll_by(state, 0, wheel)
        else:
            self.scroll_by(state, wheel, 0)
        return None

    def _render_content(self, printer: Printer, offset: Vec2) -> None:
        self._bound = printer.bound
        viewport = Rect(printer.bound.start, self._viewport.min(printer.bound.size))
        content = self._content
        printer.with_bound(viewport, lambda p: self._inner.render(p.sliced(offset, content)))

    def _render_hbar(self, printer: Printer) -> None:
        if not self._hbar:
            return
        track = self._viewport.x
        row = self._viewport.y
        start, length = thumb_span(track, self._content.x, self._offset.x)
        printer.print_horizontal_line_at((0, row), track)
        printer.print_horizontal_block_line_at((start, row), length)

    def _render_vbar(self, printer: Printer) -> None:
        if not self._vbar:
            return
        track = self._viewport.y
        column = self._viewport.x
        start, length = thumb_span(track, self._content.y, self._offset.y)
        printer.print_vertical_line_at((column, 0), track)
        printer.print_vertical_block_line_at((column, start), length)

    def _scrolls_x(self) -> bool:
        return self._orientation in (Orientation.HORIZONTAL, Orientation.BOTH)

    def _scrolls_y(self) -> bool:
        return self._orientation in (Orientation.VERTICAL, Orientation.BOTH)


__all__ = ["ScrollOutcome", "ScrollView", "apply_scroll_step", "thumb_span"]
