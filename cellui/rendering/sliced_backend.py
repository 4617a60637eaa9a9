"""Clipping and offsetting decorator over any backend."""

from __future__ import annotations

from cellui.api.backend import Backend
from cellui.api.geometry import Rect, Vec2
from cellui.api.style import Color, Effect
from cellui.rendering.text_width import skip_width, slice_str_with_width


class SlicedBackend:
    """Shows the window of a larger content surface that starts at `offset`.

    Content coordinates are translated by `-offset` and placed at
    `viewport.start` on the inner backend. Rows above or below the window are
    dropped; runs crossing the left or right edge are cut by display width and
    never split a wide character.
    """

    def __init__(self, inner: Backend, offset: Vec2, viewport: Rect) -> None:
        self._inner = inner
        self._offset = offset
        self._viewport = viewport

    @property
    def offset(self) -> Vec2:
        return self._offset

    @property
    def viewport(self) -> Rect:
        return self._viewport

    def print_at(self, pos: Vec2, text: str) -> None:
        offset = self._offset
        viewport = self._viewport
        if pos.y < offset.y or pos.y - offset.y >= viewport.h:
            return

        x = pos.x
        if x < offset.x:
            text, pad = skip_width(text, offset.x - x)
            x = offset.x + pad
        local_x = x - offset.x
        if local_x >= viewport.w or not text:
            return

        head, _, _ = slice_str_with_width(text, viewport.w - local_x)
        if head:
            self._inner.print_at(viewport.start + Vec2(local_x, pos.y - offset.y), head)

    def clear(self) -> None:
        self._inner.clear()

    def size(self) -> Vec2:
        return self._offset.saturating_add(self._viewport.size)

    def set_fg(self, color: Color | None) -> None:
        self._inner.set_fg(color)

    def set_bg(self, color: Color | None) -> None:
        self._inner.set_bg(color)

    def set_effect(self, effect: Effect) -> None:
        self._inner.set_effect(effect)

    def unset_effect(self, effect: Effect) -> None:
        self._inner.unset_effect(effect)

    def flush(self) -> None:
        self._inner.flush()


__all__ = ["SlicedBackend"]
