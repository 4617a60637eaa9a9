"""Scoped, clipped, theme-aware drawing context over a backend."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from cellui.api.backend import Backend
from cellui.api.geometry import ZERO, Rect, Vec2
from cellui.api.style import ALL_EFFECTS, Style, Theme
from cellui.rendering.text_width import slice_str_with_width

VLINE_CHAR = "│"
HLINE_CHAR = "─"
BLOCK_CHAR = "█"
LEFT_TOP = "┌"
RIGHT_TOP = "┐"
LEFT_BOTTOM = "└"
RIGHT_BOTTOM = "┘"


class Printer:
    """Draws through a backend inside a clip rectangle with a current style.

    Coordinates passed to the print helpers are local to the current bound;
    output outside the bound is cut off by display width. `with_bound` and
    `with_style` restore the previous state on every exit path.
    """

    def __init__(
        self,
        backend: Backend,
        theme: Theme | None = None,
        *,
        bound: Rect | None = None,
        style: Style | None = None,
    ) -> None:
        self._backend = backend
        self._theme = theme if theme is not None else Theme.default()
        self._bound = bound if bound is not None else Rect(ZERO, backend.size())
        self._style = style if style is not None else Style()

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def bound(self) -> Rect:
        return self._bound

    @property
    def style(self) -> Style:
        return self._style

    def with_bound[T](self, bound: Rect, f: Callable[[Printer], T]) -> T:
        """Run `f` with `bound` as the clip rectangle, then restore the old one."""
        previous = self._bound
        self._bound = bound
        try:
            return f(self)
        finally:
            self._bound = previous

    def with_style[T](self, style: Style, f: Callable[[Printer], T]) -> T:
        """Run `f` with `style` applied to the backend, then restore the old style."""
        previous = self._style
        self._set_style(style)
        try:
            return f(self)
        finally:
            self._set_style(previous)

    @contextmanager
    def bounded(self, bound: Rect) -> Iterator[Printer]:
        previous = self._bound
        self._bound = bound
        try:
            yield self
        finally:
            self._bound = previous

    @contextmanager
    def styled(self, style: Style) -> Iterator[Printer]:
        previous = self._style
        self._set_style(style)
        try:
            yield self
        finally:
            self._set_style(previous)

    def print(self, start: Vec2 | tuple[int, int], text: str) -> None:
        """Print text at a bound-local position, cut at the bound's right edge."""
        pos = Vec2.of(start)
        bound = self._bound
        if pos.y >= bound.h or pos.x >= bound.w or not text:
            return
        head, _, _ = slice_str_with_width(text, bound.w - pos.x)
        if head:
            self._backend.print_at(bound.start + pos, head)

    def print_styled(self, start: Vec2 | tuple[int, int], text: str, style: Style) -> None:
        self.with_style(style, lambda printer: printer.print(start, text))

    def print_vertical_line(self, x: int) -> None:
        self.print_vertical_line_at((x, 0), self._bound.h)

    def print_vertical_line_at(self, start: Vec2 | tuple[int, int], size: int) -> None:
        self._vertical_run(Vec2.of(start), size, VLINE_CHAR)

    def print_vertical_block_line_at(self, start: Vec2 | tuple[int, int], size: int) -> None:
        self._vertical_run(Vec2.of(start), size, BLOCK_CHAR)

    def print_horizontal_line(self, y: int) -> None:
        self.print_horizontal_line_at((0, y), self._bound.w)

    def print_horizontal_line_at(self, start: Vec2 | tuple[int, int], size: int) -> None:
        self.print(start, HLINE_CHAR * size)

    def print_horizontal_block_line_at(self, start: Vec2 | tuple[int, int], size: int) -> None:
        self.print(start, BLOCK_CHAR * size)

    def print_rect(self) -> None:
        """Outline the current bound with a single-line box."""
        w, h = self._bound.w, self._bound.h
        if w == 0 or h == 0:
            return
        self.print_horizontal_line(0)
        self.print_horizontal_line(h - 1)
        self.print_vertical_line(0)
        self.print_vertical_line(w - 1)
        self.print((0, 0), LEFT_TOP)
        self.print((w - 1, 0), RIGHT_TOP)
        self.print((0, h - 1), LEFT_BOTTOM)
        self.print((w - 1, h - 1), RIGHT_BOTTOM)

    def clear(self) -> None:
        self._backend.clear()

    def refresh(self) -> None:
        self._backend.flush()

    def sliced(self, offset: Vec2, content_size: Vec2) -> Printer:
        """Return a printer over content of `content_size` shown through the current
        bound, scrolled by `offset`."""
        from cellui.rendering.sliced_backend import SlicedBackend

        sliced = SlicedBackend(self._backend, offset, self._bound)
        return Printer(sliced, self._theme, bound=Rect(ZERO, content_size), style=self._style)

    def _vertical_run(self, start: Vec2, size: int, ch: str) -> None:
        for i in range(size):
            if start.y + i >= self._bound.h:
                break
            self.print(start.add_y(i), ch)

    def _set_style(self, style: Style) -> None:
        self._style = style
        backend = self._backend
        backend.set_fg(self._theme.resolve(style.fg))
        backend.set_bg(self._theme.resolve(style.bg))
        for effect in ALL_EFFECTS:
            if effect in style.effects:
                backend.set_effect(effect)
            else:
                backend.unset_effect(effect)


__all__ = ["Printer"]
