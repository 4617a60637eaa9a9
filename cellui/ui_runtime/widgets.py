"""Leaf widgets: text, button, edit field, selectable list and paragraph."""

from __future__ import annotations

from enum import Enum

from cellui.api.geometry import Rect, Vec2
from cellui.api.input_events import EventLike
from cellui.api.state import request_redraw
from cellui.api.style import Style
from cellui.api.view import View
from cellui.rendering.printer import Printer
from cellui.rendering.text_width import str_width


class TextView[S](View[S, EventLike, None]):
    """Single line of static text; never consumes events."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._width = str_width(text)

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        self._width = str_width(text)

    def render(self, printer: Printer) -> None:
        printer.with_style(Style.view(), lambda p: p.print((0, 0), self._text))

    def desired_size(self) -> Vec2:
        return Vec2(self._width, 1)

    def on_event(self, state: S, event: EventLike) -> None:
        return None


class ButtonDecoration(Enum):
    NONE = "none"
    ANGLE = "angle"

    def decorate(self, label: str) -> str:
        if self is ButtonDecoration.ANGLE:
            return f"<{label}>"
        return label


class ButtonMessage(Enum):
    PRESSED = "pressed"


class ButtonView[S](View[S, EventLike, ButtonMessage]):
    """Pressable label; reports PRESSED on Enter or a left click."""

    def __init__(self, label: str, decoration: ButtonDecoration = ButtonDecoration.ANGLE) -> None:
        self._text = decoration.decorate(label)
        self._width = str_width(self._text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def width(self) -> int:
        return self._width

    def render(self, printer: Printer) -> None:
        printer.with_style(Style.view(), lambda p: p.print((0, 0), self._text))

    def desired_size(self) -> Vec2:
        return Vec2(self._width, 1)

    def on_event(self, state: S, event: EventLike) -> ButtonMessage | None:
        if event.is_enter() or event.try_left_click() is not None:
            return ButtonMessage.PRESSED
        return None


class EditMessage(Enum):
    EDIT = "edit"
    SUBMIT = "submit"


class EditView[S](View[S, EventLike, EditMessage]):
    """Single-line text input."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def render(self, printer: Printer) -> None:
        printer.print((0, 0), self.text)

    def desired_size(self) -> Vec2:
        return Vec2(str_width(self.text), 1)

    def on_event(self, state: S, event: EventLike) -> EditMessage | None:
        ch = event.try_char()
        if ch is not None:
            self.text += ch
            request_redraw(state)
            return EditMessage.EDIT
        if event.is_backspace():
            self.text = self.text[:-1]
            request_redraw(state)
            return EditMessage.EDIT
        if event.is_enter():
            return EditMessage.SUBMIT
        return None


class SelectMessage(Enum):
    SELECT = "select"
    INDEX_CHANGED = "index_changed"


class SelectView[S, T](View[S, EventLike, SelectMessage]):
    """Vertical list of labelled values with one highlighted selection.

    Up/Down move the selection; Enter selects it. A left click on a row that
    was rendered selects that row.
    """

    def __init__(self, items: list[tuple[str, T]] | None = None) -> None:
        self._items: list[tuple[str, T]] = list(items or [])
        self._selected = 0
        self._bound = Rect()

    @property
    def selected(self) -> int:
        return self._selected

    def add_item(self, label: str, value: T) -> None:
        self._items.append((label, value))

    def item(self, label: str, value: T) -> SelectView[S, T]:
        self.add_item(label, value)
        return self

    def selected_value(self) -> T:
        return self._items[self._selected][1]

    def focus_up(self, state: S) -> SelectMessage | None:
        if self._selected == 0:
            return None
        self._selected -= 1
        request_redraw(state)
        return SelectMessage.INDEX_CHANGED

    def focus_down(self, state: S) -> SelectMessage | None:
        if self._selected + 1 >= len(self._items):
            return None
        self._selected += 1
        request_redraw(state)
        return SelectMessage.INDEX_CHANGED

    def render(self, printer: Printer) -> None:
        self._bound = printer.bound
        for row, (label, _) in enumerate(self._items):
            if row == self._selected:
                printer.print_styled((0, row), label, Style.highlight())
            else:
                printer.print((0, row), label)

    def desired_size(self) -> Vec2:
        width = max((str_width(label) for label, _ in self._items), default=0)
        return Vec2(width, len(self._items))

    def on_event(self, state: S, event: EventLike) -> SelectMessage | None:
        pos = event.try_left_click()
        if pos is not None:
            if not self._bound.contains(pos):
                return None
            row = pos.y - self._bound.y
            if row >= len(self._items):
                return None
            if row != self._selected:
                self._selected = row
                request_redraw(state)
            return SelectMessage.SELECT
        if event.is_enter():
            return SelectMessage.SELECT if self._items else None
        if event.is_up():
            return self.focus_up(state)
        if event.is_down():
            return self.focus_down(state)
        return None


class ParagraphView[S](View[S, EventLike, None]):
    """Multi-line text block that grows as text is appended."""

    def __init__(self) -> None:
        self._lines: list[str] = [""]
        self._width = 0

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def append(self, text: str) -> None:
        """Append text to the last line; embedded newlines start new lines."""
        first, *rest = text.split("\n")
        self._lines[-1] += first
        self._width = max(self._width, str_width(self._lines[-1]))
        for line in rest:
            self.push_line(line)

    def new_line(self) -> None:
        self._lines.append("")

    def append_line(self, text: str) -> None:
        self.append(text)
        self.new_line()

    def push_line(self, line: str) -> None:
        self._width = max(self._width, str_width(line))
        self._lines.append(line)

    def render(self, printer: Printer) -> None:
        def draw(p: Printer) -> None:
            for y, line in enumerate(self._lines):
                if y >= p.bound.h:
                    break
                p.print((0, y), line)

        printer.with_style(Style.view(), draw)

    def desired_size(self) -> Vec2:
        return Vec2(self._width, len(self._lines))

    def on_event(self, state: S, event: EventLike) -> None:
        return None


__all__ = [
    "ButtonDecoration",
    "ButtonMessage",
    "ButtonView",
    "EditMessage",
    "EditView",
    "ParagraphView",
    "SelectMessage",
    "SelectView",
    "TextView",
]
