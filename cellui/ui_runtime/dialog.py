"""Dialog container: titled border, content region and a button row."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from cellui.api.geometry import Vec2
from cellui.api.input_events import EventLike
from cellui.api.state import request_redraw
from cellui.api.style import Style
from cellui.api.view import View
from cellui.rendering.printer import Printer
from cellui.ui_runtime.widgets import ButtonDecoration, ButtonView
from cellui.ui_runtime.wrappers import BoundChecker, SizeCacher

logger = logging.getLogger(__name__)


class DialogFocus(Enum):
    CONTENT = "content"
    BUTTONS = "buttons"


class ButtonRow[S, M](View[S, EventLike, M]):
    """Horizontal row of buttons with one selected button.

    Left/Right move the selection; other key events go to the selected
    button. A left click presses the button under the pointer.
    """

    def __init__(self) -> None:
        self._buttons: list[tuple[ButtonView[S], Callable[[S], M]]] = []
        self._selected = 0
        self.active = False
        self._origin_x = 0

    def __len__(self) -> int:
        return len(self._buttons)

    @property
    def selected(self) -> int:
        return self._selected

    def add_button(self, label: str, f: Callable[[S], M]) -> None:
        self._buttons.append((ButtonView(label, ButtonDecoration.ANGLE), f))

    def select(self, index: int) -> None:
        if not 0 <= index < len(self._buttons):
            raise IndexError(f"button index {index} out of range for {len(self._buttons)} buttons")
        self._selected = index

    def render(self, printer: Printer) -> None:
        self._origin_x = printer.bound.x
        x = 0
        for index, (button, _) in enumerate(self._buttons):
            if self.active and index == self._selected:
                printer.print_styled((x, 0), button.text, Style.highlight())
            else:
                printer.print((x, 0), button.text)
            x += button.width

    def desired_size(self) -> Vec2:
        if not self._buttons:
            return Vec2(0, 0)
        return Vec2(sum(button.width for button, _ in self._buttons), 1)

    def on_event(self, state: S, event: EventLike) -> M | None:
        if not self._buttons:
            return None
        pos = event.try_left_click()
        if pos is not None:
            x = pos.x - self._origin_x
            for index, (button, _) in enumerate(self._buttons):
                if x < button.width:
                    if index != self._selected:
                        self._selected = index
                        request_redraw(state)
                    logger.debug("dialog_button_click index=%d", index)
                    return self._press(state, index, event)
                x -= button.width
            return None
        if event.is_left():
            if self._selected > 0:
                self._selected -= 1
                request_redraw(state)
            return None
        if event.is_right():
            if self._selected + 1 < len(self._buttons):
                self._selected += 1
                request_redraw(state)
            return None
        return self._press(state, self._selected, event)

    def _press(self, state: S, index: int, event: EventLike) -> M | None:
        button, f = self._buttons[index]
        if button.on_event(state, event) is None:
            return None
        return f(state)


class DialogView[S, M](View[S, EventLike, M]):
    """Bordered dialog with a title, a content view and a row of buttons.

    Tab toggles keyboard focus between the content and the button row. A
    click inside the button row's last rendered bound always goes to the
    buttons, whatever the current focus.
    """

    def __init__(self, content: View[S, EventLike, M]) -> None:
        self._title = ""
        self._content_checker = BoundChecker(content)
        self._content = SizeCacher(self._content_checker)
        self._row: ButtonRow[S, M] = ButtonRow()
        self._buttons = BoundChecker(self._row)
        self._focus = DialogFocus.CONTENT

    @property
    def focus(self) -> DialogFocus:
        return self._focus

    @property
    def content(self) -> View[S, EventLike, M]:
        return self._content_checker.inner

    @property
    def buttons(self) -> ButtonRow[S, M]:
        return self._row

    @property
    def title_text(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        self._title = title

    def title(self, title: str) -> DialogView[S, M]:
        self.set_title(title)
        return self

    def add_button(self, label: str, f: Callable[[S], M]) -> None:
        self._row.add_button(label, f)

    def button(self, label: str, f: Callable[[S], M]) -> DialogView[S, M]:
        self.add_button(label, f)
        return self

    def toggle_focus(self) -> None:
        if self._focus is DialogFocus.CONTENT and len(self._row):
            self._set_focus(DialogFocus.BUTTONS)
        else:
            self._set_focus(DialogFocus.CONTENT)

    def render(self, printer: Printer) -> None:
        printer.with_style(Style.outline(), lambda p: p.print_rect())
        title_bound = printer.bound.add_start((1, 0)).sub_size((1, 0))
        printer.with_bound(
            title_bound,
            lambda p: p.print_styled((0, 0), self._title, Style.title()),
        )
        printer.with_style(Style.view(), self._render_inner)

    def _render_inner(self, printer: Printer) -> None:
        inner = printer.bound.with_margin(1)
        buttons_h = self._row.desired_size().y
        if inner.h < buttons_h:
            return
        split = inner.split_vertical(inner.h - buttons_h)
        assert split is not None
        content_bound, buttons_bound = split
        printer.with_bound(content_bound, self._content.render)
        printer.with_bound(buttons_bound, self._buttons.render)

    def layout(self, size: Vec2) -> None:
        inner = size.saturating_sub((2, 2))
        buttons = self._row.desired_size()
        self._buttons.layout(inner.min(buttons))
        self._content.layout(inner.saturating_sub_y(buttons.y))

    def desired_size(self) -> Vec2:
        content = self._content.desired_size()
        buttons = self._row.desired_size()
        return Vec2(max(content.x, buttons.x) + 2, content.y + buttons.y + 2)

    def on_event(self, state: S, event: EventLike) -> M | None:
        pos = event.try_mouse()
        if pos is not None:
            if self._buttons.contains(pos):
                self._set_focus(DialogFocus.BUTTONS, state)
                return self._buttons.on_event(state, event)
            if self._content_checker.contains(pos):
                self._set_focus(DialogFocus.CONTENT, state)
                return self._content.on_event(state, event)
            return None
        if event.is_tab():
            self.toggle_focus()
            request_redraw(state)
            return None
        if self._focus is DialogFocus.BUTTONS:
            return self._buttons.on_event(state, event)
        return self._content.on_event(state, event)

    def _set_focus(self, focus: DialogFocus, state: S | None = None) -> None:
        if focus is self._focus:
            return
        logger.debug("dialog_focus from=%s to=%s", self._focus.value, focus.value)
        self._focus = focus
        self._row.active = focus is DialogFocus.BUTTONS
        if state is not None:
            request_redraw(state)


__all__ = ["ButtonRow", "DialogFocus", "DialogView"]
