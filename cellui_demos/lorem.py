"""Long paragraph inside a two-axis scroll view under a status line."""

from __future__ import annotations

from cellui.api.geometry import Orientation
from cellui.api.input_events import EventLike
from cellui.api.view import View
from cellui.ui_runtime.linear import LinearView
from cellui.ui_runtime.widgets import ParagraphView, TextView
from cellui_demos.shared import CounterState, run_view

LOREM = """\
Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.
Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat.
Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur.
Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id est laborum.
"""


def build(repeat: int = 12) -> tuple[CounterState, View[CounterState, EventLike, bool]]:
    paragraph: ParagraphView[CounterState] = ParagraphView()
    for _ in range(repeat):
        paragraph.append(LOREM)
    body = paragraph.scrollable(Orientation.BOTH).consume_event(False)
    status = TextView("Arrows or wheel scroll, Ctrl+C quits").consume_event(False)
    root: LinearView[CounterState, EventLike, bool] = LinearView.vertical().child(status).child(body)
    root.set_focus(1)
    return CounterState(need_redraw=True), root


def main() -> None:
    state, view = build()
    run_view(state, view)
