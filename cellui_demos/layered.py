"""Two text layers; the later one is drawn on top."""

from __future__ import annotations

from cellui.api.input_events import EventLike
from cellui.api.view import View
from cellui.ui_runtime.layered import LayeredView
from cellui.ui_runtime.widgets import TextView
from cellui_demos.shared import CounterState, run_view


def build() -> tuple[CounterState, View[CounterState, EventLike, bool]]:
    layered: LayeredView[CounterState, EventLike, bool] = (
        LayeredView()
        .layer(TextView("This is second layer").consume_event(False))
        .layer(TextView("This is first").consume_event(False))
    )
    return CounterState(need_redraw=True), layered


def main() -> None:
    state, view = build()
    run_view(state, view)
