"""Selectable list; Enter or a click logs the chosen value."""

from __future__ import annotations

import logging

from cellui.api.input_events import EventLike
from cellui.api.view import View
from cellui.ui_runtime.widgets import SelectMessage, SelectView
from cellui_demos.shared import CounterState, run_view

logger = logging.getLogger(__name__)


def _on_select(view: View[CounterState, EventLike, SelectMessage], _state: CounterState, msg: SelectMessage) -> bool:
    assert isinstance(view, SelectView)
    if msg is SelectMessage.SELECT:
        logger.info("select_value value=%r", view.selected_value())
    return False


def build() -> tuple[CounterState, View[CounterState, EventLike, bool]]:
    select: SelectView[CounterState, int] = SelectView([("123", 123), ("456", 456)])
    select.add_item("789", 789)
    return CounterState(need_redraw=True), select.map(_on_select)


def main() -> None:
    state, view = build()
    run_view(state, view)
