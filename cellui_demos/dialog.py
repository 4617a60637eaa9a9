"""Dialog with an edit field and a click-counting button.

Tab switches between the field and the button row; Enter in the field exits.
"""

from __future__ import annotations

import logging

from cellui.api.input_events import EventLike
from cellui.api.state import request_redraw
from cellui.api.view import View
from cellui.ui_runtime.dialog import DialogView
from cellui.ui_runtime.widgets import EditMessage, EditView
from cellui_demos.shared import CounterState, run_view

logger = logging.getLogger(__name__)


def _on_edit(view: View[CounterState, EventLike, EditMessage], _state: CounterState, msg: EditMessage) -> bool:
    assert isinstance(view, EditView)
    if msg is EditMessage.SUBMIT:
        logger.info("dialog_submit text=%r", view.text)
        return True
    logger.debug("dialog_edit text=%r", view.text)
    return False


def _on_click(state: CounterState) -> bool:
    state.clicks += 1
    request_redraw(state)
    logger.info("dialog_button_click count=%d", state.clicks)
    return False


def build() -> tuple[CounterState, View[CounterState, EventLike, bool]]:
    edit: EditView[CounterState] = EditView()
    dialog = DialogView(edit.map(_on_edit)).title("TITLE").button("Click", _on_click)
    return CounterState(need_redraw=True), dialog


def main() -> None:
    state, view = build()
    run_view(state, view)
