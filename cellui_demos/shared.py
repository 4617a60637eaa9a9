"""Helpers shared by the terminal demos."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cellui.api.input_events import EventLike
from cellui.api.state import RedrawState
from cellui.api.style import Theme
from cellui.api.view import View
from cellui.input.terminal import TerminalSession
from cellui.runtime.executor import Executor
from cellui.runtime.logging import shutdown_logging

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CounterState:
    """Redraw flag plus a click counter for the button demos."""

    need_redraw: bool = False
    clicks: int = 0

    def set_need_redraw(self, need_redraw: bool = True) -> None:
        self.need_redraw = need_redraw

    def is_need_redraw(self) -> bool:
        return self.need_redraw


def quit_on_ctrl_c[S, M](view: View[S, EventLike, M]) -> View[S, EventLike, M | bool]:
    """Wrap a view so Ctrl+C yields the exit message before the view sees it."""
    return view.or_else_first(lambda _view, _state, event: True if event.try_ctrl_char() == "c" else None)


def run_view[S: RedrawState](state: S, view: View[S, EventLike, object]) -> None:
    """Run a view tree in the terminal until it reports exit."""
    try:
        with TerminalSession() as session:
            executor = Executor(state, quit_on_ctrl_c(view), session.backend, Theme.default())
            executor.run(session.events())
            logger.info("demo_finished redraws=%d", executor.redraw_count)
    finally:
        shutdown_logging()
