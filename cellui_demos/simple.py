"""Declarative model styled with CSS: a counter with focusable menu entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from cellui.api.input_events import Key
from cellui.api.results import UpdateResult
from cellui.css.stylesheet import StyleSheet
from cellui.dom.arena import NodeArena, NodeHandle, NodeState
from cellui.dom.builder import attr, body, button, div, text
from cellui.input.terminal import TerminalSession
from cellui.runtime.executor import run_model
from cellui.runtime.logging import shutdown_logging
from cellui.ui_runtime.event_filter import EventFilter

logger = logging.getLogger(__name__)

STYLESHEET = """
/* whole screen */
body { color: var(--primary); background: black; padding: 1 2; }
div { padding: 0; }
button { padding: 0; border: none; }
div.title { font: bold; color: yellow; }
.menu { border: 1 solid gray; width: 30; }
.menu > button { color: lightgray; }
.menu > button:focus { font: reverse; color: cyan; }
.hint { font: dimmed; text-decoration: underline; }
"""


class Msg(Enum):
    UP = "up"
    DOWN = "down"
    ACTIVATE = "activate"
    QUIT = "quit"


ENTRIES = ("Increment", "Decrement", "Reset")


@dataclass(slots=True)
class SimpleModel:
    focus: int = 0
    count: int = 0

    def update(self, msg: Msg) -> UpdateResult:
        if msg is Msg.QUIT:
            return UpdateResult.EXIT
        if msg is Msg.UP:
            self.focus = (self.focus - 1) % len(ENTRIES)
        elif msg is Msg.DOWN:
            self.focus = (self.focus + 1) % len(ENTRIES)
        else:
            self._activate()
        return UpdateResult.REDRAW

    def _activate(self) -> None:
        entry = ENTRIES[self.focus]
        if entry == "Increment":
            self.count += 1
        elif entry == "Decrement":
            self.count -= 1
        else:
            self.count = 0
        logger.debug("simple_activate entry=%s count=%d", entry, self.count)

    def view(self, arena: NodeArena[Msg]) -> NodeHandle:
        keys = (
            attr()
            .event(EventFilter.ctrl_char("c", Msg.QUIT))
            .event(EventFilter.char("q", Msg.QUIT))
            .event(EventFilter.key(Key.UP, Msg.UP))
            .event(EventFilter.key(Key.DOWN, Msg.DOWN))
            .event(EventFilter.key(Key.ENTER, Msg.ACTIVATE))
            .build()
        )
        entries = []
        for index, label in enumerate(ENTRIES):
            entry = button(arena).child(text(arena, f" {label} "))
            if index == self.focus:
                entry = entry.state(NodeState.FOCUS)
            entries.append(entry.build())
        return (
            body(arena)
            .attr(keys)
            .child(text(arena, "Hello", attr().class_("title").build()))
            .child(text(arena, f"World! count = {self.count}"))
            .child(div(arena).attr(attr().class_("menu").build()).children(entries).build())
            .child(text(arena, "Up/Down move, Enter activates, q quits", attr().class_("hint").build()))
            .build()
        )


def main() -> None:
    model = SimpleModel()
    stylesheet = StyleSheet.parse(STYLESHEET)
    try:
        with TerminalSession() as session:
            run_model(session.backend, stylesheet, model, session.events())
    finally:
        shutdown_logging()
