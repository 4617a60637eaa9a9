"""Declarative "if the event matches, emit this message" rules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from cellui.api.input_events import EventLike, Key

_KEY_CHECKS: dict[Key, Callable[[EventLike], bool]] = {
    Key.ENTER: lambda e: e.is_enter(),
    Key.TAB: lambda e: e.is_tab(),
    Key.BACKSPACE: lambda e: e.is_backspace(),
    Key.UP: lambda e: e.is_up(),
    Key.DOWN: lambda e: e.is_down(),
    Key.LEFT: lambda e: e.is_left(),
    Key.RIGHT: lambda e: e.is_right(),
}


@dataclass(frozen=True, slots=True)
class EventFilter[M]:
    """Predicate over an event paired with the message it yields."""

    predicate: Callable[[EventLike], bool]
    message: M

    def check(self, event: EventLike) -> M | None:
        """Return the message when the event matches, otherwise None."""
        if self.predicate(event):
            return self.message
        return None

    @classmethod
    def empty(cls, message: M) -> EventFilter[M]:
        return cls(lambda _event: False, message)

    @classmethod
    def click(cls, message: M) -> EventFilter[M]:
        return cls(lambda event: event.try_left_click() is not None, message)

    @classmethod
    def char(cls, ch: str, message: M) -> EventFilter[M]:
        return cls(lambda event: event.try_char() == ch, message)

    @classmethod
    def ctrl_char(cls, ch: str, message: M) -> EventFilter[M]:
        return cls(lambda event: event.try_ctrl_char() == ch, message)

    @classmethod
    def key(cls, key: Key, message: M) -> EventFilter[M]:
        try:
            check = _KEY_CHECKS[key]
        except KeyError:
            raise ValueError(f"no capability check for key {key.value!r}") from None
        return cls(check, message)


__all__ = ["EventFilter"]
