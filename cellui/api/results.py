"""Event and update result monoids."""

from __future__ import annotations

from enum import Enum


class EventResult(Enum):
    """Outcome of a widget handling one event.

    `|` combines two outcomes: a redraw request always wins, an ignored
    outcome is the identity, and otherwise the right operand is kept.
    """

    REDRAW = "redraw"
    NODRAW = "nodraw"
    IGNORE = "ignore"

    @classmethod
    def consume(cls, redraw: bool) -> EventResult:
        return cls.REDRAW if redraw else cls.NODRAW

    def is_consume(self) -> bool:
        return self is not EventResult.IGNORE

    def is_ignored(self) -> bool:
        return self is EventResult.IGNORE

    def is_redraw(self) -> bool:
        return self is EventResult.REDRAW

    def is_nodraw(self) -> bool:
        return self is EventResult.NODRAW

    def __or__(self, other: EventResult) -> EventResult:
        if not isinstance(other, EventResult):
            return NotImplemented
        if self.is_redraw() or other.is_redraw():
            return EventResult.REDRAW
        if other.is_ignored():
            return self
        return other


class UpdateResult(Enum):
    """Outcome of a model update; REDRAW dominates, then EXIT."""

    REDRAW = "redraw"
    IGNORE = "ignore"
    EXIT = "exit"

    def is_redraw(self) -> bool:
        return self is UpdateResult.REDRAW

    def is_ignore(self) -> bool:
        return self is UpdateResult.IGNORE

    def is_exit(self) -> bool:
        return self is UpdateResult.EXIT

    def __or__(self, other: UpdateResult) -> UpdateResult:
        if not isinstance(other, UpdateResult):
            return NotImplemented
        if self.is_redraw() or other.is_redraw():
            return UpdateResult.REDRAW
        if self.is_exit() or other.is_exit():
            return UpdateResult.EXIT
        return UpdateResult.IGNORE


__all__ = ["EventResult", "UpdateResult"]
