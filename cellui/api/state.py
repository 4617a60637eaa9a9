"""Redraw-request capability carried by application state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class RedrawState(Protocol):
    """Application state that can record a pending redraw."""

    def set_need_redraw(self, need_redraw: bool = True) -> None:
        """Record (or clear) the redraw-pending flag."""

    def is_need_redraw(self) -> bool:
        """Return whether a redraw is pending."""


@dataclass(slots=True)
class RedrawFlag:
    """Minimal application state: just the dirty flag."""

    need_redraw: bool = False

    def set_need_redraw(self, need_redraw: bool = True) -> None:
        self.need_redraw = need_redraw

    def is_need_redraw(self) -> bool:
        return self.need_redraw


def request_redraw(state: object, redraw: bool = True) -> None:
    """Set the dirty flag on states that carry one; OR-combines with any pending request."""
    if redraw and isinstance(state, RedrawState):
        state.set_need_redraw(True)


__all__ = ["RedrawFlag", "RedrawState", "request_redraw"]
