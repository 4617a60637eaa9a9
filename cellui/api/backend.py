"""Drawing surface contract consumed by the rendering pipeline."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cellui.api.geometry import Vec2
from cellui.api.style import Color, Effect


@runtime_checkable
class Backend(Protocol):
    """Minimal grid-drawing surface.

    `print_at` places a run of characters starting at an absolute cell and is
    responsible for wide-character placement. It does not clip; callers (the
    printer and `SlicedBackend`) keep output inside the visible area.
    """

    def clear(self) -> None:
        """Blank the whole surface."""

    def size(self) -> Vec2:
        """Return the surface extent in cells."""

    def set_fg(self, color: Color | None) -> None:
        """Set foreground color for subsequent prints; None restores the default."""

    def set_bg(self, color: Color | None) -> None:
        """Set background color for subsequent prints; None restores the default."""

    def set_effect(self, effect: Effect) -> None:
        """Enable text effect(s) for subsequent prints."""

    def unset_effect(self, effect: Effect) -> None:
        """Disable text effect(s) for subsequent prints."""

    def print_at(self, pos: Vec2, text: str) -> None:
        """Write text starting at an absolute cell position."""

    def flush(self) -> None:
        """Present everything drawn since the last flush."""


@runtime_checkable
class ResizableBackend(Backend, Protocol):
    """Backend whose extent follows an external surface (terminal, window)."""

    def resize(self, size: Vec2) -> None:
        """Adopt a new surface extent."""


__all__ = ["Backend", "ResizableBackend"]
