"""Backend that discards all output."""

from __future__ import annotations

from cellui.api.geometry import Vec2
from cellui.api.style import Color, Effect


class NullBackend:
    """Dummy sink with a fixed extent; useful for benchmarks and layout-only runs."""

    def __init__(self, size: Vec2 = Vec2(80, 24)) -> None:
        self._size = size
        self.flush_count = 0

    def clear(self) -> None:
        pass

    def size(self) -> Vec2:
        return self._size

    def resize(self, size: Vec2) -> None:
        self._size = size

    def set_fg(self, color: Color | None) -> None:
        pass

    def set_bg(self, color: Color | None) -> None:
        pass

    def set_effect(self, effect: Effect) -> None:
        pass

    def unset_effect(self, effect: Effect) -> None:
        pass

    def print_at(self, pos: Vec2, text: str) -> None:
        pass

    def flush(self) -> None:
        self.flush_count += 1


__all__ = ["NullBackend"]
