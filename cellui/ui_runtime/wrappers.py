"""Size-caching and hit-testing wrappers used by containers."""

from __future__ import annotations

import logging

from cellui.api.geometry import ZERO, Rect, Vec2
from cellui.rendering.printer import Printer
from cellui.ui_runtime.combinators import ViewProxy

logger = logging.getLogger(__name__)


class SizeCacher[S, E, M](ViewProxy[S, E, M]):
    """Remembers the size last assigned by `layout` for sibling positioning."""

    def __init__(self, inner) -> None:
        super().__init__(inner)
        self._prev_size = ZERO

    @property
    def prev_size(self) -> Vec2:
        return self._prev_size

    def layout(self, size: Vec2) -> None:
        self._prev_size = size
        self._inner.layout(size)


class BoundChecker[S, E, M](ViewProxy[S, E, M]):
    """Remembers the rectangle it was last rendered into for pointer hit-testing."""

    def __init__(self, inner) -> None:
        super().__init__(inner)
        self._bound = Rect()

    @property
    def bound(self) -> Rect:
        return self._bound

    def contains(self, pos: Vec2) -> bool:
        hit = self._bound.contains(pos)
        logger.debug("hit_test pos=%s bound=%s hit=%s", pos, self._bound, hit)
        return hit

    def render(self, printer: Printer) -> None:
        self._bound = printer.bound
        self._inner.render(printer)


__all__ = ["BoundChecker", "SizeCacher"]
