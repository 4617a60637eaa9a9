"""Linear stack container: children laid out along one axis."""

from __future__ import annotations

import logging

from cellui.api.geometry import ZERO, Orientation, Rect, Vec2
from cellui.api.input_events import EventLike
from cellui.api.view import View
from cellui.rendering.printer import Printer
from cellui.ui_runtime.wrappers import BoundChecker, SizeCacher

logger = logging.getLogger(__name__)


class LinearView[S, E: EventLike, M](View[S, E, M]):
    """Horizontal or vertical stack of heterogeneous children.

    Pointer events go to the first child whose last rendered bound contains
    the pointer; every other event goes to the focused child, if any.
    """

    def __init__(self, orientation: Orientation = Orientation.HORIZONTAL) -> None:
        if orientation is Orientation.BOTH:
            raise ValueError("LinearView needs a single axis")
        self._orientation = orientation
        self._children: list[SizeCacher[S, E, M]] = []
        self._checkers: list[BoundChecker[S, E, M]] = []
        self._focus: int | None = None

    @classmethod
    def vertical(cls) -> LinearView[S, E, M]:
        return cls(Orientation.VERTICAL)

    @classmethod
    def horizontal(cls) -> LinearView[S, E, M]:
        return cls(Orientation.HORIZONTAL)

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def focus_index(self) -> int | None:
        return self._focus

    def __len__(self) -> int:
        return len(self._children)

    def add_child(self, child: View[S, E, M]) -> None:
        checker = BoundChecker(child)
        self._checkers.append(checker)
        self._children.append(SizeCacher(checker))

    def child(self, child: View[S, E, M]) -> LinearView[S, E, M]:
        self.add_child(child)
        return self

    def set_focus(self, index: int | None) -> None:
        if index is not None and not 0 <= index < len(self._children):
            raise IndexError(f"focus index {index} out of range for {len(self._children)} children")
        self._focus = index

    def focus(self, index: int) -> LinearView[S, E, M]:
        self.set_focus(index)
        return self

    def child_bound(self, index: int) -> Rect:
        """Return the rectangle child `index` was last rendered into."""
        return self._checkers[index].bound

    def render(self, printer: Printer) -> None:
        bound = printer.bound
        offset = 0
        for child in self._children:
            size = child.prev_size
            if self._orientation is Orientation.VERTICAL:
                child_bound = bound.add_start((0, offset))
                offset += size.y
            else:
                child_bound = bound.add_start((offset, 0))
                offset += size.x
            child_bound = child_bound.with_size(child_bound.size.min(size))
            printer.with_bound(child_bound, child.render)

    def layout(self, size: Vec2) -> None:
        remaining = size
        for child in self._children:
            desired = child.desired_size()
            child.layout(remaining.min(desired))
            if self._orientation is Orientation.VERTICAL:
                remaining = remaining.saturating_sub_y(desired.y)
            else:
                remaining = remaining.saturating_sub_x(desired.x)

    def desired_size(self) -> Vec2:
        total = ZERO
        for child in self._children:
            size = child.desired_size()
            if self._orientation is Orientation.VERTICAL:
                total = Vec2(max(total.x, size.x), total.y + size.y)
            else:
                total = Vec2(total.x + size.x, max(total.y, size.y))
        return total

    def on_event(self, state: S, event: E) -> M | None:
        pos = event.try_mouse()
        if pos is not None:
            for index, checker in enumerate(self._checkers):
                if checker.contains(pos):
                    logger.debug("pointer_routed child=%d pos=%s", index, pos)
                    return self._children[index].on_event(state, event)
            return None
        if self._focus is None:
            return None
        return self._children[self._focus].on_event(state, event)


__all__ = ["LinearView"]
