"""View contract and fluent access to the composition combinators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from cellui.api.geometry import Orientation, Vec2

if TYPE_CHECKING:
    from cellui.rendering.printer import Printer
    from cellui.ui_runtime.combinators import ConsumeEvent, Map, MapE, MapOptE, OrElse, OrElseFirst
    from cellui.ui_runtime.scroll import ScrollView
    from cellui.ui_runtime.wrappers import BoundChecker, SizeCacher


class View[S, E, M](ABC):
    """Renderable, measurable, event-handling unit of a UI tree.

    `S` is the application state handed to `on_event`, `E` the event type the
    view understands, and `M` the message it reports. `on_event` returns None
    when the event was not consumed.
    """

    @abstractmethod
    def render(self, printer: Printer) -> None:
        """Draw inside the printer's current bound without mutating view state."""

    def layout(self, size: Vec2) -> None:
        """Accept the size assigned for the next render; never larger than `size`."""

    @abstractmethod
    def desired_size(self) -> Vec2:
        """Return the preferred size, independent of any budget."""

    @abstractmethod
    def on_event(self, state: S, event: E) -> M | None:
        """Route one event, optionally mutating state; None means not consumed."""

    def map[U](self, f: Callable[[View[S, E, M], S, M], U]) -> Map[S, E, M, U]:
        from cellui.ui_runtime.combinators import Map

        return Map(self, f)

    def map_e[O](self, f: Callable[[View[S, E, M], S, O], E]) -> MapE[S, O, E, M]:
        from cellui.ui_runtime.combinators import MapE

        return MapE(self, f)

    def map_opt_e[O](self, f: Callable[[View[S, E, M], S, O], E | None]) -> MapOptE[S, O, E, M]:
        from cellui.ui_runtime.combinators import MapOptE

        return MapOptE(self, f)

    def or_else_first(self, f: Callable[[View[S, E, M], S, E], M | None]) -> OrElseFirst[S, E, M]:
        from cellui.ui_runtime.combinators import OrElseFirst

        return OrElseFirst(self, f)

    def or_else(self, f: Callable[[View[S, E, M], S, E], M | None]) -> OrElse[S, E, M]:
        from cellui.ui_runtime.combinators import OrElse

        return OrElse(self, f)

    def consume_event(self, message: M) -> ConsumeEvent[S, E, M]:
        from cellui.ui_runtime.combinators import ConsumeEvent

        return ConsumeEvent(self, message)

    def size_cached(self) -> SizeCacher[S, E, M]:
        from cellui.ui_runtime.wrappers import SizeCacher

        return SizeCacher(self)

    def bound_checked(self) -> BoundChecker[S, E, M]:
        from cellui.ui_runtime.wrappers import BoundChecker

        return BoundChecker(self)

    def scrollable(
        self,
        orientation: Orientation = Orientation.VERTICAL,
        *,
        step: int | None = None,
    ) -> ScrollView[S, E, M]:
        from cellui.ui_runtime.scroll import ScrollView

        return ScrollView(self, orientation, step=step)


__all__ = ["View"]
