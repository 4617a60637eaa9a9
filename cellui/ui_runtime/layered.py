"""Layer stack container: every layer shares the same rectangle."""

from __future__ import annotations

from cellui.api.geometry import ZERO, Vec2
from cellui.api.view import View
from cellui.rendering.printer import Printer
from cellui.ui_runtime.wrappers import SizeCacher


class LayeredView[S, E, M](View[S, E, M]):
    """Bottom-first stack of layers; only the topmost layer receives events.

    Each layer is laid out to the lesser of its desired size and the budget
    and renders into that much of the shared rectangle.
    """

    def __init__(self) -> None:
        self._layers: list[SizeCacher[S, E, M]] = []

    def __len__(self) -> int:
        return len(self._layers)

    def add_layer(self, layer: View[S, E, M]) -> None:
        """Push a layer above all existing ones."""
        self._layers.append(SizeCacher(layer))

    def layer(self, layer: View[S, E, M]) -> LayeredView[S, E, M]:
        self.add_layer(layer)
        return self

    def pop_layer(self) -> View[S, E, M] | None:
        """Remove and return the topmost layer."""
        if not self._layers:
            return None
        return self._layers.pop().inner

    def top(self) -> View[S, E, M] | None:
        if not self._layers:
            return None
        return self._layers[-1].inner

    def render(self, printer: Printer) -> None:
        bound = printer.bound
        for layer in self._layers:
            printer.with_bound(bound.with_size(bound.size.min(layer.prev_size)), layer.render)

    def layout(self, size: Vec2) -> None:
        for layer in self._layers:
            layer.layout(size.min(layer.desired_size()))

    def desired_size(self) -> Vec2:
        size = ZERO
        for layer in self._layers:
            size = size.max(layer.desired_size())
        return size

    def on_event(self, state: S, event: E) -> M | None:
        if not self._layers:
            return None
        return self._layers[-1].on_event(state, event)


__all__ = ["LayeredView"]
