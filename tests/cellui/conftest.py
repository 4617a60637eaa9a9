from __future__ import annotations

from cellui.api.geometry import Vec2
from cellui.api.input_events import EventLike
from cellui.api.style import Color, Effect
from cellui.api.view import View
from cellui.rendering.printer import Printer


class RecordingBackend:
    """Backend that records every call instead of drawing."""

    def __init__(self, size: Vec2 = Vec2(20, 5)) -> None:
        self._size = size
        self.prints: list[tuple[Vec2, str]] = []
        self.fg: Color | None = None
        self.bg: Color | None = None
        self.effects = Effect.NONE
        self.clear_count = 0
        self.flush_count = 0

    def clear(self) -> None:
        self.clear_count += 1

    def size(self) -> Vec2:
        return self._size

    def resize(self, size: Vec2) -> None:
        self._size = size

    def set_fg(self, color: Color | None) -> None:
        self.fg = color

    def set_bg(self, color: Color | None) -> None:
        self.bg = color

    def set_effect(self, effect: Effect) -> None:
        self.effects |= effect

    def unset_effect(self, effect: Effect) -> None:
        self.effects &= ~effect

    def print_at(self, pos: Vec2, text: str) -> None:
        self.prints.append((pos, text))

    def flush(self) -> None:
        self.flush_count += 1


class FixedView(View[object, EventLike, str]):
    """Fills its assigned area with `fill` and answers every event with `name`."""

    def __init__(self, name: str, size: Vec2 | tuple[int, int], fill: str = "#", *, consume: bool = True) -> None:
        self.name = name
        self.size = Vec2.of(size)
        self.fill = fill
        self.consume = consume
        self.laid_out: list[Vec2] = []
        self.events: list[EventLike] = []

    def render(self, printer: Printer) -> None:
        area = self.laid_out[-1] if self.laid_out else self.size
        for y in range(area.y):
            printer.print((0, y), self.fill * area.x)

    def layout(self, size: Vec2) -> None:
        self.laid_out.append(size)

    def desired_size(self) -> Vec2:
        return self.size

    def on_event(self, state: object, event: EventLike) -> str | None:
        self.events.append(event)
        return self.name if self.consume else None
