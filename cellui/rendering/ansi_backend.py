"""ANSI escape-sequence terminal writer backend."""

from __future__ import annotations

import shutil
import sys
from typing import TextIO

from cellui.api.geometry import Vec2
from cellui.api.style import ALL_EFFECTS, Color, Effect

_EFFECT_SGR: dict[Effect, str] = {
    Effect.BOLD: "1",
    Effect.DIM: "2",
    Effect.ITALIC: "3",
    Effect.UNDERLINE: "4",
    Effect.BLINK: "5",
    Effect.REVERSE: "7",
    Effect.HIDDEN: "8",
    Effect.STRIKETHROUGH: "9",
}


def sgr_fg(color: Color | None) -> str:
    if color is None:
        return "39"
    if color.kind == "named":
        assert isinstance(color.value, int)
        return str(30 + color.value) if color.value < 8 else str(90 + color.value - 8)
    if color.kind == "index":
        return f"38;5;{color.value}"
    r, g, b = color.to_rgb()
    return f"38;2;{r};{g};{b}"


def sgr_bg(color: Color | None) -> str:
    if color is None:
        return "49"
    if color.kind == "named":
        assert isinstance(color.value, int)
        return str(40 + color.value) if color.value < 8 else str(100 + color.value - 8)
    if color.kind == "index":
        return f"48;5;{color.value}"
    r, g, b = color.to_rgb()
    return f"48;2;{r};{g};{b}"


def sgr(fg: Color | None, bg: Color | None, effects: Effect) -> str:
    """Return a full SGR sequence that resets attributes and applies the given ones."""
    parts = ["0", sgr_fg(fg), sgr_bg(bg)]
    parts.extend(_EFFECT_SGR[effect] for effect in ALL_EFFECTS if effect in effects)
    return "\x1b[{}m".format(";".join(parts))


class AnsiTerminalBackend:
    """Buffers cursor moves, SGR changes and text; writes them on `flush`.

    Attribute changes are coalesced: the SGR sequence is emitted only before
    the next print whose attributes differ from the last ones written.
    """

    def __init__(self, out: TextIO | None = None, size: Vec2 | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._size = size if size is not None else terminal_size()
        self._fg: Color | None = None
        self._bg: Color | None = None
        self._effects = Effect.NONE
        self._written: tuple[Color | None, Color | None, Effect] | None = None
        self._buffer: list[str] = []

    def clear(self) -> None:
        self._buffer.append(sgr(self._fg, self._bg, self._effects))
        self._written = (self._fg, self._bg, self._effects)
        self._buffer.append("\x1b[2J")

    def size(self) -> Vec2:
        return self._size

    def resize(self, size: Vec2) -> None:
        self._size = size

    def set_fg(self, color: Color | None) -> None:
        self._fg = color

    def set_bg(self, color: Color | None) -> None:
        self._bg = color

    def set_effect(self, effect: Effect) -> None:
        self._effects |= effect

    def unset_effect(self, effect: Effect) -> None:
        self._effects &= ~effect

    def print_at(self, pos: Vec2, text: str) -> None:
        state = (self._fg, self._bg, self._effects)
        if state != self._written:
            self._buffer.append(sgr(*state))
            self._written = state
        self._buffer.append(f"\x1b[{pos.y + 1};{pos.x + 1}H{text}")

    def flush(self) -> None:
        if self._buffer:
            self._out.write("".join(self._buffer))
            self._buffer.clear()
        self._out.flush()

    def write_raw(self, sequence: str) -> None:
        """Queue a control sequence that bypasses the attribute tracking."""
        self._buffer.append(sequence)


def terminal_size() -> Vec2:
    size = shutil.get_terminal_size()
    return Vec2(size.columns, size.lines)


__all__ = ["AnsiTerminalBackend", "sgr", "sgr_bg", "sgr_fg", "terminal_size"]
