"""In-memory character grid backend used for assertions and headless runs."""

from __future__ import annotations

from dataclasses import dataclass

from cellui.api.geometry import Vec2
from cellui.api.style import Color, Effect
from cellui.rendering.text_width import char_width

# Second cell of a wide character.
_WIDE_TAIL = ""


@dataclass(frozen=True, slots=True)
class CellStyle:
    fg: Color | None = None
    bg: Color | None = None
    effects: Effect = Effect.NONE


class GridBackend:
    """Cell grid that renders wide characters across two cells.

    `lines()` returns each row as text, so a row holding the wide characters
    `가나` at column 2 reads `"  가나"` followed by the remaining blanks.
    """

    def __init__(self, size: Vec2) -> None:
        self._size = size
        self._current = CellStyle()
        self._cells: list[list[str]] = []
        self._styles: list[list[CellStyle]] = []
        self.flush_count = 0
        self._reset_cells()

    def clear(self) -> None:
        self._reset_cells()

    def size(self) -> Vec2:
        return self._size

    def resize(self, size: Vec2) -> None:
        self._size = size
        self._reset_cells()

    def set_fg(self, color: Color | None) -> None:
        self._current = CellStyle(color, self._current.bg, self._current.effects)

    def set_bg(self, color: Color | None) -> None:
        self._current = CellStyle(self._current.fg, color, self._current.effects)

    def set_effect(self, effect: Effect) -> None:
        self._current = CellStyle(self._current.fg, self._current.bg, self._current.effects | effect)

    def unset_effect(self, effect: Effect) -> None:
        self._current = CellStyle(self._current.fg, self._current.bg, self._current.effects & ~effect)

    def print_at(self, pos: Vec2, text: str) -> None:
        if pos.y >= self._size.y:
            return
        row = self._cells[pos.y]
        styles = self._styles[pos.y]
        width = self._size.x
        x = pos.x
        for ch in text:
            w = char_width(ch)
            if w == 0:
                if 0 < x <= width and ch.isprintable():
                    prev = x - 1 if row[x - 1] != _WIDE_TAIL else x - 2
                    row[prev] += ch
                continue
            if x + w > width:
                break
            self._put(row, styles, x, ch)
            if w == 2:
                self._put(row, styles, x + 1, _WIDE_TAIL)
            x += w

    def flush(self) -> None:
        self.flush_count += 1

    def lines(self) -> list[str]:
        """Return the grid contents, one string per row."""
        return ["".join(row) for row in self._cells]

    def cell_style(self, x: int, y: int) -> CellStyle:
        return self._styles[y][x]

    def _put(self, row: list[str], styles: list[CellStyle], x: int, cell: str) -> None:
        old = row[x]
        # Overwriting half of a wide character blanks the other half.
        if old == _WIDE_TAIL and cell != _WIDE_TAIL and x > 0:
            row[x - 1] = " "
        elif old != _WIDE_TAIL and x + 1 < len(row) and row[x + 1] == _WIDE_TAIL:
            row[x + 1] = " "
        row[x] = cell
        styles[x] = self._current

    def _reset_cells(self) -> None:
        self._cells = [[" "] * self._size.x for _ in range(self._size.y)]
        self._styles = [[CellStyle()] * self._size.x for _ in range(self._size.y)]


__all__ = ["CellStyle", "GridBackend"]
