"""Numpy glyph-buffer backend for GPU text renderers."""

from __future__ import annotations

import queue
from dataclasses import dataclass

import numpy as np

from cellui.api.geometry import Vec2
from cellui.api.style import Color, Effect
from cellui.rendering.text_width import char_width

DEFAULT_FG: tuple[int, int, int, int] = (229, 229, 229, 255)
DEFAULT_BG: tuple[int, int, int, int] = (0, 0, 0, 255)


@dataclass(frozen=True, slots=True)
class GlyphFrame:
    """Immutable snapshot of the cell buffer handed to a renderer thread.

    `codepoints` is `(rows, cols)` uint32 with 0 marking the second cell of a
    wide glyph; `fg` and `bg` are `(rows, cols, 4)` uint8 RGBA; `effects` is
    `(rows, cols)` uint16 holding `Effect` bits.
    """

    codepoints: np.ndarray
    fg: np.ndarray
    bg: np.ndarray
    effects: np.ndarray

    def text_rows(self) -> list[str]:
        return [
            "".join(chr(int(code)) for code in row if code != 0)
            for row in self.codepoints
        ]


def _rgba(color: Color | None, default: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
    if color is None:
        return default
    r, g, b = color.to_rgb()
    return (r, g, b, 255)


class GlyphBufferBackend:
    """Fills numpy cell arrays and publishes a frame per flush.

    Frames are handed to the consumer through `frames`, so a render thread
    never shares the buffer being drawn into.
    """

    def __init__(
        self,
        size: Vec2,
        frames: queue.SimpleQueue[GlyphFrame] | None = None,
    ) -> None:
        self.frames: queue.SimpleQueue[GlyphFrame] = frames if frames is not None else queue.SimpleQueue()
        self._fg = DEFAULT_FG
        self._bg = DEFAULT_BG
        self._effects = Effect.NONE
        self._size = size
        self._allocate()

    def clear(self) -> None:
        self.codepoints.fill(ord(" "))
        self.fg[:] = self._fg
        self.bg[:] = self._bg
        self.effects.fill(0)

    def size(self) -> Vec2:
        return self._size

    def resize(self, size: Vec2) -> None:
        self._size = size
        self._allocate()

    def set_fg(self, color: Color | None) -> None:
        self._fg = _rgba(color, DEFAULT_FG)

    def set_bg(self, color: Color | None) -> None:
        self._bg = _rgba(color, DEFAULT_BG)

    def set_effect(self, effect: Effect) -> None:
        self._effects |= effect

    def unset_effect(self, effect: Effect) -> None:
        self._effects &= ~effect

    def print_at(self, pos: Vec2, text: str) -> None:
        rows, cols = self.codepoints.shape
        if pos.y >= rows:
            return
        x = pos.x
        for ch in text:
            w = char_width(ch)
            if w == 0:
                continue
            if x + w > cols:
                break
            self._put(pos.y, x, ord(ch), w)
            x += w

    def flush(self) -> None:
        self.frames.put(
            GlyphFrame(
                codepoints=self.codepoints.copy(),
                fg=self.fg.copy(),
                bg=self.bg.copy(),
                effects=self.effects.copy(),
            )
        )

    def _put(self, y: int, x: int, code: int, width: int) -> None:
        span = slice(x, x + width)
        self.codepoints[y, span] = 0
        self.codepoints[y, x] = code
        self.fg[y, span] = self._fg
        self.bg[y, span] = self._bg
        self.effects[y, span] = self._effects.value

    def _allocate(self) -> None:
        shape = (self._size.y, self._size.x)
        self.codepoints = np.full(shape, ord(" "), dtype=np.uint32)
        self.fg = np.zeros(shape + (4,), dtype=np.uint8)
        self.bg = np.zeros(shape + (4,), dtype=np.uint8)
        self.effects = np.zeros(shape, dtype=np.uint16)
        self.fg[:] = DEFAULT_FG
        self.bg[:] = DEFAULT_BG


__all__ = ["DEFAULT_BG", "DEFAULT_FG", "GlyphBufferBackend", "GlyphFrame"]
