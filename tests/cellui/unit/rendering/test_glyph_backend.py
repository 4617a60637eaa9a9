from __future__ import annotations

import numpy as np

from cellui.api.geometry import Vec2
from cellui.api.style import Color, Effect
from cellui.rendering.glyph_backend import DEFAULT_BG, GlyphBufferBackend


def test_flush_publishes_independent_snapshot() -> None:
    backend = GlyphBufferBackend(Vec2(4, 2))
    backend.print_at(Vec2(0, 0), "ab")
    backend.flush()
    backend.print_at(Vec2(0, 0), "zz")
    frame = backend.frames.get_nowait()
    assert frame.text_rows() == ["ab  ", "    "]
    assert frame.codepoints.dtype == np.uint32


def test_wide_glyph_marks_tail_cell() -> None:
    backend = GlyphBufferBackend(Vec2(4, 1))
    backend.print_at(Vec2(1, 0), "가")
    assert backend.codepoints[0, 1] == ord("가")
    assert backend.codepoints[0, 2] == 0


def test_colors_and_effects_are_written_per_cell() -> None:
    backend = GlyphBufferBackend(Vec2(3, 1))
    backend.set_bg(Color.rgb(10, 20, 30))
    backend.set_effect(Effect.ITALIC)
    backend.print_at(Vec2(1, 0), "x")
    assert tuple(backend.bg[0, 1]) == (10, 20, 30, 255)
    assert tuple(backend.bg[0, 0]) == DEFAULT_BG
    assert backend.effects[0, 1] == Effect.ITALIC.value


def test_resize_reallocates_buffers() -> None:
    backend = GlyphBufferBackend(Vec2(2, 2))
    backend.resize(Vec2(5, 3))
    assert backend.codepoints.shape == (3, 5)
    assert backend.fg.shape == (3, 5, 4)
