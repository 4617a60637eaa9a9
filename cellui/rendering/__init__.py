"""Drawing pipeline: printer, clipping decorator and interchangeable backends."""

from cellui.rendering.ansi_backend import AnsiTerminalBackend
from cellui.rendering.glyph_backend import GlyphBufferBackend, GlyphFrame
from cellui.rendering.grid_backend import CellStyle, GridBackend
from cellui.rendering.null_backend import NullBackend
from cellui.rendering.printer import Printer
from cellui.rendering.sliced_backend import SlicedBackend
from cellui.rendering.text_width import (
    char_width,
    find_width_pos,
    skip_width,
    slice_str_with_width,
    str_width,
)

__all__ = [
    "AnsiTerminalBackend",
    "CellStyle",
    "GlyphBufferBackend",
    "GlyphFrame",
    "GridBackend",
    "NullBackend",
    "Printer",
    "SlicedBackend",
    "char_width",
    "find_width_pos",
    "skip_width",
    "slice_str_with_width",
    "str_width",
]
