"""Terminal display-width helpers for wide and zero-width characters."""

from __future__ import annotations

import unicodedata


def char_width(ch: str) -> int:
    """Return the number of terminal cells a single character occupies."""
    code = ord(ch)
    if 0x20 <= code <= 0x7E:
        return 1
    if code < 0x20 or code == 0x7F:
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    if unicodedata.category(ch).startswith("M"):
        return 0
    return 1


def str_width(text: str) -> int:
    """Return the display width of a string in terminal cells."""
    return sum(char_width(ch) for ch in text)


def find_width_pos(text: str, width: int) -> tuple[int, int]:
    """Return the index of the first character that no longer fits in `width`
    cells, and the cells left unused before it."""
    remaining = width
    for index, ch in enumerate(text):
        w = char_width(ch)
        if w > remaining:
            return index, remaining
        remaining -= w
    return len(text), remaining


def slice_str_with_width(text: str, width: int) -> tuple[str, str, int]:
    """Split text into the longest head fitting in `width` cells, the tail, and
    the leftover cells the head leaves unused.

    A wide character is never split: `slice_str_with_width("가나다라", 3)`
    yields `("가", "나다라", 1)`.
    """
    index, leftover = find_width_pos(text, width)
    return text[:index], text[index:], leftover


def skip_width(text: str, cells: int) -> tuple[str, int]:
    """Drop every character starting within the first `cells` columns.

    Returns the remaining text and its column offset past `cells`; the offset
    is non-zero only when a wide character straddled the boundary.
    """
    column = 0
    for index, ch in enumerate(text):
        w = char_width(ch)
        if column >= cells and w > 0:
            return text[index:], column - cells
        column += w
    return "", max(0, column - cells)


__all__ = ["char_width", "find_width_pos", "skip_width", "slice_str_with_width", "str_width"]
