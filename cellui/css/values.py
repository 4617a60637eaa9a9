"""CSS value model: inherit-or-explicit values, sizes and edge rectangles."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final


class _Inherit:
    """Marker for a property left to cascade from the parent."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "INHERIT"

    def __reduce__(self) -> str:
        return "INHERIT"


INHERIT: Final = _Inherit()


@dataclass(frozen=True, slots=True)
class Explicit[T]:
    value: T


type CssVal[T] = Explicit[T] | _Inherit


def combine[T](later: CssVal[T], earlier: CssVal[T]) -> CssVal[T]:
    """Prefer the later operand's explicit value, else fall back to the earlier one."""
    if isinstance(later, Explicit):
        return later
    return earlier


def resolve[T](value: CssVal[T], parent: T) -> T:
    """Return the explicit value, or the parent's resolved value for INHERIT."""
    if isinstance(value, Explicit):
        return value.value
    return parent


@dataclass(frozen=True, slots=True)
class CssSize:
    """A length in cells: fixed, a percentage of the parent extent, or auto."""

    kind: str  # fixed|percent|auto
    value: int = 0

    @classmethod
    def fixed(cls, cells: int) -> CssSize:
        return cls("fixed", cells)

    @classmethod
    def percent(cls, percent: int) -> CssSize:
        return cls("percent", percent)

    @classmethod
    def auto(cls) -> CssSize:
        return cls("auto")

    def calc(self, maximum: int) -> int:
        """Resolve against the parent extent; never exceeds it."""
        if self.kind == "auto":
            return maximum
        if self.kind == "percent":
            want = maximum * self.value // 100
        else:
            want = self.value
        return min(want, maximum)


_SIZE_RE = re.compile(r"^(?P<num>\d+)(?P<unit>px|ch|em|%)?$")


def parse_size(raw: str) -> CssSize:
    """Parse `10`, `10px`, `10ch`, `50%` or `auto`; raises ValueError otherwise."""
    text = raw.strip().lower()
    if text == "auto":
        return CssSize.auto()
    match = _SIZE_RE.match(text)
    if match is None:
        raise ValueError(f"invalid size: {raw!r}")
    number = int(match.group("num"))
    if match.group("unit") == "%":
        return CssSize.percent(number)
    return CssSize.fixed(number)


@dataclass(frozen=True, slots=True)
class Edges:
    """Resolved per-side cell counts."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


ZERO_EDGES = Edges()


@dataclass(frozen=True, slots=True)
class CssRect:
    """Per-side sizes as written in margin, padding or border-width."""

    top: CssSize
    right: CssSize
    bottom: CssSize
    left: CssSize

    def calc(self, width: int, height: int) -> Edges:
        """Resolve vertical sides against `height` and horizontal sides against `width`."""
        return Edges(
            top=self.top.calc(height),
            right=self.right.calc(width),
            bottom=self.bottom.calc(height),
            left=self.left.calc(width),
        )


def parse_rect(raw: str) -> CssRect:
    """Parse the 1-4 value shorthand used by margin, padding and border-width."""
    sizes = [parse_size(token) for token in raw.split()]
    if len(sizes) == 1:
        top = right = bottom = left = sizes[0]
    elif len(sizes) == 2:
        top = bottom = sizes[0]
        right = left = sizes[1]
    elif len(sizes) == 3:
        top, right, bottom = sizes
        left = right
    elif len(sizes) == 4:
        top, right, bottom, left = sizes
    else:
        raise ValueError(f"expected 1-4 sizes, got {raw!r}")
    return CssRect(top=top, right=right, bottom=bottom, left=left)


__all__ = [
    "CssRect",
    "CssSize",
    "CssVal",
    "Edges",
    "Explicit",
    "INHERIT",
    "ZERO_EDGES",
    "combine",
    "parse_rect",
    "parse_size",
    "resolve",
]
