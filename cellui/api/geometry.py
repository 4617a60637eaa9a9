"""Grid geometry primitives: unsigned 16-bit vectors and rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

U16_MAX = 0xFFFF


class Orientation(Enum):
    """Primary axis of a linear container or scroll view."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BOTH = "both"


def _check_component(name: str, value: int) -> int:
    if not 0 <= value <= U16_MAX:
        raise ValueError(f"Vec2.{name} out of range: {value}")
    return value


def _saturate(value: int) -> int:
    return max(0, min(U16_MAX, value))


@dataclass(frozen=True, slots=True, order=True)
class Vec2:
    """Grid coordinate or extent; both components are unsigned 16-bit."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        _check_component("x", self.x)
        _check_component("y", self.y)

    @classmethod
    def of(cls, value: Vec2 | tuple[int, int]) -> Vec2:
        """Coerce a tuple or Vec2 into a Vec2."""
        if isinstance(value, Vec2):
            return value
        x, y = value
        return cls(x, y)

    def __add__(self, other: Vec2 | tuple[int, int]) -> Vec2:
        other = Vec2.of(other)
        return Vec2(self.x + other.x, self.y + other.y)

    def add_x(self, x: int) -> Vec2:
        return Vec2(self.x + x, self.y)

    def add_y(self, y: int) -> Vec2:
        return Vec2(self.x, self.y + y)

    def saturating_add(self, other: Vec2 | tuple[int, int]) -> Vec2:
        other = Vec2.of(other)
        return Vec2(_saturate(self.x + other.x), _saturate(self.y + other.y))

    def saturating_sub(self, other: Vec2 | tuple[int, int]) -> Vec2:
        other = Vec2.of(other)
        return Vec2(_saturate(self.x - other.x), _saturate(self.y - other.y))

    def saturating_add_x(self, x: int) -> Vec2:
        return Vec2(_saturate(self.x + x), self.y)

    def saturating_add_y(self, y: int) -> Vec2:
        return Vec2(self.x, _saturate(self.y + y))

    def saturating_sub_x(self, x: int) -> Vec2:
        return Vec2(_saturate(self.x - x), self.y)

    def saturating_sub_y(self, y: int) -> Vec2:
        return Vec2(self.x, _saturate(self.y - y))

    def checked_sub(self, other: Vec2 | tuple[int, int]) -> Vec2 | None:
        """Subtract component-wise, or return None if either component underflows."""
        other = Vec2.of(other)
        if other.x > self.x or other.y > self.y:
            return None
        return Vec2(self.x - other.x, self.y - other.y)

    def checked_sub_x(self, x: int) -> Vec2 | None:
        if x > self.x:
            return None
        return Vec2(self.x - x, self.y)

    def checked_sub_y(self, y: int) -> Vec2 | None:
        if y > self.y:
            return None
        return Vec2(self.x, self.y - y)

    def min(self, other: Vec2 | tuple[int, int]) -> Vec2:
        """Component-wise minimum."""
        other = Vec2.of(other)
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: Vec2 | tuple[int, int]) -> Vec2:
        """Component-wise maximum."""
        other = Vec2.of(other)
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def min_x(self, x: int) -> Vec2:
        return Vec2(min(self.x, x), self.y)

    def min_y(self, y: int) -> Vec2:
        return Vec2(self.x, min(self.y, y))

    def max_x(self, x: int) -> Vec2:
        return Vec2(max(self.x, x), self.y)

    def max_y(self, y: int) -> Vec2:
        return Vec2(self.x, max(self.y, y))

    def fits_in(self, other: Vec2) -> bool:
        """Return whether both components are <= the other's."""
        return self.x <= other.x and self.y <= other.y

    def main_axis(self, orientation: Orientation) -> int:
        return self.y if orientation is Orientation.VERTICAL else self.x

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


ZERO = Vec2(0, 0)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned grid rectangle described by its start corner and size."""

    start: Vec2 = ZERO
    size: Vec2 = ZERO

    @classmethod
    def new(cls, start: Vec2 | tuple[int, int], size: Vec2 | tuple[int, int]) -> Rect:
        return cls(Vec2.of(start), Vec2.of(size))

    @property
    def x(self) -> int:
        return self.start.x

    @property
    def y(self) -> int:
        return self.start.y

    @property
    def w(self) -> int:
        return self.size.x

    @property
    def h(self) -> int:
        return self.size.y

    def end(self) -> Vec2:
        """Exclusive bottom-right corner."""
        return self.start.saturating_add(self.size)

    def is_empty(self) -> bool:
        return self.size.x == 0 or self.size.y == 0

    def contains(self, point: Vec2 | tuple[int, int]) -> bool:
        """Return whether a point lies inside the half-open rectangle."""
        p = Vec2.of(point)
        return self.x <= p.x < self.x + self.w and self.y <= p.y < self.y + self.h

    def contains_inclusive(self, point: Vec2 | tuple[int, int]) -> bool:
        """Return whether a point lies inside the rectangle including its far edges."""
        p = Vec2.of(point)
        return self.x <= p.x <= self.x + self.w and self.y <= p.y <= self.y + self.h

    def add_start(self, add: Vec2 | tuple[int, int]) -> Rect:
        """Move the start corner while keeping the far edge fixed."""
        add = Vec2.of(add)
        return Rect(self.start.saturating_add(add), self.size.saturating_sub(add))

    def sub_size(self, sub: Vec2 | tuple[int, int]) -> Rect:
        return Rect(self.start, self.size.saturating_sub(sub))

    def with_size(self, size: Vec2 | tuple[int, int]) -> Rect:
        return Rect(self.start, Vec2.of(size))

    def with_margin(self, margin: int) -> Rect:
        """Shrink by `margin` cells on every side."""
        return self.add_start((margin, margin)).sub_size((margin, margin))

    def split_vertical(self, pos: int) -> tuple[Rect, Rect] | None:
        """Split into an upper part of height `pos` and the remainder below it."""
        if pos > self.h:
            return None
        up = Rect(self.start, Vec2(self.w, pos))
        down = Rect(self.start.add_y(pos), Vec2(self.w, self.h - pos))
        return up, down

    def split_horizontal(self, pos: int) -> tuple[Rect, Rect] | None:
        """Split into a left part of width `pos` and the remainder to its right."""
        if pos > self.w:
            return None
        left = Rect(self.start, Vec2(pos, self.h))
        right = Rect(self.start.add_x(pos), Vec2(self.w - pos, self.h))
        return left, right

    def intersect(self, other: Rect) -> Rect:
        """Return the overlapping area; empty rectangles keep the clamped start."""
        x0 = max(self.x, other.x)
        y0 = max(self.y, other.y)
        x1 = min(self.x + self.w, other.x + other.w)
        y1 = min(self.y + self.h, other.y + other.h)
        return Rect(Vec2(x0, y0), Vec2(max(0, x1 - x0), max(0, y1 - y0)))


__all__ = ["Orientation", "Rect", "U16_MAX", "Vec2", "ZERO"]
