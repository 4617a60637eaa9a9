"""Cascaded property sets and their resolution against a parent."""

from __future__ import annotations

from dataclasses import dataclass, fields

from cellui.api.geometry import Vec2
from cellui.api.style import ColorRef, Effect, Style
from cellui.css.values import (
    INHERIT,
    ZERO_EDGES,
    CssRect,
    CssSize,
    CssVal,
    Edges,
    combine,
    resolve,
)


@dataclass(frozen=True, slots=True)
class ResolvedProperty:
    """Concrete values for one node after the cascade and calc pass."""

    fg: ColorRef
    bg: ColorRef
    font: Effect
    decoration: Effect
    width: int
    height: int
    padding: Edges
    margin: Edges
    border_width: Edges
    border_color: ColorRef

    @classmethod
    def root(cls, size: Vec2) -> ResolvedProperty:
        """Implicit parent of the outermost node: the whole surface, no style."""
        return cls(
            fg=None,
            bg=None,
            font=Effect.NONE,
            decoration=Effect.NONE,
            width=size.x,
            height=size.y,
            padding=ZERO_EDGES,
            margin=ZERO_EDGES,
            border_width=ZERO_EDGES,
            border_color=None,
        )

    @property
    def style(self) -> Style:
        return Style(fg=self.fg, bg=self.bg, effects=self.font | self.decoration)

    @property
    def border_style(self) -> Style:
        return Style(fg=self.border_color, bg=self.bg)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    def box_edges(self) -> Edges:
        """Sum of margin, border and padding on each side."""
        return Edges(
            top=self.margin.top + self.border_width.top + self.padding.top,
            right=self.margin.right + self.border_width.right + self.padding.right,
            bottom=self.margin.bottom + self.border_width.bottom + self.padding.bottom,
            left=self.margin.left + self.border_width.left + self.padding.left,
        )


@dataclass(frozen=True, slots=True)
class CssProperty:
    """Partial property set; every field is INHERIT unless a rule set it."""

    fg: CssVal[ColorRef] = INHERIT
    bg: CssVal[ColorRef] = INHERIT
    font: CssVal[Effect] = INHERIT
    decoration: CssVal[Effect] = INHERIT
    width: CssVal[CssSize] = INHERIT
    height: CssVal[CssSize] = INHERIT
    padding: CssVal[CssRect] = INHERIT
    margin: CssVal[CssRect] = INHERIT
    border_width: CssVal[CssRect] = INHERIT
    border_color: CssVal[ColorRef] = INHERIT

    def combine(self, later: CssProperty) -> CssProperty:
        """Overlay `later` on this set; its explicit values win per field."""
        merged = {
            f.name: combine(getattr(later, f.name), getattr(self, f.name))
            for f in fields(self)
        }
        return CssProperty(**merged)

    def calc(self, parent: ResolvedProperty) -> ResolvedProperty:
        """Resolve INHERIT to the parent's values and sizes against the parent's extent.

        Every unset field takes the parent's resolved value; margin, padding
        and border width are measured against the parent's width and height.
        """
        width = _calc_size(self.width, parent.width, parent.width)
        height = _calc_size(self.height, parent.height, parent.height)
        return ResolvedProperty(
            fg=resolve(self.fg, parent.fg),
            bg=resolve(self.bg, parent.bg),
            font=resolve(self.font, parent.font),
            decoration=resolve(self.decoration, parent.decoration),
            width=width,
            height=height,
            padding=_calc_rect(self.padding, parent.padding, parent),
            margin=_calc_rect(self.margin, parent.margin, parent),
            border_width=_calc_rect(self.border_width, parent.border_width, parent),
            border_color=resolve(self.border_color, parent.border_color),
        )


def _calc_size(value: CssVal[CssSize], inherited: int, maximum: int) -> int:
    size = resolve(value, None)
    if size is None:
        return inherited
    return size.calc(maximum)


def _calc_rect(value: CssVal[CssRect], inherited: Edges, parent: ResolvedProperty) -> Edges:
    rect = resolve(value, None)
    if rect is None:
        return inherited
    return rect.calc(parent.width, parent.height)


__all__ = ["CssProperty", "ResolvedProperty"]
