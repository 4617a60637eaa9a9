"""CSS subset: values, colors, selectors, parsing and the cascade."""

from cellui.css.color import parse_color
from cellui.css.parser import parse_declarations, parse_property, parse_rules
from cellui.css.property import CssProperty, ResolvedProperty
from cellui.css.selector import (
    Combinator,
    Compound,
    Selector,
    StyledElement,
    parse_selector,
)
from cellui.css.stylesheet import CssRule, StyleSheet
from cellui.css.values import (
    INHERIT,
    CssRect,
    CssSize,
    CssVal,
    Edges,
    Explicit,
    combine,
    parse_rect,
    parse_size,
    resolve,
)

__all__ = [
    "INHERIT",
    "Combinator",
    "Compound",
    "CssProperty",
    "CssRect",
    "CssRule",
    "CssSize",
    "CssVal",
    "Edges",
    "Explicit",
    "ResolvedProperty",
    "Selector",
    "StyleSheet",
    "StyledElement",
    "combine",
    "parse_color",
    "parse_declarations",
    "parse_property",
    "parse_rect",
    "parse_rules",
    "parse_selector",
    "parse_size",
    "resolve",
]
