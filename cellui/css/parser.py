"""Hand-written parser for the supported CSS subset.

Syntax example:
    body { color: var(--primary); background: black; }
    div.menu > div:focus { font: bold reverse; }
    .panel { border: 1 solid gray; padding: 0 1; width: 50%; }
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

import tinycss2

from cellui.api.style import Effect
from cellui.css.color import parse_color
from cellui.css.property import CssProperty
from cellui.css.selector import Selector, parse_selector
from cellui.css.values import INHERIT, Explicit, parse_rect, parse_size
from cellui.runtime.errors import RECOVERABLE_STYLE_ERRORS, log_recoverable

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a complete rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)    # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^}]*)          # declarations
    \}                       # closing brace
    """,
    re.VERBOSE,
)

# Matches a single declaration: key: value;
_DECL_RE = re.compile(
    r"""
    (?P<key>[a-zA-Z_-][a-zA-Z0-9_-]*)   # property name
    \s*:\s*                              # colon separator
    (?P<value>[^;]+?)                    # value (non-greedy up to semicolon)
    \s*;                                 # terminating semicolon
    """,
    re.VERBOSE,
)

_FONT_WORDS: dict[str, Effect] = {
    "bold": Effect.BOLD,
    "italic": Effect.ITALIC,
    "hidden": Effect.HIDDEN,
    "reverse": Effect.REVERSE,
    "dimmed": Effect.DIM,
    "dim": Effect.DIM,
}
_DECORATION_WORDS: dict[str, Effect] = {
    "underline": Effect.UNDERLINE,
    "blink": Effect.BLINK,
    "line-through": Effect.STRIKETHROUGH,
}
_NONE_WORDS = frozenset({"none", "normal"})
_BORDER_STYLE_WORDS = frozenset(
    {"solid", "dashed", "dotted", "double", "groove", "ridge", "inset", "outset", "hidden"}
)

type Fields = dict[str, Any]


def parse_declarations(body: str) -> list[tuple[str, str]]:
    """Split a rule body into ordered `(name, value)` pairs; the final `;` is optional."""
    text = body.strip()
    if text and not text.endswith(";"):
        text += ";"
    return [
        (match.group("key").strip().lower(), match.group("value").strip())
        for match in _DECL_RE.finditer(text)
    ]


def parse_property(body: str) -> CssProperty:
    """Build a property set from declarations, dropping any that fail to parse."""
    values: Fields = {}
    for name, raw in parse_declarations(body):
        apply = _APPLIERS.get(name)
        if apply is None:
            logger.debug("css_unknown_property name=%s", name)
            continue
        try:
            if raw.strip().lower() == "inherit":
                for field_name in _INHERIT_FIELDS[name]:
                    values[field_name] = INHERIT
                continue
            apply(values, raw)
        except RECOVERABLE_STYLE_ERRORS:
            log_recoverable(logger, f"css_declaration_dropped name={name} value={raw!r}")
    return CssProperty(**values)


def parse_rules(source: str) -> list[tuple[Selector, CssProperty]]:
    """Parse every rule, expanding selector lists; unsupported selectors are skipped."""
    rules: list[tuple[Selector, CssProperty]] = []
    for match in _RULE_RE.finditer(_COMMENT_RE.sub("", source)):
        prop = parse_property(match.group("body"))
        for raw_selector in match.group("selector").split(","):
            try:
                selector = parse_selector(raw_selector)
            except ValueError as exc:
                logger.warning("css_selector_skipped selector=%r reason=%s", raw_selector.strip(), exc)
                continue
            rules.append((selector, prop))
    return rules


def _flags(raw: str, table: dict[str, Effect]) -> Effect:
    words = raw.lower().split()
    if len(words) == 1 and words[0] in _NONE_WORDS:
        return Effect.NONE
    effect = Effect.NONE
    for word in words:
        effect |= table[word]
    return effect


def _current(values: Fields, name: str) -> Effect:
    current = values.get(name)
    return current.value if isinstance(current, Explicit) else Effect.NONE


def _set_color(field_name: str) -> Callable[[Fields, str], None]:
    def apply(values: Fields, raw: str) -> None:
        values[field_name] = Explicit(parse_color(raw))

    return apply


def _set_size(field_name: str) -> Callable[[Fields, str], None]:
    def apply(values: Fields, raw: str) -> None:
        values[field_name] = Explicit(parse_size(raw))

    return apply


def _set_rect(field_name: str) -> Callable[[Fields, str], None]:
    def apply(values: Fields, raw: str) -> None:
        values[field_name] = Explicit(parse_rect(raw))

    return apply


def _font(values: Fields, raw: str) -> None:
    values["font"] = Explicit(_flags(raw, _FONT_WORDS))


def _font_weight(values: Fields, raw: str) -> None:
    word = raw.strip().lower()
    current = _current(values, "font")
    if word in ("bold", "bolder", "700", "800", "900"):
        values["font"] = Explicit(current | Effect.BOLD)
    elif word in ("normal", "400", "lighter"):
        values["font"] = Explicit(current & ~Effect.BOLD)
    else:
        raise ValueError(f"unsupported font-weight: {raw!r}")


def _font_style(values: Fields, raw: str) -> None:
    word = raw.strip().lower()
    current = _current(values, "font")
    if word in ("italic", "oblique"):
        values["font"] = Explicit(current | Effect.ITALIC)
    elif word == "normal":
        values["font"] = Explicit(current & ~Effect.ITALIC)
    else:
        raise ValueError(f"unsupported font-style: {raw!r}")


def _decoration(values: Fields, raw: str) -> None:
    values["decoration"] = Explicit(_flags(raw, _DECORATION_WORDS))


def _border(values: Fields, raw: str) -> None:
    if raw.strip().lower() == "none":
        values["border_width"] = Explicit(parse_rect("0"))
        return
    parsed: Fields = {}
    for component in tinycss2.parse_component_value_list(raw, skip_comments=True):
        if component.type == "whitespace":
            continue
        token = tinycss2.serialize([component])
        if token.lower() in _BORDER_STYLE_WORDS:
            continue
        if token[0].isdigit():
            parsed["border_width"] = Explicit(parse_rect(token))
        else:
            parsed["border_color"] = Explicit(parse_color(token))
    if not parsed:
        raise ValueError(f"empty border shorthand: {raw!r}")
    values.update(parsed)


_APPLIERS: dict[str, Callable[[Fields, str], None]] = {
    "color": _set_color("fg"),
    "background": _set_color("bg"),
    "background-color": _set_color("bg"),
    "font": _font,
    "font-weight": _font_weight,
    "font-style": _font_style,
    "text-decoration": _decoration,
    "text-decoration-line": _decoration,
    "width": _set_size("width"),
    "height": _set_size("height"),
    "padding": _set_rect("padding"),
    "margin": _set_rect("margin"),
    "border-width": _set_rect("border_width"),
    "border-color": _set_color("border_color"),
    "border": _border,
}

_INHERIT_FIELDS: dict[str, tuple[str, ...]] = {
    "color": ("fg",),
    "background": ("bg",),
    "background-color": ("bg",),
    "font": ("font",),
    "font-weight": ("font",),
    "font-style": ("font",),
    "text-decoration": ("decoration",),
    "text-decoration-line": ("decoration",),
    "width": ("width",),
    "height": ("height",),
    "padding": ("padding",),
    "margin": ("margin",),
    "border-width": ("border_width",),
    "border-color": ("border_color",),
    "border": ("border_width", "border_color"),
}


__all__ = ["parse_declarations", "parse_property", "parse_rules"]
