"""CSS color values mapped onto direct terminal colors and palette references."""

from __future__ import annotations

import re

import tinycss2.color3

from cellui.api.style import Color, ColorRef, PaletteColor, PaletteRole

_NAMED: dict[str, Color | None] = {
    "transparent": None,
    "black": Color.named(0),
    "darkred": Color.named(1),
    "darkgreen": Color.named(2),
    "khaki": Color.named(3),
    "darkblue": Color.named(4),
    "darkmagenta": Color.named(5),
    "darkcyan": Color.named(6),
    "lightgray": Color.named(7),
    "gray": Color.index(8),
    "red": Color.index(9),
    "green": Color.index(10),
    "yellow": Color.index(11),
    "blue": Color.index(12),
    "magenta": Color.index(13),
    "cyan": Color.index(14),
    "white": Color.index(15),
}

_ROLES: dict[str, PaletteRole] = {
    "background": PaletteRole.BACKGROUND,
    "view": PaletteRole.VIEW,
    "primary": PaletteRole.PRIMARY,
    "title": PaletteRole.TITLE,
    "highlight": PaletteRole.HIGHLIGHT,
    "highlight-inactive": PaletteRole.HIGHLIGHT_INACTIVE,
}

_VAR_RE = re.compile(r"^var\(\s*--(?P<name>[a-z0-9-]+)\s*\)$")
_CUSTOM_RE = re.compile(r"^custom-(?P<slot>\d+)$")


def parse_color(raw: str) -> ColorRef:
    """Parse a CSS color; returns None for `transparent`, raises ValueError when invalid.

    The terminal names map onto the 16-color palette and `var(--role)` onto
    theme roles; every other CSS color level 3 form (hex, `rgb()`, `rgba()`,
    `hsl()`, `hsla()`, named colors) becomes a truecolor value.
    """
    text = raw.strip().lower()
    if text in _NAMED:
        return _NAMED[text]
    var_match = _VAR_RE.match(text)
    if var_match is not None:
        return _palette_ref(var_match.group("name"))
    parsed = tinycss2.color3.parse_color(text)
    if parsed is None or isinstance(parsed, str):
        raise ValueError(f"unknown color: {raw!r}")
    if parsed.alpha == 0:
        return None
    return Color.rgb(*(round(channel * 255) for channel in (parsed.red, parsed.green, parsed.blue)))


def _palette_ref(name: str) -> PaletteColor:
    role = _ROLES.get(name)
    if role is not None:
        return PaletteColor.of(role)
    custom = _CUSTOM_RE.match(name)
    if custom is None:
        raise KeyError(name)
    return PaletteColor.custom_slot(int(custom.group("slot")))


__all__ = ["parse_color"]
