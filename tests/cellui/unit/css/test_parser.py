from __future__ import annotations

import logging

from cellui.api.style import Color, Effect
from cellui.css.parser import parse_declarations, parse_property, parse_rules
from cellui.css.values import INHERIT, CssSize, Explicit, parse_rect


def test_declarations_keep_order_and_allow_missing_final_semicolon() -> None:
    assert parse_declarations(" color: red; width : 10 ") == [("color", "red"), ("width", "10")]


def test_font_and_decoration_are_separate_fields() -> None:
    prop = parse_property("font: bold italic; text-decoration: underline")
    assert prop.font == Explicit(Effect.BOLD | Effect.ITALIC)
    assert prop.decoration == Explicit(Effect.UNDERLINE)


def test_font_weight_and_style_adjust_current_font() -> None:
    prop = parse_property("font: reverse; font-weight: bold; font-style: italic; font-weight: normal")
    assert prop.font == Explicit(Effect.REVERSE | Effect.ITALIC)
    assert parse_property("font: none").font == Explicit(Effect.NONE)


def test_border_shorthand_sets_width_and_color() -> None:
    prop = parse_property("border: 1 solid gray")
    assert prop.border_width == Explicit(parse_rect("1"))
    assert prop.border_color == Explicit(Color.index(8))
    assert parse_property("border: none").border_width == Explicit(parse_rect("0"))


def test_inherit_keyword_resets_field() -> None:
    prop = parse_property("color: red; color: inherit")
    assert prop.fg is INHERIT


def test_invalid_declarations_are_dropped_and_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="cellui.css.parser")
    prop = parse_property("color: nope; width: 50%; font: sparkly; bogus: 1")
    assert prop.fg is INHERIT
    assert prop.font is INHERIT
    assert prop.width == Explicit(CssSize.percent(50))
    messages = [record.getMessage() for record in caplog.records]
    assert any("css_declaration_dropped name=color" in message for message in messages)
    assert any("css_declaration_dropped name=font" in message for message in messages)
    assert any("css_unknown_property name=bogus" in message for message in messages)


def test_rules_expand_selector_lists_and_skip_comments() -> None:
    rules = parse_rules("/* heading */ .a, div > .b { color: red; } body { }")
    assert [selector.text for selector, _ in rules] == [".a", "div > .b", "body"]
    assert rules[0][1] is rules[1][1]


def test_unsupported_selector_is_skipped_with_warning(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="cellui.css.parser")
    rules = parse_rules("#id, .ok { color: red }")
    assert [selector.text for selector, _ in rules] == [".ok"]
    assert any("css_selector_skipped" in record.getMessage() for record in caplog.records)
