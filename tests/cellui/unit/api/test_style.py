from __future__ import annotations

import pytest

from cellui.api.style import CUSTOM_SLOTS, Color, Effect, PaletteColor, PaletteRole, Style, Theme


def test_theme_resolves_direct_and_palette_colors() -> None:
    theme = Theme.empty().with_color(PaletteRole.PRIMARY, Color.RED)
    assert theme.resolve(Color.GREEN) == Color.GREEN
    assert theme.resolve(PaletteColor.of(PaletteRole.PRIMARY)) == Color.RED
    assert theme.resolve(PaletteColor.of(PaletteRole.VIEW)) is None
    assert theme.resolve(None) is None


def test_theme_custom_slots_are_independent_of_roles() -> None:
    theme = Theme.empty().with_color(PaletteColor.custom_slot(3), Color.rgb(1, 2, 3))
    assert theme.resolve(PaletteColor.custom_slot(3)) == Color.rgb(1, 2, 3)
    assert theme.resolve(PaletteColor.custom_slot(0)) is None
    with pytest.raises(ValueError):
        PaletteColor.custom_slot(CUSTOM_SLOTS)


def test_with_color_returns_new_theme() -> None:
    base = Theme.default()
    changed = base.with_color(PaletteRole.TITLE, Color.WHITE)
    assert base.resolve(PaletteColor.of(PaletteRole.TITLE)) == Color.YELLOW
    assert changed.resolve(PaletteColor.of(PaletteRole.TITLE)) == Color.WHITE


def test_color_constructors_validate_ranges() -> None:
    with pytest.raises(ValueError):
        Color.index(256)
    with pytest.raises(ValueError):
        Color.rgb(0, 0, 300)
    assert Color.index(196).to_rgb() == (255, 0, 0)


def test_style_presets_and_effect_members() -> None:
    highlight = Style.highlight()
    assert highlight.bg == PaletteColor.of(PaletteRole.HIGHLIGHT)
    assert Effect.REVERSE in highlight.effects
    combined = Style.title().with_effects(Effect.UNDERLINE)
    assert combined.effects.members() == (Effect.BOLD, Effect.UNDERLINE)
