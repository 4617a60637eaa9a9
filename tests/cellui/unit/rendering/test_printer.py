from __future__ import annotations

import pytest

from cellui.api.geometry import Rect, Vec2
from cellui.api.style import Color, Effect, Style, Theme
from cellui.rendering.printer import Printer
from tests.cellui.conftest import RecordingBackend


def test_print_translates_to_bound_and_clips_by_width() -> None:
    backend = RecordingBackend(Vec2(20, 5))
    printer = Printer(backend, bound=Rect.new((3, 1), (4, 2)))
    printer.print((1, 1), "abcdef")
    printer.print((0, 2), "hidden")
    printer.print((4, 0), "hidden")
    assert backend.prints == [(Vec2(4, 2), "abc")]


def test_print_cuts_before_wide_char_crossing_edge() -> None:
    backend = RecordingBackend(Vec2(20, 5))
    printer = Printer(backend, bound=Rect.new((0, 0), (3, 1)))
    printer.print((0, 0), "가나")
    assert backend.prints == [(Vec2(0, 0), "가")]


def test_with_bound_restores_previous_bound_after_exception() -> None:
    printer = Printer(RecordingBackend())
    original = printer.bound

    def boom(p: Printer) -> None:
        raise RuntimeError("render failed")

    with pytest.raises(RuntimeError):
        printer.with_bound(Rect.new((1, 1), (2, 2)), boom)
    assert printer.bound == original


def test_with_style_resolves_palette_and_restores_effects() -> None:
    backend = RecordingBackend()
    printer = Printer(backend, Theme.default())

    def check(p: Printer) -> None:
        assert backend.fg == Color.YELLOW
        assert Effect.BOLD in backend.effects

    printer.with_style(Style.title(), check)
    assert backend.fg is None
    assert backend.effects == Effect.NONE


def test_styled_context_manager_restores_on_error() -> None:
    backend = RecordingBackend()
    printer = Printer(backend)
    with pytest.raises(ValueError):
        with printer.styled(Style(fg=Color.RED)):
            raise ValueError("inner")
    assert printer.style == Style()
    assert backend.fg is None


def test_print_rect_draws_corners() -> None:
    backend = RecordingBackend(Vec2(4, 3))
    Printer(backend).print_rect()
    corners = {pos: text for pos, text in backend.prints if len(text) == 1}
    assert corners[Vec2(0, 0)] == "┌"
    assert corners[Vec2(3, 0)] == "┐"
    assert corners[Vec2(0, 2)] == "└"
    assert corners[Vec2(3, 2)] == "┘"
