from __future__ import annotations

from cellui.api.geometry import Rect, Vec2
from cellui.rendering.grid_backend import GridBackend
from cellui.rendering.sliced_backend import SlicedBackend
from tests.cellui.conftest import RecordingBackend


def test_rows_outside_window_are_dropped() -> None:
    inner = RecordingBackend()
    sliced = SlicedBackend(inner, Vec2(0, 2), Rect.new((1, 1), (5, 2)))
    sliced.print_at(Vec2(0, 1), "above")
    sliced.print_at(Vec2(0, 4), "below")
    sliced.print_at(Vec2(0, 3), "in")
    assert inner.prints == [(Vec2(1, 2), "in")]


def test_left_and_right_edges_are_cut_by_width() -> None:
    inner = RecordingBackend()
    sliced = SlicedBackend(inner, Vec2(2, 0), Rect.new((0, 0), (4, 1)))
    sliced.print_at(Vec2(0, 0), "1234567890")
    assert inner.prints == [(Vec2(0, 0), "3456")]


def test_wide_char_straddling_left_edge_is_dropped() -> None:
    grid = GridBackend(Vec2(4, 1))
    sliced = SlicedBackend(grid, Vec2(1, 0), Rect.new((0, 0), (4, 1)))
    sliced.print_at(Vec2(0, 0), "가나다")
    assert grid.lines() == [" 나 "]


def test_size_covers_offset_plus_viewport() -> None:
    sliced = SlicedBackend(RecordingBackend(), Vec2(3, 4), Rect.new((0, 0), (5, 6)))
    assert sliced.size() == Vec2(8, 10)
