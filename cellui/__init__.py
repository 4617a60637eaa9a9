"""Retained-mode UI toolkit for character-cell surfaces."""

from cellui.api import (
    Backend,
    Color,
    Effect,
    EventLike,
    EventResult,
    Key,
    KeyEvent,
    MouseEvent,
    Orientation,
    PaletteColor,
    PaletteRole,
    RedrawFlag,
    RedrawState,
    Rect,
    ResizeEvent,
    Style,
    Theme,
    UpdateResult,
    Vec2,
    View,
)
from cellui.css import StyleSheet
from cellui.rendering import GridBackend, Printer
from cellui.runtime.executor import Executor, bench, render_events, run_model

__all__ = [
    "Backend",
    "Color",
    "Effect",
    "EventLike",
    "EventResult",
    "Executor",
    "GridBackend",
    "Key",
    "KeyEvent",
    "MouseEvent",
    "Orientation",
    "PaletteColor",
    "PaletteRole",
    "Printer",
    "RedrawFlag",
    "RedrawState",
    "Rect",
    "ResizeEvent",
    "StyleSheet",
    "Style",
    "Theme",
    "UpdateResult",
    "Vec2",
    "View",
    "bench",
    "render_events",
    "run_model",
]
