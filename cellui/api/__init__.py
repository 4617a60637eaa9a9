"""Public cellui API contracts and value types."""

from cellui.api.backend import Backend, ResizableBackend
from cellui.api.geometry import U16_MAX, ZERO, Orientation, Rect, Vec2
from cellui.api.input_events import (
    EventLike,
    Key,
    KeyEvent,
    MouseButton,
    MouseEvent,
    MouseKind,
    ResizeEvent,
    TerminalEvent,
)
from cellui.api.logging import LoggingConfig
from cellui.api.results import EventResult, UpdateResult
from cellui.api.state import RedrawFlag, RedrawState, request_redraw
from cellui.api.style import (
    ALL_EFFECTS,
    CUSTOM_SLOTS,
    Color,
    ColorRef,
    Effect,
    PaletteColor,
    PaletteRole,
    Style,
    Theme,
)
from cellui.api.view import View

__all__ = [
    "ALL_EFFECTS",
    "Backend",
    "CUSTOM_SLOTS",
    "Color",
    "ColorRef",
    "Effect",
    "EventLike",
    "EventResult",
    "Key",
    "KeyEvent",
    "LoggingConfig",
    "MouseButton",
    "MouseEvent",
    "MouseKind",
    "Orientation",
    "PaletteColor",
    "PaletteRole",
    "RedrawFlag",
    "RedrawState",
    "Rect",
    "ResizableBackend",
    "ResizeEvent",
    "Style",
    "TerminalEvent",
    "Theme",
    "U16_MAX",
    "UpdateResult",
    "Vec2",
    "View",
    "ZERO",
    "request_redraw",
]
