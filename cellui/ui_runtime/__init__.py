"""View composition: combinators, wrappers, containers and leaf widgets."""

from cellui.ui_runtime.combinators import ConsumeEvent, Map, MapE, MapOptE, OrElse, OrElseFirst, ViewProxy
from cellui.ui_runtime.dialog import ButtonRow, DialogFocus, DialogView
from cellui.ui_runtime.event_filter import EventFilter
from cellui.ui_runtime.layered import LayeredView
from cellui.ui_runtime.linear import LinearView
from cellui.ui_runtime.scroll import ScrollOutcome, ScrollView, apply_scroll_step, thumb_span
from cellui.ui_runtime.widgets import (
    ButtonDecoration,
    ButtonMessage,
    ButtonView,
    EditMessage,
    EditView,
    ParagraphView,
    SelectMessage,
    SelectView,
    TextView,
)
from cellui.ui_runtime.wrappers import BoundChecker, SizeCacher

__all__ = [
    "BoundChecker",
    "ButtonDecoration",
    "ButtonMessage",
    "ButtonRow",
    "ButtonView",
    "ConsumeEvent",
    "DialogFocus",
    "DialogView",
    "EditMessage",
    "EditView",
    "EventFilter",
    "LayeredView",
    "LinearView",
    "Map",
    "MapE",
    "MapOptE",
    "OrElse",
    "OrElseFirst",
    "ParagraphView",
    "ScrollOutcome",
    "ScrollView",
    "SelectMessage",
    "SelectView",
    "SizeCacher",
    "TextView",
    "ViewProxy",
    "apply_scroll_step",
    "thumb_span",
]
