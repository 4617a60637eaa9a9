from __future__ import annotations

import pytest

from cellui.api.input_events import Key, KeyEvent, MouseEvent
from cellui.ui_runtime.event_filter import EventFilter


def test_key_filters_match_only_their_key() -> None:
    enter = EventFilter.key(Key.ENTER, "go")
    assert enter.check(KeyEvent.press(Key.ENTER)) == "go"
    assert enter.check(KeyEvent.press(Key.TAB)) is None


def test_char_and_ctrl_char_filters_are_distinct() -> None:
    plain = EventFilter.char("q", "quit")
    ctrl = EventFilter.ctrl_char("q", "force")
    assert plain.check(KeyEvent.of_char("q")) == "quit"
    assert plain.check(KeyEvent.ctrl_char("q")) is None
    assert ctrl.check(KeyEvent.ctrl_char("q")) == "force"


def test_click_filter_and_empty_filter() -> None:
    assert EventFilter.click(1).check(MouseEvent.left_down(0, 0)) == 1
    assert EventFilter.click(1).check(MouseEvent.left_up(0, 0)) is None
    assert EventFilter.empty(1).check(MouseEvent.left_down(0, 0)) is None


def test_key_without_capability_check_is_rejected() -> None:
    with pytest.raises(ValueError):
        EventFilter.key(Key.HOME, "home")
