from __future__ import annotations

import pytest

from cellui.api.input_events import Key, KeyEvent, MouseButton, MouseEvent, MouseKind
from cellui.input.decoder import InputDecoder, decode_sgr_mouse


def test_plain_text_and_control_keys() -> None:
    events = InputDecoder().feed("a\r\t\x7f\x03")
    assert events == [
        KeyEvent.of_char("a"),
        KeyEvent.press(Key.ENTER),
        KeyEvent.press(Key.TAB),
        KeyEvent.press(Key.BACKSPACE),
        KeyEvent.ctrl_char("c"),
    ]


@pytest.mark.parametrize(
    ("raw", "key"),
    [
        ("\x1b[A", Key.UP),
        ("\x1bOB", Key.DOWN),
        ("\x1b[C", Key.RIGHT),
        ("\x1b[D", Key.LEFT),
        ("\x1b[5~", Key.PAGE_UP),
        ("\x1b[3~", Key.DELETE),
        ("\x1b[Z", Key.BACKTAB),
    ],
)
def test_escape_sequences(raw: str, key: Key) -> None:
    assert InputDecoder().feed(raw) == [KeyEvent.press(key)]


def test_sequence_split_across_reads() -> None:
    decoder = InputDecoder()
    assert decoder.feed("\x1b[") == []
    assert decoder.pending
    assert decoder.feed("Ax") == [KeyEvent.press(Key.UP), KeyEvent.of_char("x")]
    assert not decoder.pending


def test_lone_escape_resolves_on_flush() -> None:
    decoder = InputDecoder()
    assert decoder.feed("\x1b") == []
    assert decoder.flush() == [KeyEvent.press(Key.ESCAPE)]
    assert decoder.flush() == []


def test_escape_then_printable_is_alt_chord() -> None:
    assert InputDecoder().feed("\x1bx") == [KeyEvent(Key.CHAR, char="x", alt=True)]


def test_unknown_sequence_replays_buffered_text() -> None:
    events = InputDecoder().feed("\x1b[Q")
    assert events == [KeyEvent.press(Key.ESCAPE), KeyEvent.of_char("["), KeyEvent.of_char("Q")]


def test_sgr_mouse_reports() -> None:
    decoder = InputDecoder()
    assert decoder.feed("\x1b[<0;3;5M") == [MouseEvent.left_down(2, 4)]
    assert decoder.feed("\x1b[<0;3;5m") == [MouseEvent.left_up(2, 4)]
    assert decoder.feed("\x1b[<65;1;1M") == [MouseEvent(MouseKind.SCROLL_DOWN, 0, 0, MouseButton.NONE)]


def test_decode_sgr_mouse_motion_kinds() -> None:
    assert decode_sgr_mouse("32;2;2M") == MouseEvent(MouseKind.DRAG, 1, 1, MouseButton.LEFT)
    assert decode_sgr_mouse("35;2;2M") == MouseEvent(MouseKind.MOVE, 1, 1, MouseButton.NONE)
    assert decode_sgr_mouse("64;2;2M") == MouseEvent(MouseKind.SCROLL_UP, 1, 1, MouseButton.NONE)
    assert decode_sgr_mouse("2;1;1M") == MouseEvent(MouseKind.DOWN, 0, 0, MouseButton.RIGHT)
    assert decode_sgr_mouse("garbage") is None


def test_malformed_mouse_report_is_dropped() -> None:
    decoder = InputDecoder()
    assert decoder.feed("\x1b[<1;xM") == []
    assert not decoder.pending
    assert decoder.feed("z") == [KeyEvent.of_char("z")]
