"""Incremental decoder from raw terminal input text to concrete events."""

from __future__ import annotations

import logging
import re

from cellui.api.input_events import (
    Key,
    KeyEvent,
    MouseButton,
    MouseEvent,
    MouseKind,
    TerminalEvent,
)

logger = logging.getLogger(__name__)

ESC = "\x1b"
_SGR_MOUSE_PREFIX = "\x1b[<"
_SGR_MOUSE_RE = re.compile(r"^(\d+);(\d+);(\d+)([Mm])$")

_ESCAPE_SEQUENCES: dict[str, Key] = {
    # Arrow keys
    "\x1b[A": Key.UP,
    "\x1bOA": Key.UP,  # application mode
    "\x1b[B": Key.DOWN,
    "\x1bOB": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1bOC": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    "\x1bOD": Key.LEFT,
    # Page Up / Page Down
    "\x1b[5~": Key.PAGE_UP,
    "\x1b[6~": Key.PAGE_DOWN,
    # Home
    "\x1b[H": Key.HOME,  # xterm
    "\x1bOH": Key.HOME,  # application mode
    "\x1b[1~": Key.HOME,  # tmux/linux
    "\x1b[7~": Key.HOME,  # rxvt
    # End
    "\x1b[F": Key.END,  # xterm
    "\x1bOF": Key.END,  # application mode
    "\x1b[4~": Key.END,  # tmux/linux
    "\x1b[8~": Key.END,  # rxvt
    "\x1b[3~": Key.DELETE,
    "\x1b[Z": Key.BACKTAB,
}

_CONTROL_KEYS: dict[str, Key] = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}

_BUTTONS = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT, MouseButton.NONE)

type _Trie = dict[str, "_Trie | Key"]


def _build_trie(sequences: dict[str, Key]) -> _Trie:
    root: _Trie = {}
    for seq, key in sequences.items():
        node = root
        for ch in seq[:-1]:
            child = node.setdefault(ch, {})
            assert isinstance(child, dict)
            node = child
        node[seq[-1]] = key
    return root


_ESCAPE_TRIE = _build_trie(_ESCAPE_SEQUENCES)


def decode_sgr_mouse(params: str) -> MouseEvent | None:
    """Decode the `b;x;yM` tail of an SGR mouse report (1-based coordinates)."""
    match = _SGR_MOUSE_RE.match(params)
    if match is None:
        return None
    code, col, row = (int(part) for part in match.group(1, 2, 3))
    x = max(0, col - 1)
    y = max(0, row - 1)
    if code & 64:
        kind = MouseKind.SCROLL_DOWN if code & 1 else MouseKind.SCROLL_UP
        return MouseEvent(kind, x, y, MouseButton.NONE)
    button = _BUTTONS[code & 3]
    if code & 32:
        kind = MouseKind.MOVE if button is MouseButton.NONE else MouseKind.DRAG
        return MouseEvent(kind, x, y, button)
    kind = MouseKind.DOWN if match.group(4) == "M" else MouseKind.UP
    return MouseEvent(kind, x, y, button)


class InputDecoder:
    """Turns chunks of decoded terminal input into events.

    Escape sequences may be split across reads; `pending` reports a partial
    sequence and `flush` resolves it (a lone ESC becomes the Escape key).
    """

    def __init__(self) -> None:
        self._buf: list[str] = []
        self._node: _Trie | None = None
        self._mouse: list[str] | None = None

    @property
    def pending(self) -> bool:
        return bool(self._buf)

    def feed(self, text: str) -> list[TerminalEvent]:
        events: list[TerminalEvent] = []
        for ch in text:
            self._feed_char(ch, events)
        return events

    def flush(self) -> list[TerminalEvent]:
        """Resolve a partial sequence after an input timeout."""
        if not self._buf:
            return []
        events: list[TerminalEvent] = []
        rest = self._buf[1:]
        self._reset()
        events.append(KeyEvent.press(Key.ESCAPE))
        for ch in rest:
            self._feed_char(ch, events)
        return events

    def _reset(self) -> None:
        self._buf = []
        self._node = None
        self._mouse = None

    def _feed_char(self, ch: str, events: list[TerminalEvent]) -> None:
        if self._mouse is not None:
            self._feed_mouse(ch, events)
            return
        if self._node is not None:
            self._feed_escape(ch, events)
            return
        if ch == ESC:
            root = _ESCAPE_TRIE[ESC]
            assert isinstance(root, dict)
            self._buf = [ch]
            self._node = root
            return
        events.append(_plain_key(ch))

    def _feed_escape(self, ch: str, events: list[TerminalEvent]) -> None:
        assert self._node is not None
        if "".join(self._buf) + ch == _SGR_MOUSE_PREFIX:
            self._buf.append(ch)
            self._mouse = []
            return
        value = self._node.get(ch)
        if value is None:
            self._dead_end(ch, events)
            return
        if isinstance(value, dict):
            self._buf.append(ch)
            self._node = value
            return
        self._reset()
        events.append(KeyEvent.press(value))

    def _dead_end(self, ch: str, events: list[TerminalEvent]) -> None:
        buffered = self._buf
        self._reset()
        if len(buffered) == 1 and ch != ESC and ch.isprintable():
            events.append(KeyEvent(Key.CHAR, char=ch, alt=True))
            return
        logger.debug("input_unknown_sequence seq=%r", "".join(buffered) + ch)
        events.append(KeyEvent.press(Key.ESCAPE))
        for leftover in buffered[1:]:
            events.append(_plain_key(leftover))
        self._feed_char(ch, events)

    def _feed_mouse(self, ch: str, events: list[TerminalEvent]) -> None:
        assert self._mouse is not None
        self._mouse.append(ch)
        if ch not in "Mm":
            if len(self._mouse) > 32:
                logger.debug("input_mouse_report_overflow")
                self._reset()
            return
        params = "".join(self._mouse)
        self._reset()
        event = decode_sgr_mouse(params)
        if event is None:
            logger.debug("input_bad_mouse_report params=%r", params)
            return
        events.append(event)


def _plain_key(ch: str) -> KeyEvent:
    key = _CONTROL_KEYS.get(ch)
    if key is not None:
        return KeyEvent.press(key)
    code = ord(ch)
    if code < 0x20:
        return KeyEvent.ctrl_char(chr(code + 0x60))
    return KeyEvent.of_char(ch)


__all__ = ["ESC", "InputDecoder", "decode_sgr_mouse"]
