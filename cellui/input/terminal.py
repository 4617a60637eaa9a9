"""Raw-mode terminal session: screen modes, mouse capture and input polling."""

from __future__ import annotations

import codecs
import logging
import os
import signal
import sys
from collections.abc import Iterator
from types import FrameType, TracebackType
from typing import TextIO

from cellui.api.input_events import ResizeEvent, TerminalEvent
from cellui.input.decoder import InputDecoder
from cellui.rendering.ansi_backend import AnsiTerminalBackend, terminal_size
from cellui.runtime.config import RuntimeTerminalConfig, get_runtime_config

if os.name != "nt":
    import select
    import termios

logger = logging.getLogger(__name__)

_ALT_SCREEN_ON = "\x1b[?1049h"
_ALT_SCREEN_OFF = "\x1b[?1049l"
_CURSOR_HIDE = "\x1b[?25l"
_CURSOR_SHOW = "\x1b[?25h"
# Button events, drag motion, SGR extended coordinates.
_MOUSE_ON = "\x1b[?1000h\x1b[?1002h\x1b[?1006h"
_MOUSE_OFF = "\x1b[?1006l\x1b[?1002l\x1b[?1000l"
_RESET = "\x1b[0m"
_ESCAPE_WAIT_MS = 25


class TerminalSession:
    """Context manager owning the controlling terminal for one application run.

    Entering switches to raw input, the alternate screen and mouse capture as
    configured; leaving restores every mode even when the body raised.
    """

    def __init__(
        self,
        *,
        config: RuntimeTerminalConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        if os.name == "nt":
            raise RuntimeError("TerminalSession requires a POSIX terminal")
        self._config = config if config is not None else get_runtime_config().terminal
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._decoder = InputDecoder()
        self._utf8 = codecs.getincrementaldecoder("utf-8")("replace")
        self._resize_pending = False
        self._wake_r: int | None = None
        self._wake_w: int | None = None
        self._saved_termios: list | None = None
        self._saved_sigwinch: object = None
        self._poller: select.poll | None = None
        self._queued: list[TerminalEvent] = []
        self._backend: AnsiTerminalBackend | None = None

    @property
    def backend(self) -> AnsiTerminalBackend:
        """ANSI backend writing to this session's output."""
        if self._backend is None:
            self._backend = AnsiTerminalBackend(self._stdout, terminal_size())
        return self._backend

    def __enter__(self) -> TerminalSession:
        fd = self._stdin.fileno()
        if not os.isatty(fd):
            raise RuntimeError("stdin is not a terminal")
        self._saved_termios = termios.tcgetattr(fd)
        _set_raw(fd)
        self._wake_r, self._wake_w = os.pipe()
        os.set_blocking(self._wake_r, False)
        os.set_blocking(self._wake_w, False)
        self._saved_sigwinch = signal.getsignal(signal.SIGWINCH)
        signal.signal(signal.SIGWINCH, self._on_sigwinch)
        self._poller = select.poll()
        self._poller.register(fd, select.POLLIN)
        self._poller.register(self._wake_r, select.POLLIN)
        self._write(self._enter_sequence())
        logger.debug(
            "terminal_session_enter alt_screen=%s mouse=%s",
            self._config.alt_screen,
            self._config.mouse_capture,
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Restore terminal modes; safe to call more than once."""
        if self._saved_termios is None:
            return
        self._write(self._exit_sequence())
        termios.tcsetattr(self._stdin.fileno(), termios.TCSANOW, self._saved_termios)
        signal.signal(signal.SIGWINCH, self._saved_sigwinch)  # type: ignore[arg-type]
        self._saved_termios = None
        self._poller = None
        for wake_fd in (self._wake_r, self._wake_w):
            if wake_fd is not None:
                os.close(wake_fd)
        self._wake_r = self._wake_w = None
        logger.debug("terminal_session_exit")

    def read_events(self, timeout_ms: int | None = None) -> list[TerminalEvent]:
        """Wait up to `timeout_ms` (config default; negative blocks) for input."""
        if self._poller is None:
            raise RuntimeError("terminal session is not active")
        if self._queued:
            events, self._queued = self._queued, []
            return events
        if resize := self._take_resize():
            return [resize]
        timeout = self._config.poll_timeout_ms if timeout_ms is None else timeout_ms
        if not self._wait_input(None if timeout < 0 else timeout):
            return self._take_resize_list()
        events = self._read_available()
        while self._decoder.pending:
            if self._wait_input(_ESCAPE_WAIT_MS):
                events.extend(self._read_available())
            elif resize := self._take_resize():
                events.append(resize)
            else:
                events.extend(self._decoder.flush())
        events.extend(self._take_resize_list())
        return events

    def events(self) -> Iterator[TerminalEvent]:
        """Yield events forever, blocking between them."""
        while True:
            yield from self.read_events(-1)

    def _wait_input(self, timeout: int | None) -> bool:
        """Poll stdin and the resize pipe; True when stdin has bytes to read."""
        assert self._poller is not None
        ready = {fd for fd, _ in self._poller.poll(timeout)}
        if self._wake_r in ready:
            _drain(self._wake_r)
        return self._stdin.fileno() in ready

    def _read_available(self) -> list[TerminalEvent]:
        data = os.read(self._stdin.fileno(), 1024)
        return self._decoder.feed(self._utf8.decode(data))

    def _take_resize(self) -> ResizeEvent | None:
        if not self._resize_pending:
            return None
        self._resize_pending = False
        size = terminal_size()
        logger.debug("terminal_resize width=%d height=%d", size.x, size.y)
        return ResizeEvent(size.x, size.y)

    def _take_resize_list(self) -> list[TerminalEvent]:
        resize = self._take_resize()
        return [resize] if resize is not None else []

    def _on_sigwinch(self, signum: int, frame: FrameType | None) -> None:
        self._resize_pending = True
        if self._wake_w is None:
            return
        try:
            os.write(self._wake_w, b"\0")
        except BlockingIOError:
            # Pipe full: a wakeup is already queued.
            return

    def _enter_sequence(self) -> str:
        parts = []
        if self._config.alt_screen:
            parts.append(_ALT_SCREEN_ON)
        parts.append(_CURSOR_HIDE)
        if self._config.mouse_capture:
            parts.append(_MOUSE_ON)
        return "".join(parts)

    def _exit_sequence(self) -> str:
        parts = [_RESET]
        if self._config.mouse_capture:
            parts.append(_MOUSE_OFF)
        parts.append(_CURSOR_SHOW)
        if self._config.alt_screen:
            parts.append(_ALT_SCREEN_OFF)
        return "".join(parts)

    def _write(self, sequence: str) -> None:
        self._stdout.write(sequence)
        self._stdout.flush()


def _set_raw(fd: int) -> None:
    """No echo, no canonical mode, no signal keys: Ctrl+C arrives as input."""
    mode = termios.tcgetattr(fd)
    mode[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN | termios.ISIG)
    mode[1] &= ~(termios.IXON | termios.IXOFF | termios.ICRNL | termios.INLCR | termios.IGNCR)
    mode[6][termios.VMIN] = 1
    mode[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, mode)


def _drain(fd: int) -> None:
    while True:
        try:
            if not os.read(fd, 512):
                return
        except BlockingIOError:
            return


__all__ = ["TerminalSession"]
