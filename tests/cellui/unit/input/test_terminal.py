from __future__ import annotations

import io
import os
import signal
import threading
import time

import pytest

from cellui.api.input_events import Key, KeyEvent, ResizeEvent
from cellui.input.terminal import TerminalSession
from cellui.runtime.config import RuntimeTerminalConfig

pytestmark = pytest.mark.skipif(os.name == "nt", reason="POSIX terminal only")


def _config() -> RuntimeTerminalConfig:
    return RuntimeTerminalConfig(mouse_capture=False, alt_screen=False, poll_timeout_ms=0)


def test_read_events_requires_an_active_session() -> None:
    session = TerminalSession(config=_config(), stdin=io.StringIO(), stdout=io.StringIO())
    with pytest.raises(RuntimeError):
        session.read_events(0)


def test_close_without_enter_is_a_no_op() -> None:
    out = io.StringIO()
    session = TerminalSession(config=_config(), stdin=io.StringIO(), stdout=out)
    session.close()
    session.close()
    assert out.getvalue() == ""


def test_enter_refuses_a_non_terminal_stdin(tmp_path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("")
    with path.open() as stdin:
        session = TerminalSession(config=_config(), stdin=stdin, stdout=io.StringIO())
        with pytest.raises(RuntimeError):
            session.__enter__()


def test_backend_writes_to_session_output() -> None:
    out = io.StringIO()
    session = TerminalSession(config=_config(), stdin=io.StringIO(), stdout=out)
    session.backend.write_raw("\x1b[H")
    session.backend.flush()
    assert out.getvalue() == "\x1b[H"
    assert session.backend is session.backend


@pytest.fixture
def pty_session():
    master, slave = os.openpty()
    stdin = os.fdopen(slave, "r", closefd=True)
    session = TerminalSession(config=_config(), stdin=stdin, stdout=io.StringIO())
    session.__enter__()
    try:
        yield session, master
    finally:
        session.close()
        stdin.close()
        os.close(master)


def test_resize_signal_wakes_a_blocked_read(pty_session) -> None:
    session, _master = pty_session
    timer = threading.Timer(0.1, signal.pthread_kill, (threading.main_thread().ident, signal.SIGWINCH))
    started = time.monotonic()
    timer.start()
    try:
        events = session.read_events(5000)
    finally:
        timer.cancel()
    assert time.monotonic() - started < 2.0
    assert len(events) == 1
    assert isinstance(events[0], ResizeEvent)
    assert session.read_events(0) == []


def test_key_input_is_decoded_from_the_terminal(pty_session) -> None:
    session, master = pty_session
    os.write(master, b"a\x1b[A")
    assert session.read_events(1000) == [KeyEvent.of_char("a"), KeyEvent.press(Key.UP)]


def test_close_restores_previous_sigwinch_handler(pty_session) -> None:
    session, _master = pty_session
    assert signal.getsignal(signal.SIGWINCH) == session._on_sigwinch
    session.close()
    assert signal.getsignal(signal.SIGWINCH) != session._on_sigwinch
