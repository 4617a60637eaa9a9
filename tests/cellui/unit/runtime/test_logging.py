from __future__ import annotations

import json
import logging

from cellui.api.logging import LoggingConfig
from cellui.runtime.logging import JsonFormatter, configure_logging, get_logger, setup_logging, shutdown_logging


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord("cellui.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.frame = 7
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "cellui.test"
    assert payload["fields"] == {"frame": 7}


def test_configure_logging_writes_to_file(tmp_path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    path = tmp_path / "logs" / "run.jsonl"
    try:
        configure_logging(
            LoggingConfig(
                level_name="debug",
                console_enabled=False,
                console_format="text",
                file_path=str(path),
                file_format="json",
            )
        )
        logging.getLogger("cellui.test").debug("redraw", extra={"count": 2})
        for handler in root.handlers:
            handler.flush()
    finally:
        shutdown_logging()
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
    line = json.loads(path.read_text(encoding="utf-8").splitlines()[-1])
    assert line["msg"] == "redraw"
    assert line["fields"] == {"count": 2}


def test_configure_logging_without_handlers_installs_null_handler() -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        configure_logging(
            LoggingConfig(
                level_name="info",
                console_enabled=False,
                console_format="text",
                file_path=None,
                file_format="json",
            )
        )
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.NullHandler)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_only_configures_an_unconfigured_root(monkeypatch) -> None:
    monkeypatch.setenv("CELLUI_LOG_LEVEL", "warning")
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        marker = logging.NullHandler()
        root.handlers[:] = [marker]
        setup_logging()
        assert root.handlers == [marker]
        root.handlers[:] = []
        setup_logging()
        assert len(root.handlers) == 1
        assert type(root.handlers[0]) is logging.StreamHandler
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_get_logger_returns_the_named_logger() -> None:
    assert get_logger("cellui.demo") is logging.getLogger("cellui.demo")
