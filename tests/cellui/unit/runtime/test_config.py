from __future__ import annotations

from cellui.runtime.config import (
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    resolve_log_level_name,
    set_runtime_config,
)


def test_defaults_when_environment_is_empty() -> None:
    config = load_runtime_config(env={})
    assert config.logging.level_name == "INFO"
    assert config.logging.file_path is None
    assert config.logging.format == "text"
    assert config.terminal.mouse_capture
    assert config.terminal.alt_screen
    assert config.terminal.poll_timeout_ms == 100
    assert config.scroll_step == 1


def test_values_are_parsed_and_clamped() -> None:
    config = load_runtime_config(
        env={
            "CELLUI_LOG_FILE": "logs/app.jsonl",
            "CELLUI_LOG_FORMAT": "JSON",
            "CELLUI_MOUSE_CAPTURE": "off",
            "CELLUI_ALT_SCREEN": "maybe",
            "CELLUI_POLL_TIMEOUT_MS": "-5",
            "CELLUI_SCROLL_STEP": "three",
        }
    )
    assert config.logging.file_path == "logs/app.jsonl"
    assert config.logging.format == "json"
    assert not config.terminal.mouse_capture
    assert config.terminal.alt_screen
    assert config.terminal.poll_timeout_ms == 0
    assert config.scroll_step == 1


def test_prefixed_log_level_takes_priority() -> None:
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning", "CELLUI_LOG_LEVEL": "debug"}) == "DEBUG"
    assert resolve_log_level_name(env={"CELLUI_LOG_LEVEL": "  "}) == "INFO"


def test_initialize_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("CELLUI_SCROLL_STEP", "4")
    try:
        initialize_runtime_config()
        assert get_runtime_config().scroll_step == 4
        monkeypatch.setenv("CELLUI_SCROLL_STEP", "2")
        assert get_runtime_config().scroll_step == 4
        assert initialize_runtime_config().scroll_step == 2
    finally:
        set_runtime_config(load_runtime_config(env={}))
