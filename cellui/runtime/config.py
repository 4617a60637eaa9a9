"""Centralized runtime configuration sourced from environment variables."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class RuntimeLoggingConfig:
    level_name: str
    file_path: str | None
    format: str  # text|json


@dataclass(frozen=True, slots=True)
class RuntimeTerminalConfig:
    mouse_capture: bool
    alt_screen: bool
    poll_timeout_ms: int


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    logging: RuntimeLoggingConfig
    terminal: RuntimeTerminalConfig
    scroll_step: int


_RUNTIME_CONFIG: ContextVar[RuntimeConfig | None] = ContextVar("cellui_runtime_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _log_format(raw: str) -> str:
    value = raw.strip().lower()
    return value if value in {"text", "json"} else "text"


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve the log level with the package-prefixed override taking priority."""
    value = _raw("CELLUI_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    log_file = _text("CELLUI_LOG_FILE", "", env=env)
    return RuntimeConfig(
        logging=RuntimeLoggingConfig(
            level_name=resolve_log_level_name(env=env),
            file_path=log_file or None,
            format=_log_format(_text("CELLUI_LOG_FORMAT", "text", env=env)),
        ),
        terminal=RuntimeTerminalConfig(
            mouse_capture=_flag("CELLUI_MOUSE_CAPTURE", True, env=env),
            alt_screen=_flag("CELLUI_ALT_SCREEN", True, env=env),
            poll_timeout_ms=_int("CELLUI_POLL_TIMEOUT_MS", 100, minimum=0, env=env),
        ),
        scroll_step=_int("CELLUI_SCROLL_STEP", 1, minimum=1, env=env),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: RuntimeConfig) -> RuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> RuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "RuntimeConfig",
    "RuntimeLoggingConfig",
    "RuntimeTerminalConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
]
