"""Public logging configuration contract."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration.

    Full-screen terminal applications should disable the console handler and
    log to `file_path` instead, since stderr shares the screen being drawn.
    """

    level_name: str = "INFO"
    console_enabled: bool = True
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


__all__ = ["LoggingConfig"]
