"""Demo logging policy over the cellui logging API."""

from __future__ import annotations

import logging

from cellui.api.logging import LoggingConfig
from cellui.runtime.config import RuntimeConfig, get_runtime_config
from cellui.runtime.logging import configure_logging

__all__ = ["setup_demo_logging"]


def setup_demo_logging(config: RuntimeConfig | None = None, *, console: bool = False) -> None:
    """Log to CELLUI_LOG_FILE only; the console is the screen being drawn."""
    runtime = config if config is not None else get_runtime_config()
    configure_logging(
        LoggingConfig(
            level_name=runtime.logging.level_name,
            console_enabled=console,
            console_format=runtime.logging.format,
            file_path=runtime.logging.file_path,
            file_format=runtime.logging.format,
        )
    )
    logging.getLogger(__name__).info("demo_logging file=%s", runtime.logging.file_path)
