"""Runtime configuration, logging setup and error policy.

The event loops live in `cellui.runtime.executor`; they are re-exported from
the top-level `cellui` package.
"""

from cellui.runtime.config import (
    RuntimeConfig,
    RuntimeLoggingConfig,
    RuntimeTerminalConfig,
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    resolve_log_level_name,
    set_runtime_config,
)
from cellui.runtime.errors import (
    RECOVERABLE_STYLE_ERRORS,
    StaleHandleError,
    log_recoverable,
)
from cellui.runtime.logging import (
    JsonFormatter,
    configure_logging,
    get_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "JsonFormatter",
    "RECOVERABLE_STYLE_ERRORS",
    "RuntimeConfig",
    "RuntimeLoggingConfig",
    "RuntimeTerminalConfig",
    "StaleHandleError",
    "configure_logging",
    "get_logger",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "log_recoverable",
    "resolve_log_level_name",
    "set_runtime_config",
    "setup_logging",
    "shutdown_logging",
]
