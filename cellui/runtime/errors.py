"""Shared exception policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Explicitly bounded set tolerated while reading untrusted style input.
RecoverableStyleErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_STYLE_ERRORS: RecoverableStyleErrors = (
    ValueError,
    KeyError,
    IndexError,
)


class StaleHandleError(RuntimeError):
    """Raised when a node handle from an earlier frame is dereferenced."""


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)


__all__ = [
    "RECOVERABLE_STYLE_ERRORS",
    "RecoverableStyleErrors",
    "StaleHandleError",
    "log_recoverable",
]
