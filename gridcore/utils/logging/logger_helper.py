"""Module: logger_helper.py

Date: 2026-02-10

Utility functions for working with loggers in a safe and consistent way.

Functions:
    get_logger(name): Returns a logger that propagates to the root handlers.
    safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
    safe_log(logger_func, message): Logs a message, falling back to ASCII if needed.
DevOnlyFilter:
    Hides dev-only debug messages from the console while file logs keep them.
"""

import logging
import re
from functools import partial

_REPLACEMENTS = {
    "→": "->",  # right arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text: The original text containing Unicode symbols.

    Returns:
        The text with replacements for problematic characters.

    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def safe_log(logger_func, message, *args, **kwargs):
    """Log through ``logger_func``, retrying with ASCII-safe text on encoding errors."""
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(str(message)), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Replace the logger's level methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger that delegates output to the root logger.

    Args:
        name: Logger name, usually the calling module's ``__name__``

    Returns:
        Configured and patched logger instance

    """
    logger = logging.getLogger(name or __name__)
    logger.propagate = True

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Drop records flagged with ``extra={"dev_only": True}``."""

    def filter(self, record: logging.LogRecord) -> bool:
        from gridcore.config import SHOW_DEV_ONLY_IN_CONSOLE

        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
