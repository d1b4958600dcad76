"""Module: diagnostics.py

Date: 2026-02-10

Default diagnostics sink: forwards absorbed failures to the logging system.
"""

from __future__ import annotations

import logging

from gridcore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class LoggingDiagnostics:
    """DiagnosticsSink writing to the cached ``gridcore`` logger.

    Failures with an exception attached are logged at ERROR with traceback,
    plain reports at WARNING.
    """

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def report(self, source: str, message: str, error: BaseException | None = None) -> None:
        if error is not None:
            self._logger.error(
                "[%s] %s: %s", source, message, error, exc_info=(type(error), error, error.__traceback__)
            )
        else:
            self._logger.warning("[%s] %s", source, message)
