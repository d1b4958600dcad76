"""Module: logger_setup.py

Date: 2026-02-10

ConfigureLogger sets up root logging for a host embedding the grid engine.
Console output is filtered by DevOnlyFilter; an optional rotating file
handler keeps warnings and errors reported by the diagnostics sink.
"""

import contextlib
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from gridcore.utils.logging.logger_factory import LoggerFactory
from gridcore.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """Configures root logging from ``gridcore.config`` settings.

    Constructor arguments override the configured values when given.
    ``target`` defaults to the root logger; a logger that already has
    handlers is left unchanged. ``engine_level`` caps every engine logger
    obtained through ``get_cached_logger``.
    """

    def __init__(
        self,
        log_name: str = "gridcore",
        log_dir: str = "logs",
        console_level: int | None = None,
        file_level: int | None = None,
        log_to_file: bool | None = None,
        target: logging.Logger | None = None,
        engine_level: int | None = None,
    ):
        from gridcore.config import (
            LOG_CONSOLE_LEVEL,
            LOG_FILE_BACKUP_COUNT,
            LOG_FILE_LEVEL,
            LOG_FILE_MAX_BYTES,
            LOG_FORMAT,
            LOG_TO_CONSOLE,
            LOG_TO_FILE,
        )

        if console_level is None:
            console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO)
        if file_level is None:
            file_level = getattr(logging, LOG_FILE_LEVEL, logging.WARNING)
        if log_to_file is None:
            log_to_file = LOG_TO_FILE

        self.logger = target or logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers filter levels
        if engine_level is not None:
            LoggerFactory.set_global_level(engine_level)

        if self.logger.handlers:
            return

        if LOG_TO_CONSOLE:
            self._setup_console_handler(console_level)

        if log_to_file:
            os.makedirs(log_dir, exist_ok=True)
            self._setup_file_handler(
                os.path.join(log_dir, f"{log_name}.log"),
                file_level,
                LOG_FILE_MAX_BYTES,
                LOG_FILE_BACKUP_COUNT,
                LOG_FORMAT,
            )

    def _setup_console_handler(self, level: int) -> None:
        """Set up console handler with UTF-8 output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)

    def _setup_file_handler(
        self, path: str, level: int, max_bytes: int, backup_count: int, fmt: str
    ) -> None:
        """Set up rotating file output."""
        file_handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        self.logger.addHandler(file_handler)
