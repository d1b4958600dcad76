"""Module: logger_factory.py

Date: 2026-02-10

Logger factory with caching.
Keeps a single logger instance per module name behind a lock.
"""

import inspect
import logging
import threading

from gridcore.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically __name__ from calling module

        Returns:
            Cached logger instance

        """
        if name is None:
            frame = inspect.currentframe().f_back
            name = frame.f_globals.get("__name__", "unknown")

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting a cached logger.

    Args:
        name: Logger name

    Returns:
        Cached logger instance

    """
    return LoggerFactory.get_logger(name)
