"""Module: observable.py

Date: 2026-02-10

Signals published by the grid stores and services.

TableStore, ColumnStore, SelectionStore, CellService and ProgressiveLoader
announce view, column, selection, edit and loader changes through these
signals. DataGrid re-emits them under the host event names, and the Qt
adapter listens to them without the engine importing Qt.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from gridcore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__name__", repr(callback))


class Signal:
    """Class-level signal declaration; each store instance gets its own SignalInstance.

    Example:
        class SelectionStore(Observable):
            selection_changed = Signal(list)

        selection.selection_changed.connect(on_selection)
        selection.selection_changed.emit(selected_rows)
    """

    def __init__(self, *arg_types: type):
        """Record the payload types (not enforced on emit)."""
        self.arg_types = arg_types
        self.name = ""  # Set by __set_name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        """Get the per-object signal instance, creating it on first access."""
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance
        return instance


class SignalInstance:
    """Callbacks connected to one signal of one store."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def connect(self, callback: Callable[..., Any]) -> None:
        """Add ``callback``; connecting the same callback twice is a no-op."""
        with self._lock:
            if callback not in self._callbacks:
                self._callbacks.append(callback)
                logger.debug(
                    "Signal connected: %s -> %s",
                    self.name,
                    _callback_name(callback),
                    extra={"dev_only": True},
                )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Remove ``callback``, or every callback when it is None."""
        with self._lock:
            if callback is None:
                count = len(self._callbacks)
                self._callbacks.clear()
                logger.debug(
                    "All callbacks disconnected from %s (count: %d)",
                    self.name,
                    count,
                    extra={"dev_only": True},
                )
            elif callback in self._callbacks:
                self._callbacks.remove(callback)
                logger.debug(
                    "Signal disconnected: %s -> %s",
                    self.name,
                    _callback_name(callback),
                    extra={"dev_only": True},
                )

    def receiver_count(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def emit(self, *args: Any) -> None:
        """Call each connected callback with ``args``.

        A callback that raises is logged and does not stop the others.
        """
        with self._lock:
            callbacks = self._callbacks.copy()

        # callbacks may connect or disconnect while running
        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s", self.name, _callback_name(callback)
                )


class Observable:
    """Base class for the grid stores and services that declare signals.

    Signals can be looked up by name, which is how DataGrid binds host
    event names in ``on()``/``off()``.
    """

    def __init__(self) -> None:
        super().__init__()

    @classmethod
    def signal_names(cls) -> list[str]:
        """Names of the signals declared on this class and its bases, base first."""
        names: list[str] = []
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, Signal) and name not in names:
                    names.append(name)
        return names

    def signal(self, name: str) -> SignalInstance | None:
        """Signal instance called ``name``, or None if the class declares no such signal."""
        if name not in self.signal_names():
            return None
        return getattr(self, name)

    def disconnect_all(self) -> None:
        """Drop every callback from every signal of this object."""
        for name in self.signal_names():
            getattr(self, name).disconnect()
