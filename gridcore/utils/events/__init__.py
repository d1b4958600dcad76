"""Module: __init__.py

Date: 2026-02-10

Pure Python event/signal implementation for decoupling observers from
grid state changes.
"""

from gridcore.utils.events.observable import Observable, Signal, SignalInstance

__all__ = ["Observable", "Signal", "SignalInstance"]
