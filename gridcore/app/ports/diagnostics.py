"""Diagnostics port for failures the engine absorbs instead of raising.

Date: 2026-02-10
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Receives failures from host callbacks and page fetches."""

    def report(self, source: str, message: str, error: BaseException | None = None) -> None:
        """Record one failure.

        Args:
            source: Component that absorbed the failure (``"sort"``, ``"fetch"``, ...)
            message: Human readable description
            error: Original exception, if any

        """
        ...
