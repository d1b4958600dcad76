"""Protocols for collaborators supplied by the host."""

from gridcore.app.ports.diagnostics import DiagnosticsSink
from gridcore.app.ports.page_fetcher import PageFetcher

__all__ = ["DiagnosticsSink", "PageFetcher"]
