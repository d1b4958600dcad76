"""Module: errors.py

Date: 2026-02-10

Exception types for the grid engine.

Runtime failures inside the query pipeline and the progressive loader are
reported to the diagnostics sink instead of being raised; these exceptions
cover construction-time misconfiguration and wrapped fetch failures.
"""


class GridError(Exception):
    """Base class for grid engine errors."""


class InvalidOptionError(GridError, ValueError):
    """Raised when grid options cannot be used to build a grid."""


class FetchError(GridError):
    """Failure reported by a page-fetch collaborator."""

    def __init__(self, page: int, reason: str):
        super().__init__(f"Fetching page {page} failed: {reason}")
        self.page = page
        self.reason = reason
