"""Module: fetch_result.py

Date: 2026-02-10

Explicit result of a page fetch: rows, empty, or failed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FetchStatus(Enum):
    """Outcome of one page fetch."""

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    """Result returned (or derived from the return value of) a page fetcher."""

    status: FetchStatus
    rows: list[Any] = field(default_factory=list)
    reason: str = ""
    error: BaseException | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", list(self.rows))
        # an OK page without rows means the source is exhausted
        if self.status is FetchStatus.OK and not self.rows:
            object.__setattr__(self, "status", FetchStatus.EMPTY)

    @classmethod
    def ok(cls, rows: Sequence[Any]) -> FetchResult:
        return cls(FetchStatus.OK, list(rows))

    @classmethod
    def empty(cls) -> FetchResult:
        return cls(FetchStatus.EMPTY)

    @classmethod
    def failed(cls, reason: str, error: BaseException | None = None) -> FetchResult:
        return cls(FetchStatus.FAILED, reason=reason, error=error)

    @classmethod
    def from_response(cls, response: Any) -> FetchResult:
        """Normalize whatever a fetcher returned.

        A FetchResult passes through, a list or tuple of rows becomes OK or
        EMPTY, and anything else is a failure.
        """
        if isinstance(response, FetchResult):
            return response
        if isinstance(response, (list, tuple)):
            return cls.ok(response)
        return cls.failed(f"unexpected fetch result: {type(response).__name__}")

    @property
    def is_ok(self) -> bool:
        return self.status is FetchStatus.OK

    @property
    def is_empty(self) -> bool:
        return self.status is FetchStatus.EMPTY

    @property
    def is_failed(self) -> bool:
        return self.status is FetchStatus.FAILED
