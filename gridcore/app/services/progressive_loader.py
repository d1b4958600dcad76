"""Module: progressive_loader.py

Date: 2026-02-10

Progressive Loader - fetch-on-demand appending for infinite scroll.

State machine: IDLE -> LOADING -> IDLE (more available) | EXHAUSTED.

The fetch is the only suspension point of the engine. ``is_loading`` keeps at
most one fetch in flight; there is no cancellation, so a result that arrives
after ``reset()`` or ``close()`` is discarded instead of being merged.
"""

from __future__ import annotations

import inspect
from enum import Enum
from typing import TYPE_CHECKING

from gridcore.config import DEFAULT_PROGRESSIVE_CURSOR, DEFAULT_PROGRESSIVE_SCROLL_MARGIN
from gridcore.models.errors import FetchError
from gridcore.models.fetch_result import FetchResult
from gridcore.utils.events import Observable, Signal
from gridcore.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from gridcore.app.ports.diagnostics import DiagnosticsSink
    from gridcore.app.ports.page_fetcher import PageFetcher
    from gridcore.app.state.table_store import TableStore

logger = get_cached_logger(__name__)


class LoaderState(Enum):
    """Progressive loading states."""

    IDLE = "idle"
    LOADING = "loading"
    EXHAUSTED = "exhausted"


class ProgressiveLoader(Observable):
    """Appends successive pages from a host fetcher to the table store.

    Signals:
        state_changed: (is_loading, has_more) after every transition
    """

    state_changed = Signal(bool, bool)

    def __init__(
        self,
        store: TableStore,
        fetcher: PageFetcher | None,
        *,
        enabled: bool = True,
        scroll_margin: int = DEFAULT_PROGRESSIVE_SCROLL_MARGIN,
        diagnostics: DiagnosticsSink | None = None,
    ) -> None:
        super().__init__()
        self._store = store
        self._fetcher = fetcher
        self.enabled = enabled
        self.scroll_margin = scroll_margin
        self._diagnostics = diagnostics or store.diagnostics

        self._cursor_page = DEFAULT_PROGRESSIVE_CURSOR
        self._exhausted = False
        self._in_flight = False
        self._generation = 0
        self._closed = False

    # =====================================
    # State
    # =====================================

    @property
    def cursor_page(self) -> int:
        """Last page merged into the collection (page 1 is the initial data)."""
        return self._cursor_page

    @property
    def is_loading(self) -> bool:
        return self._in_flight

    @property
    def has_more(self) -> bool:
        return not self._exhausted

    @property
    def state(self) -> LoaderState:
        if self._in_flight:
            return LoaderState.LOADING
        if self._exhausted:
            return LoaderState.EXHAUSTED
        return LoaderState.IDLE

    @property
    def closed(self) -> bool:
        return self._closed

    def can_load(self) -> bool:
        return (
            self.enabled
            and not self._closed
            and self._fetcher is not None
            and not self._in_flight
            and not self._exhausted
        )

    def should_load(self, remaining_distance: float) -> bool:
        """Whether a scroll observer with ``remaining_distance`` unrendered should fetch."""
        return self.can_load() and remaining_distance < self.scroll_margin

    def reset(self) -> None:
        """Start over from page 1 after the collection was replaced."""
        self._generation += 1
        self._cursor_page = DEFAULT_PROGRESSIVE_CURSOR
        was_exhausted = self._exhausted
        self._exhausted = False
        if was_exhausted:
            self._emit_state()

    def close(self) -> None:
        """Detach from the store; pending results will be dropped."""
        self._closed = True
        self._generation += 1

    # =====================================
    # Loading
    # =====================================

    async def load_more_data(self) -> FetchResult | None:
        """Fetch page ``cursor_page + 1`` and merge it.

        Returns the fetch result, or None when no fetch was started (disabled,
        already loading, exhausted, closed) or the result was discarded.
        """
        if not self.can_load():
            return None

        page = self._cursor_page + 1
        generation = self._generation
        self._in_flight = True
        self._emit_state()
        logger.debug("Fetching progressive page %d", page, extra={"dev_only": True})

        try:
            response = self._fetcher(page)
            if inspect.isawaitable(response):
                response = await response
            result = FetchResult.from_response(response)
        except Exception as e:
            result = FetchResult.failed(str(e) or type(e).__name__, e)
        finally:
            self._in_flight = False

        if self._closed or generation != self._generation:
            logger.debug(
                "Discarding page %d: loader was reset or closed", page, extra={"dev_only": True}
            )
            if not self._closed:
                self._emit_state()
            return None

        self._apply(page, result)
        return result

    def _apply(self, page: int, result: FetchResult) -> None:
        if result.is_ok:
            self._cursor_page = page
            self._store.add_rows(result.rows)
            logger.debug(
                "Progressive page %d merged: %d rows", page, len(result.rows), extra={"dev_only": True}
            )
        elif result.is_empty:
            self._exhausted = True
            logger.info("Progressive loading finished at page %d", self._cursor_page)
        else:
            self._exhausted = True
            self._diagnostics.report(
                "fetch", str(FetchError(page, result.reason)), result.error
            )
        self._emit_state()

    def _emit_state(self) -> None:
        self.state_changed.emit(self.is_loading, self.has_more)
