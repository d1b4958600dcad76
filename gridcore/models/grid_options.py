"""Module: grid_options.py

Date: 2026-02-10

GridOptions - construction-time configuration for a DataGrid.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from gridcore.config import (
    DEFAULT_INDEX_FIELD,
    DEFAULT_INITIAL_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PAGE_SIZE_OPTIONS,
    DEFAULT_PAGINATION_BUTTON_COUNT,
    DEFAULT_PAGINATION_COUNTER,
    DEFAULT_PROGRESSIVE_SCROLL_MARGIN,
    PAGINATION_COUNTER_MODES,
)
from gridcore.models.column import ColumnDefinition
from gridcore.models.errors import InvalidOptionError
from gridcore.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from gridcore.app.ports.diagnostics import DiagnosticsSink
    from gridcore.app.ports.page_fetcher import PageFetcher

logger = get_cached_logger(__name__)

# Host option name -> GridOptions attribute
_HOST_OPTIONS = {
    "data": "data",
    "columns": "columns",
    "index": "index",
    "pagination": "pagination",
    "paginationSize": "pagination_size",
    "paginationInitialPage": "pagination_initial_page",
    "paginationSizeSelector": "pagination_size_selector",
    "paginationButtonCount": "pagination_button_count",
    "paginationCounter": "pagination_counter",
    "progressiveLoad": "progressive_load",
    "onProgressiveLoad": "on_progressive_load",
    "progressiveLoadScrollMargin": "progressive_load_scroll_margin",
    "onDataLoaded": "on_data_loaded",
    "onPageLoaded": "on_page_loaded",
    "diagnostics": "diagnostics",
}


@dataclass
class GridOptions:
    """Options accepted by :class:`gridcore.DataGrid`.

    Attributes:
        data: Initial row collection
        columns: Column definitions (dataclasses or host dictionaries)
        index: Field used as row identity
        pagination: Slice the view into pages
        pagination_size: Rows per page
        pagination_initial_page: 1-based page shown first
        pagination_size_selector: Page sizes offered to the user
        pagination_button_count: Width of the page-button window
        pagination_counter: ``"rows"``, ``"pages"`` or None for no counter
        progressive_load: Enable fetch-on-demand loading (overrides pagination)
        on_progressive_load: Page fetcher ``(page) -> rows | FetchResult``
        progressive_load_scroll_margin: Remaining distance that triggers a fetch
        on_data_loaded: Host callback connected to ``data_loaded``
        on_page_loaded: Host callback connected to ``page_loaded``
        diagnostics: Sink receiving reported failures

    """

    data: list[Any] = field(default_factory=list)
    columns: list[ColumnDefinition] = field(default_factory=list)
    index: str = DEFAULT_INDEX_FIELD
    pagination: bool = False
    pagination_size: int = DEFAULT_PAGE_SIZE
    pagination_initial_page: int = DEFAULT_INITIAL_PAGE
    pagination_size_selector: list[int] = field(
        default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS)
    )
    pagination_button_count: int = DEFAULT_PAGINATION_BUTTON_COUNT
    pagination_counter: str | None = DEFAULT_PAGINATION_COUNTER
    progressive_load: bool | str = False
    on_progressive_load: PageFetcher | None = None
    progressive_load_scroll_margin: int = DEFAULT_PROGRESSIVE_SCROLL_MARGIN
    on_data_loaded: Callable[[list[Any]], Any] | None = None
    on_page_loaded: Callable[[int], Any] | None = None
    diagnostics: DiagnosticsSink | None = None

    def __post_init__(self) -> None:
        self.data = list(self.data or [])
        self.columns = [ColumnDefinition.coerce(column) for column in (self.columns or [])]

        if not isinstance(self.pagination_size, int) or self.pagination_size < 1:
            raise InvalidOptionError(f"pagination_size must be a positive integer, got {self.pagination_size!r}")
        if not isinstance(self.pagination_initial_page, int) or self.pagination_initial_page < 1:
            raise InvalidOptionError(
                f"pagination_initial_page must be >= 1, got {self.pagination_initial_page!r}"
            )
        if self.pagination_button_count < 1:
            raise InvalidOptionError("pagination_button_count must be >= 1")
        if self.pagination_counter is not None and self.pagination_counter not in PAGINATION_COUNTER_MODES:
            raise InvalidOptionError(
                f"pagination_counter must be one of {PAGINATION_COUNTER_MODES} or None"
            )
        if self.progressive_enabled and self.on_progressive_load is None:
            logger.warning("Progressive loading enabled without a page fetcher; no pages will load")

    @property
    def progressive_enabled(self) -> bool:
        return bool(self.progressive_load)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> GridOptions:
        """Build options from host camelCase names. Presentation-only keys are ignored."""
        kwargs: dict[str, Any] = {}
        ignored: list[str] = []
        for key, value in options.items():
            name = _HOST_OPTIONS.get(key)
            if name is None and key in cls.__dataclass_fields__:
                name = key
            if name is None:
                ignored.append(key)
                continue
            kwargs[name] = value

        if ignored:
            logger.debug(
                "Ignoring presentation options: %s", ", ".join(sorted(ignored)), extra={"dev_only": True}
            )
        return cls(**kwargs)
