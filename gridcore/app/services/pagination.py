"""Module: pagination.py

Date: 2026-02-10

Builds PaginationInfo descriptors from the table store's current view.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from gridcore.config import (
    DEFAULT_PAGE_SIZE_OPTIONS,
    DEFAULT_PAGINATION_BUTTON_COUNT,
    DEFAULT_PAGINATION_COUNTER,
)
from gridcore.core.pipeline.windowing import page_bounds, page_button_window
from gridcore.models.pagination_info import PaginationInfo

if TYPE_CHECKING:
    from gridcore.app.state.table_store import TableStore


def counter_text(
    mode: str | None, current_page: int, total_pages: int, first_row: int, last_row: int, total_rows: int
) -> str:
    """Footer counter: ``"Showing 1 to 10 of 42 rows"`` or ``"1 of 5"``."""
    if mode == "rows":
        return f"Showing {first_row} to {last_row} of {total_rows} rows"
    if mode == "pages":
        return f"{current_page} of {total_pages}"
    return ""


def build_pagination_info(
    store: TableStore,
    *,
    button_count: int = DEFAULT_PAGINATION_BUTTON_COUNT,
    counter: str | None = DEFAULT_PAGINATION_COUNTER,
    size_options: Sequence[int] = DEFAULT_PAGE_SIZE_OPTIONS,
) -> PaginationInfo:
    view = store.view
    total_rows = view.total_rows
    page = view.current_page

    if total_rows == 0:
        first_row = last_row = 0
    elif store.pagination_enabled and not store.progressive_enabled:
        start, end = page_bounds(page, store.page_size)
        first_row = start + 1
        last_row = min(end, total_rows)
    else:
        first_row, last_row = 1, total_rows

    return PaginationInfo(
        current_page=page,
        page_size=store.page_size,
        total_pages=view.total_pages,
        total_rows=total_rows,
        first_row=first_row,
        last_row=last_row,
        page_buttons=page_button_window(page, view.total_pages, button_count),
        page_size_options=list(size_options),
        counter_text=counter_text(counter, page, view.total_pages, first_row, last_row, total_rows),
    )
