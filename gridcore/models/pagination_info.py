"""Module: pagination_info.py

Date: 2026-02-10

Pagination descriptor handed to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PaginationInfo:
    """Snapshot of the pagination state for a paginator footer.

    Attributes:
        current_page: 1-based page being shown
        page_size: Rows per page
        total_pages: Number of pages, never less than 1
        total_rows: Rows in the filtered/sorted set
        first_row: 1-based position of the first row on the page (0 if empty)
        last_row: 1-based position of the last row on the page (0 if empty)
        page_buttons: Page numbers to render as buttons
        page_size_options: Sizes offered by the size selector
        counter_text: Footer counter, empty when the counter is disabled

    """

    current_page: int
    page_size: int
    total_pages: int
    total_rows: int
    first_row: int
    last_row: int
    page_buttons: list[int] = field(default_factory=list)
    page_size_options: list[int] = field(default_factory=list)
    counter_text: str = ""

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
