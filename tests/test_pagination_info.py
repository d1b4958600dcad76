"""
Tests for pagination descriptors.

Date: 2026-02-10
"""

from gridcore.app.services.pagination import build_pagination_info, counter_text
from gridcore.app.state import TableStore


class TestCounterText:
    """Test footer counter rendering."""

    def test_modes(self):
        """Test rows, pages and disabled counters."""
        assert counter_text("rows", 2, 5, 11, 20, 42) == "Showing 11 to 20 of 42 rows"
        assert counter_text("pages", 2, 5, 11, 20, 42) == "2 of 5"
        assert counter_text(None, 2, 5, 11, 20, 42) == ""


class TestBuildPaginationInfo:
    """Test PaginationInfo derived from a store."""

    def test_last_partial_page(self, twelve_rows):
        """Test row range and navigation flags on the last page."""
        store = TableStore(twelve_rows, pagination=True, page_size=5, current_page=3)
        info = build_pagination_info(store)
        assert (info.first_row, info.last_row) == (11, 12)
        assert info.total_pages == 3
        assert info.page_buttons == [1, 2, 3]
        assert info.has_previous
        assert not info.has_next
        assert info.counter_text == "Showing 11 to 12 of 12 rows"
        assert info.page_size_options == [10, 25, 50, 100]

    def test_empty_store(self):
        """Test the empty collection."""
        info = build_pagination_info(TableStore([], pagination=True), counter="pages")
        assert (info.first_row, info.last_row) == (0, 0)
        assert info.counter_text == "1 of 1"
        assert not info.has_previous
        assert not info.has_next

    def test_without_pagination(self, twelve_rows):
        """Test that an unpaginated store spans every row."""
        info = build_pagination_info(TableStore(twelve_rows), button_count=3)
        assert (info.first_row, info.last_row) == (1, 12)
        assert info.page_buttons == [1]
