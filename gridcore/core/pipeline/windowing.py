"""Module: windowing.py

Date: 2026-02-10

Windowing stage: page arithmetic and slicing.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any


def total_pages(row_count: int, page_size: int, paginated: bool = True) -> int:
    """``ceil(row_count / page_size)`` clamped to at least 1; 1 when not paginated."""
    if not paginated or page_size < 1:
        return 1
    return max(1, math.ceil(row_count / page_size))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(1, pages))


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """Half-open ``[start, end)`` source indices of a 1-based page."""
    start = (page - 1) * page_size
    return start, start + page_size


def slice_page(rows: Sequence[Any], page: int, page_size: int) -> list[Any]:
    start, end = page_bounds(page, page_size)
    return list(rows[start:end])


def page_button_window(current_page: int, pages: int, button_count: int) -> list[int]:
    """Page numbers for a paginator: ``button_count`` wide, centred where possible."""
    half = button_count // 2
    start = max(1, current_page - half)
    end = min(pages, start + button_count - 1)
    if end - start < button_count - 1:
        start = max(1, end - button_count + 1)
    return list(range(start, end + 1))
