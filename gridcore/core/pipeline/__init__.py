"""gridcore.core.pipeline package.

Pure functions turning the authoritative rows into the visible rows.

Components:
- filters: filter stage (logical AND across fields)
- sorters: comparator resolution and the stable multi-key sort
- windowing: page arithmetic and slicing
- pipeline: QueryState -> QueryView
"""

from gridcore.core.pipeline.filters import build_predicate, filter_rows
from gridcore.core.pipeline.pipeline import QueryState, QueryView, recompute
from gridcore.core.pipeline.sorters import ResolvedSorter, resolve_sorter, resolve_sorters, sort_rows
from gridcore.core.pipeline.windowing import page_button_window, slice_page, total_pages

__all__ = [
    "QueryState",
    "QueryView",
    "ResolvedSorter",
    "build_predicate",
    "filter_rows",
    "page_button_window",
    "recompute",
    "resolve_sorter",
    "resolve_sorters",
    "slice_page",
    "sort_rows",
    "total_pages",
]
