"""Module: pipeline.py

Date: 2026-02-10

Query pipeline: ``filter -> sort -> paginate-or-window``.

``recompute`` is a pure function of a QueryState snapshot. It is re-run
after every mutating store operation and returns the same QueryView for the
same inputs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from gridcore.core.pipeline.filters import filter_rows
from gridcore.core.pipeline.sorters import ResolvedSorter, sort_rows
from gridcore.core.pipeline.windowing import clamp_page, slice_page, total_pages
from gridcore.models.query import FilterEntry, SorterEntry

if TYPE_CHECKING:
    from gridcore.app.ports.diagnostics import DiagnosticsSink


@dataclass(frozen=True)
class QueryState:
    """Inputs of one pipeline run."""

    rows: tuple[Any, ...]
    filters: tuple[FilterEntry, ...] = ()
    sorters: tuple[SorterEntry, ...] = ()
    comparators: Mapping[str, ResolvedSorter] = field(default_factory=dict)
    pagination: bool = False
    progressive: bool = False
    current_page: int = 1
    page_size: int = 10


@dataclass(frozen=True)
class QueryView:
    """Outputs of one pipeline run.

    Attributes:
        visible_rows: Rows the renderer draws
        all_rows: Full filtered/sorted set
        current_page: Requested page clamped into ``[1, total_pages]``
        total_pages: Page count for the filtered set

    """

    visible_rows: tuple[Any, ...]
    all_rows: tuple[Any, ...]
    current_page: int
    total_pages: int

    @property
    def total_rows(self) -> int:
        return len(self.all_rows)


def recompute(state: QueryState, diagnostics: DiagnosticsSink | None = None) -> QueryView:
    """Derive the visible rows for ``state``."""
    filtered = filter_rows(state.rows, state.filters)
    ordered = sort_rows(filtered, state.sorters, state.comparators, diagnostics)

    paginated = state.pagination and not state.progressive
    pages = total_pages(len(ordered), state.page_size, paginated)
    page = clamp_page(state.current_page, pages)

    if paginated:
        visible = slice_page(ordered, page, state.page_size)
    else:
        visible = ordered

    return QueryView(
        visible_rows=tuple(visible),
        all_rows=tuple(ordered),
        current_page=page,
        total_pages=pages,
    )
