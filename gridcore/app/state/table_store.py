"""Module: table_store.py

Date: 2026-02-10

Table Store - single source of truth for rows, columns, sorters, filters and
the pagination cursor.

Every mutating operation updates the stored state and then re-runs the query
pipeline, so ``view`` always reflects the current inputs. Sorting never
reorders the stored rows; only the derived view is ordered.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from gridcore.app.services.diagnostics import LoggingDiagnostics
from gridcore.app.state.column_store import ColumnLike, ColumnStore
from gridcore.app.state.identity import RowPosition, row_identity
from gridcore.app.state.selection_store import SelectionStore
from gridcore.config import DEFAULT_INDEX_FIELD, DEFAULT_INITIAL_PAGE, DEFAULT_PAGE_SIZE
from gridcore.core.pipeline.pipeline import QueryState, QueryView, recompute
from gridcore.core.pipeline.sorters import resolve_sorters
from gridcore.models.column import ColumnDefinition
from gridcore.models.query import FilterEntry, SorterEntry
from gridcore.utils.events import Observable, Signal
from gridcore.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from gridcore.app.ports.diagnostics import DiagnosticsSink

logger = get_cached_logger(__name__)


def _coerce_sorters(sorters: Any) -> tuple[SorterEntry, ...]:
    if sorters is None:
        return ()
    if isinstance(sorters, (SorterEntry, dict)):
        sorters = [sorters]
    elif isinstance(sorters, tuple) and len(sorters) == 2 and isinstance(sorters[0], str):
        sorters = [sorters]
    return tuple(SorterEntry.coerce(entry) for entry in sorters)


class TableStore(Observable):
    """Authoritative row collection plus the query state applied to it.

    Signals:
        view_changed: QueryView after every recompute
        rows_changed: list of rows after the collection is mutated
    """

    view_changed = Signal(object)
    rows_changed = Signal(list)

    def __init__(
        self,
        rows: Iterable[Any] = (),
        columns: Iterable[ColumnLike] = (),
        *,
        index_field: str = DEFAULT_INDEX_FIELD,
        pagination: bool = False,
        page_size: int = DEFAULT_PAGE_SIZE,
        current_page: int = DEFAULT_INITIAL_PAGE,
        progressive: bool = False,
        diagnostics: DiagnosticsSink | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            rows: Initial authoritative collection
            columns: Column definitions
            index_field: Field holding row identity
            pagination: Slice the view into pages
            page_size: Rows per page
            current_page: Requested initial page, clamped after the first recompute
            progressive: Progressive loading mode (disables page slicing)
            diagnostics: Sink for absorbed failures

        """
        super().__init__()
        self.diagnostics: DiagnosticsSink = diagnostics or LoggingDiagnostics()
        self.index_field = index_field
        self.pagination_enabled = pagination
        self.progressive_enabled = progressive

        self._rows: list[Any] = list(rows)
        self._identity_index: dict[Hashable, int] | None = None
        self._sorters: tuple[SorterEntry, ...] = ()
        self._filters: list[FilterEntry] = []
        self._page_size = max(1, int(page_size))
        self._current_page = max(1, int(current_page))

        self.columns = ColumnStore(columns)
        self._comparators = resolve_sorters(self.columns.get_columns(), self.diagnostics)
        self.columns.columns_changed.connect(self._on_columns_changed)

        self.selection = SelectionStore(self.find_row)

        self._view: QueryView = self._run_pipeline()
        self._current_page = self._view.current_page

        logger.debug(
            "TableStore initialized: %d rows, pagination=%s, progressive=%s",
            len(self._rows),
            pagination,
            progressive,
            extra={"dev_only": True},
        )

    # =====================================
    # Derived view
    # =====================================

    @property
    def view(self) -> QueryView:
        return self._view

    @property
    def visible_rows(self) -> list[Any]:
        return list(self._view.visible_rows)

    @property
    def all_rows(self) -> list[Any]:
        """Full filtered/sorted set."""
        return list(self._view.all_rows)

    @property
    def rows(self) -> list[Any]:
        """Authoritative collection in insertion order."""
        return self._rows.copy()

    @property
    def loaded_rows(self) -> list[Any]:
        """Rows fetched so far in progressive mode (the authoritative collection)."""
        return self._rows.copy()

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def sorters(self) -> list[SorterEntry]:
        return list(self._sorters)

    @property
    def filters(self) -> list[FilterEntry]:
        return self._filters.copy()

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return self._view.total_pages

    def _run_pipeline(self) -> QueryView:
        state = QueryState(
            rows=tuple(self._rows),
            filters=tuple(self._filters),
            sorters=self._sorters,
            comparators=self._comparators,
            pagination=self.pagination_enabled,
            progressive=self.progressive_enabled,
            current_page=self._current_page,
            page_size=self._page_size,
        )
        return recompute(state, self.diagnostics)

    def refresh(self) -> QueryView:
        """Re-run the pipeline and publish the new view."""
        self._view = self._run_pipeline()
        self._current_page = self._view.current_page
        self.view_changed.emit(self._view)
        return self._view

    # =====================================
    # Identity lookup
    # =====================================

    def identity_of(self, row: Any, position: int) -> Hashable:
        return row_identity(row, position, self.index_field)

    def _index(self) -> dict[Hashable, int]:
        if self._identity_index is None:
            index: dict[Hashable, int] = {}
            for position, row in enumerate(self._rows):
                index.setdefault(self.identity_of(row, position), position)
            self._identity_index = index
        return self._identity_index

    def position_of(self, identity: Hashable) -> int | None:
        """Position of the row with ``identity`` in the authoritative collection."""
        try:
            return self._index().get(identity)
        except TypeError:
            return None

    def find_row(self, identity: Hashable) -> Any | None:
        position = self.position_of(identity)
        if position is None:
            return None
        return self._rows[position]

    def _rows_mutated(self) -> None:
        self._identity_index = None
        self.rows_changed.emit(self._rows.copy())
        self.refresh()

    # =====================================
    # Row operations
    # =====================================

    def set_rows(self, rows: Iterable[Any]) -> None:
        """Replace the authoritative collection. Selection is resolved lazily."""
        self._rows = list(rows)
        logger.debug("Rows replaced: %d rows", len(self._rows), extra={"dev_only": True})
        self._rows_mutated()

    def add_rows(self, rows: Iterable[Any], at_top: bool = False) -> list[Any]:
        """Prepend or append rows. Returns the added rows."""
        added = list(rows)
        if not added:
            return added
        if at_top:
            self.selection.shift_positions(0, len(added))
            self._rows[0:0] = added
        else:
            self._rows.extend(added)
        self._rows_mutated()
        return added

    def delete_row(self, index: int) -> Any:
        """Remove the row at ``index`` of the authoritative collection.

        Returns the removed row, or None when the index is out of range.
        """
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._rows):
            logger.debug("delete_row(%r) ignored: out of range", index, extra={"dev_only": True})
            return None
        row = self._rows[index]
        identity = self.identity_of(row, index)
        del self._rows[index]
        was_selected = self.selection.purge(identity, emit_signal=False)
        self.selection.shift_positions(index + 1, -1)
        self._rows_mutated()
        if was_selected:
            self.selection.selection_changed.emit(self.selection.get_selected_identities())
        return row

    def update_rows(self, updates: Iterable[Mapping[str, Any]]) -> int:
        """Merge partial rows into the rows with the same identity.

        Updates without an identity, or for rows not in the collection, are skipped.
        Returns the number of rows updated.
        """
        updated = 0
        for update in updates:
            identity = update.get(self.index_field) if isinstance(update, Mapping) else None
            row = self.find_row(identity) if identity is not None else None
            if row is None:
                logger.debug("update skipped for unknown row %r", identity, extra={"dev_only": True})
                continue
            for key, value in update.items():
                self._write_field(row, key, value)
            updated += 1
        if updated:
            self._rows_mutated()
        return updated

    @staticmethod
    def _write_field(row: Any, field: str, value: Any) -> None:
        if isinstance(row, MutableMapping):
            row[field] = value
        else:
            setattr(row, field, value)

    def set_cell(self, identity: Hashable, field: str, value: Any) -> Any:
        """Write one field of one row and return the previous value.

        Raises:
            KeyError: If no row has ``identity``

        """
        row = self.find_row(identity)
        if row is None:
            raise KeyError(identity)
        if isinstance(row, Mapping):
            old_value = row.get(field)
        else:
            old_value = getattr(row, field, None)
        self._write_field(row, field, value)
        self._rows_mutated()
        return old_value

    # =====================================
    # Columns
    # =====================================

    def set_columns(self, columns: Iterable[ColumnLike]) -> None:
        self.columns.set_columns(columns)

    def get_columns(self) -> list[ColumnDefinition]:
        return self.columns.get_columns()

    def _on_columns_changed(self, columns: list[ColumnDefinition]) -> None:
        self._comparators = resolve_sorters(columns, self.diagnostics)
        self.refresh()

    # =====================================
    # Sorting and filtering
    # =====================================

    def set_sort(self, sorters: Any) -> None:
        """Replace the sorter list. Accepts entries, ``(column, dir)`` pairs or mappings."""
        self._sorters = _coerce_sorters(sorters)
        for entry in self._sorters:
            if entry.column not in self._comparators:
                self.diagnostics.report(
                    "sort", f"No sortable column '{entry.column}'; sorter entry ignored"
                )
        self.refresh()

    def clear_sort(self) -> None:
        if not self._sorters:
            return
        self._sorters = ()
        self.refresh()

    def set_filter(self, field: str, type_: Any, value: Any) -> FilterEntry:
        """Set the filter for ``field``, replacing any filter already on that field."""
        entry = FilterEntry.create(field, type_, value)
        if not entry.is_valid:
            self.diagnostics.report(
                "filter", f"Unknown filter operator '{type_}' on '{field}'; filter ignored"
            )
        self._filters = [f for f in self._filters if f.field != field]
        self._filters.append(entry)
        self.refresh()
        return entry

    def clear_filter(self, field: str | None = None) -> None:
        """Remove the filter on ``field``, or every filter when no field is given."""
        if field is None:
            remaining: list[FilterEntry] = []
        else:
            remaining = [f for f in self._filters if f.field != field]
        if len(remaining) == len(self._filters):
            return
        self._filters = remaining
        self.refresh()

    # =====================================
    # Pagination
    # =====================================

    def set_page(self, page: int) -> bool:
        """Move to ``page``. Pages outside ``[1, total_pages]`` are ignored."""
        if not isinstance(page, int) or isinstance(page, bool):
            return False
        if not 1 <= page <= self.total_pages:
            logger.debug(
                "set_page(%d) ignored: valid range is 1..%d",
                page,
                self.total_pages,
                extra={"dev_only": True},
            )
            return False
        self._current_page = page
        self.refresh()
        return True

    def set_page_size(self, size: int) -> bool:
        """Change rows per page and go back to page 1. Non-positive sizes are ignored."""
        if not isinstance(size, int) or isinstance(size, bool) or size < 1:
            logger.debug("set_page_size(%r) ignored", size, extra={"dev_only": True})
            return False
        self._page_size = size
        self._current_page = 1
        self.refresh()
        return True

    def identity_for(self, row: Any) -> Hashable | None:
        """Identity of a row object taken from the view, or None if it left the collection."""
        for position, candidate in enumerate(self._rows):
            if candidate is row:
                return self.identity_of(candidate, position)
        return None
