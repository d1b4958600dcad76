"""Module: grid.py

Date: 2026-02-10

DataGrid - public facade of the grid engine.

The grid is a thin orchestrator. It delegates to:
- TableStore: rows, columns, sorters, filters, pagination cursor
- SelectionStore: selected row identities
- ProgressiveLoader: fetch-on-demand appending
- CellService: formatter and cell edit contracts

and re-publishes their changes as lifecycle signals for the renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from gridcore.app.services.cell_service import CellService
from gridcore.app.services.pagination import build_pagination_info
from gridcore.app.services.progressive_loader import LoaderState, ProgressiveLoader
from gridcore.app.state.column_store import ColumnLike
from gridcore.app.state.table_store import TableStore
from gridcore.core.pipeline.pipeline import QueryView
from gridcore.models.column import ColumnDefinition
from gridcore.models.fetch_result import FetchResult
from gridcore.models.grid_options import GridOptions
from gridcore.models.pagination_info import PaginationInfo
from gridcore.utils.events import Observable, Signal, SignalInstance
from gridcore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# Host event names accepted by on()/off(), mapped to signal attributes
EVENT_ALIASES = {
    "dataLoaded": "data_loaded",
    "pageLoaded": "page_loaded",
    "dataProcessed": "view_changed",
    "viewChanged": "view_changed",
    "rowSelectionChanged": "selection_changed",
    "selectionChanged": "selection_changed",
    "rowAdded": "row_added",
    "rowDeleted": "row_deleted",
    "cellEdited": "cell_edited",
    "progressiveStateChanged": "progressive_state_changed",
}

PAGE_KEYWORDS = ("next", "prev", "first", "last")


class DataGrid(Observable):
    """Client-side data engine of a data grid.

    Signals:
        data_loaded: rows, after the collection was replaced
        page_loaded: page number, after a successful ``set_page``
        view_changed: QueryView, after any recompute
        selection_changed: selected identities
        row_added: rows added by ``add_rows``
        row_deleted: the deleted row
        cell_edited: (identity, field, old_value, new_value)
        progressive_state_changed: (is_loading, has_more)
    """

    data_loaded = Signal(list)
    page_loaded = Signal(int)
    view_changed = Signal(object)
    selection_changed = Signal(list)
    row_added = Signal(list)
    row_deleted = Signal(object)
    cell_edited = Signal(object, str, object, object)
    progressive_state_changed = Signal(bool, bool)

    def __init__(self, options: GridOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Create a grid from GridOptions, a host option mapping, or keyword options."""
        super().__init__()
        if options is None:
            options = GridOptions(**kwargs)
        elif isinstance(options, Mapping):
            options = GridOptions.from_mapping({**options, **kwargs})
        elif kwargs:
            raise TypeError("Pass either GridOptions or keyword options, not both")
        self.options = options

        self.store = TableStore(
            options.data,
            options.columns,
            index_field=options.index,
            pagination=options.pagination,
            page_size=options.pagination_size,
            current_page=options.pagination_initial_page,
            progressive=options.progressive_enabled,
            diagnostics=options.diagnostics,
        )
        self.selection = self.store.selection
        self.loader = ProgressiveLoader(
            self.store,
            options.on_progressive_load,
            enabled=options.progressive_enabled,
            scroll_margin=options.progressive_load_scroll_margin,
        )
        self.cells = CellService(self.store)
        self._destroyed = False

        self.store.view_changed.connect(self.view_changed.emit)
        self.selection.selection_changed.connect(self.selection_changed.emit)
        self.loader.state_changed.connect(self.progressive_state_changed.emit)
        self.cells.cell_edited.connect(self.cell_edited.emit)

        if options.on_data_loaded is not None:
            self.data_loaded.connect(options.on_data_loaded)
        if options.on_page_loaded is not None:
            self.page_loaded.connect(options.on_page_loaded)

        logger.info(
            "DataGrid created: %d rows, %d columns",
            self.store.row_count,
            len(self.store.get_columns()),
        )

    # =====================================
    # Outbound views
    # =====================================

    @property
    def view(self) -> QueryView:
        return self.store.view

    @property
    def data(self) -> list[Any]:
        """Visible rows (post filter, sort and window)."""
        return self.store.visible_rows

    @property
    def all_data(self) -> list[Any]:
        """Full filtered/sorted row set."""
        return self.store.all_rows

    def get_data(self) -> list[Any]:
        return self.store.all_rows

    def get_visible_data(self) -> list[Any]:
        return self.store.visible_rows

    def get_row(self, identity: Hashable) -> Any | None:
        return self.store.find_row(identity)

    def get_row_position(self, identity: Hashable) -> int | None:
        return self.store.position_of(identity)

    # =====================================
    # Row data
    # =====================================

    def set_rows(self, rows: Iterable[Any]) -> None:
        """Replace the whole collection and fire ``data_loaded``."""
        rows = list(rows)
        self.store.set_rows(rows)
        if self.loader.enabled:
            self.loader.reset()
        self.data_loaded.emit(rows)

    set_data = set_rows
    replace_data = set_rows

    def clear_data(self) -> None:
        self.set_rows([])

    def add_rows(self, rows: Iterable[Any], at_top: bool = False) -> list[Any]:
        added = self.store.add_rows(rows, at_top)
        if added:
            self.row_added.emit(added)
        return added

    add_data = add_rows

    def update_data(self, updates: Iterable[Mapping[str, Any]]) -> int:
        """Merge partial rows into existing rows matched by identity."""
        return self.store.update_rows(updates)

    def delete_row(self, index: int) -> Any | None:
        """Delete the row at ``index`` of the authoritative collection."""
        row = self.store.delete_row(index)
        if row is not None:
            self.row_deleted.emit(row)
        return row

    # =====================================
    # Columns
    # =====================================

    def set_columns(self, columns: Iterable[ColumnLike]) -> None:
        self.store.set_columns(columns)

    def get_columns(self) -> list[ColumnDefinition]:
        return self.store.get_columns()

    def get_visible_columns(self) -> list[ColumnDefinition]:
        return self.store.columns.get_visible_columns()

    def show_column(self, field: str) -> bool:
        return self.store.columns.show_column(field)

    def hide_column(self, field: str) -> bool:
        return self.store.columns.hide_column(field)

    def toggle_column(self, field: str) -> bool:
        return self.store.columns.toggle_column(field)

    def add_column(
        self, column: ColumnLike, before: bool = False, target: str | None = None
    ) -> ColumnDefinition:
        return self.store.columns.add_column(column, before, target)

    def delete_column(self, field: str) -> bool:
        return self.store.columns.delete_column(field)

    def move_column(self, field: str, target: str, before: bool = False) -> bool:
        return self.store.columns.move_column(field, target, before)

    # =====================================
    # Sorting and filtering
    # =====================================

    def set_sort(self, sorters: Any) -> None:
        self.store.set_sort(sorters)

    def get_sorters(self) -> list[dict[str, str]]:
        return [entry.as_dict() for entry in self.store.sorters]

    def clear_sort(self) -> None:
        self.store.clear_sort()

    def set_filter(self, field: str, type_: Any, value: Any) -> None:
        self.store.set_filter(field, type_, value)

    add_filter = set_filter

    def get_filters(self) -> list[dict[str, Any]]:
        return [entry.as_dict() for entry in self.store.filters]

    def clear_filter(self, field: str | None = None) -> None:
        self.store.clear_filter(field)

    # =====================================
    # Pagination
    # =====================================

    def _resolve_page(self, page: int | str) -> int | None:
        if not isinstance(page, str):
            return page
        keyword = page.strip().lower()
        current = self.store.current_page
        if keyword == "next":
            return current + 1
        if keyword == "prev":
            return current - 1
        if keyword == "first":
            return 1
        if keyword == "last":
            return self.store.total_pages
        return None

    def set_page(self, page: int | str) -> bool:
        """Go to ``page`` (number or next/prev/first/last). Out-of-range requests are ignored."""
        target = self._resolve_page(page)
        if target is None or not self.store.set_page(target):
            return False
        self.page_loaded.emit(self.store.current_page)
        return True

    def next_page(self) -> bool:
        return self.set_page("next")

    def previous_page(self) -> bool:
        return self.set_page("prev")

    def first_page(self) -> bool:
        return self.set_page("first")

    def last_page(self) -> bool:
        return self.set_page("last")

    def set_page_size(self, size: int) -> bool:
        return self.store.set_page_size(size)

    def get_page(self) -> int:
        return self.store.current_page

    def get_page_size(self) -> int:
        return self.store.page_size

    def get_page_max(self) -> int:
        return self.store.total_pages

    @property
    def current_page(self) -> int:
        return self.store.current_page

    @property
    def page_size(self) -> int:
        return self.store.page_size

    @property
    def total_pages(self) -> int:
        return self.store.total_pages

    def get_pagination_info(self) -> PaginationInfo:
        return build_pagination_info(
            self.store,
            button_count=self.options.pagination_button_count,
            counter=self.options.pagination_counter,
            size_options=self.options.pagination_size_selector,
        )

    # =====================================
    # Selection
    # =====================================

    def select_row(self, identities: Hashable | Iterable[Hashable]) -> None:
        self.selection.select_row(identities)

    def deselect_row(self, identities: Hashable | Iterable[Hashable]) -> None:
        self.selection.deselect_row(identities)

    def toggle_select_row(self, identity: Hashable) -> None:
        self.selection.toggle_select_row(identity)

    def clear_selection(self) -> None:
        self.selection.clear_selection()

    def is_selected(self, identity: Hashable) -> bool:
        return self.selection.is_selected(identity)

    def get_selected_identities(self) -> list[Hashable]:
        return self.selection.get_selected_identities()

    def get_selected_data(self) -> list[Any]:
        return self.selection.get_selected_data()

    # =====================================
    # Progressive loading
    # =====================================

    async def load_more_data(self) -> FetchResult | None:
        return await self.loader.load_more_data()

    def should_load_more(self, remaining_distance: float) -> bool:
        return self.loader.should_load(remaining_distance)

    @property
    def is_loading(self) -> bool:
        return self.loader.is_loading

    @property
    def has_more(self) -> bool:
        return self.loader.has_more

    @property
    def loader_state(self) -> LoaderState:
        return self.loader.state

    @property
    def loaded_rows(self) -> list[Any]:
        return self.store.loaded_rows

    # =====================================
    # Cells
    # =====================================

    def format_cell(self, row: Any, field: str) -> Any:
        return self.cells.format_cell(row, field)

    def edit_cell(self, identity: Hashable, field: str, value: Any) -> bool:
        return self.cells.edit_cell(identity, field, value)

    # =====================================
    # Events and lifecycle
    # =====================================

    def _signal_for(self, event: str) -> SignalInstance | None:
        return self.signal(EVENT_ALIASES.get(event, event))

    def on(self, event: str, callback: Callable[..., Any]) -> bool:
        """Subscribe ``callback`` to a lifecycle event by name."""
        signal = self._signal_for(event)
        if signal is None:
            logger.warning("Unknown grid event '%s'", event)
            return False
        signal.connect(callback)
        return True

    def off(self, event: str, callback: Callable[..., Any] | None = None) -> bool:
        signal = self._signal_for(event)
        if signal is None:
            return False
        signal.disconnect(callback)
        return True

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        """Tear down: close the loader and drop all subscribers."""
        if self._destroyed:
            return
        self._destroyed = True
        self.loader.close()
        self.disconnect_all()
        logger.debug("DataGrid destroyed", extra={"dev_only": True})
