"""Module: qt_grid_model.py

Date: 2026-02-10

QtGridTableModel - Qt table model over a DataGrid.

Exposes the grid's visible rows and visible columns to a QTableView. The
model holds no data of its own: it resets whenever the grid publishes a new
view or the column set changes, and forwards header sorting and cell edits
back to the grid.

For the Qt-free engine, see gridcore/app/grid.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from PyQt5.QtCore import QAbstractTableModel, QModelIndex, QObject, Qt

from gridcore.core.pipeline.values import get_field
from gridcore.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from gridcore.app.grid import DataGrid
    from gridcore.models.column import ColumnDefinition

logger = get_cached_logger(__name__)


class QtGridTableModel(QAbstractTableModel):
    """Read/write Qt model for the rows a DataGrid currently shows."""

    def __init__(self, grid: DataGrid, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._grid = grid
        self._rows: list[Any] = grid.get_visible_data()
        self._columns: list[ColumnDefinition] = grid.get_visible_columns()

        grid.view_changed.connect(self._on_view_changed)
        grid.store.columns.columns_changed.connect(self._on_columns_changed)
        logger.debug("QtGridTableModel attached to grid", extra={"dev_only": True})

    # ==================== Grid notifications ====================

    def _on_view_changed(self, _view: Any = None) -> None:
        self.beginResetModel()
        self._rows = self._grid.get_visible_data()
        self.endResetModel()

    def _on_columns_changed(self, _columns: Any = None) -> None:
        self.beginResetModel()
        self._columns = self._grid.get_visible_columns()
        self._rows = self._grid.get_visible_data()
        self.endResetModel()

    # ==================== Qt model interface ====================

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: B008
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: B008
        if parent.isValid():
            return 0
        return len(self._columns)

    def column_at(self, section: int) -> ColumnDefinition | None:
        if 0 <= section < len(self._columns):
            return self._columns[section]
        return None

    def row_at(self, row: int) -> Any | None:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        if not index.isValid():
            return None
        row = self.row_at(index.row())
        column = self.column_at(index.column())
        if row is None or column is None:
            return None

        if role == Qt.DisplayRole:
            value = self._grid.format_cell(row, column.field)
            return "" if value is None else str(value)
        if role == Qt.EditRole:
            return get_field(row, column.field)
        return None

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole) -> Any:
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            column = self.column_at(section)
            return column.title if column else None
        return section + 1

    def flags(self, index: QModelIndex) -> Qt.ItemFlags:
        if not index.isValid():
            return Qt.NoItemFlags
        base = Qt.ItemIsEnabled | Qt.ItemIsSelectable
        column = self.column_at(index.column())
        row = self.row_at(index.row())
        if column is not None and row is not None and self._grid.cells.is_editable(column, row):
            base |= Qt.ItemIsEditable
        return base

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.EditRole) -> bool:
        if role != Qt.EditRole or not index.isValid():
            return False
        row = self.row_at(index.row())
        column = self.column_at(index.column())
        if row is None or column is None:
            return False
        identity = self._grid.store.identity_for(row)
        if identity is None:
            return False
        # edit_cell triggers a view refresh, which resets this model
        return self._grid.edit_cell(identity, column.field, value)

    def sort(self, column: int, order: Qt.SortOrder = Qt.AscendingOrder) -> None:
        definition = self.column_at(column)
        if definition is None:
            return
        direction = "desc" if order == Qt.DescendingOrder else "asc"
        self._grid.set_sort([(definition.field, direction)])
