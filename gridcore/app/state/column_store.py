"""Module: column_store.py

Date: 2026-02-10

Column definitions, order and visibility.

Responsibilities:
    - Replace, add, delete and move column definitions
    - Track column visibility for the renderer
    - Notify listeners so sorter comparators can be re-resolved
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from gridcore.models.column import ColumnDefinition
from gridcore.utils.events import Observable, Signal
from gridcore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

ColumnLike = ColumnDefinition | Mapping[str, Any]


class ColumnStore(Observable):
    """Ordered column definitions keyed by field.

    Signals:
        columns_changed: list of ColumnDefinition after any change
    """

    columns_changed = Signal(list)

    def __init__(self, columns: Iterable[ColumnLike] = ()) -> None:
        super().__init__()
        self._columns: list[ColumnDefinition] = [ColumnDefinition.coerce(c) for c in columns]

    def get_columns(self) -> list[ColumnDefinition]:
        return self._columns.copy()

    def get_visible_columns(self) -> list[ColumnDefinition]:
        return [column for column in self._columns if column.visible]

    def get_column(self, field: str) -> ColumnDefinition | None:
        for column in self._columns:
            if column.field == field:
                return column
        return None

    def _index_of(self, field: str) -> int:
        for i, column in enumerate(self._columns):
            if column.field == field:
                return i
        return -1

    def set_columns(self, columns: Iterable[ColumnLike]) -> None:
        """Replace all column definitions. Row data is untouched."""
        self._columns = [ColumnDefinition.coerce(c) for c in columns]
        logger.debug("Columns replaced: %d columns", len(self._columns), extra={"dev_only": True})
        self._emit_changed()

    # =====================================
    # Visibility
    # =====================================

    def _set_visibility(self, field: str, visible: bool | None) -> bool:
        index = self._index_of(field)
        if index < 0:
            logger.debug("Visibility change for unknown column '%s' ignored", field)
            return False
        column = self._columns[index]
        new_visible = (not column.visible) if visible is None else visible
        if new_visible == column.visible:
            return False
        self._columns[index] = column.with_visibility(new_visible)
        self._emit_changed()
        return True

    def show_column(self, field: str) -> bool:
        return self._set_visibility(field, True)

    def hide_column(self, field: str) -> bool:
        return self._set_visibility(field, False)

    def toggle_column(self, field: str) -> bool:
        return self._set_visibility(field, None)

    # =====================================
    # Structure
    # =====================================

    def add_column(
        self, column: ColumnLike, before: bool = False, target: str | None = None
    ) -> ColumnDefinition:
        """Insert a column next to ``target``, or at the start/end when no target is found.

        A column whose field already exists replaces the old definition in place.
        """
        definition = ColumnDefinition.coerce(column)
        existing = self._index_of(definition.field)
        if existing >= 0:
            self._columns[existing] = definition
            self._emit_changed()
            return definition

        target_index = self._index_of(target) if target is not None else -1
        if target_index < 0:
            position = 0 if before else len(self._columns)
        else:
            position = target_index if before else target_index + 1
        self._columns.insert(position, definition)
        self._emit_changed()
        return definition

    def delete_column(self, field: str) -> bool:
        index = self._index_of(field)
        if index < 0:
            return False
        del self._columns[index]
        self._emit_changed()
        return True

    def move_column(self, field: str, target: str, before: bool = False) -> bool:
        """Move ``field`` next to ``target``. Unknown fields leave the order unchanged."""
        if field == target:
            return False
        index = self._index_of(field)
        if index < 0 or self._index_of(target) < 0:
            return False
        column = self._columns.pop(index)
        target_index = self._index_of(target)
        self._columns.insert(target_index if before else target_index + 1, column)
        self._emit_changed()
        return True

    def _emit_changed(self) -> None:
        self.columns_changed.emit(self.get_columns())
