"""Module: cell_service.py

Date: 2026-02-10

Cell-level contracts with host callbacks: display formatting and edits.

Formatters, editable predicates and validators are host code. When one of
them raises, the failure goes to the diagnostics sink and the cell falls back
to its raw value (formatting) or keeps its current value (editing).
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TYPE_CHECKING, Any

from gridcore.core.pipeline.values import get_field
from gridcore.utils.events import Observable, Signal
from gridcore.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from gridcore.app.ports.diagnostics import DiagnosticsSink
    from gridcore.app.state.table_store import TableStore
    from gridcore.models.column import ColumnDefinition

logger = get_cached_logger(__name__)


class CellService(Observable):
    """Formats cell values and applies cell edits to the table store.

    Signals:
        cell_edited: (identity, field, old_value, new_value)
    """

    cell_edited = Signal(object, str, object, object)

    def __init__(self, store: TableStore) -> None:
        super().__init__()
        self._store = store

    @property
    def _diagnostics(self) -> DiagnosticsSink:
        return self._store.diagnostics

    def format_cell(self, row: Any, field: str) -> Any:
        """Display value for ``row[field]`` through the column formatter, if callable."""
        value = get_field(row, field)
        column = self._store.columns.get_column(field)
        if column is None or not callable(column.formatter):
            return value
        try:
            return column.formatter(value, row, dict(column.formatter_params))
        except Exception as e:
            self._diagnostics.report("format", f"Formatter for column '{field}' failed", e)
            return value

    def is_editable(self, column: ColumnDefinition, row: Any) -> bool:
        if callable(column.editable):
            try:
                return bool(column.editable(row, column))
            except Exception as e:
                self._diagnostics.report(
                    "edit", f"Editable check for column '{column.field}' failed", e
                )
                return False
        return column.has_editor

    def _validate(self, column: ColumnDefinition, value: Any, row: Any) -> bool:
        validator = column.validator
        if validator is None:
            return True
        if not callable(validator):
            logger.debug(
                "Named validator %r on '%s' is not evaluated by the engine",
                validator,
                column.field,
                extra={"dev_only": True},
            )
            return True
        try:
            verdict = validator(value, row, column)
        except Exception as e:
            self._diagnostics.report("edit", f"Validator for column '{column.field}' failed", e)
            return False
        if isinstance(verdict, str):
            logger.info("Edit of '%s' rejected: %s", column.field, verdict)
            return False
        return bool(verdict)

    def edit_cell(self, identity: Hashable, field: str, value: Any) -> bool:
        """Write ``value`` into the row with ``identity`` if the column allows it.

        Returns:
            True if the row was changed

        """
        row = self._store.find_row(identity)
        column = self._store.columns.get_column(field)
        if row is None or column is None:
            logger.debug(
                "edit_cell ignored: row %r / column %r not found",
                identity,
                field,
                extra={"dev_only": True},
            )
            return False
        if not self.is_editable(column, row) or not self._validate(column, value, row):
            return False

        old_value = self._store.set_cell(identity, field, value)
        self.cell_edited.emit(identity, field, old_value, value)
        return True

    def snapshot(self, row: Any) -> Mapping[str, Any]:
        """Formatted values of ``row`` for every visible column."""
        return {
            column.field: self.format_cell(row, column.field)
            for column in self._store.columns.get_visible_columns()
        }
