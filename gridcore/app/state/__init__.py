"""Grid state management.

Qt-free state containers for rows, columns and selection.
"""

from gridcore.app.state.column_store import ColumnStore
from gridcore.app.state.identity import RowPosition, row_identity
from gridcore.app.state.selection_store import SelectionStore
from gridcore.app.state.table_store import TableStore

__all__ = ["ColumnStore", "RowPosition", "SelectionStore", "TableStore", "row_identity"]
