"""gridcore - client-side data engine for data-grid components.

Turns a raw row collection into the slice of rows a viewport should render,
given filters, sorters, pagination and progressive loading, and tracks row
selection across all of them.

    from gridcore import DataGrid

    grid = DataGrid(data=rows, columns=[{"field": "age", "sorter": "number"}])
    grid.set_sort([("age", "asc")])
    grid.data  # visible rows
"""

from gridcore.app.grid import DataGrid
from gridcore.app.services.diagnostics import LoggingDiagnostics
from gridcore.app.services.progressive_loader import LoaderState, ProgressiveLoader
from gridcore.app.state.identity import RowPosition
from gridcore.models import (
    ColumnDefinition,
    FetchResult,
    FetchStatus,
    FilterOperator,
    GridOptions,
    InvalidOptionError,
    PaginationInfo,
    SortDirection,
    SorterEntry,
)

__version__ = "0.1.0"

__all__ = [
    "ColumnDefinition",
    "DataGrid",
    "FetchResult",
    "FetchStatus",
    "FilterOperator",
    "GridOptions",
    "InvalidOptionError",
    "LoaderState",
    "LoggingDiagnostics",
    "PaginationInfo",
    "ProgressiveLoader",
    "RowPosition",
    "SortDirection",
    "SorterEntry",
]
