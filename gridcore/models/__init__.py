"""gridcore.models package.

Dataclasses and enums shared by the stores, the query pipeline and the loader.
"""

from gridcore.models.column import (
    ColumnDefinition,
    CustomSorter,
    NamedSorter,
    SorterSpec,
    sorter_spec_from,
)
from gridcore.models.errors import FetchError, GridError, InvalidOptionError
from gridcore.models.fetch_result import FetchResult, FetchStatus
from gridcore.models.grid_options import GridOptions
from gridcore.models.pagination_info import PaginationInfo
from gridcore.models.query import FilterEntry, FilterOperator, SortDirection, SorterEntry

__all__ = [
    "ColumnDefinition",
    "CustomSorter",
    "FetchError",
    "FetchResult",
    "FetchStatus",
    "FilterEntry",
    "FilterOperator",
    "GridError",
    "GridOptions",
    "InvalidOptionError",
    "NamedSorter",
    "PaginationInfo",
    "SortDirection",
    "SorterEntry",
    "SorterSpec",
    "sorter_spec_from",
]
