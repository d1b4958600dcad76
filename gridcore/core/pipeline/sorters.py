"""Module: sorters.py

Date: 2026-02-10

Sort stage.

Column sorter specs are resolved once, when columns are configured, into
ResolvedSorter objects. The sort itself is a stable multi-key sort: the first
sorter entry whose comparator returns non-zero decides the order, and rows that
tie on every key keep their pre-sort order.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any

from gridcore.core.pipeline.values import get_field, to_number, to_timestamp
from gridcore.models.column import ColumnDefinition, CustomSorter, NamedSorter
from gridcore.models.query import SortDirection, SorterEntry
from gridcore.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from gridcore.app.ports.diagnostics import DiagnosticsSink

logger = get_cached_logger(__name__)

# (a, b, row_a, row_b, direction) -> ascending comparison
Comparator = Callable[[Any, Any, Any, Any, SortDirection], Any]


def _cmp(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _lower(value: Any) -> str:
    return "" if value is None else str(value).lower()


def compare_strings(a: Any, b: Any, *_: Any) -> int:
    """Case-insensitive lexical compare; missing values compare as empty text."""
    return _cmp(_lower(a), _lower(b))


def compare_numbers(a: Any, b: Any, *_: Any) -> int:
    """Numeric compare; missing values are 0 and non-numeric values tie."""
    return _cmp(to_number(a, missing=0.0), to_number(b, missing=0.0))


def compare_dates(a: Any, b: Any, *_: Any) -> int:
    """Timestamp compare; invalid or missing dates are the epoch."""
    return _cmp(to_timestamp(a), to_timestamp(b))


BUILTIN_COMPARATORS: dict[str, Comparator] = {
    "string": compare_strings,
    "number": compare_numbers,
    "date": compare_dates,
}


@dataclass(frozen=True)
class ResolvedSorter:
    """Concrete comparator for one column."""

    field: str
    name: str
    compare: Comparator
    is_custom: bool = False


def _custom_comparator(column: ColumnDefinition, callback: Callable[..., Any]) -> Comparator:
    params = dict(column.sorter_params)

    def compare(a: Any, b: Any, row_a: Any, row_b: Any, direction: SortDirection) -> Any:
        return callback(a, b, row_a, row_b, column, direction.value, params)

    return compare


def resolve_sorter(
    column: ColumnDefinition, diagnostics: DiagnosticsSink | None = None
) -> ResolvedSorter | None:
    """Turn a column's sorter spec into a comparator.

    Columns without a sorter resolve to None silently; unknown sorter names
    resolve to None and are reported.
    """
    spec = column.sorter
    if isinstance(spec, CustomSorter):
        return ResolvedSorter(
            column.field, "custom", _custom_comparator(column, spec.callback), is_custom=True
        )
    if isinstance(spec, NamedSorter):
        comparator = BUILTIN_COMPARATORS.get(spec.tag)
        if comparator is None:
            if diagnostics is not None:
                diagnostics.report(
                    "sort", f"Unknown sorter '{spec.tag}' on column '{column.field}'; sorting disabled"
                )
            return None
        return ResolvedSorter(column.field, spec.tag, comparator)
    return None


def resolve_sorters(
    columns: Iterable[ColumnDefinition], diagnostics: DiagnosticsSink | None = None
) -> dict[str, ResolvedSorter]:
    """Map field -> ResolvedSorter for every column with a usable sorter."""
    resolved: dict[str, ResolvedSorter] = {}
    for column in columns:
        if not column.field:
            continue
        sorter = resolve_sorter(column, diagnostics)
        if sorter is not None:
            resolved[column.field] = sorter
    return resolved


def _normalize(result: Any) -> int:
    number = to_number(result)
    if math.isnan(number):
        return 0
    return _cmp(number, 0.0)


def sort_rows(
    rows: Sequence[Any],
    sorters: Sequence[SorterEntry],
    resolved: Mapping[str, ResolvedSorter],
    diagnostics: DiagnosticsSink | None = None,
) -> list[Any]:
    """Return ``rows`` ordered by ``sorters``; the input is not modified.

    Sorter entries whose column has no resolved comparator are skipped. A
    custom comparator that raises counts as a tie for that pair, and the
    failure is reported once per sort.
    """
    keys = [(resolved[entry.column], entry.dir) for entry in sorters if entry.column in resolved]
    if not keys:
        return list(rows)

    failed: set[str] = set()

    def compare_rows(row_a: Any, row_b: Any) -> int:
        for sorter, direction in keys:
            a = get_field(row_a, sorter.field)
            b = get_field(row_b, sorter.field)
            try:
                result = _normalize(sorter.compare(a, b, row_a, row_b, direction))
            except Exception as e:
                if sorter.field not in failed:
                    failed.add(sorter.field)
                    if diagnostics is not None:
                        diagnostics.report(
                            "sort", f"Comparator for column '{sorter.field}' failed", e
                        )
                    else:
                        logger.warning("Comparator for column '%s' failed: %s", sorter.field, e)
                result = 0
            if result:
                return -result if direction is SortDirection.DESC else result
        return 0

    # sorted() is stable, which keeps tied rows in source order
    return sorted(rows, key=cmp_to_key(compare_rows))
