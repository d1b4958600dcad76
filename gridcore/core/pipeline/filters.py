"""Module: filters.py

Date: 2026-02-10

Filter stage: a row survives when it satisfies every active filter entry.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from gridcore.core.pipeline.values import get_field, strict_equals, stringify, to_number
from gridcore.models.query import FilterEntry, FilterOperator

RowPredicate = Callable[[Any], bool]

comparison_operators = {
    FilterOperator.GREATER_THAN: operator.gt,
    FilterOperator.LESS_THAN: operator.lt,
    FilterOperator.GREATER_OR_EQUAL: operator.ge,
    FilterOperator.LESS_OR_EQUAL: operator.le,
}


def _always(_row: Any) -> bool:
    return True


def build_predicate(entry: FilterEntry) -> RowPredicate:
    """Compile one filter entry into a row predicate.

    Entries with an unknown operator accept every row.
    """
    field = entry.field
    target = entry.value
    op = entry.operator

    if op is None:
        return _always

    if op is FilterOperator.EQUALS:
        return lambda row: strict_equals(get_field(row, field), target)

    if op is FilterOperator.NOT_EQUALS:
        return lambda row: not strict_equals(get_field(row, field), target)

    if op is FilterOperator.CONTAINS:
        needle = stringify(target).lower()
        return lambda row: needle in stringify(get_field(row, field)).lower()

    compare = comparison_operators[op]
    # NaN never satisfies a comparison, so non-numeric rows drop out
    bound = to_number(target)
    return lambda row: compare(to_number(get_field(row, field)), bound)


def filter_rows(rows: Sequence[Any], entries: Iterable[FilterEntry]) -> list[Any]:
    """Return the rows matching all entries, in source order."""
    predicates = [build_predicate(entry) for entry in entries if entry.is_valid]
    if not predicates:
        return list(rows)
    return [row for row in rows if all(predicate(row) for predicate in predicates)]
