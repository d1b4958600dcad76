"""Module: query.py

Date: 2026-02-10

Sorter and filter entries held by the table store.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SortDirection(Enum):
    """Direction of a sorter entry."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: SortDirection | str) -> SortDirection:
        """Parse ``"asc"``/``"desc"`` (any case). Unknown values sort ascending."""
        if isinstance(value, SortDirection):
            return value
        return cls.DESC if str(value).strip().lower() == "desc" else cls.ASC


class FilterOperator(Enum):
    """Operators understood by the filter stage."""

    EQUALS = "="
    NOT_EQUALS = "!="
    CONTAINS = "like"
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_OR_EQUAL = ">="
    LESS_OR_EQUAL = "<="

    @classmethod
    def from_token(cls, token: Any) -> FilterOperator | None:
        """Resolve an operator token or alias. Returns None for unknown tokens."""
        if isinstance(token, FilterOperator):
            return token
        return _OPERATOR_ALIASES.get(str(token).strip().lower())


_OPERATOR_ALIASES = {
    "=": FilterOperator.EQUALS,
    "==": FilterOperator.EQUALS,
    "equals": FilterOperator.EQUALS,
    "eq": FilterOperator.EQUALS,
    "!=": FilterOperator.NOT_EQUALS,
    "not_equals": FilterOperator.NOT_EQUALS,
    "ne": FilterOperator.NOT_EQUALS,
    "like": FilterOperator.CONTAINS,
    "contains": FilterOperator.CONTAINS,
    ">": FilterOperator.GREATER_THAN,
    "gt": FilterOperator.GREATER_THAN,
    "<": FilterOperator.LESS_THAN,
    "lt": FilterOperator.LESS_THAN,
    ">=": FilterOperator.GREATER_OR_EQUAL,
    "gte": FilterOperator.GREATER_OR_EQUAL,
    "<=": FilterOperator.LESS_OR_EQUAL,
    "lte": FilterOperator.LESS_OR_EQUAL,
}


@dataclass(frozen=True)
class SorterEntry:
    """One key of a multi-key sort. The first entry is the primary key."""

    column: str
    dir: SortDirection = SortDirection.ASC

    @classmethod
    def coerce(cls, value: Any) -> SorterEntry:
        """Build an entry from a SorterEntry, a ``(column, dir)`` pair or a mapping."""
        if isinstance(value, SorterEntry):
            return value
        if isinstance(value, dict):
            column = value.get("column", value.get("field"))
            return cls(str(column), SortDirection.parse(value.get("dir", "asc")))
        column, direction = value
        return cls(str(column), SortDirection.parse(direction))

    def as_dict(self) -> dict[str, str]:
        return {"column": self.column, "dir": self.dir.value}


@dataclass(frozen=True)
class FilterEntry:
    """Active filter on one field.

    ``operator`` is None when ``type`` is not a known operator token; such an
    entry accepts every row.
    """

    field: str
    type: str
    value: Any
    operator: FilterOperator | None = None

    @classmethod
    def create(cls, field: str, type_: Any, value: Any) -> FilterEntry:
        operator = FilterOperator.from_token(type_)
        token = operator.value if operator is not None else str(type_)
        return cls(field=field, type=token, value=value, operator=operator)

    @property
    def is_valid(self) -> bool:
        return self.operator is not None

    def as_dict(self) -> dict[str, Any]:
        return {"field": self.field, "type": self.type, "value": self.value}
