"""Module: identity.py

Date: 2026-02-10

Row identity: the index field's value when the row carries it, otherwise
the row's position in the authoritative collection.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, order=True)
class RowPosition:
    """Positional identity for rows without a usable index field value."""

    index: int

    def shifted(self, delta: int) -> RowPosition:
        return RowPosition(self.index + delta)


def row_identity(row: Any, position: int, index_field: str) -> Hashable:
    """Identity of ``row`` sitting at ``position``."""
    if isinstance(row, Mapping):
        value = row.get(index_field)
    else:
        value = getattr(row, index_field, None)
    if value is None or not isinstance(value, Hashable):
        return RowPosition(position)
    return value
