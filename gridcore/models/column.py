"""Module: column.py

Date: 2026-02-10

Column definitions.

The engine reads ``field``, the sorter spec and (for the editing and
formatting contracts) ``editable``, ``validator`` and ``formatter``.
Width hints, CSS class and any unknown host keys are carried through
untouched for the renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

# Host keys mapped onto dataclass fields; anything else lands in ``extra``
_HOST_KEYS = {
    "field": "field",
    "title": "title",
    "sorter": "sorter",
    "sorterParams": "sorter_params",
    "formatter": "formatter",
    "formatterParams": "formatter_params",
    "editable": "editable",
    "editor": "editor",
    "validator": "validator",
    "headerFilter": "header_filter",
    "headerSort": "header_sort",
    "visible": "visible",
    "width": "width",
    "minWidth": "min_width",
    "maxWidth": "max_width",
}


@dataclass(frozen=True)
class NamedSorter:
    """Built-in sorter selected by name (``string``, ``number``, ``date``)."""

    tag: str


@dataclass(frozen=True)
class CustomSorter:
    """Host comparator ``(a, b, row_a, row_b, column, direction, params) -> int``."""

    callback: Callable[..., Any]


SorterSpec = NamedSorter | CustomSorter


def sorter_spec_from(value: Any) -> SorterSpec | None:
    """Tag a raw sorter option as a SorterSpec variant. No sorter stays None."""
    if value is None or isinstance(value, (NamedSorter, CustomSorter)):
        return value
    if callable(value):
        return CustomSorter(value)
    return NamedSorter(str(value).strip().lower())


@dataclass
class ColumnDefinition:
    """Column configuration for one field."""

    field: str
    title: str = ""
    sorter: SorterSpec | None = None
    sorter_params: dict[str, Any] = field(default_factory=dict)
    formatter: Callable[..., Any] | str | None = None
    formatter_params: dict[str, Any] = field(default_factory=dict)
    editable: bool | Callable[..., bool] | None = None
    editor: Any = None
    validator: Callable[..., Any] | None = None
    header_filter: Any = None
    header_sort: bool = True
    visible: bool = True
    width: int | str | None = None
    min_width: int | None = None
    max_width: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.sorter = sorter_spec_from(self.sorter)
        if not self.title:
            self.title = self.field

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ColumnDefinition:
        """Build a column from a host dictionary using camelCase option names."""
        kwargs: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            name = _HOST_KEYS.get(key)
            if name is None:
                extra[key] = value
            else:
                kwargs[name] = value
        kwargs.setdefault("field", "")
        for params_key in ("sorter_params", "formatter_params"):
            if kwargs.get(params_key) is None:
                kwargs.pop(params_key, None)
        return cls(**kwargs, extra=extra)

    @classmethod
    def coerce(cls, value: ColumnDefinition | Mapping[str, Any]) -> ColumnDefinition:
        if isinstance(value, ColumnDefinition):
            return value
        return cls.from_mapping(value)

    @property
    def has_editor(self) -> bool:
        """Whether edits are allowed without consulting a predicate."""
        if self.editable is None:
            return bool(self.editor)
        return bool(self.editable)

    def with_visibility(self, visible: bool) -> ColumnDefinition:
        return replace(self, visible=visible)
