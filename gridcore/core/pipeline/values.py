"""Module: values.py

Date: 2026-02-10

Value access and coercion shared by the filter and sort stages.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from numbers import Number
from typing import Any

NAN = float("nan")


def get_field(row: Any, field: str) -> Any:
    """Read ``field`` from a mapping row or an attribute-style record."""
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)


def is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def to_number(value: Any, missing: float = NAN) -> float:
    """Coerce to float. Non-numeric input becomes NaN, ``None`` becomes ``missing``."""
    if value is None:
        return missing
    if isinstance(value, bool):
        return float(value)
    if is_number(value):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        except (TypeError, ValueError):
            return NAN
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return NAN
        try:
            return float(text)
        except ValueError:
            return NAN
    return NAN


def strict_equals(left: Any, right: Any) -> bool:
    """Equality without cross-type coercion (``1 != True``, ``1 != "1"``, ``1 == 1.0``)."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_number(left) and is_number(right):
        return left == right
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_timestamp(value: Any) -> float:
    """Milliseconds since the epoch. Invalid or missing input is the epoch itself.

    Naive datetimes are read as UTC so results do not depend on the host zone.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif is_number(value):
        try:
            number = float(value)
        except (OverflowError, TypeError, ValueError):
            return 0.0
        return number if math.isfinite(number) else 0.0
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            return 0.0
    else:
        return 0.0

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.timestamp() * 1000.0
