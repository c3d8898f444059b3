"""
Resolve raw string filter values against a column's Python type.

Filter values always arrive as strings. Before binding, the value is
converted according to the column type (``bool``, ``int``, ``float``,
``Decimal``, ``date``, ``datetime``, ``UUID``, ``Enum``); other types
pass through unchanged. Every failure surfaces as
:class:`~list_query.exceptions.FilterValueError` naming the field, so
driver-specific exceptions never leak out of a bad query string.
"""

from __future__ import annotations

import enum
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from list_query.exceptions import FilterValueError

_TRUE = frozenset({"1", "true", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "no", "n", "off"})


def column_python_type(column: Any) -> type | None:
    """Python type of a column or mapped attribute, ``None`` when unknown."""
    col_type = getattr(column, "type", None)
    if col_type is None:
        return None
    try:
        return col_type.python_type  # type: ignore[no-any-return]
    except NotImplementedError:
        return None


def coerce_value(field: str, column: Any, value: Any) -> Any:
    """Convert *value* (a string or tuple of strings) for *column*."""
    python_type = column_python_type(column)
    if python_type is None or python_type is str:
        return value
    if isinstance(value, tuple):
        return tuple(_coerce_scalar(field, python_type, v) for v in value)
    return _coerce_scalar(field, python_type, value)


def _coerce_scalar(field: str, python_type: type, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip()
    if python_type is bool:
        return _to_bool(field, text)
    if issubclass(python_type, enum.Enum):
        return _to_enum(field, python_type, text)
    converter = _CONVERTERS.get(python_type)
    if converter is None:
        return value
    kind, func = converter
    if not text:
        raise _bad_value(field, kind, value)
    try:
        return func(text)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise _bad_value(field, kind, value) from e


def _to_bool(field: str, text: str) -> bool:
    lowered = text.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise _bad_value(field, "boolean", text)


def _to_enum(field: str, enum_cls: type[enum.Enum], text: str) -> enum.Enum:
    for member in enum_cls:
        if str(member.value) == text or member.name == text:
            return member
    raise _bad_value(field, enum_cls.__name__, text)


def _to_date(text: str) -> date:
    if "T" in text or " " in text:
        return _to_datetime(text).date()
    return date.fromisoformat(text)


def _to_datetime(text: str) -> datetime:
    # Date-only values mean the start of that day.
    if len(text) == 10 and "T" not in text and " " not in text:
        return datetime.combine(date.fromisoformat(text), datetime.min.time())
    return datetime.fromisoformat(text.replace("Z", "+00:00"))


_CONVERTERS: dict[type, tuple[str, Any]] = {
    int: ("integer", int),
    float: ("number", float),
    Decimal: ("decimal", Decimal),
    date: ("date", _to_date),
    datetime: ("datetime", _to_datetime),
    uuid.UUID: ("UUID", uuid.UUID),
}


def _bad_value(field: str, kind: str, value: Any) -> FilterValueError:
    return FilterValueError(
        field, f"Invalid {kind} value {value!r} for filter field {field!r}"
    )
