"""
FilterConditionBuilder: validated filters -> store-agnostic conditions.

A :class:`Condition` is the predicate handed to a backend compiler (see
``list_query.sqlalchemy``). Pattern operators collapse into ``LIKE``:

    contains "x"    -> like "%x%"
    startsWith "x"  -> like "x%"
    endsWith "x"    -> like "%x"

Literal ``%`` and ``_`` in the value are not escaped, so they keep their
wildcard meaning inside the pattern. Values are only ever bound as query
parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import FilterValueError
from .operators import ConditionOp, FilterOperator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .types import Filter, FilterValue

NULL_CHECK_VALUE = "true"

_DIRECT_OPS: dict[FilterOperator, ConditionOp] = {
    FilterOperator.EQ: ConditionOp.EQ,
    FilterOperator.NE: ConditionOp.NE,
    FilterOperator.GT: ConditionOp.GT,
    FilterOperator.GTE: ConditionOp.GTE,
    FilterOperator.LT: ConditionOp.LT,
    FilterOperator.LTE: ConditionOp.LTE,
}

_PATTERN_TEMPLATES: dict[FilterOperator, str] = {
    FilterOperator.LIKE: "{}",
    FilterOperator.CONTAINS: "%{}%",
    FilterOperator.STARTS_WITH: "{}%",
    FilterOperator.ENDS_WITH: "%{}",
}


@dataclass(frozen=True)
class Condition:
    """One comparison on one field, ready for a backend to translate."""

    field: str
    op: ConditionOp
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the ``{"op", "attr", "val"}`` AST form."""
        val = list(self.value) if isinstance(self.value, tuple) else self.value
        return {"op": self.op.value, "attr": self.field, "val": val}


class FilterConditionBuilder:
    """Map each ``(field, operator, value)`` filter to a :class:`Condition`."""

    def build(self, flt: Filter) -> Condition:
        op = flt.operator
        if op in _DIRECT_OPS:
            return Condition(flt.field, _DIRECT_OPS[op], self._scalar(flt))
        if op in _PATTERN_TEMPLATES:
            pattern = _PATTERN_TEMPLATES[op].format(self._scalar(flt))
            return Condition(flt.field, ConditionOp.LIKE, pattern)
        if op is FilterOperator.IN:
            return Condition(flt.field, ConditionOp.IN, self._members(flt))
        if op.is_null_check:
            self._require_true(flt)
            target = (
                ConditionOp.IS_NULL
                if op is FilterOperator.IS_NULL
                else ConditionOp.IS_NOT_NULL
            )
            return Condition(flt.field, target)
        raise FilterValueError(flt.field, f"Unsupported filter operator {op.value!r}")

    def build_all(self, filters: Iterable[Filter]) -> tuple[Condition, ...]:
        """Conditions for *filters*, in order; the caller ANDs them."""
        return tuple(self.build(f) for f in filters)

    @staticmethod
    def _scalar(flt: Filter) -> str:
        value: FilterValue = flt.value
        if isinstance(value, tuple):
            raise FilterValueError(
                flt.field,
                f"Filter {flt.operator.value!r} on {flt.field!r} takes a single value",
            )
        return value

    @staticmethod
    def _members(flt: Filter) -> tuple[str, ...]:
        value = flt.value
        members = (value,) if isinstance(value, str) else tuple(value)
        members = tuple(m for m in members if m != "")
        if not members:
            raise FilterValueError(
                flt.field, f"Filter 'in' on {flt.field!r} needs at least one value"
            )
        return members

    @staticmethod
    def _require_true(flt: Filter) -> None:
        if not isinstance(flt.value, str) or flt.value.strip() != NULL_CHECK_VALUE:
            raise FilterValueError(
                flt.field,
                f"Filter {flt.operator.value!r} on {flt.field!r} only accepts "
                f"{NULL_CHECK_VALUE!r}",
            )
