"""
Built-in strategies covering every :class:`ConditionOp`.

``contains``/``startsWith``/``endsWith`` reach this layer as ``LIKE`` with a
wrapped pattern, so four strategies are enough::

    registry = build_default_sqla_registry()
    registry.require(ConditionOp.GTE).apply(ConditionOp.GTE, User.age, 30)
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any, ClassVar, cast

from list_query.operators import ConditionOp

from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy import ColumnElement

_COMPARISONS: dict[ConditionOp, Callable[[Any, Any], Any]] = {
    ConditionOp.EQ: operator.eq,
    ConditionOp.NE: operator.ne,
    ConditionOp.GT: operator.gt,
    ConditionOp.GTE: operator.ge,
    ConditionOp.LT: operator.lt,
    ConditionOp.LTE: operator.le,
}


class ComparisonOperator(SQLAlchemyOperator):
    """``=``, ``!=``, ``>``, ``>=``, ``<``, ``<=`` against a coerced value."""

    handles: ClassVar[frozenset[ConditionOp]] = frozenset(_COMPARISONS)

    def apply(self, op: ConditionOp, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", _COMPARISONS[op](column, value))


class PatternOperator(SQLAlchemyOperator):
    # Patterns are matched as text whatever the column type.
    handles: ClassVar[frozenset[ConditionOp]] = frozenset({ConditionOp.LIKE})
    coerces_value: ClassVar[bool] = False

    def apply(self, op: ConditionOp, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.like(value))


class MembershipOperator(SQLAlchemyOperator):
    handles: ClassVar[frozenset[ConditionOp]] = frozenset({ConditionOp.IN})

    def apply(self, op: ConditionOp, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.in_(list(value)))


class NullCheckOperator(SQLAlchemyOperator):
    handles: ClassVar[frozenset[ConditionOp]] = frozenset(
        {ConditionOp.IS_NULL, ConditionOp.IS_NOT_NULL}
    )
    coerces_value: ClassVar[bool] = False

    def apply(self, op: ConditionOp, column: Any, value: Any) -> ColumnElement[bool]:
        if op is ConditionOp.IS_NULL:
            return cast("ColumnElement[bool]", column.is_(None))
        return cast("ColumnElement[bool]", column.is_not(None))


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with the built-in strategies."""
    return SQLAlchemyOperatorRegistry(
        ComparisonOperator(),
        PatternOperator(),
        MembershipOperator(),
        NullCheckOperator(),
    )


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "ComparisonOperator",
    "MembershipOperator",
    "NullCheckOperator",
    "PatternOperator",
    "build_default_sqla_registry",
]
