"""Filter operators accepted on the wire and the canonical condition operators."""

from __future__ import annotations

from enum import Enum


class FilterOperator(str, Enum):
    """Operators accepted in ``filter[field][operator]`` query keys."""

    EQ = "eq"
    NE = "ne"
    LIKE = "like"
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    IN = "in"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IS_NULL = "isNull"
    NOT_NULL = "notNull"

    @property
    def is_list(self) -> bool:
        """Value is a comma-separated list."""
        return self is FilterOperator.IN

    @property
    def is_null_check(self) -> bool:
        """Value must be the literal ``"true"``."""
        return self in (FilterOperator.IS_NULL, FilterOperator.NOT_NULL)

    @property
    def is_pattern(self) -> bool:
        """Value ends up as a LIKE pattern."""
        return self in _PATTERN_OPERATORS

    @classmethod
    def lookup(cls, raw: str) -> FilterOperator | None:
        """Return the operator named *raw*, or ``None`` if unknown."""
        try:
            return cls(raw)
        except ValueError:
            return None


_PATTERN_OPERATORS = frozenset(
    {
        FilterOperator.LIKE,
        FilterOperator.CONTAINS,
        FilterOperator.STARTS_WITH,
        FilterOperator.ENDS_WITH,
    }
)


class ConditionOp(str, Enum):
    """Backend-facing operators a :class:`~list_query.conditions.Condition` uses.

    ``contains``/``startsWith``/``endsWith`` collapse into ``LIKE`` with a
    wrapped pattern, so backends only implement this smaller set.
    """

    EQ = "eq"
    NE = "ne"
    LIKE = "like"
    IN = "in"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"
