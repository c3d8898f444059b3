"""
Strategy interface for compiling conditions into SQLAlchemy clauses.

A strategy owns one family of :class:`~list_query.operators.ConditionOp`
members (comparisons, patterns, membership, null checks). The registry maps
each operator to the strategy that handles it; registering a strategy for an
operator that is already taken replaces the previous one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from list_query.operators import ConditionOp


class SQLAlchemyOperator(ABC):
    """Compile the condition operators listed in ``handles``."""

    handles: ClassVar[frozenset[ConditionOp]]

    #: Whether the value is converted to the column's Python type first.
    coerces_value: ClassVar[bool] = True

    @abstractmethod
    def apply(self, op: ConditionOp, column: Any, value: Any) -> ColumnElement[bool]:
        """Build the clause for ``column <op> value``; *op* is one of ``handles``."""


class SQLAlchemyOperatorRegistry:
    """Operator -> strategy lookup used by the predicate compiler."""

    def __init__(self, *strategies: SQLAlchemyOperator) -> None:
        self._by_op: dict[ConditionOp, SQLAlchemyOperator] = {}
        self.register_all(*strategies)

    def register_all(self, *strategies: SQLAlchemyOperator) -> None:
        for strategy in strategies:
            for op in strategy.handles:
                self._by_op[op] = strategy

    def require(self, op: ConditionOp) -> SQLAlchemyOperator:
        """
        Strategy for *op*.

        Raises:
            ValueError: If no registered strategy handles *op*.
        """
        try:
            return self._by_op[op]
        except KeyError:
            raise ValueError(f"Unsupported operator for SQLAlchemy: {op}") from None
