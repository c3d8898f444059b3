"""
Compile list query conditions into SQLAlchemy expressions.

Each operator family is a strategy in ``operators``, looked up through a
``SQLAlchemyOperatorRegistry``. The compiler resolves the public field name
to a model attribute, coerces the raw value to the column type and delegates
to the registry.

Field map
---------
Public field names (the ones in the allowlist and query string) need not
match attribute names. ``field_map={"createdAt": "created_at"}`` resolves
``filter[createdAt][gte]`` against ``Model.created_at``. Unmapped names are
looked up as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, and_, asc, desc

from list_query.exceptions import FieldNotAllowedError

from .coercion import coerce_value
from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from list_query.conditions import Condition
    from list_query.types import SortSpec

    from .strategy import SQLAlchemyOperatorRegistry


class SQLAlchemyPredicateCompiler:
    """Translate conditions and sort for one mapped model.

    Args:
        model: The SQLAlchemy model class (or any object exposing columns
            as attributes, e.g. ``Table.c``).
        registry: Optional custom operator registry. Falls back to
            ``DEFAULT_SQLA_REGISTRY``.
        field_map: Optional public-name -> attribute-name mapping.
    """

    def __init__(
        self,
        model: Any,
        *,
        registry: SQLAlchemyOperatorRegistry | None = None,
        field_map: Mapping[str, str] | None = None,
    ) -> None:
        self._model = model
        self._registry = registry or DEFAULT_SQLA_REGISTRY
        self._field_map = dict(field_map or {})

    @property
    def model(self) -> Any:
        return self._model

    def column(self, field: str) -> Any:
        """Resolve a public field name to a model column."""
        attr = self._field_map.get(field, field)
        column = getattr(self._model, attr, None)
        if column is None or not hasattr(column, "type"):
            raise FieldNotAllowedError([field])
        return column

    def compile_condition(self, condition: Condition) -> ColumnElement[bool]:
        strategy = self._registry.require(condition.op)
        column = self.column(condition.field)
        value = condition.value
        if strategy.coerces_value and value is not None:
            value = coerce_value(condition.field, column, value)
        return strategy.apply(condition.op, column, value)

    def compile(self, conditions: Sequence[Condition]) -> ColumnElement[bool] | None:
        """AND of all *conditions*; ``None`` when there are none."""
        clauses = [self.compile_condition(c) for c in conditions]
        if not clauses:
            return None
        if len(clauses) == 1:
            return clauses[0]
        return and_(*clauses)

    def order_by(self, sort: SortSpec) -> Any:
        column = self.column(sort.field)
        return desc(column) if sort.descending else asc(column)
