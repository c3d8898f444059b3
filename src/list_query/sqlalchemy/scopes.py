"""
Caller-side scopes ANDed with whatever the engine produces.

The engine only builds the filters a client asked for. Fixed predicates,
such as excluding soft-deleted rows, belong to the data-access layer::

    executor = SQLAlchemyListQueryExecutor(
        User, base_conditions=[not_deleted(User)]
    )

Resources without soft deletes simply omit the scope.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import and_

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


def not_deleted(model: Any, attr: str = "deleted_at") -> ColumnElement[bool]:
    """``<attr> IS NULL``: rows without a deletion marker."""
    column = getattr(model, attr, None)
    if column is None:
        raise AttributeError(f"Model {model!r} has no attribute {attr!r}")
    return cast("ColumnElement[bool]", column.is_(None))


def combine(*conditions: ColumnElement[bool] | None) -> ColumnElement[bool] | None:
    """AND the given conditions, skipping ``None``; ``None`` if nothing is left."""
    valid = [c for c in conditions if c is not None]
    if not valid:
        return None
    if len(valid) == 1:
        return valid[0]
    return and_(*valid)
