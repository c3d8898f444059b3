"""SQLAlchemy backend: condition compilation, caller scopes, count + data execution."""

from __future__ import annotations

from .coercion import coerce_value, column_python_type
from .compiler import SQLAlchemyPredicateCompiler
from .executor import SQLAlchemyListQueryExecutor
from .operators import DEFAULT_SQLA_REGISTRY, build_default_sqla_registry
from .scopes import combine, not_deleted
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyListQueryExecutor",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "SQLAlchemyPredicateCompiler",
    "build_default_sqla_registry",
    "coerce_value",
    "column_python_type",
    "combine",
    "not_deleted",
]
