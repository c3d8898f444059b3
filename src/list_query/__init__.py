"""Parse, validate and paginate list endpoint query strings."""

from __future__ import annotations

from .adapter import IPredicateCompiler
from .conditions import Condition, FilterConditionBuilder
from .config import (
    ALL_ROWS,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    ListQueryConfig,
)
from .engine import ExecutableListQuery, ListQueryEngine
from .exceptions import (
    FieldNotAllowedError,
    FilterParseError,
    FilterValueError,
    ListQueryError,
    ValidationError,
)
from .operators import ConditionOp, FilterOperator
from .pagination import PaginationParser, calculate_limit_offset, calculate_pagination
from .query_string import QueryStringBuilder
from .response import PaginatedResponse, build_paginated_response
from .syntax import BracketFilterSyntax, FilterSyntax
from .types import (
    Filter,
    ListQuery,
    PaginationRequest,
    PaginationResult,
    SortOrder,
    SortRequest,
    SortSpec,
)
from .whitelist import FieldWhitelist

__all__ = [
    "ALL_ROWS",
    "BracketFilterSyntax",
    "Condition",
    "ConditionOp",
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "ExecutableListQuery",
    "FieldNotAllowedError",
    "FieldWhitelist",
    "Filter",
    "FilterConditionBuilder",
    "FilterOperator",
    "FilterParseError",
    "FilterSyntax",
    "FilterValueError",
    "IPredicateCompiler",
    "ListQuery",
    "ListQueryConfig",
    "ListQueryEngine",
    "ListQueryError",
    "MAX_PER_PAGE",
    "PaginatedResponse",
    "PaginationParser",
    "PaginationRequest",
    "PaginationResult",
    "QueryStringBuilder",
    "SortOrder",
    "SortRequest",
    "SortSpec",
    "ValidationError",
    "build_paginated_response",
    "calculate_limit_offset",
    "calculate_pagination",
]
