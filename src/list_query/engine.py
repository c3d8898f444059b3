"""ListQueryEngine: query params -> validated conditions, sort, limit and offset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .conditions import Condition, FilterConditionBuilder
from .config import DEFAULT_CONFIG, ListQueryConfig
from .pagination import PaginationParser, calculate_limit_offset
from .response import build_paginated_response
from .syntax import BracketFilterSyntax, FilterSyntax
from .types import ListQuery, SortSpec

if TYPE_CHECKING:
    from .response import PaginatedResponse, T
    from .whitelist import FieldWhitelist

logger = logging.getLogger("list_query.engine")


@dataclass(frozen=True)
class ExecutableListQuery:
    """Everything the caller needs to run the count and data queries.

    Attributes:
        query: The parsed request, filters already validated.
        conditions: Predicates to AND together, in filter order. The count
            query and the data query must both use all of them.
        sort: Validated sort.
        limit: Page size for the data query; ``None`` means no LIMIT.
        offset: Rows to skip in the data query.
    """

    query: ListQuery
    conditions: tuple[Condition, ...]
    sort: SortSpec
    limit: int | None
    offset: int

    @property
    def is_unpaginated(self) -> bool:
        return self.limit is None


class ListQueryEngine:
    """Parse and validate list query params for one resource.

    Holds only read-only collaborators, so one instance serves concurrent
    requests.

    Example::

        users = ListQueryEngine(
            FieldWhitelist(
                sort_fields={"email", "createdAt"},
                filter_fields={"email", "role", "isActive"},
                default_sort=SortSpec("createdAt", SortOrder.DESC),
            )
        )
        executable = users.build(request.query_params)
    """

    def __init__(
        self,
        whitelist: FieldWhitelist,
        config: ListQueryConfig | None = None,
        *,
        syntax: FilterSyntax | None = None,
        condition_builder: FilterConditionBuilder | None = None,
    ) -> None:
        self._whitelist = whitelist
        self._config = config or DEFAULT_CONFIG
        self._syntax = syntax or BracketFilterSyntax(self._config.filter_key)
        self._pagination = PaginationParser(self._config)
        self._conditions = condition_builder or FilterConditionBuilder()

    @property
    def whitelist(self) -> FieldWhitelist:
        return self._whitelist

    @property
    def config(self) -> ListQueryConfig:
        return self._config

    def parse(self, query_params: Any) -> ListQuery:
        """Parse without allowlist checks. Only malformed filter values raise."""
        pagination, sort = self._pagination.parse(query_params)
        filters = self._syntax.parse_filters(query_params)
        return ListQuery(pagination=pagination, sort=sort, filters=tuple(filters))

    def build(self, query_params: Any) -> ExecutableListQuery:
        """Parse, validate and translate; raises ValidationError before any I/O."""
        query = self.parse(query_params)
        return self.prepare(query)

    def prepare(self, query: ListQuery) -> ExecutableListQuery:
        """Validate an already parsed query and translate it."""
        self._whitelist.check_filters(query.filters)
        sort = self._whitelist.resolve_sort(query.sort)
        conditions = self._conditions.build_all(query.filters)
        limit, offset = calculate_limit_offset(query.pagination)
        logger.debug(
            "Built list query: %d condition(s), sort=%s %s, limit=%s, offset=%d",
            len(conditions),
            sort.field,
            sort.order.value,
            limit,
            offset,
        )
        return ExecutableListQuery(
            query=query,
            conditions=conditions,
            sort=sort,
            limit=limit,
            offset=offset,
        )

    @staticmethod
    def build_response(
        data: list[T], total: int, executable: ExecutableListQuery
    ) -> PaginatedResponse[T]:
        return build_paginated_response(data, total, executable.query.pagination)
