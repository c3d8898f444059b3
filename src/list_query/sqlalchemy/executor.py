"""Async count + page execution for an ``ExecutableListQuery``."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import func, select

from list_query.response import PaginatedResponse, build_paginated_response

from .compiler import SQLAlchemyPredicateCompiler
from .scopes import combine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import ColumnElement, Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from list_query.engine import ExecutableListQuery

M = TypeVar("M")

logger = logging.getLogger("list_query.sqlalchemy.executor")


class SQLAlchemyListQueryExecutor(Generic[M]):
    """
    Run an :class:`ExecutableListQuery` as a count query plus a data query.

    Both statements are built from one where clause (engine conditions AND
    ``base_conditions``), so ``total`` always matches the rows it describes::

        executable = engine.build(request.query_params)
        page = await executor.execute(session, executable)
        return page.to_dict()

    Callers that run statements themselves can use :meth:`build_statements`
    and :func:`~list_query.response.build_paginated_response`.
    """

    def __init__(
        self,
        model: type[M],
        *,
        compiler: SQLAlchemyPredicateCompiler | None = None,
        base_conditions: Sequence[ColumnElement[bool]] = (),
    ) -> None:
        self.model = model
        self._compiler = compiler or SQLAlchemyPredicateCompiler(model)
        self._base_conditions = tuple(base_conditions)

    def where_clause(
        self, executable: ExecutableListQuery
    ) -> ColumnElement[bool] | None:
        return combine(
            *self._base_conditions, self._compiler.compile(executable.conditions)
        )

    def build_statements(
        self, executable: ExecutableListQuery
    ) -> tuple[Select[Any], Select[Any]]:
        """Return ``(count_stmt, data_stmt)`` sharing the same where clause."""
        where = self.where_clause(executable)

        count_stmt = select(func.count()).select_from(self.model)
        data_stmt = select(self.model)
        if where is not None:
            count_stmt = count_stmt.where(where)
            data_stmt = data_stmt.where(where)

        data_stmt = data_stmt.order_by(self._compiler.order_by(executable.sort))
        if executable.limit is not None:
            data_stmt = data_stmt.limit(executable.limit).offset(executable.offset)
        return count_stmt, data_stmt

    async def execute(
        self, session: AsyncSession, executable: ExecutableListQuery
    ) -> PaginatedResponse[M]:
        count_stmt, data_stmt = self.build_statements(executable)
        start = time.perf_counter()
        total = (await session.execute(count_stmt)).scalar_one()
        rows: list[M] = []
        # A page past the end needs no data query.
        if executable.limit is None or executable.offset < total:
            rows = list((await session.execute(data_stmt)).scalars().all())
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Listed %s: %d of %d row(s) in %.2fms",
            getattr(self.model, "__name__", self.model),
            len(rows),
            total,
            elapsed,
        )
        return build_paginated_response(rows, total, executable.query.pagination)
