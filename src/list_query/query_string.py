"""QueryStringBuilder: ListQuery -> query string (pagination links)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from .config import DEFAULT_CONFIG, ListQueryConfig

if TYPE_CHECKING:
    from .types import ListQuery, PaginationResult


class QueryStringBuilder:
    """Render a :class:`ListQuery` back into the wire format.

    Parsing the produced string gives back an equal ``ListQuery``.
    """

    def __init__(self, config: ListQueryConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def build(self, query: ListQuery, *, page: int | None = None) -> str:
        """Produce the query string, optionally for another *page*."""
        cfg = self._config
        params: list[tuple[str, str | int]] = [
            (cfg.page_key, page if page is not None else query.pagination.page),
            (cfg.per_page_key, query.pagination.per_page),
        ]
        if query.sort.field is not None:
            params.append((cfg.sort_by_key, query.sort.field))
        if query.sort.order is not None:
            params.append((cfg.sort_order_key, query.sort.order.value))
        for f in query.filters:
            value = ",".join(f.value) if isinstance(f.value, tuple) else f.value
            params.append((f"{cfg.filter_key}[{f.field}][{f.operator.value}]", value))
        return urlencode(params)

    def links(
        self, query: ListQuery, result: PaginationResult
    ) -> dict[str, str | None]:
        """Query strings for the next and previous pages (``None`` at the edges)."""
        return {
            "next": (
                self.build(query, page=result.page + 1) if result.has_next else None
            ),
            "previous": (
                self.build(query, page=result.page - 1) if result.has_previous else None
            ),
        }
