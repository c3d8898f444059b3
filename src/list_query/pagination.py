"""PaginationParser: page, perPage, sortBy and sortOrder params; page arithmetic."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

from .config import ALL_ROWS, DEFAULT_CONFIG, ListQueryConfig
from .syntax import get_param
from .types import PaginationRequest, PaginationResult, SortOrder, SortRequest

# Largest OFFSET a signed 64-bit SQL integer can carry.
MAX_OFFSET = 2**63 - 1

_INTEGER = re.compile(r"-?\d+", re.ASCII)
_DECIMAL = re.compile(r"-?(?:\d+\.\d*|\.\d+)", re.ASCII)
_MAX_DIGITS = 18


class PaginationParser:
    """Parse pagination and sort params. Bad values fall back to defaults."""

    def __init__(self, config: ListQueryConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def parse(self, query_params: Any) -> tuple[PaginationRequest, SortRequest]:
        return (
            self.parse_pagination(query_params),
            self.parse_sort(query_params),
        )

    def parse_pagination(self, query_params: Any) -> PaginationRequest:
        cfg = self._config
        page = _int_param(get_param(query_params, cfg.page_key))
        if page is None or page < 1:
            page = cfg.default_page

        raw_per_page = get_param(query_params, cfg.per_page_key)
        if raw_per_page is not None and str(raw_per_page).strip() == str(ALL_ROWS):
            return PaginationRequest(page=page, per_page=ALL_ROWS)
        per_page = _int_param(raw_per_page)
        if per_page is None:
            per_page = cfg.default_per_page
        else:
            per_page = min(cfg.max_per_page, max(1, per_page))
        # Past the last page anyway; keeps OFFSET representable.
        page = min(page, MAX_OFFSET // per_page + 1)
        return PaginationRequest(page=page, per_page=per_page)

    def parse_sort(self, query_params: Any) -> SortRequest:
        raw_field = get_param(query_params, self._config.sort_by_key)
        field = str(raw_field).strip() if raw_field is not None else ""
        order = SortOrder.lookup(get_param(query_params, self._config.sort_order_key))
        return SortRequest(field=field or None, order=order)


def _int_param(v: Any) -> int | None:
    """Parse a plain decimal integer; decimals floor (``"2.5"`` -> 2)."""
    if v is None:
        return None
    text = str(v).strip()
    if not (_INTEGER.fullmatch(text) or _DECIMAL.fullmatch(text)):
        return None
    # Saturate oversized values; the caller clamps them anyway.
    if len(text.split(".")[0].lstrip("-").lstrip("0")) > _MAX_DIGITS:
        return -MAX_OFFSET if text.startswith("-") else MAX_OFFSET
    return math.floor(Decimal(text))


def calculate_limit_offset(request: PaginationRequest) -> tuple[int | None, int]:
    """``(limit, offset)`` for the data query; ``limit`` is ``None`` for all rows."""
    if request.is_unpaginated:
        return None, 0
    return request.per_page, (request.page - 1) * request.per_page


def calculate_pagination(request: PaginationRequest, total: int) -> PaginationResult:
    """Build pagination metadata from the row count of the same predicate set.

    A page past the end is not an error: it reports ``has_next=False``.
    """
    if total < 0:
        raise ValueError(f"total must be >= 0, got {total}")
    if request.is_unpaginated:
        return PaginationResult(
            page=1,
            per_page=ALL_ROWS,
            total=total,
            total_pages=1,
            has_next=False,
            has_previous=False,
        )
    total_pages = math.ceil(total / request.per_page)
    return PaginationResult(
        page=request.page,
        per_page=request.per_page,
        total=total,
        total_pages=total_pages,
        has_next=request.page < total_pages,
        has_previous=request.page > 1,
    )
