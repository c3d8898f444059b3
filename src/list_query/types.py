"""
Request-scoped value types for list queries.

Every value here is built fresh from the raw query string of one request
and never outlives it. All types are frozen, so two parses of the same
query string compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .config import ALL_ROWS
from .operators import FilterOperator

FilterValue = Union[str, tuple[str, ...]]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def lookup(cls, raw: Any) -> SortOrder | None:
        """Case-insensitive lookup; ``None`` for anything unrecognised."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class SortSpec:
    """Validated sort: ``field`` is in the resource's sort allowlist."""

    field: str
    order: SortOrder = SortOrder.ASC

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESC


@dataclass(frozen=True)
class SortRequest:
    """Sort as sent by the client, before allowlist validation.

    ``None`` means the parameter was absent or unusable.
    """

    field: str | None = None
    order: SortOrder | None = None


@dataclass(frozen=True)
class Filter:
    """One ``filter[field][operator]=value`` clause.

    ``value`` is the raw string, or a tuple of strings for ``in``.
    """

    field: str
    operator: FilterOperator
    value: FilterValue


@dataclass(frozen=True)
class PaginationRequest:
    """Requested page; ``per_page == -1`` disables pagination."""

    page: int = 1
    per_page: int = 20

    @property
    def is_unpaginated(self) -> bool:
        return self.per_page == ALL_ROWS


@dataclass(frozen=True)
class PaginationResult:
    """Pagination metadata computed from the same ``total`` as the data query."""

    page: int
    per_page: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool

    def to_dict(self) -> dict[str, Any]:
        """Wire form (camelCase keys)."""
        return {
            "page": self.page,
            "perPage": self.per_page,
            "total": self.total,
            "totalPages": self.total_pages,
            "hasNext": self.has_next,
            "hasPrevious": self.has_previous,
        }


@dataclass(frozen=True)
class ListQuery:
    """Parsed pagination, sort and filters of one list request.

    Filters keep their query-string order; they are ANDed together.
    """

    pagination: PaginationRequest = field(default_factory=PaginationRequest)
    sort: SortRequest = field(default_factory=SortRequest)
    filters: tuple[Filter, ...] = ()

    @property
    def filter_fields(self) -> list[str]:
        return [f.field for f in self.filters]
