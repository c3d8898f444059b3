"""Engine configuration: pagination limits and query parameter names."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100

# perPage sentinel: return every matching row.
ALL_ROWS = -1


@dataclass(frozen=True)
class ListQueryConfig:
    """List query configuration.

    Attributes:
        default_page: Page used when ``page`` is missing or invalid.
        default_per_page: Page size used when ``perPage`` is missing or invalid.
        max_per_page: Upper clamp for ``perPage`` (the ``-1`` sentinel bypasses it).
        page_key: Query parameter carrying the page number.
        per_page_key: Query parameter carrying the page size.
        sort_by_key: Query parameter carrying the sort field.
        sort_order_key: Query parameter carrying the sort direction.
        filter_key: Prefix of ``<filter_key>[field][operator]`` keys.
    """

    default_page: int = DEFAULT_PAGE
    default_per_page: int = DEFAULT_PER_PAGE
    max_per_page: int = MAX_PER_PAGE
    page_key: str = "page"
    per_page_key: str = "perPage"
    sort_by_key: str = "sortBy"
    sort_order_key: str = "sortOrder"
    filter_key: str = "filter"

    def __post_init__(self) -> None:
        if self.default_page < 1:
            raise ValueError("default_page must be >= 1")
        if self.max_per_page < 1:
            raise ValueError("max_per_page must be >= 1")
        if not 1 <= self.default_per_page <= self.max_per_page:
            raise ValueError(
                f"default_per_page must be between 1 and {self.max_per_page}"
            )
        if not self.filter_key:
            raise ValueError("filter_key must not be empty")


DEFAULT_CONFIG = ListQueryConfig()
