"""FieldWhitelist: per-resource sortable/filterable fields and default sort."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import FieldNotAllowedError
from .types import SortOrder, SortSpec

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .operators import FilterOperator
    from .types import Filter, SortRequest

logger = logging.getLogger("list_query.whitelist")


class FieldWhitelist:
    """Per-resource allowed fields, registered once at startup.

    Unknown sort fields fall back to ``default_sort``. Unknown filter
    fields reject the whole request: dropping a filter silently could
    return more rows than the caller asked for.

    Args:
        sort_fields: Fields the resource can be ordered by.
        filter_fields: Fields the resource can be filtered on.
        default_sort: Sort applied when the request names none, or an
            unknown one. Its field must be in ``sort_fields``.
        filter_operators: Optional per-field operator restriction. Fields
            absent from this mapping accept every operator.
    """

    def __init__(
        self,
        *,
        sort_fields: Iterable[str],
        filter_fields: Iterable[str],
        default_sort: SortSpec,
        filter_operators: Mapping[str, Iterable[FilterOperator]] | None = None,
    ) -> None:
        self.sort_fields: frozenset[str] = frozenset(sort_fields)
        self.filter_fields: frozenset[str] = frozenset(filter_fields)
        self.default_sort = default_sort
        self.filter_operators: dict[str, frozenset[FilterOperator]] = {
            name: frozenset(ops) for name, ops in (filter_operators or {}).items()
        }
        if default_sort.field not in self.sort_fields:
            raise ValueError(
                f"Default sort field {default_sort.field!r} is not a sortable field"
            )
        unknown = set(self.filter_operators) - self.filter_fields
        if unknown:
            raise ValueError(
                "Operator restrictions given for non-filterable fields: "
                f"{sorted(unknown)}"
            )

    def resolve_sort(self, request: SortRequest) -> SortSpec:
        """Return a valid sort, never raising."""
        if request.field is not None and request.field in self.sort_fields:
            return SortSpec(request.field, request.order or SortOrder.ASC)
        if request.field is not None:
            logger.debug(
                "Unknown sort field %r, falling back to %r",
                request.field,
                self.default_sort.field,
            )
        return SortSpec(
            self.default_sort.field, request.order or self.default_sort.order
        )

    def check_filters(self, filters: Iterable[Filter]) -> None:
        """Raise FieldNotAllowedError if any filter field or operator is not allowed."""
        filters = list(filters)
        rejected = [f.field for f in filters if f.field not in self.filter_fields]
        if rejected:
            logger.warning("Rejected list query filtering on %s", ", ".join(rejected))
            raise FieldNotAllowedError(
                dict.fromkeys(rejected), allowed_fields=self.filter_fields
            )
        for f in filters:
            allowed_ops = self.filter_operators.get(f.field)
            if allowed_ops is not None and f.operator not in allowed_ops:
                raise FieldNotAllowedError([f.field], operator=f.operator.value)

    def allows_filter(self, field: str) -> bool:
        return field in self.filter_fields

    def allows_sort(self, field: str) -> bool:
        return field in self.sort_fields
