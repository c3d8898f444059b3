"""Paginated response envelope."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .pagination import calculate_pagination
from .types import PaginationRequest, PaginationResult

T = TypeVar("T")


@dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    """Rows of one page plus the pagination block. Rows are passed through untouched."""

    pagination: PaginationResult
    data: list[T] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": list(self.data),
            "pagination": self.pagination.to_dict(),
        }


def build_paginated_response(
    data: list[T],
    total: int,
    request: PaginationRequest,
) -> PaginatedResponse[T]:
    """Wrap *data* with metadata computed from *total*.

    *total* must come from the same predicate set as *data*.
    """
    return PaginatedResponse(
        pagination=calculate_pagination(request, total),
        data=list(data),
    )
