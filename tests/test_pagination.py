"""Tests for PaginationParser and page arithmetic."""

from __future__ import annotations

import pytest

from list_query import ListQueryConfig, SortOrder
from list_query.pagination import (
    MAX_OFFSET,
    PaginationParser,
    calculate_limit_offset,
    calculate_pagination,
)
from list_query.types import PaginationRequest


def test_defaults() -> None:
    r = PaginationParser().parse_pagination({})
    assert r.page == 1
    assert r.per_page == 20
    assert not r.is_unpaginated


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("3", 3), ("0", 1), ("-4", 1), ("abc", 1), ("", 1), ("2.5", 2), ("nan", 1)],
)
def test_page_normalisation(raw: str, expected: int) -> None:
    assert PaginationParser().parse_pagination({"page": raw}).page == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("10", 10),
        ("100", 100),
        ("500", 100),
        ("0", 1),
        ("-5", 1),
        ("abc", 20),
        ("7.9", 7),
        ("inf", 20),
    ],
)
def test_per_page_normalisation(raw: str, expected: int) -> None:
    assert PaginationParser().parse_pagination({"perPage": raw}).per_page == expected


@pytest.mark.parametrize("raw", ["1_000", "\u0663", "+3", "0x10", "1e3", "3 4"])
def test_only_plain_decimal_numbers(raw: str) -> None:
    r = PaginationParser().parse_pagination({"page": raw, "perPage": raw})
    assert r.page == 1
    assert r.per_page == 20


def test_huge_page_keeps_offset_representable() -> None:
    r = PaginationParser().parse_pagination(
        {"page": "99999999999999999999", "perPage": "10"}
    )
    assert r.page == MAX_OFFSET // 10 + 1
    limit, offset = calculate_limit_offset(r)
    assert limit == 10
    assert offset <= MAX_OFFSET


def test_huge_per_page_clamps() -> None:
    r = PaginationParser().parse_pagination({"perPage": "9" * 5000})
    assert r.per_page == 100


def test_per_page_sentinel() -> None:
    r = PaginationParser().parse_pagination({"perPage": "-1", "page": "4"})
    assert r.per_page == -1
    assert r.is_unpaginated


def test_custom_config() -> None:
    config = ListQueryConfig(default_per_page=5, max_per_page=50, per_page_key="size")
    parser = PaginationParser(config)
    assert parser.parse_pagination({}).per_page == 5
    assert parser.parse_pagination({"size": "80"}).per_page == 50
    assert parser.parse_pagination({"perPage": "30"}).per_page == 5


class TestParseSort:
    def test_field_and_order(self) -> None:
        sort = PaginationParser().parse_sort({"sortBy": "email", "sortOrder": "DESC"})
        assert sort.field == "email"
        assert sort.order is SortOrder.DESC

    def test_invalid_order_is_absent(self) -> None:
        sort = PaginationParser().parse_sort({"sortBy": "email", "sortOrder": "down"})
        assert sort.order is None

    def test_missing_and_blank_field(self) -> None:
        assert PaginationParser().parse_sort({}).field is None
        assert PaginationParser().parse_sort({"sortBy": "  "}).field is None


class TestLimitOffset:
    @pytest.mark.parametrize(
        ("page", "per_page", "expected"),
        [(1, 20, (20, 0)), (2, 10, (10, 10)), (5, 100, (100, 400)), (3, 1, (1, 2))],
    )
    def test_offset_formula(
        self, page: int, per_page: int, expected: tuple[int, int]
    ) -> None:
        assert calculate_limit_offset(PaginationRequest(page, per_page)) == expected

    def test_unpaginated_has_no_limit(self) -> None:
        assert calculate_limit_offset(PaginationRequest(7, -1)) == (None, 0)


class TestCalculatePagination:
    def test_middle_page(self) -> None:
        r = calculate_pagination(PaginationRequest(2, 10), 25)
        assert r.to_dict() == {
            "page": 2,
            "perPage": 10,
            "total": 25,
            "totalPages": 3,
            "hasNext": True,
            "hasPrevious": True,
        }

    def test_exact_multiple(self) -> None:
        r = calculate_pagination(PaginationRequest(2, 10), 20)
        assert r.total_pages == 2
        assert not r.has_next

    def test_empty_result(self) -> None:
        r = calculate_pagination(PaginationRequest(1, 20), 0)
        assert r.total_pages == 0
        assert not r.has_next
        assert not r.has_previous

    def test_page_past_the_end(self) -> None:
        r = calculate_pagination(PaginationRequest(9, 10), 25)
        assert r.page == 9
        assert not r.has_next
        assert r.has_previous

    def test_unpaginated(self) -> None:
        r = calculate_pagination(PaginationRequest(3, -1), 42)
        assert r.to_dict() == {
            "page": 1,
            "perPage": -1,
            "total": 42,
            "totalPages": 1,
            "hasNext": False,
            "hasPrevious": False,
        }

    def test_negative_total_raises(self) -> None:
        with pytest.raises(ValueError):
            calculate_pagination(PaginationRequest(), -1)
