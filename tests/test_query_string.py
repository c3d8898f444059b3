"""Tests for QueryStringBuilder."""

from __future__ import annotations

from urllib.parse import parse_qsl

from list_query import ListQueryEngine, QueryStringBuilder
from list_query.pagination import calculate_pagination


def test_round_trip(users_engine: ListQueryEngine) -> None:
    query = users_engine.parse(
        {
            "page": "2",
            "perPage": "10",
            "sortBy": "email",
            "sortOrder": "desc",
            "filter[role][in]": "admin,manager",
            "filter[email][contains]": "a&b",
        }
    )
    qs = QueryStringBuilder().build(query)
    assert users_engine.parse(dict(parse_qsl(qs))) == query


def test_omits_absent_sort(users_engine: ListQueryEngine) -> None:
    qs = QueryStringBuilder().build(users_engine.parse({}))
    assert qs == "page=1&perPage=20"


def test_brackets_are_encoded(users_engine: ListQueryEngine) -> None:
    qs = QueryStringBuilder().build(users_engine.parse({"filter[age][gt]": "3"}))
    assert "filter%5Bage%5D%5Bgt%5D=3" in qs


def test_links(users_engine: ListQueryEngine) -> None:
    query = users_engine.parse({"page": "2", "perPage": "10"})
    builder = QueryStringBuilder()
    links = builder.links(query, calculate_pagination(query.pagination, 25))
    assert links == {
        "next": "page=3&perPage=10",
        "previous": "page=1&perPage=10",
    }


def test_links_at_edges(users_engine: ListQueryEngine) -> None:
    query = users_engine.parse({"perPage": "10"})
    links = QueryStringBuilder().links(
        query, calculate_pagination(query.pagination, 5)
    )
    assert links == {"next": None, "previous": None}
