"""Pluggable filter grammar; the bracket form is ``filter[field][op]=value``."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from .exceptions import FilterValueError
from .operators import FilterOperator
from .types import Filter

logger = logging.getLogger("list_query.syntax")


def iter_query_params(query_params: Any) -> list[tuple[str, Any]]:
    """Flatten *query_params* into ``(key, value)`` pairs, one per key.

    Accepts a plain mapping, a mapping of lists, or a multi-dict exposing
    ``getlist`` (e.g. Starlette ``QueryParams``). Repeated keys keep their
    last value; key order is preserved.
    """
    if query_params is None:
        return []
    getlist = getattr(query_params, "getlist", None)
    pairs: list[tuple[str, Any]] = []
    if callable(getlist):
        seen: set[str] = set()
        for key in query_params.keys():
            if key in seen:
                continue
            seen.add(key)
            values = getlist(key)
            pairs.append((key, values[-1] if values else ""))
        return pairs
    if not isinstance(query_params, Mapping):
        raise TypeError(
            f"query_params must be a mapping, got {type(query_params).__name__}"
        )
    for key, value in query_params.items():
        if isinstance(value, (list, tuple)):
            value = value[-1] if value else ""
        pairs.append((str(key), value))
    return pairs


def get_param(query_params: Any, key: str) -> Any:
    """Last value of *key* in *query_params*, or ``None``."""
    for name, value in iter_query_params(query_params):
        if name == key:
            return value
    return None


class FilterSyntax:
    """Base for filter syntax parsers."""

    def parse_filters(self, query_params: Any) -> list[Filter]:
        """Collect filters from raw query params, in a deterministic order."""
        raise NotImplementedError


class BracketFilterSyntax(FilterSyntax):
    """Parse ``filter[<field>][<operator>]=<value>`` keys (clauses are ANDed).

    Keys of any other shape, and operators outside :class:`FilterOperator`,
    are not collected. Values are taken as already URL-decoded.
    """

    def __init__(self, filter_key: str = "filter") -> None:
        self._filter_key = filter_key
        self._pattern = re.compile(
            rf"^{re.escape(filter_key)}\[([^\[\]]+)\]\[([^\[\]]+)\]$"
        )

    @property
    def filter_key(self) -> str:
        return self._filter_key

    def parse_filters(self, query_params: Any) -> list[Filter]:
        filters: list[Filter] = []
        for key, raw_value in iter_query_params(query_params):
            if key == self._filter_key and isinstance(raw_value, Mapping):
                # Already nested by a qs-style parser: {field: {operator: value}}
                for field, op_name, value in self._walk_nested(raw_value):
                    self._collect(filters, field, op_name, value)
                continue
            if not key.startswith(self._filter_key):
                continue
            match = self._pattern.match(key)
            if match is None:
                logger.debug("Ignoring malformed filter key %r", key)
                continue
            self._collect(filters, match.group(1), match.group(2), raw_value)
        return filters

    def _collect(
        self, filters: list[Filter], field: str, op_name: str, raw_value: Any
    ) -> None:
        operator = FilterOperator.lookup(op_name)
        if operator is None:
            logger.debug("Ignoring unknown filter operator %r on %r", op_name, field)
            return
        filters.append(
            Filter(
                field=field,
                operator=operator,
                value=self._parse_value(field, operator, raw_value),
            )
        )

    def _walk_nested(
        self, nested: Mapping[Any, Any]
    ) -> list[tuple[str, str, Any]]:
        out: list[tuple[str, str, Any]] = []
        for field, ops in nested.items():
            if not isinstance(ops, Mapping):
                logger.debug("Ignoring filter %r without an operator", field)
                continue
            for op_name, value in ops.items():
                if isinstance(value, Mapping):
                    logger.debug(
                        "Ignoring filter %r operator %r nested too deep", field, op_name
                    )
                    continue
                out.append((str(field), str(op_name), value))
        return out

    def _parse_value(
        self, field: str, operator: FilterOperator, raw: Any
    ) -> str | tuple[str, ...]:
        if isinstance(raw, (list, tuple)):
            if operator.is_list:
                raw = ",".join(str(v) for v in raw)
            else:
                raw = raw[-1] if raw else ""
        text = "" if raw is None else str(raw)
        if operator.is_list:
            items = tuple(part.strip() for part in text.split(",") if part.strip())
            if not items:
                raise FilterValueError(
                    field, f"Filter 'in' on {field!r} needs at least one value"
                )
            return items
        return text
