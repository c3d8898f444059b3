"""
List query exception hierarchy.

Every error raised while parsing or validating a list query derives from
``ValidationError`` and is raised before any I/O happens. All exceptions
provide ``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


class ListQueryError(Exception):
    """Root exception for the list query engine."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(ListQueryError):
    """Raised when a list query is rejected.

    Carries structured errors: ``{field: [messages]}``. A bare message is
    stored under ``"__root__"``.
    """

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(
        self,
        errors: dict[str, list[str]] | str | None = None,
        message: str | None = None,
    ) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        self.message = message or _first_message(self.errors) or "Invalid query"
        super().__init__(self.message)

    @property
    def fields(self) -> list[str]:
        """Names of the offending fields, in reporting order."""
        return [name for name in self.errors if name != "__root__"]

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": {name: list(msgs) for name, msgs in self.errors.items()},
        }


class FilterParseError(ValidationError):
    """Raised when a filter key or its structure is malformed."""


class FieldNotAllowedError(ValidationError):
    """Raised when a filter field is not allowlisted or its operator is disallowed.

    Provides fuzzy-matched suggestions for likely intended field names.
    """

    def __init__(
        self,
        fields: Iterable[str],
        allowed_fields: Iterable[str] = (),
        *,
        operator: str | None = None,
    ) -> None:
        self.rejected = list(fields)
        self.allowed_fields = sorted(allowed_fields)
        self.operator = operator
        self.suggestions: dict[str, list[str]] = {}

        errors: dict[str, list[str]] = {}
        for name in self.rejected:
            if operator is not None:
                msg = f"Operator {operator!r} is not allowed for field {name!r}"
            else:
                msg = f"Field {name!r} is not filterable"
                close = get_close_matches(name, self.allowed_fields, n=3, cutoff=0.6)
                if close:
                    self.suggestions[name] = close
                    msg += f". Did you mean: {', '.join(close)}?"
            errors.setdefault(name, []).append(msg)
        super().__init__(errors)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.suggestions:
            data["suggestions"] = self.suggestions
        return data


class FilterValueError(ValidationError):
    """Raised when a filter value does not fit its operator or column type."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__({field: [message]})


def _first_message(errors: dict[str, list[str]]) -> str | None:
    for messages in errors.values():
        if messages:
            return messages[0]
    return None
