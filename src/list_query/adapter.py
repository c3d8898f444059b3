"""IPredicateCompiler: protocol for backend-specific translation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .conditions import Condition
    from .types import SortSpec


@runtime_checkable
class IPredicateCompiler(Protocol):
    """Translate conditions and sort into a backend-native query structure.

    Examples include SQL WHERE/ORDER BY constructs or MongoDB filter docs.
    """

    def compile(self, conditions: Sequence[Condition]) -> Any:
        """Return the AND of *conditions*, or ``None`` when there are none."""
        ...

    def order_by(self, sort: SortSpec) -> Any:
        """Return the backend ordering clause for *sort*."""
        ...
