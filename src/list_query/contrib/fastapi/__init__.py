"""FastAPI integration for list-query-engine."""

from .dependencies import list_query_dependency, register_exception_handler

__all__: list[str] = [
    "list_query_dependency",
    "register_exception_handler",
]
