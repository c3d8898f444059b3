"""FastAPI dependencies for list endpoints.

Provides a Depends factory that turns the request query string into an
``ExecutableListQuery``, and an exception handler for callers that run the
engine themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from ...exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import FastAPI

    from ...engine import ExecutableListQuery, ListQueryEngine

logger = logging.getLogger("list_query.contrib.fastapi")


def list_query_dependency(
    engine: ListQueryEngine,
) -> Callable[[Request], ExecutableListQuery]:
    """Create a dependency that parses and validates the query string.

    Args:
        engine: Engine configured for the resource being listed.

    Returns:
        Dependency function.

    Raises:
        HTTPException: 400 with the error's ``to_dict()`` as detail.

    Example:
        ```python
        users_query = list_query_dependency(users_engine)

        @router.get("/users")
        async def list_users(executable = Depends(users_query)):
            page = await executor.execute(session, executable)
            return page.to_dict()
        ```
    """

    def dependency(request: Request) -> ExecutableListQuery:
        try:
            return engine.build(request.query_params)
        except ValidationError as err:
            logger.info("Rejected list query on %s: %s", request.url.path, err)
            raise HTTPException(
                status_code=err.status_code,
                detail=err.to_dict(),
            ) from err

    return dependency


def register_exception_handler(app: FastAPI) -> None:
    """Render ``ValidationError`` raised anywhere in *app* as a 400 response.

    Example:
        ```python
        app = FastAPI()
        register_exception_handler(app)
        ```
    """

    async def handle(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("Rejected list query on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.add_exception_handler(ValidationError, handle)  # type: ignore[arg-type]
