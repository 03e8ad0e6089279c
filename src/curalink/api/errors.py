"""Translation of internal outcomes into the JSON error envelope."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from curalink.data_sources.base_client import DataSourceError
from curalink.exceptions import CuraLinkError, UpstreamError

logger = logging.getLogger(__name__)


@contextmanager
def upstream_errors(message: str) -> Iterator[None]:
    """Convert any DataSourceError raised inside the block into an UpstreamError.

    The raw upstream detail is logged; callers only ever see *message*.
    """
    try:
        yield
    except DataSourceError as e:
        logger.error("%s: %s", message, e)
        raise UpstreamError(message) from e


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query")]
    if first.get("type") == "missing" and loc:
        return f"Missing {loc[-1]}"
    if loc:
        return f"Invalid {loc[-1]}"
    return "Invalid request body"


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CuraLinkError)
    async def handle_curalink_error(request: Request, exc: CuraLinkError):
        # UpstreamError is logged with its upstream detail where it is raised
        if exc.status_code >= 500 and not isinstance(exc, UpstreamError):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Server error"})
