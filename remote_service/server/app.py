# FastAPI app served by the remote service bootstrapper
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from remote_service.utils.logging_utils import get_logger

logger = get_logger(__name__)


class ErrorResponse(BaseModel):
    timestamp: str
    status: int
    error: str
    path: str


def error_body(status_code: int, path: str) -> dict:
    """Build the JSON error body returned for every failed request."""
    try:
        reason = HTTPStatus(status_code).phrase
    except ValueError:
        reason = "Unknown"

    return jsonable_encoder(
        ErrorResponse(
            timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            status=status_code,
            error=reason,
            path=path,
        )
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors (404, 405, ...) as JSON."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, request.url.path),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    """Log unexpected errors and answer with a 500 body."""
    logger.error(f"Unhandled error serving {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(status_code=500, content=error_body(500, request.url.path))


def create_app() -> FastAPI:
    """
    Create the web application.

    The service exposes no routes of its own; every request is answered by
    the error handlers below.

    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title="Remote Service",
        description="Remote service - listens for inbound connections",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.state.application_arguments = ()
    return app
