"""Error Handlers — the single place where error kinds become HTTP responses.

Invariants:
    - GroupChatError → status from its ErrorKind, body {"error": message}
    - StoreError message replaced by a generic one unless display_error_details
    - Unknown routes → 404 "Route not found"; wrong method → 405
    - Exception (catch-all) → 500 "Internal Server Error", never leaks details
    - Logging honours log_errors / log_error_details from settings

Design Decisions:
    - Registered per app with its Settings: no global config lookup at error time
    - Validation errors from FastAPI (should not occur, bodies are parsed by hand)
      are still mapped to the same envelope as a 400
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from groupchat.api.responses import json_response
from groupchat.config import Settings
from groupchat.core.errors import (
    GENERIC_INTERNAL_MESSAGE, ErrorKind, GroupChatError,
)

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
METHOD_NOT_ALLOWED = "Method not allowed"


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app, settings)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app, settings)


def _register_domain_error_handler(app: FastAPI, settings: Settings) -> None:

    @app.exception_handler(GroupChatError)
    async def domain_error_handler(request: Request, exc: GroupChatError):
        """Map a domain/store error to its status and envelope."""
        status_code = exc.http_status
        if settings.log_errors:
            level = logging.ERROR if exc.kind == ErrorKind.STORE else logging.WARNING
            logger.log(
                level,
                f"[{status_code}] {exc.message}",
                extra={
                    "error_kind": exc.kind.value,
                    "status_code": status_code,
                    "path": request.url.path,
                },
                exc_info=exc if settings.log_error_details else None,
            )
        return json_response(
            status_code, exc.to_response(verbose=settings.display_error_details),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = ROUTE_NOT_FOUND
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            message = METHOD_NOT_ALLOWED
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return json_response(
            status.HTTP_400_BAD_REQUEST, {"error": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI, settings: Settings) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        if settings.log_errors:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                extra={"status_code": 500, "path": request.url.path},
                exc_info=True,
            )
        return json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"error": GENERIC_INTERNAL_MESSAGE},
        )
