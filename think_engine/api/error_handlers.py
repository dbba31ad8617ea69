"""Error Handlers - global exception handlers for the engine API.

Invariants:
    - ThinkEngineError -> structured JSON with error code, message, severity
    - RequestValidationError -> the same VALIDATION_ERROR body a tool call reports
      (details.fields, dotted paths), built by ArtifactValidationError
    - Exception (catch-all) -> INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ThinkEngineError), validation (Pydantic), catch-all (Exception)
    - Every body comes from ThinkEngineError.to_response(): one error shape for
      route lookups, request parsing, and failures
    - Tool calls never reach these handlers for engine outcomes: the dispatcher
      returns an envelope; only route-level lookups raise
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from think_engine.core.errors import (
    ArtifactValidationError, ErrorCategory, ErrorContext, ErrorSeverity, ThinkEngineError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _request_context(request: Request) -> ErrorContext:
    return ErrorContext(tool_name=request.path_params.get("tool_name"))


def _respond(exc: ThinkEngineError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ThinkEngineError)
    async def domain_error_handler(request: Request, exc: ThinkEngineError):
        logger.error(
            f"ThinkEngineError on {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.code,
                "tool_name": exc.context.tool_name,
                "session_id": exc.context.session_id,
            },
        )
        return _respond(exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = request_validation_error(exc, _request_context(request))
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "tool_name": error.context.tool_name},
        )
        return _respond(error)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        context = _request_context(request)
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "tool_name": context.tool_name},
        )
        return _respond(ThinkEngineError(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, context,
        ))


def request_validation_error(
    exc: RequestValidationError, context: ErrorContext | None = None,
) -> ArtifactValidationError:
    """Query/path/body parsing failures reported in the tool VALIDATION_ERROR shape."""
    fields = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return ArtifactValidationError("request", fields, context)
