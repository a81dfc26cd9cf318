"""Global exception handlers for FastAPI application.

Every error leaves the API in the error envelope, including failures that
never reach a route handler.

Handlers:
    http_exception_handler: HTTPException (auth gate, permission check, 404s)
    validation_exception_handler: RequestValidationError -> 422 VALIDATION_ERROR
    generic_exception_handler: Anything unhandled -> 500 INTERNAL_ERROR

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.core.enums import ErrorCode
from src.presentation.routers.api.errors.error_response_builder import (
    ApiException,
    ErrorResponseBuilder,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to the error envelope.

    ApiException carries its own code; any other HTTPException gets the
    generic code of its status.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by handler, dependency or router.

    Returns:
        JSONResponse with the error envelope.
    """
    # Type narrowing: registered only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    if isinstance(exc, ApiException):
        code = exc.code
    else:
        code = ErrorResponseBuilder.code_for_status(exc.status_code)

    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return ErrorResponseBuilder.build(
        status_code=exc.status_code,
        code=code.value,
        message=message,
        request=request,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to 422 VALIDATION_ERROR.

    The message lists the failing fields, e.g.
    ``"email: Invalid email format: x; code: String should have at least 6 characters"``.
    """
    assert isinstance(exc, RequestValidationError)

    parts: list[str] = []
    for error in exc.errors():
        # ["body", "email"] -> "email"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "request"
        parts.append(f"{field_name}: {error.get('msg', 'Validation failed')}")

    return ErrorResponseBuilder.build(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        code=ErrorCode.VALIDATION_ERROR.value,
        message="; ".join(parts) or "Request validation failed",
        request=request,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the failure with full context and returns a generic 500 envelope.
    Stack traces and internal details never reach the caller.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=get_trace_id(),
        request_path=request.url.path,
        request_method=request.method,
    )
    return ErrorResponseBuilder.build(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code=ErrorCode.INTERNAL_ERROR.value,
        message="An unexpected error occurred",
        request=request,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    # Starlette's base class also covers router-level 404/405
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
