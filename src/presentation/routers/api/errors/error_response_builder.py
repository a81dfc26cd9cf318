"""Error envelope builder.

Converts application layer errors into the uniform error envelope:

    {"success": false,
     "error": {"code", "message", "timestamp", "path", "statusCode"}}

Exports:
    ErrorResponseBuilder: Utility class for building error envelopes
    ApiException: HTTPException carrying an explicit envelope code
"""

from datetime import UTC, datetime

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.schemas.common_schemas import ErrorBody, ErrorResponse

# Category -> (HTTP status, generic envelope code)
_CATEGORY_INFO: dict[ApplicationErrorCode, tuple[int, ErrorCode]] = {
    ApplicationErrorCode.VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        ErrorCode.BAD_REQUEST,
    ),
    ApplicationErrorCode.UNAUTHORIZED: (
        status.HTTP_401_UNAUTHORIZED,
        ErrorCode.UNAUTHORIZED,
    ),
    ApplicationErrorCode.FORBIDDEN: (status.HTTP_403_FORBIDDEN, ErrorCode.FORBIDDEN),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, ErrorCode.NOT_FOUND),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, ErrorCode.CONFLICT),
    ApplicationErrorCode.RATE_LIMIT_EXCEEDED: (
        status.HTTP_429_TOO_MANY_REQUESTS,
        ErrorCode.RATE_LIMIT_EXCEEDED,
    ),
    ApplicationErrorCode.INTERNAL_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_ERROR,
    ),
}

# HTTP status -> generic envelope code (for HTTPExceptions without a reason)
_STATUS_CODES: dict[int, ErrorCode] = {
    400: ErrorCode.BAD_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION_ERROR,
    429: ErrorCode.RATE_LIMIT_EXCEEDED,
}


class ApiException(HTTPException):
    """HTTPException whose envelope code is set explicitly.

    Raised by dependencies (authentication gate, permission check) where
    the generic status-derived code is not specific enough.

    Example:
        >>> raise ApiException(
        ...     status_code=401,
        ...     code=ErrorCode.INVALID_TOKEN,
        ...     message="Invalid or expired access token",
        ... )
    """

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        message: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.code = code


class ErrorResponseBuilder:
    """Build error envelope responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="Email already registered",
        ...     reason=ErrorCode.EMAIL_ALREADY_EXISTS,
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(error, request)
        >>> response.status_code
        409
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
    ) -> JSONResponse:
        """Convert ApplicationError to an error envelope.

        The envelope code is the specific reason when the error carries one,
        otherwise the generic code of its category.

        Args:
            error: Application layer error to convert.
            request: FastAPI Request object (for the path).

        Returns:
            JSONResponse with the error envelope.
        """
        status_code, generic_code = ErrorResponseBuilder.category_info(error.code)
        code = error.reason or generic_code
        return ErrorResponseBuilder.build(
            status_code=status_code,
            code=code.value,
            message=error.message,
            request=request,
        )

    @staticmethod
    def build(
        status_code: int,
        code: str,
        message: str,
        request: Request,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Build an error envelope response.

        Args:
            status_code: HTTP status.
            code: Envelope code.
            message: Human-readable message.
            request: FastAPI Request object.
            headers: Extra response headers (e.g. WWW-Authenticate).

        Returns:
            JSONResponse with the error envelope.
        """
        body = ErrorResponse(
            error=ErrorBody(
                code=code,
                message=message,
                timestamp=datetime.now(UTC),
                path=str(request.url.path),
                status_code=status_code,
            )
        )
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(mode="json", by_alias=True),
            headers=headers,
        )

    @staticmethod
    def category_info(code: ApplicationErrorCode) -> tuple[int, ErrorCode]:
        """Map an application error category to (HTTP status, generic code).

        Example:
            >>> ErrorResponseBuilder.category_info(ApplicationErrorCode.NOT_FOUND)
            (404, <ErrorCode.NOT_FOUND: 'NOT_FOUND'>)
        """
        return _CATEGORY_INFO.get(
            code, (status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorCode.INTERNAL_ERROR)
        )

    @staticmethod
    def code_for_status(status_code: int) -> ErrorCode:
        """Generic envelope code for an HTTP status."""
        if status_code >= 500:
            return ErrorCode.INTERNAL_ERROR
        return _STATUS_CODES.get(status_code, ErrorCode.BAD_REQUEST)
