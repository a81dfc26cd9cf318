"""Success envelope helper.

Route handlers wrap every successful payload with ``success_response`` so
clients always receive ``{success, data, message, timestamp, path}``.
"""

from datetime import UTC, datetime
from typing import Any

from fastapi import Request

from src.schemas.common_schemas import SuccessResponse


def success_response(
    request: Request,
    data: Any = None,
    message: str | None = None,
) -> SuccessResponse[Any]:
    """Build the success envelope for the current request.

    Args:
        request: FastAPI request (for the path).
        data: Payload (pydantic model, list of models or None).
        message: Optional human-readable message.

    Returns:
        SuccessResponse envelope.

    Example:
        >>> return success_response(request, AccountResponse(...), "Welcome")
    """
    return SuccessResponse[Any](
        data=data,
        message=message,
        timestamp=datetime.now(UTC),
        path=str(request.url.path),
    )
