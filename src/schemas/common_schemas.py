"""Response envelopes shared by every endpoint.

Success:
    {"success": true, "data": ..., "message": ..., "timestamp": ..., "path": ...}

Error:
    {"success": false, "error": {"code", "message", "timestamp", "path", "statusCode"}}
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """Success envelope.

    Attributes:
        success: Always True.
        data: Endpoint payload (None for message-only outcomes).
        message: Optional human-readable message.
        timestamp: Response time (UTC).
        path: Request path.
    """

    success: bool = True
    data: DataT | None = None
    message: str | None = None
    timestamp: datetime
    path: str


class ErrorBody(BaseModel):
    """Error details inside the error envelope."""

    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    timestamp: datetime
    path: str
    status_code: int = Field(..., alias="statusCode")


class ErrorResponse(BaseModel):
    """Error envelope."""

    success: bool = False
    error: ErrorBody


class CountResponse(BaseModel):
    """Number of rows affected by a bulk operation."""

    count: int = Field(..., ge=0)
