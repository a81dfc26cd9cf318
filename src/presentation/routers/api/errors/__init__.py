"""Error envelope builder and exception handlers.

Exports:
    ApiException: HTTPException carrying an explicit envelope code
    ErrorResponseBuilder: Utility for building error envelopes
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.errors.error_response_builder import (
    ApiException,
    ErrorResponseBuilder,
)
from src.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ApiException",
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
