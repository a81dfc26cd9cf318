"""LoggerProtocol definition for structured logging.

Every log call is an event name plus key/value context. Event names are
snake_case (``login_succeeded``, ``verification_code_issued``).

Security:
    - NEVER log passwords, tokens, one-time codes or TOTP secrets
    - Log identifiers (account_id, device_id) instead of addresses where possible

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("login_succeeded", account_id=str(account.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("request_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the five standard levels and immutable context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level event."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level event.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event (service-wide failure)."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            request_logger = logger.bind(trace_id=trace_id, path=request.url.path)
            request_logger.info("request_started")
        """
        ...
