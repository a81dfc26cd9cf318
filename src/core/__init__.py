"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Machine-readable error codes
- Clock abstraction for time-dependent rules

The core module has NO dependencies on other application layers.
"""

from src.core.clock import Clock, SystemClock
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "Clock",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "SystemClock",
]
