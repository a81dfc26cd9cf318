"""Domain value objects.

Immutable value objects shared across layers.
"""

from src.domain.value_objects.principal import Principal

__all__ = [
    "Principal",
]
