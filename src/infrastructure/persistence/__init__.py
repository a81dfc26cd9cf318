"""Database persistence infrastructure.

- base.py: Declarative base and mixins
- database.py: Engine and session management
- models/: Table mappings
- repositories/: Protocol implementations
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
