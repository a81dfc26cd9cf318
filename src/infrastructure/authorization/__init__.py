"""Authorization infrastructure package.

This package contains the Casbin-based permission resolver:
- model.conf: role -> permission-name model
- casbin_adapter.py: CasbinAdapter implementing PermissionResolverProtocol
"""

from src.infrastructure.authorization.casbin_adapter import CasbinAdapter

__all__ = [
    "CasbinAdapter",
]
