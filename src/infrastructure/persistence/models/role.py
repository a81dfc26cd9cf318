"""Role and permission database models.

Roles and permissions are static reference data seeded by migrations
(see alembic/seeds/rbac_seeder.py). They are linked many-to-many through
the ``role_permissions`` association table.
"""

from sqlalchemy import Boolean, Column, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel

role_permissions = Table(
    "role_permissions",
    BaseModel.metadata,
    Column(
        "role_id",
        Uuid,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "permission_id",
        Uuid,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Permission(BaseMutableModel):
    """Named permission guarding an HTTP path and method.

    Fields:
        name: Unique permission name (``users.update``)
        path: Guarded route path
        method: Guarded HTTP method
        description: Free text
    """

    __tablename__ = "permissions"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        comment="Unique permission name (resource.action)",
    )
    path: Mapped[str] = mapped_column(String(255), nullable=False)
    method: Mapped[str] = mapped_column(String(10), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Role(BaseMutableModel):
    """Role granting a set of permissions.

    Fields:
        name: Unique role name (admin, manager, user)
        description: Free text
        is_active: Inactive roles grant nothing

    Relationships:
        - permissions: Many-to-many via role_permissions (eager selectin)
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="Unique role name",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    permissions: Mapped[list[Permission]] = relationship(
        secondary=role_permissions,
        lazy="selectin",
    )
