"""RoleRepository - SQLAlchemy implementation of RoleRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.role import Permission, Role
from src.infrastructure.persistence.models.role import Role as RoleModel


class RoleRepository:
    """Read-only access to roles and their permissions.

    Attributes:
        session: SQLAlchemy async session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, role_id: UUID) -> Role | None:
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.id == role_id)
        )
        role_model = result.scalar_one_or_none()
        return self._to_domain(role_model) if role_model else None

    async def find_by_name(self, name: str) -> Role | None:
        result = await self.session.execute(
            select(RoleModel).where(RoleModel.name == name)
        )
        role_model = result.scalar_one_or_none()
        return self._to_domain(role_model) if role_model else None

    async def list_all(self) -> list[Role]:
        result = await self.session.execute(select(RoleModel).order_by(RoleModel.name))
        return [self._to_domain(model) for model in result.scalars().all()]

    def _to_domain(self, role_model: RoleModel) -> Role:
        return Role(
            id=role_model.id,
            name=role_model.name,
            is_active=role_model.is_active,
            description=role_model.description,
            permissions=tuple(
                Permission(
                    id=permission.id,
                    name=permission.name,
                    path=permission.path,
                    method=permission.method,
                    description=permission.description,
                )
                for permission in role_model.permissions
            ),
        )
