"""RBAC seeder: default roles, permissions and their grants.

Idempotent via existence checks - safe to run on every migration. The
permission resolver reads these tables at application startup.

After initial seeding, role/permission changes are data changes (a restart,
or a resolver reload, picks them up).
"""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.models import Permission, Role

logger = structlog.get_logger(__name__)

# (name, path, method, description)
PERMISSIONS: list[tuple[str, str, str, str]] = [
    ("users.read", "/admin/accounts", "GET", "Read accounts"),
    ("users.update", "/admin/accounts/{account_id}/status", "PATCH", "Change account status"),
    ("users.delete", "/admin/accounts/{account_id}", "DELETE", "Delete accounts"),
    (
        "verification_codes.read",
        "/admin/verification-codes/statistics",
        "GET",
        "Read verification code statistics",
    ),
    (
        "verification_codes.purge",
        "/admin/verification-codes/expired",
        "DELETE",
        "Purge expired verification codes",
    ),
]

# role -> granted permission names
ROLES: dict[str, tuple[str, ...]] = {
    "admin": tuple(name for name, _, _, _ in PERMISSIONS),
    "manager": ("users.read", "verification_codes.read"),
    "user": (),
}


async def seed_rbac_policies(session: AsyncSession) -> None:
    """Seed default roles and permissions. Idempotent.

    Seeds:
        - Permissions (users.*, verification_codes.*)
        - Roles (admin: everything, manager: read-only admin, user: none)

    Existing grants are never removed; missing ones are added.

    Args:
        session: Async database session.
    """
    seeded_count = 0

    permissions: dict[str, Permission] = {
        p.name: p for p in (await session.execute(select(Permission))).scalars()
    }
    for name, path, method, description in PERMISSIONS:
        if name in permissions:
            continue
        permission = Permission(
            name=name, path=path, method=method, description=description
        )
        session.add(permission)
        permissions[name] = permission
        seeded_count += 1

    roles: dict[str, Role] = {
        r.name: r for r in (await session.execute(select(Role))).scalars()
    }
    for role_name, granted in ROLES.items():
        role = roles.get(role_name)
        if role is None:
            role = Role(name=role_name, is_active=True, permissions=[])
            session.add(role)
            seeded_count += 1
        held = {p.name for p in role.permissions}
        for name in granted:
            if name not in held:
                role.permissions.append(permissions[name])
                seeded_count += 1

    await session.flush()

    logger.info(
        "rbac_seeding_complete",
        seeded=seeded_count,
        roles=len(ROLES),
        permissions=len(PERMISSIONS),
    )
