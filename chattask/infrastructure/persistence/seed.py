"""
Reference data seeding.

Inserts whatever is missing of the permission set, the system roles and the
default task statuses. Existing rows are left untouched, so custom changes to
a role's permissions survive restarts.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from chattask.domain.value_objects.permission_name import ChatPermissionName
from chattask.domain.value_objects.system_role import SystemRole
from chattask.infrastructure.persistence.models import (
    ChatPermissionModel,
    ChatRoleModel,
    TaskStatusModel,
)

logger = logging.getLogger(__name__)

SYSTEM_ROLE_PERMISSIONS: dict[SystemRole, tuple[ChatPermissionName, ...]] = {
    SystemRole.OWNER: tuple(ChatPermissionName),
    SystemRole.MAIN: (ChatPermissionName.SEND_MESSAGE, ChatPermissionName.VIEW_MESSAGES),
    SystemRole.BANNED: (),
}

DEFAULT_TASK_STATUSES = ("created", "in_progress", "done")


async def seed_reference_data(session_factory: async_sessionmaker[AsyncSession]) -> None:
    async with session_factory() as session:
        permissions = {
            p.name: p for p in (await session.scalars(select(ChatPermissionModel))).all()
        }
        for name in ChatPermissionName:
            if name.value not in permissions:
                permission = ChatPermissionModel(name=name.value)
                session.add(permission)
                permissions[name.value] = permission
                logger.info(f"[Seed] Permission {name.value!r} added")
        await session.flush()

        roles = {r.name for r in (await session.scalars(select(ChatRoleModel))).all()}
        for role, granted in SYSTEM_ROLE_PERMISSIONS.items():
            if role.value in roles:
                continue
            session.add(
                ChatRoleModel(
                    name=role.value,
                    permissions=[permissions[p.value] for p in granted],
                )
            )
            logger.info(f"[Seed] Role {role.value!r} added")

        statuses = {s.name for s in (await session.scalars(select(TaskStatusModel))).all()}
        for name in DEFAULT_TASK_STATUSES:
            if name not in statuses:
                session.add(TaskStatusModel(name=name))
                logger.info(f"[Seed] Task status {name!r} added")

        await session.commit()
