"""
Persistence Layer - Database implementations.

Contains SQLAlchemy (asyncio) repository implementations for domain ports.
"""

from chattask.infrastructure.persistence.sqlalchemy_chat_repository import (
    SqlAlchemyChatRepository,
)
from chattask.infrastructure.persistence.sqlalchemy_chat_member_repository import (
    SqlAlchemyChatMemberRepository,
)
from chattask.infrastructure.persistence.sqlalchemy_chat_role_repository import (
    SqlAlchemyChatRoleRepository,
    SqlAlchemyChatPermissionRepository,
)
from chattask.infrastructure.persistence.sqlalchemy_message_repository import (
    SqlAlchemyMessageRepository,
)
from chattask.infrastructure.persistence.sqlalchemy_task_repository import (
    SqlAlchemyTaskRepository,
)
from chattask.infrastructure.persistence.sqlalchemy_task_status_repository import (
    SqlAlchemyTaskStatusRepository,
)
from chattask.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "SqlAlchemyChatRepository",
    "SqlAlchemyChatMemberRepository",
    "SqlAlchemyChatRoleRepository",
    "SqlAlchemyChatPermissionRepository",
    "SqlAlchemyMessageRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyTaskStatusRepository",
    "SqlAlchemyUnitOfWork",
]
