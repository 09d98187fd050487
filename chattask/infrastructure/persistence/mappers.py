"""Mapping between ORM rows and domain entities."""

from chattask.domain.entities.chat import Chat
from chattask.domain.entities.chat_member import ChatMember
from chattask.domain.entities.chat_role import ChatPermission, ChatRole
from chattask.domain.entities.message import Message
from chattask.domain.entities.task import Task, TaskStatus
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.message_id import MessageId
from chattask.domain.value_objects.user_id import UserId
from chattask.infrastructure.persistence.models import (
    ChatModel,
    ChatPermissionModel,
    ChatRoleModel,
    ChatUserModel,
    MessageModel,
    TaskModel,
    TaskStatusModel,
)


def chat_to_entity(record: ChatModel) -> Chat:
    return Chat(
        id=ChatId(record.id),
        name=record.name,
        is_group=record.is_group,
        created_at=record.created_at,
        description=record.description,
        avatar_file_id=record.avatar_file_id,
    )


def permission_to_entity(record: ChatPermissionModel) -> ChatPermission:
    return ChatPermission(id=record.id, name=record.name)


def role_to_entity(record: ChatRoleModel) -> ChatRole:
    return ChatRole(
        id=record.id,
        name=record.name,
        permissions=[permission_to_entity(p) for p in record.permissions],
    )


def member_to_entity(record: ChatUserModel) -> ChatMember:
    return ChatMember(
        chat_id=ChatId(record.chat_id),
        user_id=UserId(record.user_id),
        role_id=record.role_id,
        role=role_to_entity(record.role) if record.role is not None else None,
    )


def message_to_entity(record: MessageModel) -> Message:
    return Message(
        id=MessageId(record.id),
        chat_id=ChatId(record.chat_id),
        sender_id=UserId(record.sender_id) if record.sender_id else None,
        content=record.content,
        created_at=record.created_at,
        updated_at=record.updated_at,
        file_ids=[f.file_id for f in record.files],
    )


def status_to_entity(record: TaskStatusModel) -> TaskStatus:
    return TaskStatus(id=record.id, name=record.name)


def task_to_entity(record: TaskModel) -> Task:
    return Task(
        id=record.id,
        title=record.title,
        description=record.description or "",
        status_id=record.status_id,
        creator_id=UserId(record.creator_id),
        created_at=record.created_at,
        executor_id=UserId(record.executor_id) if record.executor_id else None,
        chat_id=ChatId(record.chat_id) if record.chat_id else None,
        file_ids=[f.file_id for f in record.files],
        status=status_to_entity(record.status) if record.status is not None else None,
    )
