"""
SQLAlchemy ORM models.

UUIDs are stored as 36-char strings so the schema works on SQLite and
PostgreSQL alike. Relationships load with "selectin" so repositories never
trigger lazy IO outside an awaited query.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


# ==================== CHAT SERVICE ====================

chat_role_permissions = Table(
    "chat_role_permissions",
    Base.metadata,
    Column("role_id", Integer, ForeignKey("chat_roles.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "permission_id",
        Integer,
        ForeignKey("chat_permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class ChatModel(Base):
    __tablename__ = "chats"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    is_group: Mapped[bool] = mapped_column(Boolean, default=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    avatar_file_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class ChatPermissionModel(Base):
    __tablename__ = "chat_permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)


class ChatRoleModel(Base):
    __tablename__ = "chat_roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)

    permissions: Mapped[list[ChatPermissionModel]] = relationship(
        secondary=chat_role_permissions,
        lazy="selectin",
        order_by=ChatPermissionModel.id,
    )


class ChatUserModel(Base):
    __tablename__ = "chat_user"

    chat_id: Mapped[str] = mapped_column(String(36), ForeignKey("chats.id"), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(36), primary_key=True, index=True)
    role_id: Mapped[int] = mapped_column(Integer, ForeignKey("chat_roles.id"))

    role: Mapped[ChatRoleModel] = relationship(lazy="selectin")


class MessageModel(Base):
    __tablename__ = "messages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    chat_id: Mapped[str] = mapped_column(String(36), ForeignKey("chats.id"), index=True)
    sender_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    content: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    files: Mapped[list["MessageFileModel"]] = relationship(
        lazy="selectin", cascade="all, delete-orphan"
    )


class MessageFileModel(Base):
    __tablename__ = "message_files"

    message_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("messages.id"), primary_key=True
    )
    file_id: Mapped[int] = mapped_column(Integer, primary_key=True)


# ==================== TASK SERVICE ====================


class TaskStatusModel(Base):
    __tablename__ = "task_statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True)


class TaskModel(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    status_id: Mapped[int] = mapped_column(Integer, ForeignKey("task_statuses.id"))
    creator_id: Mapped[str] = mapped_column(String(36))
    executor_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    chat_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    status: Mapped[TaskStatusModel] = relationship(lazy="selectin")
    files: Mapped[list["TaskFileModel"]] = relationship(
        lazy="selectin", cascade="all, delete-orphan"
    )


class TaskFileModel(Base):
    __tablename__ = "task_files"

    task_id: Mapped[int] = mapped_column(Integer, ForeignKey("tasks.id"), primary_key=True)
    file_id: Mapped[int] = mapped_column(Integer, primary_key=True)
