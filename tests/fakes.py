"""
In-memory implementations of the domain ports for handler and API tests.

All fake repositories share one InMemoryStore. Reads return copies, so an
entity mutated by a handler only changes the store when it is written back.
FakeUnitOfWork snapshots the store and restores it on rollback.
"""

import copy
import dataclasses
import itertools
from typing import Optional
from uuid import uuid4

from dishka import Provider, Scope, provide

from chattask.domain.entities import (
    Chat,
    ChatMember,
    ChatPermission,
    ChatRole,
    Message,
    Task,
    TaskStatus,
)
from chattask.domain.exceptions import (
    ChatServiceError,
    DatabaseError,
    FileServiceError,
    UserServiceError,
)
from chattask.domain.ports.gateways import (
    ChatGateway,
    ChatInfo,
    FileGateway,
    FileInfo,
    UserGateway,
    UserInfo,
)
from chattask.domain.ports.notification_publisher import NotificationPublisher
from chattask.domain.ports.repositories import (
    ChatMemberRepository,
    ChatPermissionRepository,
    ChatRepository,
    ChatRoleRepository,
    MessageRepository,
    TaskRepository,
    TaskStatusRepository,
)
from chattask.domain.ports.unit_of_work import UnitOfWork
from chattask.domain.value_objects.chat_id import ChatId
from chattask.domain.value_objects.permission_name import ChatPermissionName
from chattask.domain.value_objects.system_role import SystemRole
from chattask.domain.value_objects.user_id import UserId
from chattask.infrastructure.persistence.seed import (
    DEFAULT_TASK_STATUSES,
    SYSTEM_ROLE_PERMISSIONS,
)


class InMemoryStore:
    def __init__(self):
        self.chats: dict[str, Chat] = {}
        self.members: dict[tuple[str, str], ChatMember] = {}
        self.permissions: dict[int, ChatPermission] = {}
        self.roles: dict[int, ChatRole] = {}
        self.messages: list[Message] = []
        self.statuses: dict[int, TaskStatus] = {}
        self.tasks: dict[int, Task] = {}
        self._ids = itertools.count(1)
        self.fail_writes = False

    def next_id(self) -> int:
        return next(self._ids)

    def check_write(self) -> None:
        if self.fail_writes:
            raise DatabaseError("write failed")

    def snapshot(self) -> dict:
        return copy.deepcopy(
            {
                "chats": self.chats,
                "members": self.members,
                "permissions": self.permissions,
                "roles": self.roles,
                "messages": self.messages,
                "statuses": self.statuses,
                "tasks": self.tasks,
            }
        )

    def restore(self, snapshot: dict) -> None:
        for name, value in copy.deepcopy(snapshot).items():
            setattr(self, name, value)

    def role_by_name(self, name: str) -> Optional[ChatRole]:
        return next((r for r in self.roles.values() if r.name == name), None)

    def status_by_name(self, name: str) -> Optional[TaskStatus]:
        return next((s for s in self.statuses.values() if s.name == name), None)


def seed_store(store: InMemoryStore) -> InMemoryStore:
    """Permissions, system roles and task statuses as the startup seeding creates them."""
    by_name = {}
    for name in ChatPermissionName:
        permission = ChatPermission(id=store.next_id(), name=name.value)
        store.permissions[permission.id] = permission
        by_name[name] = permission
    for role, granted in SYSTEM_ROLE_PERMISSIONS.items():
        role_id = store.next_id()
        store.roles[role_id] = ChatRole(
            id=role_id, name=role.value, permissions=[by_name[p] for p in granted]
        )
    for name in DEFAULT_TASK_STATUSES:
        status_id = store.next_id()
        store.statuses[status_id] = TaskStatus(id=status_id, name=name)
    return store


# ==================== REPOSITORIES ====================


class FakeChatRepository(ChatRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, chat_id):
        return copy.deepcopy(self.store.chats.get(chat_id.value))

    async def list_by_member(self, user_id):
        chat_ids = [c for (c, u) in self.store.members if u == user_id.value]
        return [copy.deepcopy(self.store.chats[c]) for c in chat_ids if c in self.store.chats]

    async def add(self, chat):
        self.store.check_write()
        self.store.chats[chat.id.value] = copy.deepcopy(chat)

    async def update(self, chat):
        self.store.check_write()
        self.store.chats[chat.id.value] = copy.deepcopy(chat)

    async def delete(self, chat_id):
        self.store.check_write()
        self.store.chats.pop(chat_id.value, None)


class FakeChatMemberRepository(ChatMemberRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    def _with_role(self, member: ChatMember) -> ChatMember:
        member = copy.deepcopy(member)
        member.role = copy.deepcopy(self.store.roles.get(member.role_id))
        return member

    async def get(self, chat_id, user_id):
        member = self.store.members.get((chat_id.value, user_id.value))
        return self._with_role(member) if member else None

    async def list_by_chat(self, chat_id):
        return [
            self._with_role(m) for (c, _), m in self.store.members.items() if c == chat_id.value
        ]

    async def add(self, member):
        self.store.check_write()
        key = (member.chat_id.value, member.user_id.value)
        if key in self.store.members:
            raise DatabaseError("duplicate membership")
        self.store.members[key] = ChatMember(
            chat_id=member.chat_id, user_id=member.user_id, role_id=member.role_id
        )

    async def update_role(self, chat_id, user_id, role_id):
        self.store.check_write()
        member = self.store.members.get((chat_id.value, user_id.value))
        if member:
            member.role_id = role_id

    async def remove(self, chat_id, user_id):
        self.store.check_write()
        self.store.members.pop((chat_id.value, user_id.value), None)

    async def remove_all(self, chat_id):
        self.store.check_write()
        for key in [k for k in self.store.members if k[0] == chat_id.value]:
            del self.store.members[key]


class FakeChatRoleRepository(ChatRoleRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, role_id):
        return copy.deepcopy(self.store.roles.get(role_id))

    async def get_by_name(self, name):
        return copy.deepcopy(self.store.role_by_name(name))

    async def list_all(self):
        return [copy.deepcopy(r) for r in self.store.roles.values()]

    async def create(self, name, permission_ids):
        self.store.check_write()
        role = ChatRole(
            id=self.store.next_id(),
            name=name,
            permissions=[self.store.permissions[p] for p in permission_ids],
        )
        self.store.roles[role.id] = role
        return copy.deepcopy(role)

    async def set_permissions(self, role_id, permission_ids):
        self.store.check_write()
        role = self.store.roles[role_id]
        role.permissions = [self.store.permissions[p] for p in permission_ids]
        return copy.deepcopy(role)

    async def delete(self, role_id):
        self.store.check_write()
        return self.store.roles.pop(role_id, None) is not None


class FakeChatPermissionRepository(ChatPermissionRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, permission_id):
        return copy.deepcopy(self.store.permissions.get(permission_id))

    async def get_by_name(self, name):
        return next(
            (copy.deepcopy(p) for p in self.store.permissions.values() if p.name == name), None
        )

    async def list_all(self):
        return [copy.deepcopy(p) for p in self.store.permissions.values()]

    async def create(self, name):
        self.store.check_write()
        permission = ChatPermission(id=self.store.next_id(), name=name)
        self.store.permissions[permission.id] = permission
        return copy.deepcopy(permission)

    async def delete(self, permission_id):
        self.store.check_write()
        if self.store.permissions.pop(permission_id, None) is None:
            return False
        for role in self.store.roles.values():
            role.permissions = [p for p in role.permissions if p.id != permission_id]
        return True


class FakeMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    def _newest_first(self, chat_id):
        # Insertion order breaks created_at ties
        indexed = [
            (m.created_at, i, m)
            for i, m in enumerate(self.store.messages)
            if m.chat_id == chat_id
        ]
        return [m for _, _, m in sorted(indexed, key=lambda t: (t[0], t[1]), reverse=True)]

    async def get_by_id(self, message_id):
        return next(
            (copy.deepcopy(m) for m in self.store.messages if m.id == message_id), None
        )

    async def list_by_chat(self, chat_id, limit=20, offset=0):
        return copy.deepcopy(self._newest_first(chat_id)[offset : offset + limit])

    async def search(self, chat_id, text, limit, offset):
        needle = text.lower()
        matches = [m for m in self._newest_first(chat_id) if needle in m.content.lower()]
        return copy.deepcopy(matches[offset : offset + limit]), len(matches)

    async def add(self, message):
        self.store.check_write()
        self.store.messages.append(copy.deepcopy(message))

    async def delete_by_chat(self, chat_id):
        self.store.check_write()
        self.store.messages = [m for m in self.store.messages if m.chat_id != chat_id]


class FakeTaskRepository(TaskRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, task_id):
        return copy.deepcopy(self.store.tasks.get(task_id))

    async def list_by_executor(self, executor_id, limit=20, offset=0):
        tasks = [t for t in self.store.tasks.values() if t.executor_id == executor_id]
        tasks.sort(key=lambda t: (t.created_at, t.id), reverse=True)
        return copy.deepcopy(tasks[offset : offset + limit])

    async def add(self, task):
        self.store.check_write()
        stored = dataclasses.replace(task, id=self.store.next_id())
        self.store.tasks[stored.id] = copy.deepcopy(stored)
        return stored

    async def update_status(self, task_id, status_id):
        self.store.check_write()
        task = self.store.tasks[task_id]
        task.status_id = status_id
        task.status = copy.deepcopy(self.store.statuses[status_id])


class FakeTaskStatusRepository(TaskStatusRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, status_id):
        return copy.deepcopy(self.store.statuses.get(status_id))

    async def get_by_name(self, name):
        return copy.deepcopy(self.store.status_by_name(name))

    async def list_all(self):
        return [copy.deepcopy(s) for s in self.store.statuses.values()]

    async def create(self, name):
        self.store.check_write()
        status = TaskStatus(id=self.store.next_id(), name=name)
        self.store.statuses[status.id] = status
        return copy.deepcopy(status)

    async def delete(self, status_id):
        self.store.check_write()
        return self.store.statuses.pop(status_id, None) is not None


class FakeUnitOfWork(UnitOfWork):
    def __init__(self, store: InMemoryStore):
        self.store = store
        self._snapshot = store.snapshot()
        self.commits = 0
        self.rollbacks = 0

    async def commit(self):
        self.commits += 1
        self._snapshot = self.store.snapshot()

    async def rollback(self):
        self.rollbacks += 1
        self.store.restore(self._snapshot)


# ==================== GATEWAYS ====================


class FakeUserGateway(UserGateway):
    def __init__(self, users: Optional[dict[str, UserInfo]] = None):
        self.users = users if users is not None else {}
        self.calls: list[str] = []

    def register(self, user_id: str, username: str, email: str) -> UserInfo:
        user = UserInfo(id=user_id, username=username, email=email)
        self.users[user_id] = user
        return user

    async def get_user(self, user_id):
        self.calls.append(user_id.value)
        user = self.users.get(user_id.value)
        if user is None:
            raise UserServiceError(user_id.value, "nil user")
        return user


class FakeFileGateway(FileGateway):
    """Unknown ids answer with id 0; ids in `failing` raise like a non-200 answer."""

    def __init__(self, files: Optional[dict[int, FileInfo]] = None):
        self.files = files if files is not None else {}
        self.failing: set[int] = set()

    def register(self, file_id: int, name: str = "") -> FileInfo:
        file = FileInfo(id=file_id, name=name or f"file-{file_id}", url=f"/files/{file_id}")
        self.files[file_id] = file
        return file

    async def get_file(self, file_id):
        if file_id in self.failing:
            raise FileServiceError(file_id, "can't get file: 500")
        return self.files.get(file_id, FileInfo(id=0))


class FakeChatGateway(ChatGateway):
    def __init__(self):
        self.chats: dict[str, ChatInfo] = {}

    def register(self, chat_id: str, name: str = "chat") -> ChatInfo:
        chat = ChatInfo(id=chat_id, name=name)
        self.chats[chat_id] = chat
        return chat

    async def get_chat(self, chat_id):
        chat = self.chats.get(chat_id.value)
        if chat is None:
            raise ChatServiceError(chat_id.value, "can't get chat: 404")
        return chat


class RecordingPublisher(NotificationPublisher):
    def __init__(self):
        self.published = []
        self.fail = False

    async def publish(self, notification):
        if self.fail:
            raise ConnectionError("broker unavailable")
        self.published.append(notification)


# ==================== ENVIRONMENT ====================


@dataclasses.dataclass
class FakeEnvironment:
    store: InMemoryStore = dataclasses.field(default_factory=InMemoryStore)
    users: FakeUserGateway = dataclasses.field(default_factory=FakeUserGateway)
    files: FakeFileGateway = dataclasses.field(default_factory=FakeFileGateway)
    chats: FakeChatGateway = dataclasses.field(default_factory=FakeChatGateway)
    publisher: NotificationPublisher = dataclasses.field(default_factory=RecordingPublisher)

    @classmethod
    def seeded(cls) -> "FakeEnvironment":
        env = cls()
        seed_store(env.store)
        return env

    def new_user(self, username: str) -> UserId:
        user_id = UserId(str(uuid4()))
        self.users.register(user_id.value, username, f"{username}@example.com")
        return user_id

    def add_chat(self, name: str, owner: UserId, members=(), **fields) -> ChatId:
        """Store a chat with an owner and main-role members, bypassing the handlers."""
        chat = Chat.create(name=name, member_count=len(members), **fields)
        self.store.chats[chat.id.value] = chat
        self.set_role(chat.id, owner, SystemRole.OWNER)
        for member in members:
            self.set_role(chat.id, member, SystemRole.MAIN)
        return chat.id

    def set_role(self, chat_id: ChatId, user_id: UserId, role: SystemRole) -> None:
        role_id = self.store.role_by_name(role.value).id
        self.store.members[(chat_id.value, user_id.value)] = ChatMember(
            chat_id=chat_id, user_id=user_id, role_id=role_id
        )

    def role_of(self, chat_id: ChatId, user_id: UserId) -> Optional[str]:
        member = self.store.members.get((chat_id.value, user_id.value))
        return self.store.roles[member.role_id].name if member else None

    def add_message(self, chat_id: ChatId, sender: UserId, content: str, file_ids=()) -> Message:
        message = Message.create(chat_id=chat_id, sender_id=sender, content=content, file_ids=list(file_ids))
        self.store.messages.append(message)
        return message


class FakeInfrastructureProvider(Provider):
    """Stands in for InfrastructureProvider; every request shares the env's store."""

    def __init__(self, env: FakeEnvironment):
        super().__init__()
        self.env = env

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        return FakeUnitOfWork(self.env.store)

    @provide(scope=Scope.REQUEST)
    def get_chat_repository(self) -> ChatRepository:
        return FakeChatRepository(self.env.store)

    @provide(scope=Scope.REQUEST)
    def get_chat_member_repository(self) -> ChatMemberRepository:
        return FakeChatMemberRepository(self.env.store)

    @provide(scope=Scope.REQUEST)
    def get_chat_role_repository(self) -> ChatRoleRepository:
        return FakeChatRoleRepository(self.env.store)

    @provide(scope=Scope.REQUEST)
    def get_chat_permission_repository(self) -> ChatPermissionRepository:
        return FakeChatPermissionRepository(self.env.store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self) -> MessageRepository:
        return FakeMessageRepository(self.env.store)

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self) -> TaskRepository:
        return FakeTaskRepository(self.env.store)

    @provide(scope=Scope.REQUEST)
    def get_task_status_repository(self) -> TaskStatusRepository:
        return FakeTaskStatusRepository(self.env.store)

    @provide(scope=Scope.APP)
    def get_user_gateway(self) -> UserGateway:
        return self.env.users

    @provide(scope=Scope.APP)
    def get_file_gateway(self) -> FileGateway:
        return self.env.files

    @provide(scope=Scope.APP)
    def get_chat_gateway(self) -> ChatGateway:
        return self.env.chats

    @provide(scope=Scope.APP)
    def get_notification_publisher(self) -> NotificationPublisher:
        return self.env.publisher
