"""
Dishka DI Container Setup.

Two providers:
- InfrastructureProvider: engine, sessions, repositories, HTTP gateways and
  the notification publisher (everything that talks to the outside world)
- AppProvider: services and command/query handlers, wired only against the
  domain ports

Tests replace InfrastructureProvider with in-memory fakes and keep AppProvider.

Dishka concepts:
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- Async generators: code after `yield` runs when the scope closes

Flow:
  Container → provides → SqlAlchemyChatMemberRepository → to → ChatPermissionService
                                    ↓
                            uses ChatMemberRepository interface
"""

from typing import AsyncIterable

import httpx
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from chattask.application.commands.chat_roles import (
    CreateChatPermissionHandler,
    CreateChatRoleHandler,
    DeleteChatPermissionHandler,
    DeleteChatRoleHandler,
    UpdateRolePermissionsHandler,
)
from chattask.application.commands.chats import (
    BanUserHandler,
    ChangeUserRoleHandler,
    CreateChatHandler,
    DeleteChatHandler,
    UpdateChatHandler,
)
from chattask.application.commands.messages import SendMessageHandler
from chattask.application.commands.task_statuses import (
    CreateTaskStatusHandler,
    DeleteTaskStatusHandler,
)
from chattask.application.commands.tasks import CreateTaskHandler, UpdateTaskStatusHandler
from chattask.application.queries.chat_roles import (
    GetChatRoleHandler,
    ListChatPermissionsHandler,
    ListChatRolesHandler,
)
from chattask.application.queries.chats import (
    GetChatHandler,
    GetMyRoleHandler,
    GetUserRoleHandler,
    ListChatMembersHandler,
    ListUserChatsHandler,
)
from chattask.application.queries.messages import (
    GetChatMessagesHandler,
    SearchMessagesHandler,
)
from chattask.application.queries.task_statuses import (
    GetTaskStatusHandler,
    ListTaskStatusesHandler,
)
from chattask.application.queries.tasks import GetTaskHandler, ListUserTasksHandler
from chattask.config.settings import Config
from chattask.domain.ports.gateways import ChatGateway, FileGateway, UserGateway
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
from chattask.infrastructure.http_clients import (
    HttpChatGateway,
    HttpFileGateway,
    HttpUserGateway,
    close_http_client,
    create_http_client,
)
from chattask.infrastructure.messaging import create_notification_publisher
from chattask.infrastructure.persistence import (
    SqlAlchemyChatMemberRepository,
    SqlAlchemyChatPermissionRepository,
    SqlAlchemyChatRepository,
    SqlAlchemyChatRoleRepository,
    SqlAlchemyMessageRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyTaskStatusRepository,
    SqlAlchemyUnitOfWork,
)
from chattask.infrastructure.persistence.database import create_engine, create_session_factory
from chattask.services.chat_permission_service import ChatPermissionService
from chattask.services.notification_service import NotificationService


class InfrastructureProvider(Provider):
    """Adapters for the database, the external services and Kafka."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_engine(self) -> AsyncIterable[AsyncEngine]:
        """
        Provide the async engine (singleton, app-scoped).

        - Disposed when the container closes on shutdown
        """
        engine = create_engine()
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        """
        One session per HTTP request.

        - The permission check and the handler share it
        - Closed (and any open transaction rolled back) when the request ends
        """
        async with session_factory() as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        return SqlAlchemyUnitOfWork(session)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_chat_repository(self, session: AsyncSession) -> ChatRepository:
        """
        Provide ChatRepository implementation.

        - Return type is ABSTRACT (ChatRepository)
        - Implementation is CONCRETE (SqlAlchemyChatRepository)
        """
        return SqlAlchemyChatRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_chat_member_repository(self, session: AsyncSession) -> ChatMemberRepository:
        return SqlAlchemyChatMemberRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_chat_role_repository(self, session: AsyncSession) -> ChatRoleRepository:
        return SqlAlchemyChatRoleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_chat_permission_repository(self, session: AsyncSession) -> ChatPermissionRepository:
        return SqlAlchemyChatPermissionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, session: AsyncSession) -> MessageRepository:
        return SqlAlchemyMessageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, session: AsyncSession) -> TaskRepository:
        return SqlAlchemyTaskRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_task_status_repository(self, session: AsyncSession) -> TaskStatusRepository:
        return SqlAlchemyTaskStatusRepository(session)

    # ==================== EXTERNAL SERVICES ====================

    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterable[httpx.AsyncClient]:
        client = create_http_client()
        yield client
        await close_http_client(client)

    @provide(scope=Scope.APP)
    def get_user_gateway(self, client: httpx.AsyncClient) -> UserGateway:
        return HttpUserGateway(client, Config.USER_SERVICE_URL)

    @provide(scope=Scope.APP)
    def get_file_gateway(self, client: httpx.AsyncClient) -> FileGateway:
        return HttpFileGateway(client, Config.FILE_SERVICE_URL)

    @provide(scope=Scope.APP)
    def get_chat_gateway(self, client: httpx.AsyncClient) -> ChatGateway:
        return HttpChatGateway(client, Config.CHAT_SERVICE_URL)

    # ==================== NOTIFICATIONS ====================

    @provide(scope=Scope.APP)
    async def get_notification_publisher(self) -> AsyncIterable[NotificationPublisher]:
        """
        Kafka publisher when KAFKA_ENABLED, otherwise a publisher that only logs.

        - Building it does no I/O: the Kafka producer connects on the first publish,
          so a broker outage only fails the (best-effort) notification
        - Closed (producer stopped) when the container closes
        """
        publisher = create_notification_publisher()
        yield publisher
        await publisher.close()


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers services and handlers; every parameter is a domain port, so
    Dishka resolves it from whichever infrastructure provider is installed.
    """

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_chat_permission_service(
        self, member_repository: ChatMemberRepository
    ) -> ChatPermissionService:
        return ChatPermissionService(member_repository)

    @provide(scope=Scope.REQUEST)
    def get_notification_service(
        self, publisher: NotificationPublisher
    ) -> NotificationService:
        return NotificationService(publisher)

    # ==================== CHAT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_chat_handler(
        self,
        chat_repository: ChatRepository,
        member_repository: ChatMemberRepository,
        role_repository: ChatRoleRepository,
        user_gateway: UserGateway,
        file_gateway: FileGateway,
        unit_of_work: UnitOfWork,
        notification_service: NotificationService,
    ) -> CreateChatHandler:
        """
        Provide CreateChatHandler.

        - Parameters ask for ports (abstract)
        - Dishka auto-wires them from the installed providers
        """
        return CreateChatHandler(
            chat_repository=chat_repository,
            member_repository=member_repository,
            role_repository=role_repository,
            user_gateway=user_gateway,
            file_gateway=file_gateway,
            unit_of_work=unit_of_work,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_chat_handler(
        self,
        chat_repository: ChatRepository,
        member_repository: ChatMemberRepository,
        role_repository: ChatRoleRepository,
        user_gateway: UserGateway,
        file_gateway: FileGateway,
        unit_of_work: UnitOfWork,
        notification_service: NotificationService,
    ) -> UpdateChatHandler:
        return UpdateChatHandler(
            chat_repository=chat_repository,
            member_repository=member_repository,
            role_repository=role_repository,
            user_gateway=user_gateway,
            file_gateway=file_gateway,
            unit_of_work=unit_of_work,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_chat_handler(
        self,
        chat_repository: ChatRepository,
        member_repository: ChatMemberRepository,
        message_repository: MessageRepository,
        unit_of_work: UnitOfWork,
    ) -> DeleteChatHandler:
        return DeleteChatHandler(chat_repository, member_repository, message_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_change_user_role_handler(
        self,
        member_repository: ChatMemberRepository,
        role_repository: ChatRoleRepository,
        unit_of_work: UnitOfWork,
    ) -> ChangeUserRoleHandler:
        return ChangeUserRoleHandler(member_repository, role_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_ban_user_handler(
        self,
        member_repository: ChatMemberRepository,
        role_repository: ChatRoleRepository,
        unit_of_work: UnitOfWork,
    ) -> BanUserHandler:
        return BanUserHandler(member_repository, role_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_get_chat_handler(
        self, chat_repository: ChatRepository, file_gateway: FileGateway
    ) -> GetChatHandler:
        return GetChatHandler(chat_repository, file_gateway)

    @provide(scope=Scope.REQUEST)
    def get_list_user_chats_handler(self, chat_repository: ChatRepository) -> ListUserChatsHandler:
        return ListUserChatsHandler(chat_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_user_role_handler(self, member_repository: ChatMemberRepository) -> GetUserRoleHandler:
        return GetUserRoleHandler(member_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_my_role_handler(self, member_repository: ChatMemberRepository) -> GetMyRoleHandler:
        return GetMyRoleHandler(member_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_chat_members_handler(
        self, member_repository: ChatMemberRepository
    ) -> ListChatMembersHandler:
        return ListChatMembersHandler(member_repository)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        chat_repository: ChatRepository,
        message_repository: MessageRepository,
        user_gateway: UserGateway,
        file_gateway: FileGateway,
        unit_of_work: UnitOfWork,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            chat_repository=chat_repository,
            message_repository=message_repository,
            user_gateway=user_gateway,
            file_gateway=file_gateway,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_chat_messages_handler(
        self,
        chat_repository: ChatRepository,
        message_repository: MessageRepository,
        file_gateway: FileGateway,
    ) -> GetChatMessagesHandler:
        return GetChatMessagesHandler(chat_repository, message_repository, file_gateway)

    @provide(scope=Scope.REQUEST)
    def get_search_messages_handler(
        self,
        chat_repository: ChatRepository,
        member_repository: ChatMemberRepository,
        message_repository: MessageRepository,
    ) -> SearchMessagesHandler:
        return SearchMessagesHandler(chat_repository, member_repository, message_repository)

    # ==================== ROLE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_chat_role_handler(
        self,
        role_repository: ChatRoleRepository,
        permission_repository: ChatPermissionRepository,
        unit_of_work: UnitOfWork,
    ) -> CreateChatRoleHandler:
        return CreateChatRoleHandler(role_repository, permission_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_delete_chat_role_handler(
        self, role_repository: ChatRoleRepository, unit_of_work: UnitOfWork
    ) -> DeleteChatRoleHandler:
        return DeleteChatRoleHandler(role_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_update_role_permissions_handler(
        self,
        role_repository: ChatRoleRepository,
        permission_repository: ChatPermissionRepository,
        unit_of_work: UnitOfWork,
    ) -> UpdateRolePermissionsHandler:
        return UpdateRolePermissionsHandler(role_repository, permission_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_create_chat_permission_handler(
        self, permission_repository: ChatPermissionRepository, unit_of_work: UnitOfWork
    ) -> CreateChatPermissionHandler:
        return CreateChatPermissionHandler(permission_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_delete_chat_permission_handler(
        self, permission_repository: ChatPermissionRepository, unit_of_work: UnitOfWork
    ) -> DeleteChatPermissionHandler:
        return DeleteChatPermissionHandler(permission_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_list_chat_roles_handler(self, role_repository: ChatRoleRepository) -> ListChatRolesHandler:
        return ListChatRolesHandler(role_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_chat_role_handler(self, role_repository: ChatRoleRepository) -> GetChatRoleHandler:
        return GetChatRoleHandler(role_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_chat_permissions_handler(
        self, permission_repository: ChatPermissionRepository
    ) -> ListChatPermissionsHandler:
        return ListChatPermissionsHandler(permission_repository)

    # ==================== TASK HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_task_handler(
        self,
        task_repository: TaskRepository,
        status_repository: TaskStatusRepository,
        user_gateway: UserGateway,
        file_gateway: FileGateway,
        chat_gateway: ChatGateway,
        unit_of_work: UnitOfWork,
        notification_service: NotificationService,
    ) -> CreateTaskHandler:
        return CreateTaskHandler(
            task_repository=task_repository,
            status_repository=status_repository,
            user_gateway=user_gateway,
            file_gateway=file_gateway,
            chat_gateway=chat_gateway,
            unit_of_work=unit_of_work,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_task_status_handler(
        self,
        task_repository: TaskRepository,
        status_repository: TaskStatusRepository,
        unit_of_work: UnitOfWork,
    ) -> UpdateTaskStatusHandler:
        return UpdateTaskStatusHandler(task_repository, status_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_get_task_handler(
        self, task_repository: TaskRepository, file_gateway: FileGateway
    ) -> GetTaskHandler:
        return GetTaskHandler(task_repository, file_gateway)

    @provide(scope=Scope.REQUEST)
    def get_list_user_tasks_handler(self, task_repository: TaskRepository) -> ListUserTasksHandler:
        return ListUserTasksHandler(task_repository)

    # ==================== TASK STATUS HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_task_status_handler(
        self, status_repository: TaskStatusRepository, unit_of_work: UnitOfWork
    ) -> CreateTaskStatusHandler:
        return CreateTaskStatusHandler(status_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_delete_task_status_handler(
        self, status_repository: TaskStatusRepository, unit_of_work: UnitOfWork
    ) -> DeleteTaskStatusHandler:
        return DeleteTaskStatusHandler(status_repository, unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_get_task_status_handler(self, status_repository: TaskStatusRepository) -> GetTaskStatusHandler:
        return GetTaskStatusHandler(status_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_task_statuses_handler(
        self, status_repository: TaskStatusRepository
    ) -> ListTaskStatusesHandler:
        return ListTaskStatusesHandler(status_repository)


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE at app startup; the app closes it on shutdown
    """
    return make_async_container(InfrastructureProvider(), AppProvider())
