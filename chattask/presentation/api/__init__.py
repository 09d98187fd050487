"""
HTTP routers.

Registration order matters: literal segments (/chats/messages, /chats/search,
/tasks/statuses) must be included before the parameterized routes they
shadow.
"""

from chattask.presentation.api.messages import router as messages_router
from chattask.presentation.api.chats import router as chats_router
from chattask.presentation.api.chat_roles import router as chat_roles_router
from chattask.presentation.api.task_statuses import router as task_statuses_router
from chattask.presentation.api.tasks import router as tasks_router
from chattask.presentation.api.tasks import users_router as user_tasks_router

ROUTERS = (
    messages_router,
    chats_router,
    chat_roles_router,
    task_statuses_router,
    tasks_router,
    user_tasks_router,
)

__all__ = [
    "ROUTERS",
    "messages_router",
    "chats_router",
    "chat_roles_router",
    "task_statuses_router",
    "tasks_router",
    "user_tasks_router",
]
