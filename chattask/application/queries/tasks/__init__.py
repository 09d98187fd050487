"""Task queries."""

from .get_task import GetTaskQuery, GetTaskHandler, GetTaskResult
from .list_user_tasks import ListUserTasksQuery, ListUserTasksHandler

__all__ = [
    "GetTaskQuery",
    "GetTaskHandler",
    "GetTaskResult",
    "ListUserTasksQuery",
    "ListUserTasksHandler",
]
