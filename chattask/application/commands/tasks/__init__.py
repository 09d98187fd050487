"""Task commands."""

from .create_task import CreateTaskCommand, CreateTaskHandler
from .update_task_status import UpdateTaskStatusCommand, UpdateTaskStatusHandler

__all__ = [
    "CreateTaskCommand",
    "CreateTaskHandler",
    "UpdateTaskStatusCommand",
    "UpdateTaskStatusHandler",
]
