"""Task status commands."""

from .manage_task_statuses import (
    CreateTaskStatusCommand,
    CreateTaskStatusHandler,
    DeleteTaskStatusCommand,
    DeleteTaskStatusHandler,
)

__all__ = [
    "CreateTaskStatusCommand",
    "CreateTaskStatusHandler",
    "DeleteTaskStatusCommand",
    "DeleteTaskStatusHandler",
]
