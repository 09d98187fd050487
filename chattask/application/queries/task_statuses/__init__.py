"""Task status queries."""

from .task_statuses import (
    GetTaskStatusQuery,
    GetTaskStatusHandler,
    ListTaskStatusesQuery,
    ListTaskStatusesHandler,
)

__all__ = [
    "GetTaskStatusQuery",
    "GetTaskStatusHandler",
    "ListTaskStatusesQuery",
    "ListTaskStatusesHandler",
]
