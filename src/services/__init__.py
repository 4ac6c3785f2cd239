"""Task and user business logic."""

from .exceptions import NotFoundError, TaskNotFoundError, UserNotFoundError
from .task_service import TaskService
from .user_service import UserService

__all__ = [
    "NotFoundError",
    "TaskNotFoundError",
    "UserNotFoundError",
    "TaskService",
    "UserService"
]
