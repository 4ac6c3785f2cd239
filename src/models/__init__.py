"""Database models for the task manager."""

from .task import Base, Task, TaskStatus
from .user import User

__all__ = [
    "Base",
    "Task",
    "TaskStatus",
    "User"
]
