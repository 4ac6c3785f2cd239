"""Task operations: assignee resolution and UTC timestamping."""

from typing import List, Optional
import logging

from database.stores import TaskStore, UserStore
from models import Task, User
from .clock import local_time, resolve_zone, utc_now
from .exceptions import TaskNotFoundError, UserNotFoundError

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, tasks: TaskStore, users: UserStore):
        self.tasks = tasks
        self.users = users

    def create_task(self, task: Task, timezone: Optional[str] = None) -> Task:
        """Stamp, resolve the assignee and persist a new task.

        ``timezone`` only affects the local time that gets logged. Both
        timestamps are always stored as the same UTC instant.
        """
        now = self._stamp(timezone)
        task.created_at = now
        task.updated_at = now

        if task.assigned_to_id is not None:
            task.assigned_to = self._resolve_user(task.assigned_to_id)

        task = self.tasks.save(task)
        logger.info(f"Created task '{task.title}' (ID: {task.id})")
        return task

    def get_all_tasks(self) -> List[Task]:
        return self.tasks.find_all()

    def get_task_by_id(self, task_id: int) -> Task:
        task = self.tasks.find_by_id(task_id)
        if task is None:
            logger.warning(f"Task {task_id} not found")
            raise TaskNotFoundError(task_id)

        # The relationship may already be loaded, but a deleted user only shows up here
        if task.assigned_to_id is not None:
            task.assigned_to = self._resolve_user(task.assigned_to_id)

        return task

    def update_task(self, task_id: int, details: Task, timezone: Optional[str] = None) -> Task:
        """Replace title, description and status; keep id and created_at.

        The assignee is only replaced when ``details`` names one.
        """
        task = self.get_task_by_id(task_id)

        task.title = details.title
        task.description = details.description
        task.status = details.status
        task.updated_at = self._stamp(timezone)

        if details.assigned_to_id is not None:
            task.assigned_to = self._resolve_user(details.assigned_to_id)

        task = self.tasks.save(task)
        logger.info(f"Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> None:
        task = self.get_task_by_id(task_id)
        self.tasks.delete(task)
        logger.info(f"Deleted task {task_id}")

    def _resolve_user(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            logger.warning(f"Assigned user {user_id} not found")
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def _stamp(timezone: Optional[str]):
        now = utc_now()
        zone = resolve_zone(timezone)
        logger.debug(f"Timestamp {now.isoformat()}Z is {local_time(now, zone).isoformat()} in {zone}")
        return now
