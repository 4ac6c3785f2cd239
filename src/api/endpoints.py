"""API endpoints for task management."""

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from typing import Optional

from database import get_db, TaskStore, UserStore
from services import TaskService
from .schemas import RecordId, TaskIn
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    """Build the task service over the request's session."""
    return TaskService(TaskStore(db), UserStore(db))


@router.post("/tasks", status_code=201)
async def create_task(
    task: TaskIn,
    timezone: Optional[str] = Query(None),
    service: TaskService = Depends(get_task_service)
):
    """Create a new task."""
    created = service.create_task(task.to_model(), timezone)
    return created.to_dict()


@router.get("/tasks")
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """List all tasks."""
    return [task.to_dict() for task in service.get_all_tasks()]


@router.get("/tasks/{task_id}")
async def get_task(task_id: RecordId, service: TaskService = Depends(get_task_service)):
    """Get a specific task by ID."""
    return service.get_task_by_id(task_id).to_dict()


@router.put("/tasks/{task_id}")
async def update_task(
    task_id: RecordId,
    task: TaskIn,
    timezone: Optional[str] = Query(None),
    service: TaskService = Depends(get_task_service)
):
    """Replace a task's title, description and status."""
    updated = service.update_task(task_id, task.to_model(), timezone)
    return updated.to_dict()


@router.delete("/tasks/{task_id}", status_code=204)
async def delete_task(task_id: RecordId, service: TaskService = Depends(get_task_service)):
    """Delete a task."""
    service.delete_task(task_id)
    return Response(status_code=204)
