"""API endpoints for user management."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database import get_db, UserStore
from services import UserService
from .schemas import RecordId, UserIn

router = APIRouter()


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserStore(db))


@router.post("/users", status_code=201)
async def create_user(user: UserIn, service: UserService = Depends(get_user_service)):
    """Create a new user."""
    return service.create_user(user.to_model()).to_dict()


@router.get("/users")
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users."""
    return [user.to_dict() for user in service.get_all_users()]


@router.get("/users/{user_id}")
async def get_user(user_id: RecordId, service: UserService = Depends(get_user_service)):
    """Get a specific user by ID."""
    return service.get_user_by_id(user_id).to_dict()


@router.put("/users/{user_id}")
async def update_user(user_id: RecordId, user: UserIn, service: UserService = Depends(get_user_service)):
    """Replace every field of a user."""
    return service.update_user(user_id, user.to_model()).to_dict()


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(user_id: RecordId, service: UserService = Depends(get_user_service)):
    """Delete a user."""
    service.delete_user(user_id)
    return Response(status_code=204)
