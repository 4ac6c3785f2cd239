"""User operations."""

from typing import List
import logging

from database.stores import UserStore
from models import User
from .exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserStore):
        self.users = users

    def create_user(self, user: User) -> User:
        user = self.users.save(user)
        logger.info(f"Created user {user.id}")
        return user

    def get_all_users(self) -> List[User]:
        return self.users.find_all()

    def get_user_by_id(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            logger.warning(f"User {user_id} not found")
            raise UserNotFoundError(user_id)
        return user

    def update_user(self, user_id: int, details: User) -> User:
        """Replace every editable field, including ones left unset in ``details``."""
        user = self.get_user_by_id(user_id)

        user.first_name = details.first_name
        user.last_name = details.last_name
        user.timezone = details.timezone
        user.is_active = details.is_active

        user = self.users.save(user)
        logger.info(f"Updated user {user_id}")
        return user

    def delete_user(self, user_id: int) -> None:
        # Tasks assigned to this user are left pointing at the deleted id
        user = self.get_user_by_id(user_id)
        self.users.delete(user)
        logger.info(f"Deleted user {user_id}")
