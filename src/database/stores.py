"""Stores: per-entity persistence over a SQLAlchemy session.

Stores flush so that new rows get their ids, but never commit. The
transaction belongs to whoever owns the session (see ``DatabaseManager``).
"""

from typing import Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session

from models import Task, User

ModelT = TypeVar("ModelT")


class Store(Generic[ModelT]):
    """find_by_id / find_all / save / delete for one mapped class."""

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.session.query(self.model).filter(self.model.id == entity_id).first()

    def find_all(self) -> List[ModelT]:
        return self.session.query(self.model).order_by(self.model.id).all()

    def save(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.session.delete(entity)
        self.session.flush()


class TaskStore(Store[Task]):
    model = Task


class UserStore(Store[User]):
    model = User
