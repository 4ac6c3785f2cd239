"""Task model and its status vocabulary."""

from enum import Enum
from typing import Dict, Any
from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class TaskStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class Task(Base):
    __tablename__ = "tasks"
    # Never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(String(20))  # One of TaskStatus values, or NULL

    # Timestamps, naive UTC. created_at is written once on insert.
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    # Optional assignee. No backref on User, so deleting a user leaves the id dangling.
    assigned_to_id = Column("user_id", Integer, ForeignKey("users.id"))
    assigned_to = relationship("User", lazy="joined")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "assignedTo": self.assigned_to.to_dict() if self.assigned_to else None
        }
