"""User model."""

from typing import Dict, Any
from sqlalchemy import Column, String, Integer, Boolean
from .task import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    timezone = Column(String(64), nullable=False)  # IANA zone id, e.g. "Europe/Berlin"
    is_active = Column(Boolean)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "timezone": self.timezone,
            "isActive": self.is_active
        }
